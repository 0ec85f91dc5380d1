"""A button whose repeated classes are removed after generation."""

from __future__ import annotations

from dataclasses import dataclass

from cvakit.core import Cva, base, map_variant
from cvakit.helpers import dedupe_classes


@dataclass
class Props:
    """Button props: a size name."""

    size: str = ""


button = Cva(
    base("inline-flex items-center justify-center rounded-md"),
    map_variant(
        lambda p: p.size,
        {
            "small": "h-8 rounded-md",
            "medium": "h-10 rounded-md",
            "large": "h-12 rounded-md",
        },
    ),
)


def deduped_classes(props: Props) -> str:
    """Return the button's classes with duplicates removed."""
    return dedupe_classes(button.classes(props))


def example() -> tuple[str, str]:
    """Print and return the raw and the deduplicated classes for a small button."""
    props = Props("small")
    raw = button.classes(props)
    deduped = deduped_classes(props)
    print(raw)
    print(deduped)
    return raw, deduped