"""A button with a single size variant."""

from __future__ import annotations

from dataclasses import dataclass

from cvakit.core import Cva, base, map_variant


@dataclass
class Props:
    """Button props: a size name."""

    size: str = ""


button = Cva(
    base("inline-flex items-center justify-center"),
    map_variant(
        lambda p: p.size,
        {
            "small": "h-9 px-3",
            "medium": "h-10 px-4 py-2 rounded-md",
            "large": "h-11 px-8 py-3 rounded-md",
        },
    ),
)


def example() -> str:
    """Print and return the classes for a medium button."""
    result = button.classes(Props("medium"))
    print(result)
    return result