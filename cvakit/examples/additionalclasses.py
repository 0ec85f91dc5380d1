"""A button that accepts extra classes from its parent."""

from __future__ import annotations

from dataclasses import dataclass, field

from cvakit import core


@dataclass
class Props:
    """Button props: a size name and any additional classes."""

    size: str = ""
    classes: list[str] = field(default_factory=list)


button = core.Cva(
    core.base("inline-flex items-center justify-center"),
    core.map_variant(
        lambda p: p.size,
        {
            "small": "h-9 px-3",
            "medium": "h-10 px-4 py-2",
            "large": "h-11 px-8 py-3",
        },
    ),
    core.classes(lambda p: p.classes),
)


def example() -> str:
    """Print and return the classes for a small button with a red background."""
    result = button.classes(Props("small", ["bg-red-500"]))
    print(result)
    return result