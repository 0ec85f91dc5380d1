"""A button whose icon style depends on both size and style."""

from __future__ import annotations

from dataclasses import dataclass

from cvakit.core import Cva, base, compound, compound_variant, map_variant


@dataclass
class Props:
    """Button props: size and style names."""

    size: str = ""
    style: str = ""


button = Cva(
    base("inline-flex items-center justify-center"),
    map_variant(
        lambda p: p.size,
        {
            "small": "h-8",
            "medium": "h-10",
            "large": "h-12",
        },
    ),
    map_variant(
        lambda p: p.style,
        {
            "icon": "bg-gray-100 rounded-full aspect-square",
            "regular": "bg-gray-100 rounded-md",
            "link": "text-blue-500",
        },
    ),
    compound_variant(
        lambda p: (p.size, p.style),
        compound("small", "icon", "[&_svg]:size-4"),
        compound("medium", "icon", "[&_svg]:size-5"),
        compound("large", "icon", "[&_svg]:size-6"),
    ),
)


def example() -> str:
    """Print and return the classes for a small icon button."""
    result = button.classes(Props("small", "icon"))
    print(result)
    return result