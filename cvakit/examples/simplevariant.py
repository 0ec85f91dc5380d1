"""A button built with a Variant helper."""

from __future__ import annotations

from dataclasses import dataclass

from cvakit.core import Cva, base
from cvakit.variant import Variant


@dataclass
class Props:
    """Button props: a size name."""

    size: str = ""


_size = Variant(lambda p: p.size, "")

button = Cva(
    base("inline-flex items-center justify-center"),
    _size.map(
        {
            "small": "h-9 px-3",
            "medium": "h-10 px-4 py-2",
            "large": "h-11 px-8 py-3",
        }
    ),
    _size.is_not("small").then("rounded-md"),
)


def example() -> str:
    """Print and return the classes for a medium button."""
    result = button.classes(Props("medium"))
    print(result)
    return result