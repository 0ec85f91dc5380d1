"""A button built from variants and composed matchers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from cvakit.core import Cva, base
from cvakit.variant import Variant, when


class Size(IntEnum):
    """Button sizes."""

    SMALL = 0
    LARGE = 1


class Theme(IntEnum):
    """Button colour themes."""

    DANGER = 0
    PRIMARY = 1


class Element(IntEnum):
    """The kind of element the button renders as."""

    BUTTON = 0
    LINK = 1
    ICON = 2


@dataclass
class Props:
    """Button props: size, theme and element kind."""

    size: Size = Size.SMALL
    theme: Theme = Theme.DANGER
    element: Element = Element.BUTTON


_size = Variant(lambda p: p.size, Size.SMALL)
_theme = Variant(lambda p: p.theme, Theme.DANGER)
_elem = Variant(lambda p: p.element, Element.BUTTON)

button = Cva(
    base("px-4 py-1"),
    _size.map(
        {
            Size.SMALL: "px-2",
            Size.LARGE: "px-6 py-2",
        }
    ),
    _theme.map(
        {
            Theme.DANGER: "bg-red-500 text-white",
            Theme.PRIMARY: "bg-blue-500 text-white",
        }
    ),
    _elem.is_(Element.ICON).then("rounded-full"),
    _elem.is_not(Element.ICON).then("rounded-md"),
    _size.is_(Size.LARGE).and_(_theme.is_(Theme.DANGER)).then("font-bold"),
    _elem.is_(Element.ICON).and_(_size.is_not(Size.SMALL)).then("[&_svg]:size-5"),
    when(_elem.is_(Element.LINK), "text-blue-500 hover:text-blue-600 bg-transparent"),
)


def example() -> str:
    """Print and return the classes for a large danger link."""
    result = button.classes(Props(Size.LARGE, Theme.DANGER, Element.LINK))
    print(result)
    return result