"""Buttons that build on a shared base button."""

from __future__ import annotations

from dataclasses import dataclass, field

from cvakit.core import Cva, base, inherit, map_variant, predicate_variant


@dataclass
class ButtonProps:
    """Base button props: size and style names."""

    size: str = ""
    style: str = ""


@dataclass
class LoadingButtonProps:
    """Base button props plus a loading flag."""

    button: ButtonProps = field(default_factory=ButtonProps)
    loading: bool = False


@dataclass
class IconButtonProps:
    """Base button props plus an icon name."""

    button: ButtonProps = field(default_factory=ButtonProps)
    icon: str = ""


button = Cva(
    base("inline-flex items-center justify-center"),
    map_variant(
        lambda p: p.size,
        {
            "small": "h-8 px-3",
            "medium": "h-10 px-4",
            "large": "h-12 px-6",
        },
    ),
    map_variant(
        lambda p: p.style,
        {
            "primary": "bg-blue-500 text-white",
            "secondary": "bg-gray-200 text-gray-800",
            "outline": "border border-gray-300 text-gray-800",
        },
    ),
)

loading_button = Cva(
    inherit(button, lambda p: p.button),
    predicate_variant(lambda p: p.loading, "opacity-50 cursor-not-allowed"),
)

icon_button = Cva(
    inherit(button, lambda p: p.button),
    map_variant(
        lambda p: p.icon,
        {
            "plus": "rounded-full [&_svg]:size-4",
            "settings": "rounded-full [&_svg]:size-5",
            "close": "rounded-full [&_svg]:size-6",
        },
    ),
)


def example() -> list[str]:
    """Print and return classes for a selection of base, loading and icon buttons."""
    lines = [
        "Base Button Examples:",
        button.classes(ButtonProps(size="medium", style="primary")),
        button.classes(ButtonProps(size="small", style="secondary")),
        button.classes(ButtonProps(size="large", style="outline")),
        "",
        "Loading Button Examples:",
        loading_button.classes(LoadingButtonProps(ButtonProps("medium", "primary"), loading=True)),
        loading_button.classes(LoadingButtonProps(ButtonProps("small", "secondary"), loading=False)),
        "",
        "Icon Button Examples:",
        icon_button.classes(IconButtonProps(ButtonProps("medium", "primary"), icon="plus")),
        icon_button.classes(IconButtonProps(ButtonProps("small", "secondary"), icon="settings")),
        icon_button.classes(IconButtonProps(ButtonProps("large", "outline"), icon="close")),
    ]
    for line in lines:
        print(line)
    return lines