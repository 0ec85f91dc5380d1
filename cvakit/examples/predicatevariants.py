"""A button whose classes depend on boolean state."""

from __future__ import annotations

from dataclasses import dataclass

from cvakit.core import Cva, base, predicate_variant


@dataclass
class Props:
    """Button props: loading and disabled flags."""

    loading: bool = False
    disabled: bool = False


button = Cva(
    base("button"),
    predicate_variant(lambda p: p.loading, "button-loading"),
    predicate_variant(lambda p: p.disabled or p.loading, "button-disabled"),
)


def example() -> str:
    """Print and return the classes for a loading button."""
    result = button.classes(Props(loading=True, disabled=False))
    print(result)
    return result