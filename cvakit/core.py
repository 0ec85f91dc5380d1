"""The class-name generator and the options that configure it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Mapping, Optional, Tuple, Union

from cvakit.helpers import join_classes

ClassValue = Union[str, Iterable[str], None]
Producer = Callable[[Any], list]
Option = Callable[["Cva"], None]


def _as_list(value: ClassValue) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


class Cva:
    """Builds a class string for a component from its props.

    Each option adds one or more producers; the classes they yield are joined
    in the order the options were given.
    """

    def __init__(self, *options: Option) -> None:
        self._producers: list[Producer] = []
        for option in options:
            option(self)

    def classes(self, props: Any) -> str:
        """Return the class string for ``props``."""
        parts = [part for producer in self._producers for part in producer(props)]
        return join_classes(*parts)


def classes(fn: Callable[[Any], ClassValue]) -> Option:
    """Apply whatever classes ``fn`` returns: a string, an iterable of strings, or None."""

    def producer(props: Any) -> list[str]:
        return _as_list(fn(props))

    def option(cva: Cva) -> None:
        cva._producers.append(producer)

    return option


def static(*class_list: str) -> Option:
    """Apply the given classes regardless of props."""
    fixed = list(class_list)
    return classes(lambda _props: fixed)


def base(*class_list: str) -> Option:
    """Apply the given classes regardless of props; same as :func:`static`."""
    return static(*class_list)


def map_variant(
    getter: Callable[[Any], Hashable],
    classes_map: Optional[Mapping[Hashable, ClassValue]],
) -> Option:
    """Apply the classes mapped to the value ``getter`` returns.

    The mapping is copied, so later changes to it have no effect.
    """
    table = {key: _as_list(value) for key, value in (classes_map or {}).items()}
    return classes(lambda props: table.get(getter(props)))


@dataclass(frozen=True)
class Compound:
    """A pair of variant values and the classes to apply when both match."""

    v1: Hashable
    v2: Hashable
    classes: Tuple[str, ...] = ()


def compound(v1: Hashable, v2: Hashable, *class_list: str) -> Compound:
    """Create a :class:`Compound` for use with :func:`compound_variant`."""
    return Compound(v1, v2, tuple(class_list))


def compound_variant(
    getter: Callable[[Any], Tuple[Hashable, Hashable]],
    *compounds: Compound,
) -> Option:
    """Apply classes when the pair returned by ``getter`` matches a compound.

    When the same pair is given more than once, the last one wins.
    """
    table = {(c.v1, c.v2): list(c.classes) for c in compounds}
    return classes(lambda props: table.get(tuple(getter(props))))


def predicate_variant(test: Callable[[Any], bool], *class_list: str) -> Option:
    """Apply the given classes when ``test`` returns true for the props."""
    fixed = list(class_list)
    return classes(lambda props: fixed if test(props) else None)


def inherit(base_cva: Cva, base_mapper: Callable[[Any], Any]) -> Option:
    """Reuse every producer of ``base_cva``, mapping props through ``base_mapper`` first."""

    def wrap(producer: Producer) -> Producer:
        return lambda props: producer(base_mapper(props))

    def option(cva: Cva) -> None:
        cva._producers.extend(wrap(producer) for producer in list(base_cva._producers))

    return option