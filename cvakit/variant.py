"""Chainable matchers and variant helpers for building options."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Mapping, Optional

from cvakit.core import Option, classes, predicate_variant


class Matcher:
    """A predicate over props that can be combined and turned into an option."""

    def __init__(self, fn: Callable[[Any], bool]) -> None:
        self._fn = fn

    def __call__(self, props: Any) -> bool:
        return bool(self._fn(props))

    def or_(self, *others: Matcher) -> Matcher:
        """Match when this matcher or any of ``others`` matches."""
        return Matcher(lambda props: self(props) or any(m(props) for m in others))

    def and_(self, *others: Matcher) -> Matcher:
        """Match when this matcher and all of ``others`` match."""
        return Matcher(lambda props: self(props) and all(m(props) for m in others))

    def not_(self) -> Matcher:
        """Match when this matcher does not."""
        return Matcher(lambda props: not self(props))

    def then(self, *class_list: str) -> Option:
        """Return an option applying ``class_list`` when this matcher matches."""
        return predicate_variant(self, *class_list)


class Variant:
    """A prop value read by ``getter``, with optional default and allowed values.

    ``zero`` is the value treated as unset: a value outside the allowed set
    becomes ``zero``, and ``zero`` is replaced by the default when one is set.
    """

    def __init__(self, getter: Callable[[Any], Hashable], zero: Any = None) -> None:
        self._getter = getter
        self._zero = zero
        self._default: Any = zero
        self._has_default = False
        self._values: Optional[tuple] = None

    def with_default(self, val: Any) -> Variant:
        """Use ``val`` whenever the value is the zero value."""
        self._default = val
        self._has_default = True
        return self

    def with_values(self, *vals: Any) -> Variant:
        """Restrict the variant to ``vals``; any other value counts as zero."""
        self._values = vals or None
        return self

    def get(self, props: Any) -> Any:
        """Return the effective value for ``props``."""
        val = self._getter(props)
        if self._values is not None and val not in self._values:
            val = self._zero
        if not self._has_default or val != self._zero:
            return val
        return self._default

    def test(self, fn: Callable[[Any], bool]) -> Matcher:
        """Match when ``fn`` holds for the value."""
        return Matcher(lambda props: fn(self.get(props)))

    def is_(self, val: Any) -> Matcher:
        """Match when the value equals ``val``."""
        return Matcher(lambda props: self.get(props) == val)

    def in_(self, *vals: Any) -> Matcher:
        """Match when the value is one of ``vals``."""
        return Matcher(lambda props: self.get(props) in vals)

    def is_not(self, val: Any) -> Matcher:
        """Match when the value differs from ``val``."""
        return self.is_(val).not_()

    def not_in(self, *vals: Any) -> Matcher:
        """Match when the value is none of ``vals``."""
        return self.in_(*vals).not_()

    def map(self, mapping: Mapping[Hashable, str]) -> Option:
        """Return an option applying the classes mapped to the value."""
        return classes(lambda props: mapping.get(self.get(props)))


def when(matcher: Matcher, *class_list: str) -> Option:
    """Return an option applying ``class_list`` when ``matcher`` matches."""
    return matcher.then(*class_list)


def any_of(*matchers: Matcher) -> Matcher:
    """Match when any of ``matchers`` matches."""
    return Matcher(lambda props: any(m(props) for m in matchers))


def all_of(*matchers: Matcher) -> Matcher:
    """Match when all of ``matchers`` match."""
    return Matcher(lambda props: all(m(props) for m in matchers))


def _iter_matchers(matchers: Iterable[Matcher]) -> list[Matcher]:
    return list(matchers)