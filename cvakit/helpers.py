"""Small utilities for working with class strings and prop getters."""

from __future__ import annotations

import functools
import re
from typing import Callable, TypeVar

P = TypeVar("P")
R = TypeVar("R")

_WHITESPACE_RE = re.compile(r"[\t\n\f\r ]+")
_MISSING = object()


def memoize(fn: Callable[[P], R]) -> Callable[[P], R]:
    """Return a version of ``fn`` that caches the result of the most recent input.

    The wrapped function is only called again when the argument differs from
    the one passed on the previous call.
    """
    last_props: object = _MISSING
    last_result: object = None

    @functools.wraps(fn)
    def wrapper(props: P) -> R:
        nonlocal last_props, last_result
        if last_props is _MISSING or last_props != props:
            last_props = props
            last_result = fn(props)
        return last_result  # type: ignore[return-value]

    return wrapper


def dedupe_classes(*classes: str) -> str:
    """Split the given class strings, drop duplicates keeping first occurrences, and join."""
    tokens = (
        token.strip()
        for part in classes
        for token in part.split(" ")
    )
    unique = dict.fromkeys(token for token in tokens if token)
    return join_classes(*unique)


def join_classes(*classes: str) -> str:
    """Join classes with spaces, trim the ends and collapse runs of whitespace."""
    return _WHITESPACE_RE.sub(" ", " ".join(classes).strip())