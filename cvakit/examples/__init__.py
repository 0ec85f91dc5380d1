"""Worked component examples built with cvakit."""

__all__ = [
    "additionalclasses",
    "compoundvariants",
    "deduping",
    "inheritance",
    "matchers",
    "predicatevariants",
    "simplecase",
    "simplevariant",
]