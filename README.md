# cvakit

Build CSS class strings for UI components from their props. Describe a component once: its
base classes, the variants that depend on props, and the combinations that need extra
classes. Then ask it for the class string of any set of props.

cvakit has no dependencies beyond the standard library.

## Quick start

```python
from dataclasses import dataclass

from cvakit.core import Cva, base, map_variant


@dataclass(frozen=True)
class Props:
    size: str


button = Cva(
    base("inline-flex items-center justify-center"),
    map_variant(
        lambda p: p.size,
        {
            "small": "h-9 px-3",
            "medium": "h-10 px-4 py-2 rounded-md",
            "large": "h-11 px-8 py-3 rounded-md",
        },
    ),
)

button.classes(Props("medium"))
# 'inline-flex items-center justify-center h-10 px-4 py-2 rounded-md'
```

`Cva(*options)` takes any number of options; `Cva.classes(props)` returns the class string.
Classes appear in the order the options were given. The result is trimmed and every run of
whitespace becomes a single space. Repeated classes are kept as they are.

## Options

All of these live in `cvakit.core`:

- `base(*classes)` and `static(*classes)` add the classes whatever the props are.
- `classes(fn)` adds whatever `fn(props)` returns: a string, an iterable of strings, or `None`
  for nothing.
- `map_variant(getter, mapping)` looks `getter(props)` up in a mapping whose values are a
  string or a list of strings, and adds nothing when the key is missing. The mapping is
  copied, so later changes to it have no effect. `None` counts as an empty mapping.
- `compound_variant(getter, *compounds)` matches the pair returned by `getter(props)` against
  `Compound` entries made with `compound(v1, v2, *classes)`. If the same pair is given twice,
  the last one wins.
- `predicate_variant(test, *classes)` adds the classes when `test(props)` is true.
- `inherit(base_cva, base_mapper)` reuses every option of another `Cva`, turning the new props
  into that component's props with `base_mapper`.

## Variants and matchers

`cvakit.variant` gives a chainable way to write conditions:

```python
from cvakit.core import Cva, base
from cvakit.variant import Variant, when

size = Variant(lambda p: p.size, "")

button = Cva(
    base("btn"),
    size.map({"small": "h-9 px-3", "large": "h-11 px-8"}),
    size.is_not("small").then("rounded-md"),
    when(size.in_("large").and_(size.is_not("small")), "font-bold"),
)
```

`Variant(getter, zero)` reads a value from the props; `zero` is the value treated as unset
(`None` if not given). `with_default(value)` sets a value used in place of `zero`.
`with_values(*values)` restricts the variant to those values; any other value counts as
`zero`. `get(props)` returns the resulting value. Both `with_` methods return the variant, so
they can be chained.

A variant makes `Matcher`s with `test(fn)`, `is_(value)`, `in_(*values)`, `is_not(value)` and
`not_in(*values)`, and an option with `map(mapping)`.

A `Matcher` can be called on props to get a bool. It combines with `or_`, `and_` and `not_`,
and turns into an option with `then(*classes)`. The functions `any_of(*matchers)`,
`all_of(*matchers)` and `when(matcher, *classes)` do the same without method chaining.

## Helpers

`cvakit.helpers` holds:

- `join_classes(*classes)` joins the classes with spaces and normalises whitespace.
- `dedupe_classes(*classes)` splits the classes on spaces, keeps only the first appearance of
  each one, and joins them.
- `memoize(fn)` wraps a one-argument function so it is only called again when the argument
  differs from the previous call's.

## Examples

`cvakit.examples` holds small worked components: `simplecase`, `simplevariant`,
`additionalclasses`, `compoundvariants`, `deduping`, `inheritance`, `matchers` and
`predicatevariants`. Each defines its props and components at module level, and has an
`example()` function that prints sample class strings and returns them. `deduping` also has
`deduped_classes(props)`.

## What it does not do

cvakit only builds class strings. It does not resolve conflicting utility classes (for
example `px-4` followed by `px-2` are both kept), and it does not render HTML or templates.