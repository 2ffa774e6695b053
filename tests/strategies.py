"""Hypothesis strategies for agentstudio parameter specs and values.

Provides strategies for valid values of each parameter kind, values of
the wrong kind, and bounded number specs.
"""

from hypothesis import strategies as st

from agentstudio.models.parameters import NumberParam

finite_floats = st.floats(allow_nan=False, allow_infinity=False, width=64)
numbers = st.one_of(st.integers(min_value=-10**9, max_value=10**9), finite_floats)

VALUES_BY_KIND = {
    "string": st.text(max_size=50),
    "number": numbers,
    "boolean": st.booleans(),
}

kinds = st.sampled_from(sorted(VALUES_BY_KIND))


def values_of(kind: str):
    """Values whose runtime type matches ``kind``."""
    return VALUES_BY_KIND[kind]


def values_not_of(kind: str):
    """Non-None values whose runtime type does NOT match ``kind``."""
    others = [s for k, s in VALUES_BY_KIND.items() if k != kind]
    others.append(st.lists(st.integers(), max_size=3))
    return st.one_of(*others)


@st.composite
def bounded_number_specs(draw):
    """A NumberParam with min <= max, plus the (min, max) pair."""
    low = draw(st.integers(min_value=-1000, max_value=1000))
    high = draw(st.integers(min_value=low, max_value=low + 2000))
    return NumberParam(description="bounded", required=True, min=low, max=high), low, high
