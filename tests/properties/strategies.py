"""Hypothesis strategies for jsonmap property-based testing."""

from hypothesis import strategies as st

from jsonmap import Byte, Char, Float, Integer, Long, Short
from jsonmap._constants import MAX_LONG, MIN_LONG

# Canonical scalar values: the types that survive a JSON round trip
canonical_scalar_strategy = st.one_of(
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(),
)

# JSON primitive strategy
json_primitive_strategy = st.one_of(st.none(), canonical_scalar_strategy)

# JSON value strategy (recursive, bounded depth)
# Use st.recursive to generate nested structures
json_value_strategy = st.recursive(
    json_primitive_strategy,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(st.text(max_size=20), children, max_size=5),
    ),
    max_leaves=50,
)

# JSON object strategy (for whole maps)
json_object_strategy = st.dictionaries(
    st.text(max_size=20),
    json_value_strategy,
    max_size=10,
)

# Canonical object strategy: flat maps of canonical scalars
canonical_object_strategy = st.dictionaries(
    st.text(max_size=20),
    canonical_scalar_strategy,
    max_size=10,
)

# Fixed-width scalar strategy: the extended types that normalize on decode
fixed_width_strategy = st.one_of(
    st.integers(min_value=-128, max_value=127).map(Byte),
    st.integers(min_value=-(2**15), max_value=2**15 - 1).map(Short),
    st.integers(min_value=-(2**31), max_value=2**31 - 1).map(Integer),
    st.integers(min_value=MIN_LONG, max_value=MAX_LONG).map(Long),
    st.floats(width=32, allow_nan=False, allow_infinity=False).map(Float),
    st.characters().map(Char),
)

# Any value a caller might store, including ones no getter can coerce
stored_value_strategy = st.one_of(
    json_value_strategy,
    fixed_width_strategy,
    st.floats(),
)

# Key strategy
key_strategy = st.text(max_size=20)
