"""Fixed-width integer bounds and codec settings."""

BYTE_BITS: int = 8
SHORT_BITS: int = 16
INT_BITS: int = 32
LONG_BITS: int = 64

MIN_BYTE: int = -(2**7)
MAX_BYTE: int = 2**7 - 1
MIN_SHORT: int = -(2**15)
MAX_SHORT: int = 2**15 - 1
MIN_INT: int = -(2**31)
MAX_INT: int = 2**31 - 1
MIN_LONG: int = -(2**63)
MAX_LONG: int = 2**63 - 1

# Largest finite IEEE 754 binary32 value
MAX_FLOAT32: float = 3.4028234663852886e38

COMPACT_SEPARATORS: tuple[str, str] = (",", ":")
INDENT_SEPARATORS: tuple[str, str] = (",", ": ")
