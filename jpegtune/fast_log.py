"""Integer base-2 logarithms."""

_UINT32_LIMIT = 1 << 32


def _check_uint32(n: int) -> None:
    if n < 0 or n >= _UINT32_LIMIT:
        raise ValueError(f"value {n} is not an unsigned 32-bit integer")


def log2_floor_nonzero(n: int) -> int:
    """Return floor(log2(n)) for a positive 32-bit integer."""
    _check_uint32(n)
    if n == 0:
        raise ValueError("log2_floor_nonzero requires a non-zero value")
    return n.bit_length() - 1


def log2_floor(n: int) -> int:
    """Return floor(log2(n)), or -1 when n is zero."""
    _check_uint32(n)
    return -1 if n == 0 else log2_floor_nonzero(n)