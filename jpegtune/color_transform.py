"""Fixed-point YCbCr to RGB conversion with range limiting."""

from typing import Tuple

_SCALE_BITS = 16
_ONE_HALF = 1 << (_SCALE_BITS - 1)

# Fixed-point multipliers (value * 2**16, rounded) of the conversion matrix.
_FIX_1_40200 = 91881
_FIX_1_77200 = 116130
_FIX_0_71414 = 46802
_FIX_0_34414 = 22554

_RANGE_LOW = -384
_RANGE_HIGH = 639

CR_TO_RED_TABLE: Tuple[int, ...] = tuple(
    (_FIX_1_40200 * (i - 128) + _ONE_HALF) >> _SCALE_BITS for i in range(256)
)
CB_TO_BLUE_TABLE: Tuple[int, ...] = tuple(
    (_FIX_1_77200 * (i - 128) + _ONE_HALF) >> _SCALE_BITS for i in range(256)
)
CR_TO_GREEN_TABLE: Tuple[int, ...] = tuple(
    -_FIX_0_71414 * (i - 128) for i in range(256)
)
CB_TO_GREEN_TABLE: Tuple[int, ...] = tuple(
    -_FIX_0_34414 * (i - 128) + _ONE_HALF for i in range(256)
)


def range_limit(value: int) -> int:
    """Clamp value to 0..255; only values in -384..639 are accepted."""
    if not _RANGE_LOW <= value <= _RANGE_HIGH:
        raise ValueError(
            f"value {value} outside the range-limit table "
            f"[{_RANGE_LOW}, {_RANGE_HIGH}]"
        )
    return min(max(value, 0), 255)


def _check_sample(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} sample {value} is not in 0..255")


def ycbcr_to_rgb(y: int, cb: int, cr: int) -> Tuple[int, int, int]:
    """Convert one 8-bit YCbCr pixel to an (r, g, b) tuple."""
    _check_sample("y", y)
    _check_sample("cb", cb)
    _check_sample("cr", cr)
    red = range_limit(y + CR_TO_RED_TABLE[cr])
    green = range_limit(
        y + ((CR_TO_GREEN_TABLE[cr] + CB_TO_GREEN_TABLE[cb]) >> _SCALE_BITS)
    )
    blue = range_limit(y + CB_TO_BLUE_TABLE[cb])
    return red, green, blue