"""Mapping from JPEG quality levels to perceptual distance targets."""

_LOWEST_QUALITY = 70
_HIGHEST_QUALITY = 110

# Median distance scores for JPEG quality levels, starting at 70; levels above
# 100 decrease linearly so that 110 is 90% of the score for 100.
_SCORE_FOR_QUALITY = (
    2.810761,  # 70
    2.729300,
    2.689687,
    2.636811,
    2.547863,
    2.525400,
    2.473416,
    2.366133,
    2.338078,
    2.318654,
    2.201674,  # 80
    2.145517,
    2.087322,
    2.009328,
    1.945456,
    1.900112,
    1.805701,
    1.750194,
    1.644175,
    1.562165,
    1.473608,  # 90
    1.382021,
    1.294298,
    1.185402,
    1.066781,
    0.971769,  # 95
    0.852901,
    0.724544,
    0.611302,
    0.443185,
    0.211578,  # 100
    0.209462,
    0.207346,
    0.205230,
    0.203114,
    0.200999,  # 105
    0.198883,
    0.196767,
    0.194651,
    0.192535,
    0.190420,  # 110
    0.190420,
)


def butteraugli_score_for_quality(quality: float) -> float:
    """Return the distance target for a quality level, interpolating linearly."""
    quality = min(max(quality, _LOWEST_QUALITY), _HIGHEST_QUALITY)
    index = int(quality)
    mix = quality - index
    base = index - _LOWEST_QUALITY
    return (_SCORE_FOR_QUALITY[base] * (1 - mix)
            + _SCORE_FOR_QUALITY[base + 1] * mix)