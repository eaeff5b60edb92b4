"""Combined score of output size and perceptual distance."""

import math

_SCALE = 50.0
_MAX_EXPONENT = 10.0
_LARGE_SIZE = 1e30


def score_jpeg(butteraugli_distance: float, size: int,
               butteraugli_target: float) -> float:
    """Score an encoding; lower is better, penalizing distance above target."""
    diff = butteraugli_distance - butteraugli_target
    if diff <= 0.0:
        return float(size)
    exponent = _SCALE * diff
    if exponent > _MAX_EXPONENT:
        return _LARGE_SIZE * math.exp(_MAX_EXPONENT) * diff + size
    return math.exp(exponent) * size