"""Search over global quantization matrices ordered by a heuristic score."""

from dataclasses import dataclass, field
from itertools import chain
from typing import List, Optional, Sequence, Tuple

DCT_BLOCK_SIZE = 64
NUM_COMPONENTS = 3
_MATRIX_SIZE = NUM_COMPONENTS * DCT_BLOCK_SIZE
_MAX_ITERATIONS = 1000
_EPS = 0.05

QuantMatrix = List[List[int]]

# Natural (row-major) index of each zigzag position.
JPEG_NATURAL_ORDER: Tuple[int, ...] = (
    0, 1, 8, 16, 9, 2, 3, 10,
    17, 24, 32, 25, 18, 11, 4, 5,
    12, 19, 26, 33, 40, 48, 41, 34,
    27, 20, 13, 6, 7, 14, 21, 28,
    35, 42, 49, 56, 57, 50, 43, 36,
    29, 22, 15, 23, 30, 37, 44, 51,
    58, 59, 52, 45, 38, 31, 39, 46,
    53, 60, 61, 54, 47, 55, 62, 63,
)

# Zigzag position of each natural index.
JPEG_ZIGZAG_ORDER: Tuple[int, ...] = tuple(
    JPEG_NATURAL_ORDER.index(k) for k in range(DCT_BLOCK_SIZE)
)


@dataclass
class QuantData:
    """A tried quantization matrix with its output size and acceptance."""

    q: QuantMatrix = field(
        default_factory=lambda: [[1] * DCT_BLOCK_SIZE
                                 for _ in range(NUM_COMPONENTS)])
    jpg_size: int = 0
    dist_ok: bool = False


def contrast_sensitivity(k: int) -> float:
    """Return the sensitivity weight of the coefficient at natural index k."""
    return 1.0 / (1.0 + JPEG_ZIGZAG_ORDER[k] / 2.0)


def quant_matrix_heuristic_score(q: Sequence[Sequence[int]]) -> float:
    """Return a score that grows with the coarseness of the matrices."""
    return sum(
        0.5 * (value - 1.0) * contrast_sensitivity(k)
        for table in q for k, value in enumerate(table)
    )


def _flatten(q: Sequence[Sequence[int]]) -> List[int]:
    flat = list(chain.from_iterable(q))
    if len(flat) != _MATRIX_SIZE:
        raise ValueError(
            f"quantization matrices must hold {_MATRIX_SIZE} values, "
            f"got {len(flat)}")
    return flat


def compare_quant_matrices(a: Sequence[Sequence[int]],
                           b: Sequence[Sequence[int]]) -> int:
    """Compare two sets of matrices elementwise.

    Returns 0 if equal, -1 if a <= b everywhere, 1 if a >= b everywhere and
    2 if some entries are smaller and others greater.
    """
    pairs = list(zip(_flatten(a), _flatten(b)))
    diffs = [(x > y) - (x < y) for x, y in pairs]
    has_less = -1 in diffs
    has_more = 1 in diffs
    if has_less and has_more:
        return 2
    if has_less:
        return -1
    if has_more:
        return 1
    return 0


class QuantMatrixGenerator:
    """Proposes quantization matrices by bisecting on the heuristic score.

    Results of trying the proposals are fed back with ``add``; ``get_next``
    returns None once no new matrix is worth trying.
    """

    def __init__(self, downsample: bool) -> None:
        self.downsample = downsample
        # Lower and upper bounds of the heuristic score; -1.0 means unknown.
        self.hscore_a = -1.0
        self.hscore_b = -1.0
        self.total_csf = sum(3.0 * contrast_sensitivity(k)
                             for k in range(DCT_BLOCK_SIZE))
        self.quants: List[QuantData] = []

    def get_next(self) -> Optional[QuantMatrix]:
        """Return the next matrix to try, or None when the search is done."""
        for _ in range(_MAX_ITERATIONS):
            if self.hscore_b == -1.0:
                if self.hscore_a == -1.0:
                    hscore = 0.0 if self.downsample else self.total_csf
                elif self.hscore_a < 5.0 * self.total_csf:
                    hscore = self.hscore_a + self.total_csf
                else:
                    hscore = 2 * (self.hscore_a + self.total_csf)
                if hscore > 100 * self.total_csf:
                    # No matrix produces enough error, e.g. because all DCT
                    # coefficients of the image are close to zero.
                    return None
            elif self.hscore_b == 0.0:
                return None
            elif self.hscore_a == -1.0:
                hscore = 0.0
            else:
                mid = 0.5 * (self.hscore_a + self.hscore_b)
                lower_q = self._matrix_with_score(
                    (1 - _EPS) * self.hscore_a + _EPS * mid)
                upper_q = self._matrix_with_score(
                    (1 - _EPS) * self.hscore_b + _EPS * mid)
                if compare_quant_matrices(lower_q, upper_q) == 0:
                    return None
                hscore = mid
            q = self._matrix_with_score(hscore)
            seen = next((data for data in self.quants
                         if compare_quant_matrices(q, data.q) == 0), None)
            if seen is None:
                return q
            if seen.dist_ok:
                self.hscore_a = hscore
            else:
                self.hscore_b = hscore
        return None

    def add(self, data: QuantData) -> None:
        """Record the outcome of trying a matrix and tighten the bounds."""
        self.quants.append(data)
        hscore = quant_matrix_heuristic_score(data.q)
        if data.dist_ok:
            self.hscore_a = max(self.hscore_a, hscore)
        elif self.hscore_b == -1.0:
            self.hscore_b = hscore
        else:
            self.hscore_b = min(self.hscore_b, hscore)

    def _matrix_with_score(self, score: float) -> QuantMatrix:
        level = int(score / self.total_csf)
        score -= level * self.total_csf
        q = [[0] * DCT_BLOCK_SIZE for _ in range(NUM_COMPONENTS)]
        for k in reversed(JPEG_NATURAL_ORDER):
            value = 2 * level + (3 if score > 0.0 else 1)
            for table in q:
                table[k] = value
            score -= 3.0 * contrast_sensitivity(k)
        return q