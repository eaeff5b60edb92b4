"""Encoder parameters, output selection and coefficient bookkeeping helpers."""

from dataclasses import dataclass
from typing import Iterable, MutableSequence, Sequence, Tuple

from .fast_log import log2_floor_nonzero
from .quant_search import DCT_BLOCK_SIZE, JPEG_NATURAL_ORDER, QuantData

MAX_BUTTERAUGLI_TARGET = 2.0
_MAX_COMPONENT = 1 << 12
_ZERO_RUN_SYMBOL = 0xF0
_EOB_SYMBOL = 0


@dataclass
class Params:
    """Tuning parameters of the encoder search."""

    butteraugli_target: float = 1.0
    clear_metadata: bool = True
    try_420: bool = False
    force_420: bool = False
    use_silver_screen: bool = False
    zeroing_greedy_lookahead: int = 3
    new_zeroing_model: bool = True

    def validate(self) -> None:
        """Raise ValueError if the parameters would give visible artifacts."""
        if self.butteraugli_target > MAX_BUTTERAUGLI_TARGET:
            raise ValueError(
                "the encoder should be called with quality >= 84, otherwise "
                "the output will have noticeable artifacts")


@dataclass
class GuetzliOutput:
    """The best encoding found so far and its score; a negative score means none."""

    jpeg_data: bytes = b""
    score: float = -1.0

    def maybe_update(self, encoded_jpg: bytes, score: float) -> bool:
        """Keep encoded_jpg if it scores better; return whether it was kept."""
        if score < self.score or self.score < 0:
            self.jpeg_data = bytes(encoded_jpg)
            self.score = score
            return True
        return False


def compare_quant_data(a: QuantData, b: QuantData) -> bool:
    """Return whether a is preferable to b: acceptable first, then smaller."""
    if a.dist_ok and not b.dist_ok:
        return True
    if not a.dist_ok and b.dist_ok:
        return False
    return a.jpg_size < b.jpg_size


def is_grayscale(component_coeffs: Sequence[Sequence[int]]) -> bool:
    """Return whether both chroma components hold only zero coefficients."""
    if len(component_coeffs) < 3:
        raise ValueError(
            f"expected 3 components, got {len(component_coeffs)}")
    return not any(any(coeffs) for coeffs in component_coeffs[1:3])


def check_jpeg_sanity(
        components: Iterable[Tuple[Sequence[int], Sequence[int]]]) -> bool:
    """Return whether no dequantized coefficient exceeds the supported range.

    Each component is a pair of its coefficients and its quantization table.
    """
    for coeffs, quant_table in components:
        if len(quant_table) != DCT_BLOCK_SIZE:
            raise ValueError(
                f"quantization table must hold {DCT_BLOCK_SIZE} values")
        for i, coeff in enumerate(coeffs):
            if abs(coeff * quant_table[i % DCT_BLOCK_SIZE]) > _MAX_COMPONENT:
                return False
    return True


def update_ac_histogram(weight: int, coeffs: Sequence[int], q: Sequence[int],
                        histogram: MutableSequence[int]) -> None:
    """Add weight to the AC Huffman symbols one block would produce.

    coeffs and q are in natural order; histogram is indexed by symbol.
    """
    if len(coeffs) != DCT_BLOCK_SIZE or len(q) != DCT_BLOCK_SIZE:
        raise ValueError(f"block and table must hold {DCT_BLOCK_SIZE} values")
    run = 0
    for k_nat in JPEG_NATURAL_ORDER[1:]:
        coeff = coeffs[k_nat]
        if coeff == 0:
            run += 1
            continue
        while run > 15:
            histogram[_ZERO_RUN_SYMBOL] += weight
            run -= 16
        nbits = log2_floor_nonzero(abs(coeff) // abs(q[k_nat])) + 1
        histogram[(run << 4) + nbits] += weight
        run = 0
    if run > 0:
        histogram[_EOB_SYMBOL] += weight