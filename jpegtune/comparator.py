"""Abstract interface for comparing candidate images with a baseline."""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence


class Comparator(ABC):
    """A baseline image, a comparison metric and an acceptance criterion.

    A comparator holds the distance map of the most recent ``compare`` call,
    or of the baseline against itself if ``compare`` was never called.
    """

    @abstractmethod
    def compare(self, img: Any) -> None:
        """Compare img with the baseline and keep the resulting distance map.

        img must have the same dimensions as the baseline image.
        """

    @abstractmethod
    def start_block_comparisons(self) -> None:
        """Prepare for ``compare_block`` calls."""

    @abstractmethod
    def finish_block_comparisons(self) -> None:
        """End a run of ``compare_block`` calls."""

    @abstractmethod
    def switch_block(self, block_x: int, block_y: int,
                     factor_x: int, factor_y: int) -> None:
        """Select the macro-block used by subsequent ``compare_block`` calls."""

    @abstractmethod
    def compare_block(self, img: Any, off_x: int, off_y: int) -> float:
        """Return the distance of one 8x8 block of the current macro-block."""

    @abstractmethod
    def score_output_size(self, size: int) -> float:
        """Return a combined score of the output size and the last distance."""

    @abstractmethod
    def distance_ok(self, target_mul: float) -> bool:
        """Return whether the last compared image is acceptable.

        A target_mul of 1.0 uses the original criterion; smaller values are
        stricter and larger values are more lenient.
        """

    @abstractmethod
    def distmap(self) -> List[float]:
        """Return the per-pixel distance map of the last comparison."""

    @abstractmethod
    def distmap_aggregate(self) -> float:
        """Return an aggregate distance or similarity of the last comparison."""

    @abstractmethod
    def block_error_limit(self) -> float:
        """Return the block error above which distortions are not considered."""

    @abstractmethod
    def compute_block_error_adjustment_weights(
            self, direction: int, max_block_dist: int, target_mul: float,
            factor_x: int, factor_y: int,
            distmap: Sequence[float]) -> List[float]:
        """Return relative per-block error adjustment weights.

        direction is +1 when searching upwards and -1 when searching down.
        """