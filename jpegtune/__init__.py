"""Building blocks for perceptually guided JPEG re-encoding."""

__version__ = "0.1.0"

__all__ = [
    "bit_writer",
    "color_transform",
    "comparator",
    "fast_log",
    "jpeg_error",
    "preprocess",
    "processor",
    "quality",
    "quant_search",
    "score",
    "stats",
]