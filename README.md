# jpegtune

Pure-Python building blocks for re-encoding JPEG images so that the files are
smaller and look the same. The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `jpegtune.score`: `score_jpeg(butteraugli_distance, size, butteraugli_target)`
  combines output size and perceptual distance into one score. Lower is
  better. At or below the target the score is the size itself. Above the
  target the score grows exponentially with the excess distance.
- `jpegtune.quality`: `butteraugli_score_for_quality(quality)` maps a
  libjpeg-style quality setting to a target perceptual distance. Values are
  clamped to 70–110 and interpolated linearly between whole levels.
- `jpegtune.color_transform`: `ycbcr_to_rgb(y, cb, cr)` gives the fixed-point
  YCbCr to RGB conversion of one 8-bit pixel. `range_limit(value)` clamps to
  0..255 and accepts inputs from -384 to 639. Both raise `ValueError` for
  inputs outside their range.
- `jpegtune.preprocess`:
  - `rgb_to_yuv420(rgb_in, width, height)` does gamma-compensated chroma
    subsampling of interleaved 8-bit RGB. It returns full-size Y, U and V
    planes, where U and V are made of 2x2 blocks of equal values.
  - `preprocess_channel(w, h, channel, sigma, amount, blur, sharpen, image)`
    selectively sharpens or blurs the U (1) or V (2) plane of a 0–255 YUV
    image.
- `jpegtune.bit_writer`: `BitWriter(length)` packs bits most-significant
  first into a fixed-size buffer.
  - It inserts a 0x00 byte after every 0xFF byte.
  - It sets `overflow` when the buffer is full.
  - `jump_to_byte_boundary()` pads the last byte with one bits.
  - `getvalue()` returns the bytes written so far.
  - `has_zero_byte(x)` tests a 64-bit value for a zero byte.
- `jpegtune.quant_search`: `QuantMatrixGenerator(downsample)` proposes global
  quantization matrices by bisecting on a contrast-sensitivity heuristic
  score.
  - `get_next()` returns a matrix to try, or `None` when the search is done.
  - `add(QuantData(...))` records whether a tried matrix was acceptable.
  - Also in the module: `contrast_sensitivity`,
    `quant_matrix_heuristic_score` and `compare_quant_matrices`.
- `jpegtune.comparator`: `Comparator`, an abstract base class. A perceptual
  metric that drives the search implements it.
- `jpegtune.processor`:
  - `Params` holds the search settings; see below.
  - `GuetzliOutput` keeps the best-scoring encoding through `maybe_update`.
  - `compare_quant_data` prefers acceptable results first, then smaller
    files.
  - `is_grayscale` and `check_jpeg_sanity` check input coefficients.
  - `update_ac_histogram` adds the AC Huffman symbols of one block to a
    histogram.
- `jpegtune.stats`: `ProcessStats` holds named counters (`increment`) and
  writes debug text to optional sinks (`log`).
- `jpegtune.jpeg_error`: the `JPEGReadError` codes and the `JPEGError`
  exception that carries one.
- `jpegtune.fast_log`: integer `log2_floor` and `log2_floor_nonzero` for
  32-bit values.

## Example

```python
from jpegtune.quality import butteraugli_score_for_quality
from jpegtune.score import score_jpeg
from jpegtune.color_transform import ycbcr_to_rgb

target = butteraugli_score_for_quality(90)
print(score_jpeg(0.9, 12000, target))    # within target: 12000.0
print(ycbcr_to_rgb(128, 128, 128))       # (128, 128, 128)
```

## Search parameters

`Params` defaults:

| Setting | Default |
| --- | --- |
| `butteraugli_target` | 1.0 |
| `clear_metadata` | True |
| `try_420` | False |
| `force_420` | False |
| `use_silver_screen` | False |
| `zeroing_greedy_lookahead` | 3 |
| `new_zeroing_model` | True |

`Params.validate()` raises `ValueError` for targets above 2.0. Such targets
correspond to quality settings below 84, which produce visible artifacts.

## What this package does not do

This package does not give a complete encoder. It has no:

- JPEG reader or writer
- DCT
- Huffman table builder
- concrete perceptual `Comparator`
- command-line tool

To optimize real files, you supply these pieces and drive the search with
the components above.