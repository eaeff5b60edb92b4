"""Chroma preprocessing and gamma-compensated chroma subsampling."""

import math
from typing import List, Sequence

Plane = List[float]
Mask = List[bool]

_INV_SQRT_2PI = 0.3989422804014327
_BLUR_SIGMA = 1.3
_KERNEL_SIZE = 5
_EDGE_MATRIX = (
    0.0, -1.0, 0.0,
    -1.0, 4.0, -1.0,
    0.0, -1.0, 0.0,
)
_SUBSAMPLING_ITERATIONS = 20


def _check_planes(image: Sequence[Sequence[float]], w: int, h: int) -> None:
    if w <= 0 or h <= 0:
        raise ValueError(f"image dimensions must be positive, got {w}x{h}")
    if len(image) != 3:
        raise ValueError(f"expected 3 planes, got {len(image)}")
    for plane in image:
        if len(plane) != w * h:
            raise ValueError(
                f"plane holds {len(plane)} values, expected {w * h}")


def _convolve_2d(image: Plane, w: int, h: int, kernel: Sequence[float],
                 size: int) -> Plane:
    """Convolve with a size*size kernel, leaving the border untouched."""
    result = list(image)
    half = size // 2
    tail = size - half - 1
    for y in range(half, h - tail):
        for x in range(half, w - tail):
            result[y * w + x] = sum(
                kernel[j] * image[(y + j // size - half) * w
                                  + x + j % size - half]
                for j in range(size * size)
            )
    return result


def _convolve_2x(image: Plane, w: int, h: int, kernel: Sequence[float],
                 mul: float) -> Plane:
    """Convolve horizontally then vertically with a 1D kernel."""
    size = len(kernel)
    half = size // 2
    tail = size - half - 1
    temp = list(image)
    for y in range(h):
        row = y * w
        for x in range(half, w - tail):
            temp[row + x] = mul * sum(
                k * image[row + x + j - half] for j, k in enumerate(kernel))
    result = list(temp)
    for y in range(half, h - tail):
        for x in range(w):
            result[y * w + x] = mul * sum(
                k * temp[(y + j - half) * w + x] for j, k in enumerate(kernel))
    return result


def _normal(x: float, sigma: float) -> float:
    return math.exp(-x * x / (2 * sigma * sigma)) * _INV_SQRT_2PI / sigma


def _gaussian_kernel(sigma: float) -> List[float]:
    half = _KERNEL_SIZE // 2
    return [_normal(float(i - half), sigma) for i in range(_KERNEL_SIZE)]


def _gaussian_blur(image: Plane, w: int, h: int,
                   sigma: float = _BLUR_SIGMA) -> Plane:
    kernel = _gaussian_kernel(sigma)
    return _convolve_2x(image, w, h, kernel, 1.0 / sum(kernel))


def _sharpen(image: Plane, w: int, h: int, sigma: float,
             amount: float) -> Plane:
    blurred = _gaussian_blur(image, w, h, sigma)
    return [v + (v - b) * amount for v, b in zip(image, blurred)]


def _erode(w: int, h: int, mask: Mask) -> None:
    temp = list(mask)
    for y in range(1, h - 1):
        for x in range(1, w - 1):
            i = y * w + x
            if not (temp[i] and temp[i - 1] and temp[i + 1]
                    and temp[i - w] and temp[i + w]):
                mask[i] = False


def _dilate(w: int, h: int, mask: Mask) -> None:
    temp = list(mask)
    for y in range(1, h - 1):
        for x in range(1, w - 1):
            i = y * w + x
            if (temp[i] or temp[i - 1] or temp[i + 1]
                    or temp[i - w] or temp[i + w]):
                mask[i] = True


def _is_dark(channel: int, y: float, u: float, v: float) -> bool:
    r = y + 1.402 * v
    g = y - 0.34414 * u - 0.71414 * v
    b = y + 1.772 * u
    # Tuned to avoid the effect in bright areas, where it makes things worse.
    if channel == 2:
        return g < 0.85 and b < 0.85 and r < 0.9
    if channel == 1:
        return r < 0.85 and g < 0.85 and b < 0.9
    return False


def _is_target_color(channel: int, u: float, v: float) -> bool:
    # Tuned to allow only colors on which sharpening is useful.
    if channel == 2:
        return 2.116 * v > -0.34414 * u + 0.2 and 1.402 * v > 1.772 * u + 0.2
    if channel == 1:
        return v < 1.263 * u - 0.1 and u > -0.33741 * v
    return False


def preprocess_channel(w: int, h: int, channel: int, sigma: float,
                       amount: float, blur: bool, sharpen: bool,
                       image: Sequence[Sequence[float]]) -> List[Plane]:
    """Selectively sharpen or blur the u (1) or v (2) plane of a YUV image.

    The planes are in the 0-255 range; a new list of three planes is returned.
    """
    if channel not in (0, 1, 2):
        raise ValueError(f"channel must be 0, 1 or 2, got {channel}")
    _check_planes(image, w, h)
    if not blur and not sharpen:
        return [list(plane) for plane in image]

    yuv = [
        [v / 255.0 for v in image[0]],
        [v / 255.0 - 0.5 for v in image[1]],
        [v / 255.0 - 0.5 for v in image[2]],
    ]
    ys, us, vs = yuv

    darkmap = [_is_dark(channel, y, u, v) for y, u, v in zip(ys, us, vs)]
    for _ in range(3):
        _erode(w, h, darkmap)

    colormap = [_is_target_color(channel, u, v) for u, v in zip(us, vs)]
    for _ in range(3):
        _dilate(w, h, colormap)

    sharpenmap = [c and d for c, d in zip(colormap, darkmap)]

    threshold = (0.02 if channel == 2 else 1.0) * 127.5
    edge = _convolve_2d(yuv[channel], w, h, _EDGE_MATRIX, 3)
    blurmap = [
        not s and d and abs(e) < threshold and v < -0.162 * u
        for s, d, e, u, v in zip(sharpenmap, darkmap, edge, us, vs)
    ]
    for _ in range(2):
        _erode(w, h, blurmap)

    sharpened = _sharpen(yuv[channel], w, h, sigma, amount)
    blurred = _gaussian_blur(yuv[channel], w, h)
    target = yuv[channel]
    for i, (do_sharpen, do_blur) in enumerate(zip(sharpenmap, blurmap)):
        if do_sharpen:
            if sharpen:
                target[i] = sharpened[i]
        elif do_blur and blur:
            target[i] = blurred[i]

    return [
        [v * 255.0 for v in ys],
        [(v + 0.5) * 255.0 for v in us],
        [(v + 0.5) * 255.0 for v in vs],
    ]


def _clip(val: float) -> float:
    return max(0.0, min(255.0, val))


def _rgb_to_y(r: float, g: float, b: float) -> float:
    return 0.299 * r + 0.587 * g + 0.114 * b


def _rgb_to_u(r: float, g: float, b: float) -> float:
    return -0.16874 * r - 0.33126 * g + 0.5 * b + 128.0


def _rgb_to_v(r: float, g: float, b: float) -> float:
    return 0.5 * r - 0.41869 * g - 0.08131 * b + 128.0


def _gamma_to_linear(x: float) -> float:
    return (x / 255.0) ** 2.2


def _linear_to_gamma(x: float) -> float:
    return 255.0 * x ** (1.0 / 2.2)


def _pixels(rgb: Plane):
    return zip(rgb[0::3], rgb[1::3], rgb[2::3])


def _linearly_averaged_luma(rgb: Plane) -> Plane:
    return [
        _linear_to_gamma(_rgb_to_y(_gamma_to_linear(r), _gamma_to_linear(g),
                                   _gamma_to_linear(b)))
        for r, g, b in _pixels(rgb)
    ]


def _linearly_downsample_2x2(rgb_in: Plane, width: int,
                             height: int) -> Plane:
    if len(rgb_in) != 3 * width * height:
        raise ValueError("RGB buffer does not match the image dimensions")
    w = (width + 1) // 2
    h = (height + 1) // 2
    out: Plane = []
    for y in range(h):
        rows = [min(height - 1, 2 * y + iy) for iy in range(2)]
        for x in range(w):
            cols = [min(width - 1, 2 * x + ix) for ix in range(2)]
            for i in range(3):
                total = sum(
                    _gamma_to_linear(rgb_in[3 * (yy * width + xx) + i])
                    for yy in rows for xx in cols)
                out.append(_linear_to_gamma(0.25 * total))
    return out


def _rgb_to_yuv(rgb: Plane) -> List[Plane]:
    pixels = list(_pixels(rgb))
    return [
        [_rgb_to_y(*p) for p in pixels],
        [_rgb_to_u(*p) for p in pixels],
        [_rgb_to_v(*p) for p in pixels],
    ]


def _yuv_to_rgb(yuv: Sequence[Plane]) -> Plane:
    rgb: Plane = []
    for y, u, v in zip(*yuv):
        rgb.append(_clip(y + 1.402 * (v - 128.0)))
        rgb.append(_clip(y - 0.344136 * (u - 128.0) - 0.714136 * (v - 128.0)))
        rgb.append(_clip(y + 1.772 * (u - 128.0)))
    return rgb


def _upsample_2x2(img_in: Plane, width: int, height: int) -> Plane:
    """Box-filter upsampling to width x height."""
    w = (width + 1) // 2
    h = (height + 1) // 2
    if len(img_in) != w * h:
        raise ValueError("plane does not match the half-size dimensions")
    out = [0.0] * (width * height)
    for y in range(h):
        for x in range(w):
            value = img_in[y * w + x]
            for iy in range(2):
                yy = min(height - 1, 2 * y + iy)
                for ix in range(2):
                    out[yy * width + min(width - 1, 2 * x + ix)] = value
    return out


def _fancy_upsample_blur(img: Plane, width: int, height: int) -> Plane:
    """Apply the 9-3-3-1 "fancy upsampling" filter to a box-upsampled plane."""
    out = [0.0] * (width * height)
    for y0 in range(0, height, 2):
        for x0 in range(0, width, 2):
            for iy in range(min(2, height - y0)):
                y1 = min(height - 1, max(0, y0 + 4 * iy - 2))
                for ix in range(min(2, width - x0)):
                    x1 = min(width - 1, max(0, x0 + 4 * ix - 2))
                    out[(y0 + iy) * width + x0 + ix] = (
                        9.0 * img[y0 * width + x0]
                        + 3.0 * img[y0 * width + x1]
                        + 3.0 * img[y1 * width + x0]
                        + 1.0 * img[y1 * width + x1]) / 16.0
    return out


def _yuv420_to_rgb(yuv420: Sequence[Plane], width: int,
                   height: int) -> Plane:
    u = _upsample_2x2(yuv420[1], width, height)
    v = _upsample_2x2(yuv420[2], width, height)
    return _yuv_to_rgb([
        yuv420[0],
        _fancy_upsample_blur(u, width, height),
        _fancy_upsample_blur(v, width, height),
    ])


def _update_guess(target: Plane, reconstructed: Plane, guess: Plane) -> None:
    for i, (g, r, t) in enumerate(zip(guess, reconstructed, target)):
        guess[i] = _clip(g - (r - t))


def rgb_to_yuv420(rgb_in: Sequence[int], width: int,
                  height: int) -> List[Plane]:
    """Gamma-compensated chroma subsampling of interleaved 8-bit RGB.

    Returns Y, U and V planes of width x height; U and V consist of 2x2
    blocks of equal values.
    """
    if width <= 0 or height <= 0:
        raise ValueError(
            f"image dimensions must be positive, got {width}x{height}")
    if len(rgb_in) != 3 * width * height:
        raise ValueError(
            f"RGB buffer holds {len(rgb_in)} values, "
            f"expected {3 * width * height}")
    rgbf = [float(v) for v in rgb_in]
    y_target = _linearly_averaged_luma(rgbf)
    yuv_target = _rgb_to_yuv(_linearly_downsample_2x2(rgbf, width, height))
    guess = [
        _upsample_2x2(yuv_target[0], width, height),
        list(yuv_target[1]),
        list(yuv_target[2]),
    ]
    for _ in range(_SUBSAMPLING_ITERATIONS):
        rgb_rec = _yuv420_to_rgb(guess, width, height)
        y_rec = _linearly_averaged_luma(rgb_rec)
        yuv_rec = _rgb_to_yuv(_linearly_downsample_2x2(rgb_rec, width, height))
        _update_guess(y_target, y_rec, guess[0])
        _update_guess(yuv_target[1], yuv_rec[1], guess[1])
        _update_guess(yuv_target[2], yuv_rec[2], guess[2])
    guess[1] = _upsample_2x2(guess[1], width, height)
    guess[2] = _upsample_2x2(guess[2], width, height)
    return guess