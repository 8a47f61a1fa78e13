"""
The Mandelbrot set is the set of c for which

z_{i + 1} = z_i^2 + c with z_0 = 0

does not diverge to infinity.
(Check it out on Wikipedia here: https://en.wikipedia.org/wiki/Mandelbrot_set)

If |z_i|^2 > 4 for some i the sequence diverges, so we count how many steps
it takes to get there (the escape time) and stop after max_iter steps.
"""
import math

import numpy as np
import numba as nb


# Knill limits, the whole set lives inside this box
KNILL_LIMITS = (-2.0, 1.0, -3 / 2, 3 / 2)


class InvalidConfigurationError(ValueError):
    """Raised for a viewport, image size or iteration cap that cannot be rendered."""


def validate_viewport(viewport):
    """Check that viewport = (xmin, xmax, ymin, ymax) is a finite, non-empty box."""
    try:
        xmin, xmax, ymin, ymax = (float(v) for v in viewport)
    except (TypeError, ValueError) as err:
        raise InvalidConfigurationError(
            f"viewport must be four numbers (xmin, xmax, ymin, ymax), got {viewport!r}"
        ) from err

    if not all(math.isfinite(v) for v in (xmin, xmax, ymin, ymax)):
        raise InvalidConfigurationError(f"viewport bounds must be finite, got {viewport!r}")
    if xmin >= xmax:
        raise InvalidConfigurationError(f"xmin ({xmin}) must be smaller than xmax ({xmax})")
    if ymin >= ymax:
        raise InvalidConfigurationError(f"ymin ({ymin}) must be smaller than ymax ({ymax})")

    return xmin, xmax, ymin, ymax


def _positive_int(name, value):
    try:
        number = float(value)
    except (TypeError, ValueError) as err:
        raise InvalidConfigurationError(f"{name} must be a positive integer, got {value!r}") from err

    # nan and inf never make it to int()
    if not math.isfinite(number) or number <= 0 or number != int(number):
        raise InvalidConfigurationError(f"{name} must be a positive integer, got {value!r}")

    return int(number)


def validate_render_args(width, height, max_iter):
    return (
        _positive_int("width", width),
        _positive_int("height", height),
        _positive_int("max_iter", max_iter),
    )


@nb.jit
def escape_time(re, im, max_iter):
    """Number of steps until |z| > 2 for c = re + im*i, or max_iter if it never escapes."""
    z_re = 0.0
    z_im = 0.0
    k = 0
    # compare |z|^2 with 4 to avoid the square root, |z| == 2 is still bounded
    while k < max_iter and z_re * z_re + z_im * z_im <= 4.0:
        z_re, z_im = z_re * z_re - z_im * z_im + re, 2.0 * z_re * z_im + im
        k += 1
    return k


@nb.jit
def smooth_escape_time(re, im, max_iter, bailout=8192.0):
    """Fractional escape time used for colouring.

    Same iteration as `escape_time` but with a much larger bailout on |z|^2,
    so that the normalised count k + 1 - log2(log2|z|) varies continuously
    between neighbouring pixels.

    Returns max_iter exactly when `escape_time` does, and something below
    max_iter otherwise.
    """
    z_re = 0.0
    z_im = 0.0
    k = 0
    norm = 0.0
    # first step with |z|^2 > 4, same cutoff as escape_time
    escaped_at = max_iter
    while k < max_iter and norm < bailout:
        z_re, z_im = z_re * z_re - z_im * z_im + re, 2.0 * z_re * z_im + im
        norm = z_re * z_re + z_im * z_im
        k += 1
        if escaped_at == max_iter and norm > 4.0 and k < max_iter:
            escaped_at = k

    if norm < bailout:
        # escaped, but too late to reach the bailout: use the plain count
        return float(escaped_at)

    # log2|z| = log2(|z|^2) / 2, at least 6.5 here so smooth < k - 1
    nu = np.log2(np.log2(norm) / 2.0)
    smooth = k + 1.0 - nu
    if smooth < 0.0:
        return 0.0
    return smooth


@nb.jit
def pixel_to_complex(px, py, width, height, xmin, xmax, ymin, ymax):
    """Affine map from pixel (px, py) to the point c of the viewport."""
    dx = (xmax - xmin) / width
    dy = (ymax - ymin) / height
    return xmin + px * dx, ymin + py * dy


@nb.jit(parallel=True)
def _draw_mandelbrot(width, height, max_iter, xmin, xmax, ymin, ymax):
    pixels = np.empty((height, width), np.int32)

    # rows are independent, each thread writes its own rows
    for j in nb.prange(height):
        for i in range(width):
            x, y = pixel_to_complex(i, j, width, height, xmin, xmax, ymin, ymax)
            pixels[j, i] = escape_time(x, y, max_iter)

    return pixels


@nb.jit
def _draw_mandelbrot_sequential(width, height, max_iter, xmin, xmax, ymin, ymax):
    pixels = np.empty((height, width), np.int32)

    for j in range(height):
        for i in range(width):
            x, y = pixel_to_complex(i, j, width, height, xmin, xmax, ymin, ymax)
            pixels[j, i] = escape_time(x, y, max_iter)

    return pixels


@nb.jit(parallel=True)
def _draw_mandelbrot_smooth(width, height, max_iter, xmin, xmax, ymin, ymax):
    pixels = np.empty((height, width), np.float64)

    for j in nb.prange(height):
        for i in range(width):
            x, y = pixel_to_complex(i, j, width, height, xmin, xmax, ymin, ymax)
            pixels[j, i] = smooth_escape_time(x, y, max_iter)

    return pixels


def draw_mandelbrot(width, height, max_iter, viewport=KNILL_LIMITS):
    """Escape times for a (height, width) pixel grid over the viewport.

    Row j holds y = ymin + j * dy, so row 0 is the bottom of the picture.
    Rows are computed in parallel.
    """
    xmin, xmax, ymin, ymax = validate_viewport(viewport)
    width, height, max_iter = validate_render_args(width, height, max_iter)
    return _draw_mandelbrot(width, height, max_iter, xmin, xmax, ymin, ymax)


def draw_mandelbrot_sequential(width, height, max_iter, viewport=KNILL_LIMITS):
    """Single-threaded version of `draw_mandelbrot`, gives the same pixels."""
    xmin, xmax, ymin, ymax = validate_viewport(viewport)
    width, height, max_iter = validate_render_args(width, height, max_iter)
    return _draw_mandelbrot_sequential(width, height, max_iter, xmin, xmax, ymin, ymax)


def draw_mandelbrot_smooth(width, height, max_iter, viewport=KNILL_LIMITS):
    """Fractional escape times (see `smooth_escape_time`) for the pixel grid."""
    xmin, xmax, ymin, ymax = validate_viewport(viewport)
    width, height, max_iter = validate_render_args(width, height, max_iter)
    return _draw_mandelbrot_smooth(width, height, max_iter, xmin, xmax, ymin, ymax)
