# Some utility functions for colouring, saving and measuring the rendered pixels
import matplotlib.pyplot as plt
from PIL import Image
from scipy.stats import beta
import numpy as np

from mandelbrot import KNILL_LIMITS, InvalidConfigurationError, validate_viewport


def plot_pixels(pixels, figsize=(7, 7), dpi=300, viewport=KNILL_LIMITS, cmap=None):
    """Show a pixel grid with axes in complex plane units.

    Row 0 of `pixels` is ymin, hence origin="lower".
    """
    fig, ax = plt.subplots(figsize=figsize, dpi=dpi, layout="constrained")
    p = ax.imshow(pixels, extent=list(viewport), origin="lower", cmap=cmap)
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    return fig, ax, p


def colorize(pixels, max_iter):
    """Map escape times to RGB.

    t = value / max_iter gives (t^2, t, sqrt(t)), every channel grows with t.
    Points that never escaped (value >= max_iter) are black.
    """
    if max_iter <= 0:
        raise InvalidConfigurationError(f"max_iter must be positive, got {max_iter!r}")

    values = np.asarray(pixels, dtype=np.float64)
    t = np.clip(values / max_iter, 0.0, 1.0)

    rgb = np.stack([t**2, t, np.sqrt(t)], axis=-1)
    rgb[values >= max_iter] = 0.0

    return (255.0 * rgb).astype(np.uint8)


def to_image(rgb):
    """Pillow image from an RGB grid, flipped so the largest y is the top row."""
    rgb = np.asarray(rgb, dtype=np.uint8)
    if rgb.ndim != 3 or rgb.shape[2] != 3:
        raise InvalidConfigurationError(
            f"expected an RGB array of shape (height, width, 3), got {rgb.shape}"
        )
    return Image.fromarray(np.ascontiguousarray(np.flipud(rgb)))


def save_image(rgb, path):
    """Write an RGB grid to `path`, the format follows the file extension."""
    image = to_image(rgb)
    image.save(path)
    return image


def viewport_area(viewport):
    xmin, xmax, ymin, ymax = validate_viewport(viewport)
    return (xmax - xmin) * (ymax - ymin)


def bounded_fraction(pixels, max_iter):
    """Fraction of pixels that never escaped."""
    pixels = np.asarray(pixels)
    if pixels.size == 0:
        raise InvalidConfigurationError("cannot measure an empty pixel grid")
    return np.count_nonzero(pixels >= max_iter) / pixels.size


def confidence_interval(confidence_level, numerator, denominator, area):
    """Calculate confidence interval based on Clopper-Pearson.
    `beta.ppf` is the Percent Point function of the Beta distribution.
    Check out
    https://en.wikipedia.org/wiki/Binomial_proportion_confidence_interval#Clopper%E2%80%93Pearson_interval
    """
    low = beta.ppf(confidence_level / 2, numerator, denominator - numerator + 1) * area
    high = beta.ppf(1 - confidence_level / 2, numerator + 1, denominator - numerator) * area

    # catch nan cases (numerator == 0 or numerator == denominator)
    low = np.nan_to_num(np.asarray(low), nan=0)
    high = np.nan_to_num(np.asarray(high), nan=area)

    return low, high


def estimate_area(pixels, max_iter, viewport=KNILL_LIMITS, confidence_level=0.05):
    """Area covered by bounded pixels, with its Clopper-Pearson interval.

    Every pixel is treated as one sample of the viewport, so this is only as
    good as the grid resolution and max_iter allow.

    The pixels sit on a fixed lattice, they are not random draws. The
    Clopper-Pearson interval therefore only describes the binomial spread of
    the pixel count, it says nothing about the error from the lattice or from
    points that escape after max_iter steps. For an interval on the true area
    the points have to be drawn at random (Monte Carlo) instead.
    """
    if not 0 < confidence_level < 1:
        raise InvalidConfigurationError(
            f"confidence_level must be between 0 and 1, got {confidence_level!r}"
        )

    pixels = np.asarray(pixels)
    total_area = viewport_area(viewport)
    fraction = bounded_fraction(pixels, max_iter)

    numerator = np.count_nonzero(pixels >= max_iter)
    low, high = confidence_interval(confidence_level, numerator, pixels.size, total_area)

    return fraction * total_area, low.item(), high.item()
