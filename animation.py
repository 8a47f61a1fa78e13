"""Render a keyframed zoom into the Mandelbrot set and save it as a GIF."""
import numpy as np

from keyframes import get_interpolated_frames
from mandelbrot import InvalidConfigurationError, draw_mandelbrot_smooth
from utils import colorize, to_image


def render_frame(keyframe, width, height, max_iter):
    """RGB pixels of a single frame, coloured with the smooth escape time."""
    pixels = draw_mandelbrot_smooth(width, height, max_iter, keyframe.viewport())
    return colorize(pixels, max_iter)


def render_frames(keyframes, width, height, max_iter):
    """Render every interpolated frame between the keyframes, in order.

    Frames are rendered one after the other, the pixels of each frame are
    computed in parallel.
    """
    return [
        render_frame(keyframe, width, height, max_iter)
        for keyframe in get_interpolated_frames(keyframes)
    ]


class Animation:
    """Frames of a looping GIF, written to `path` by `write_animation`.

    The file is created right away, so a bad path fails before any frame
    is rendered.
    """

    def __init__(self, path, width, height, framerate):
        if width <= 0 or height <= 0:
            raise InvalidConfigurationError(
                f"animation size must be positive, got {width}x{height}"
            )
        if framerate <= 0:
            raise InvalidConfigurationError(f"framerate must be positive, got {framerate}")

        # GIF frame delays are whole hundredths of a second
        delay = int(100.0 / framerate)
        if delay < 1:
            raise InvalidConfigurationError(
                f"framerate must be at most 100 frames per second, got {framerate}"
            )

        self.path = path
        self.width = width
        self.height = height
        self.delay = delay
        self.frames = []
        self.file = open(path, "wb")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        self.file.close()

    def add_frames(self, frames):
        for frame in frames:
            frame = np.asarray(frame)
            if frame.shape != (self.height, self.width, 3):
                raise InvalidConfigurationError(
                    f"frame of shape {frame.shape} does not fit a "
                    f"{self.width}x{self.height} RGB animation"
                )
            self.frames.append(frame)

    def write_animation(self):
        with self.file:
            if not self.frames:
                raise InvalidConfigurationError("animation has no frames to write")

            images = [to_image(frame) for frame in self.frames]
            images[0].save(
                self.file,
                format="GIF",
                save_all=True,
                append_images=images[1:],
                duration=self.delay * 10,
                loop=0,
            )
