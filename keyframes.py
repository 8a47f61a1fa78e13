"""Keyframes for a zoom animation.

A keyframe pins a viewport (centre and size) to a frame index. The frames in
between two keyframes are linear interpolations of the two.
"""
from dataclasses import dataclass, replace

from mandelbrot import InvalidConfigurationError, pixel_to_complex


@dataclass(frozen=True)
class Keyframe:
    x_center: float
    y_center: float
    x_size: float
    y_size: float
    index: int

    def __post_init__(self):
        if not (self.x_size > 0 and self.y_size > 0):
            raise InvalidConfigurationError(
                f"keyframe {self.index}: sizes must be positive, got {self.x_size}, {self.y_size}"
            )
        if self.index < 0:
            raise InvalidConfigurationError(f"keyframe index must be >= 0, got {self.index}")

    def interpolate(self, other, idx):
        """Viewport at frame `idx`, somewhere between this keyframe and `other`."""
        t = (idx - self.index) / (other.index - self.index)

        def flerp(a, b):
            return a + (b - a) * t

        return replace(
            self,
            x_center=flerp(self.x_center, other.x_center),
            y_center=flerp(self.y_center, other.y_center),
            x_size=flerp(self.x_size, other.x_size),
            y_size=flerp(self.y_size, other.y_size),
            index=idx,
        )

    def viewport(self):
        """(xmin, xmax, ymin, ymax) covered by this keyframe."""
        return (
            self.x_center - self.x_size / 2,
            self.x_center + self.x_size / 2,
            self.y_center - self.y_size / 2,
            self.y_center + self.y_size / 2,
        )

    def get_coordinate(self, x, y, width, height):
        """Point of the plane shown at pixel (x, y) of a rendered frame.

        Row 0 is the top of the frame, i.e. the last grid row before the
        image is flipped for saving.
        """
        xmin, xmax, ymin, ymax = self.viewport()
        return pixel_to_complex(x, height - 1 - y, width, height, xmin, xmax, ymin, ymax)


def get_interpolated_frames(keyframes):
    """Every frame from the first keyframe up to (not including) the last one."""
    keyframes = list(keyframes)

    for start, end in zip(keyframes, keyframes[1:]):
        if end.index <= start.index:
            raise InvalidConfigurationError(
                f"keyframe indices must be strictly increasing, got {start.index} then {end.index}"
            )

    return [
        start.interpolate(end, idx)
        for start, end in zip(keyframes, keyframes[1:])
        for idx in range(start.index, end.index)
    ]
