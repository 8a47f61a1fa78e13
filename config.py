# Default settings for render.py, every one of them can be overridden on the command line
from keyframes import Keyframe

# Knill limits
XMIN, XMAX = -2.0, 1.0
YMIN, YMAX = -3 / 2, 3 / 2

WIDTH = 1000
HEIGHT = 1000
MAX_ITER = 255

IMAGE_FILE = "mandelbrot.png"
PLOT_FILE = "pixels.png"

# zoom animation
ANIM_WIDTH = 500
ANIM_HEIGHT = 500
FRAMERATE = 24.0
ANIM_FILE = "anim.gif"

KEYFRAMES = [
    Keyframe(x_center=-0.75, y_center=0.0, x_size=3.5, y_size=3.5, index=0),
    Keyframe(x_center=-1.35, y_center=0.0, x_size=0.2, y_size=0.2, index=100),
    Keyframe(x_center=-0.75, y_center=0.0, x_size=3.5, y_size=3.5, index=300),
]

# area estimate
CONFIDENCE_LEVEL = 0.05
