#!/usr/bin/env python3
"""Render the Mandelbrot set.

    python render.py image      # still image of the Knill limits
    python render.py animate    # zoom animation between the keyframes in config.py
    python render.py area       # area of the bounded pixels with a confidence interval
"""
import argparse
import warnings
from time import perf_counter

# ignore deprecation warnings from numba for now
from numba.core.errors import NumbaDeprecationWarning, NumbaPendingDeprecationWarning

import config
from animation import Animation, render_frames
from keyframes import get_interpolated_frames
from mandelbrot import InvalidConfigurationError, draw_mandelbrot
from utils import colorize, estimate_area, plot_pixels, save_image

warnings.simplefilter("ignore", category=NumbaDeprecationWarning)
warnings.simplefilter("ignore", category=NumbaPendingDeprecationWarning)

BANNER = "########################################################"


def banner(message):
    print(BANNER)
    print(message)
    print(BANNER)


def add_grid_arguments(parser):
    parser.add_argument("--xmin", type=float, default=config.XMIN,
                        help="Minimum real-axis value")
    parser.add_argument("--xmax", type=float, default=config.XMAX,
                        help="Maximum real-axis value")
    parser.add_argument("--ymin", type=float, default=config.YMIN,
                        help="Minimum imaginary-axis value")
    parser.add_argument("--ymax", type=float, default=config.YMAX,
                        help="Maximum imaginary-axis value")
    parser.add_argument("--width", type=int, default=config.WIDTH,
                        help="Image width in pixels")
    parser.add_argument("--height", type=int, default=config.HEIGHT,
                        help="Image height in pixels")
    parser.add_argument("--max-iter", type=int, default=config.MAX_ITER,
                        help="Max iterations per point")


def build_parser():
    parser = argparse.ArgumentParser(description="Escape-time renderer for the Mandelbrot set")
    subparsers = parser.add_subparsers(dest="command", required=True)

    image = subparsers.add_parser("image", help="Render a still image")
    add_grid_arguments(image)
    image.add_argument("--output", default=config.IMAGE_FILE,
                       help="Where to write the image")
    image.add_argument("--plot", nargs="?", const=config.PLOT_FILE, default=None,
                       help="Also save a matplotlib plot of the escape times")

    animate = subparsers.add_parser("animate", help="Render the keyframed zoom as a GIF")
    animate.add_argument("--width", type=int, default=config.ANIM_WIDTH,
                         help="Frame width in pixels")
    animate.add_argument("--height", type=int, default=config.ANIM_HEIGHT,
                         help="Frame height in pixels")
    animate.add_argument("--max-iter", type=int, default=config.MAX_ITER,
                         help="Max iterations per point")
    animate.add_argument("--framerate", type=float, default=config.FRAMERATE,
                         help="Frames per second")
    animate.add_argument("--output", default=config.ANIM_FILE,
                         help="Where to write the GIF")

    area = subparsers.add_parser("area", help="Estimate the area of the bounded pixels")
    add_grid_arguments(area)
    area.add_argument("--confidence-level", type=float, default=config.CONFIDENCE_LEVEL,
                      help="1 - coverage of the Clopper-Pearson interval")

    return parser


def viewport_from(args):
    return args.xmin, args.xmax, args.ymin, args.ymax


def run_image(args):
    viewport = viewport_from(args)
    banner(f"Generating Mandelbrot set for ({args.width},{args.height}) pixel array")

    ts = perf_counter()
    pixels = draw_mandelbrot(args.width, args.height, args.max_iter, viewport)
    print(f"\tRuntime: {perf_counter() - ts:.3f} s")

    save_image(colorize(pixels, args.max_iter), args.output)
    print(f"\tOutput has been saved in `{args.output}`\n")

    if args.plot:
        fig, _, _ = plot_pixels(pixels, viewport=viewport)
        fig.savefig(args.plot)
        print(f"\tPixels are plotted in `{args.plot}`\n")


def run_animate(args):
    # settings, keyframes and the output file are checked before spending time on the frames
    with Animation(args.output, args.width, args.height, args.framerate) as animation:
        num_frames = len(get_interpolated_frames(config.KEYFRAMES))

        banner(f"Collecting {num_frames} frames of ({args.width},{args.height}) pixels")

        ts = perf_counter()
        animation.add_frames(
            render_frames(config.KEYFRAMES, args.width, args.height, args.max_iter)
        )
        print(f"\tRuntime: {perf_counter() - ts:.3f} s")

        animation.write_animation()
    print(f"\tAnimation has been saved in `{args.output}`\n")


def run_area(args):
    viewport = viewport_from(args)
    banner(f"Estimating Mandelbrot area from ({args.width},{args.height}) pixel array")

    pixels = draw_mandelbrot(args.width, args.height, args.max_iter, viewport)
    area, low, high = estimate_area(pixels, args.max_iter, viewport, args.confidence_level)

    print(f"\tArea of the Mandelbrot set is {area}")
    print(f"\tClopper-Pearson confidence interval is ({low}, {high})\n")


COMMANDS = {
    "image": run_image,
    "animate": run_animate,
    "area": run_area,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        COMMANDS[args.command](args)
    except InvalidConfigurationError as err:
        parser.error(str(err))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
