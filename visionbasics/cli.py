"""Command-line entry point for the image-processing demonstrations."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image

from .convolution import convolve, separable_convolve
from .interpolation import bilinear_interpolate, nearest_neighbour_interpolate
from .morphology import closing, dilation, erosion, gradient, opening

SOBEL = np.array([[-1.0, 0.0, 1.0], [-2.0, 0.0, 2.0], [-1.0, 0.0, 1.0]])
GAUSSIAN = np.array([[1.0, 2.0, 1.0], [2.0, 4.0, 2.0], [1.0, 2.0, 1.0]]) / 16
GAUSSIAN_1D = (0.25, 0.5, 0.25)

_MORPHOLOGY = {
    "erode": erosion,
    "dilate": dilation,
    "open": opening,
    "close": closing,
    "gradient": gradient,
}


def load_image(path: str | Path, grayscale: bool = False) -> np.ndarray:
    """Read an image file as an 8-bit array.

    Colour images come back in BGR channel order with shape (rows, cols, 3);
    grayscale images have shape (rows, cols). Unreadable files raise OSError.
    """
    with Image.open(path) as picture:
        if grayscale:
            array = np.asarray(picture.convert("L"), dtype=np.uint8)
        else:
            array = np.asarray(picture.convert("RGB"), dtype=np.uint8)[:, :, ::-1]
    return np.ascontiguousarray(array)


def save_image(image, path: str | Path) -> None:
    """Write a grayscale or BGR 8-bit image to a file; the suffix picks the format."""
    array = np.asarray(image)
    if array.ndim == 3 and array.shape[2] == 3:
        array = array[:, :, ::-1]
    elif array.ndim != 2:
        raise ValueError("image must be grayscale or have three channels")
    if array.size == 0:
        raise ValueError("image must not be empty")
    Image.fromarray(np.ascontiguousarray(array.astype(np.uint8))).save(path)


def _scale(image: np.ndarray, factor: float) -> np.ndarray:
    if factor == 1:
        return image
    rows, cols = image.shape[:2]
    width, height = int(cols * factor), int(rows * factor)
    if width < 1 or height < 1:
        raise ValueError("scale factor leaves an empty image")
    resized = Image.fromarray(np.ascontiguousarray(image)).resize(
        (width, height), Image.Resampling.BILINEAR
    )
    return np.asarray(resized, dtype=np.uint8)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="visionbasics", description="Basic image-processing operations."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    interp = commands.add_parser(
        "interpolate", help="resize by bilinear and nearest-neighbour interpolation"
    )
    interp.add_argument("input")
    interp.add_argument("upscaled", help="output of bilinear interpolation")
    interp.add_argument("downscaled", help="output of nearest-neighbour interpolation")
    interp.add_argument(
        "--up-size", nargs=2, type=int, default=(1000, 1000),
        metavar=("WIDTH", "HEIGHT"),
    )
    interp.add_argument(
        "--down-size", nargs=2, type=int, default=(100, 100),
        metavar=("WIDTH", "HEIGHT"),
    )

    conv = commands.add_parser("convolve", help="apply a Sobel kernel")
    conv.add_argument("input")
    conv.add_argument("output")
    conv.add_argument("--scale", type=float, default=0.5)

    sep = commands.add_parser(
        "separable", help="apply a Gaussian kernel as two one-dimensional passes"
    )
    sep.add_argument("input")
    sep.add_argument("output")
    sep.add_argument("--intermediate", help="where to save the vertical pass")
    sep.add_argument("--full", help="where to save the full 3x3 Gaussian result")
    sep.add_argument("--scale", type=float, default=0.5)

    for name, operation in _MORPHOLOGY.items():
        morph = commands.add_parser(name, help=operation.__doc__)
        morph.add_argument("input")
        morph.add_argument("output")
        morph.add_argument("--kernel-size", type=int, default=3)

    return parser


def _run(args: argparse.Namespace) -> None:
    if args.command == "interpolate":
        image = load_image(args.input)
        upscaled = bilinear_interpolate(image, *args.up_size)
        downscaled = nearest_neighbour_interpolate(image, *args.down_size)
        save_image(upscaled, args.upscaled)
        save_image(downscaled, args.downscaled)
    elif args.command == "convolve":
        print("Demonstrating naive convolution...")
        image = _scale(load_image(args.input), args.scale)
        save_image(convolve(image, SOBEL), args.output)
    elif args.command == "separable":
        image = _scale(load_image(args.input), args.scale)
        print("Demonstrating separable convolutions...")
        if args.full:
            save_image(convolve(image, GAUSSIAN), args.full)
        if args.intermediate:
            column = np.asarray(GAUSSIAN_1D).reshape(-1, 1)
            save_image(convolve(image, column), args.intermediate)
        save_image(separable_convolve(image, GAUSSIAN_1D, GAUSSIAN_1D), args.output)
    else:
        image = load_image(args.input, grayscale=True)
        result = _MORPHOLOGY[args.command](image, args.kernel_size)
        save_image(result, args.output)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one operation on an image file and save the result."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except OSError as exc:
        print(f"Could not open or find the image: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())