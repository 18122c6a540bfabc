"""Readable image-processing routines on NumPy arrays: BMP files, resizing,
convolution, morphology, colour sampling and pixel editing."""

__version__ = "0.1.0"

__all__ = [
    "blob",
    "bmp",
    "cli",
    "convolution",
    "interpolation",
    "morphology",
    "pixels",
]