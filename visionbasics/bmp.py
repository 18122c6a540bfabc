"""Reading 8-bit grayscale BMP files and describing their headers."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import numpy as np

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_RULE = "-------------------------------------------------------------"


class BmpError(ValueError):
    """Raised when data is not an 8-bit BMP image this module can read."""


@dataclass(frozen=True)
class BitmapFileHeader:
    """The 14-byte header that opens every BMP file."""

    file_type: bytes
    file_size: int
    reserved1: int
    reserved2: int
    pixel_data_offset: int

    SIZE = _FILE_HEADER.size

    @classmethod
    def from_bytes(cls, raw: bytes) -> BitmapFileHeader:
        return cls(*_FILE_HEADER.unpack(raw))


@dataclass(frozen=True)
class BitmapInfoHeader:
    """The 40-byte header describing the image's dimensions and encoding."""

    header_size: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    compression: int
    image_size: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    colors_used: int
    colors_important: int

    SIZE = _INFO_HEADER.size

    @classmethod
    def from_bytes(cls, raw: bytes) -> BitmapInfoHeader:
        return cls(*_INFO_HEADER.unpack(raw))


@dataclass(frozen=True)
class BmpImage:
    """A parsed BMP file: both headers and width * height bytes of pixel data."""

    header: BitmapFileHeader
    info: BitmapInfoHeader
    data: bytes

    def pixels(self) -> np.ndarray:
        """Return the pixels as a (height, width) array with the top row first."""
        rows = np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.info.height, self.info.width
        )
        # BMP rows are stored bottom-up.
        return rows[::-1].copy()


def parse_bmp(data: bytes) -> BmpImage:
    """Parse the bytes of an 8-bit BMP file.

    The pixel data is taken to follow the info header directly; if the file
    ends early the missing pixels are zero.
    """
    data = bytes(data)
    file_end = BitmapFileHeader.SIZE
    if len(data) < file_end:
        raise BmpError("Input file is too short for a BMP file header")
    header = BitmapFileHeader.from_bytes(data[:file_end])
    if header.file_type != b"BM":
        raise BmpError("Input file is not a BMP image")

    info_end = file_end + BitmapInfoHeader.SIZE
    if len(data) < info_end:
        raise BmpError("Input file is too short for a BMP info header")
    info = BitmapInfoHeader.from_bytes(data[file_end:info_end])
    if info.bits_per_pixel != 8:
        raise BmpError("Input file is not an 8-bit BMP image")
    if info.width < 0 or info.height < 0:
        raise BmpError("Input file has negative image dimensions")

    count = info.width * info.height
    pixels = data[info_end:info_end + count]
    pixels += bytes(count - len(pixels))
    return BmpImage(header=header, info=info, data=pixels)


def read_bmp(path: str | Path) -> BmpImage:
    """Read and parse an 8-bit BMP file from disk."""
    return parse_bmp(Path(path).read_bytes())


def format_headers(image: BmpImage) -> str:
    """Describe both headers of an image as printable text."""
    header, info = image.header, image.info
    lines = [
        "\n-------------------- Bit Map File Header --------------------",
        f"File type: {header.file_type.decode('latin-1')}",
        f"File Size: {header.file_size}",
        f"Pixel Data Offset: {header.pixel_data_offset}",
        _RULE + "\n",
        "-------------------- Bit Map Info Header --------------------",
        f"Header Size: {info.header_size}",
        f"Width: {info.width}",
        f"Height: {info.height}",
        f"Planes: {info.planes}",
        f"Bits per pixel: {info.bits_per_pixel}",
        f"Compression type: {info.compression}",
        f"Image Size: {info.image_size}",
        f"X pixels per meter: {info.x_pixels_per_meter}",
        f"Y pixels per meter: {info.y_pixels_per_meter}",
        f"Number of Colors Used: {info.colors_used}",
        f"Number of important colors: {info.colors_important}",
        _RULE + "\n",
    ]
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the headers of a BMP file and optionally save its pixels as an image."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (1, 2):
        print("Usage: bmp <input_file.bmp> [output_image]", file=sys.stderr)
        return 1

    source = args[0]
    try:
        raw = Path(source).read_bytes()
    except OSError:
        print(f"Error: Could not open input file: {source}", file=sys.stderr)
        return 1

    try:
        image = parse_bmp(raw)
    except BmpError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(format_headers(image))

    if len(args) == 2:
        from PIL import Image

        Image.fromarray(image.pixels(), mode="L").save(args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())