"""Local-mean binarization of 8-bit grayscale BMP images."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from gmtimer.bmp import BmpError, FileHeader, InfoHeader, RgbQuad

_PROG = "gray2mono"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _row_size(width: int) -> int:
    """Bytes per stored row: rows are padded to a multiple of four."""
    return width + (4 - width % 4) % 4


@dataclass
class GrayImage:
    """An 8-bit palettised bitmap with its rows stored bottom-up and padded."""

    file_header: FileHeader
    info_header: InfoHeader
    palette: list[RgbQuad]
    pixels: bytearray

    @property
    def width(self) -> int:
        return self.info_header.width

    @property
    def height(self) -> int:
        return self.info_header.height

    @property
    def row_size(self) -> int:
        return _row_size(self.width)


def binarize(
    data: bytes, width: int, height: int, threshold: int, window_size: int
) -> bytearray:
    """Threshold each pixel against the mean of the window around it.

    ``data`` holds padded rows. A pixel becomes 255 when the integer mean of
    the in-bounds pixels of its window is above ``threshold``, otherwise 0.
    Padding bytes of the result are zero.
    """
    if width < 0 or height < 0:
        raise ValueError("image dimensions must not be negative")
    row_size = _row_size(width)
    total = row_size * height
    if len(data) < total:
        raise ValueError(f"pixel data needs {total} bytes, got {len(data)}")
    half = abs(window_size) // 2
    if window_size < 0 and half > 0:
        raise ValueError("window size must not be negative")

    # Summed-area table: integral[y][x] is the sum of the rectangle above-left.
    integral = [[0] * (width + 1)]
    for y in range(height):
        start = y * row_size
        previous = integral[-1]
        row = [0]
        running = 0
        for x, value in enumerate(data[start:start + width]):
            running += value
            row.append(previous[x + 1] + running)
        integral.append(row)

    result = bytearray(total)
    for y in range(height):
        top = max(0, y - half)
        bottom = min(height, y + half + 1)
        upper, lower = integral[top], integral[bottom]
        base = y * row_size
        for x in range(width):
            left = max(0, x - half)
            right = min(width, x + half + 1)
            window_sum = lower[right] - upper[right] - lower[left] + upper[left]
            count = (bottom - top) * (right - left)
            if window_sum // count > threshold:
                result[base + x] = 255
    return result


def _option_value(arg: str) -> int:
    tokens = [token for token in arg.split("=") if token]
    if len(tokens) < 2:
        raise ValueError(f"Missing value in option: {arg}")
    match = _LEADING_INT.match(tokens[1])
    return int(match.group(1)) if match else 0


def parse_options(first: str, second: str) -> tuple[int, int]:
    """Parse ``-t=N`` and ``-w=N`` in either order into (threshold, window)."""
    first_value = _option_value(first)
    second_value = _option_value(second)
    if "-t" in first:
        return first_value, second_value
    return second_value, first_value


def _check_parameters(threshold: int, window_size: int, width: int, height: int) -> None:
    if not 0 <= threshold <= 255:
        raise ValueError("Threshold must be between 0 and 255.")
    if (
        window_size <= 0
        or window_size > width
        or window_size > height
        or window_size % 2 == 0
    ):
        raise ValueError("Invalid window size.")


def _read_exact(stream: BinaryIO, size: int, message: str) -> bytes:
    chunk = stream.read(size)
    if len(chunk) != size:
        raise BmpError(message)
    return chunk


def _open_input(path: str | Path) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as err:
        raise BmpError(f"Cannot open file: {path}") from err


def _read_headers(stream: BinaryIO) -> tuple[FileHeader, InfoHeader]:
    message = "Failed to read file or info header."
    file_header = FileHeader.from_bytes(_read_exact(stream, FileHeader.SIZE, message))
    info_header = InfoHeader.from_bytes(_read_exact(stream, InfoHeader.SIZE, message))
    if info_header.bit_count != 8:
        raise BmpError("Only 8-bit grayscale images are supported.")
    return file_header, info_header


def _read_body(
    stream: BinaryIO, file_header: FileHeader, info_header: InfoHeader
) -> GrayImage:
    count = 1 << info_header.bit_count
    raw_palette = _read_exact(stream, RgbQuad.SIZE * count, "Failed to read palette.")
    palette = [
        RgbQuad.from_bytes(raw_palette[offset:offset + RgbQuad.SIZE])
        for offset in range(0, len(raw_palette), RgbQuad.SIZE)
    ]
    size = _row_size(info_header.width) * info_header.height
    pixels = bytearray(_read_exact(stream, size, "Failed to read image data."))
    return GrayImage(file_header, info_header, palette, pixels)


def read_gray_bmp(path: str | Path) -> GrayImage:
    """Read an 8-bit palettised BMP whose palette follows the info header."""
    with _open_input(path) as stream:
        file_header, info_header = _read_headers(stream)
        if info_header.width <= 0 or info_header.height <= 0:
            raise BmpError("Unsupported image dimensions.")
        return _read_body(stream, file_header, info_header)


def _grayscale_palette(bit_count: int) -> list[RgbQuad]:
    return [RgbQuad(level, level, level, 0) for level in range(1 << bit_count)]


def write_mono_bmp(path: str | Path, image: GrayImage) -> None:
    """Write ``image`` with its headers and a linear grayscale palette."""
    palette = _grayscale_palette(image.info_header.bit_count)
    try:
        stream = open(path, "wb")
    except OSError as err:
        raise BmpError("Cannot create output file") from err
    with stream:
        stream.write(image.file_header.to_bytes())
        stream.write(image.info_header.to_bytes())
        stream.write(b"".join(entry.to_bytes() for entry in palette))
        stream.write(bytes(image.pixels[:image.row_size * image.height]))


def convert(
    input_path: str | Path, output_path: str | Path, threshold: int, window_size: int
) -> GrayImage:
    """Binarize the BMP at ``input_path`` into ``output_path``; return the result."""
    with _open_input(input_path) as stream:
        file_header, info_header = _read_headers(stream)
        _check_parameters(threshold, window_size, info_header.width, info_header.height)
        source = _read_body(stream, file_header, info_header)
    pixels = binarize(source.pixels, source.width, source.height, threshold, window_size)
    result = GrayImage(
        file_header,
        info_header,
        _grayscale_palette(info_header.bit_count),
        pixels,
    )
    write_mono_bmp(output_path, result)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``<input> <output> -t=N -w=N``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        print(f"Usage: {_PROG} <input image> <output image> <threshold> <window size>")
        return 1
    input_path, output_path, first, second = args
    try:
        threshold, window_size = parse_options(first, second)
        convert(input_path, output_path, threshold, window_size)
    except (BmpError, ValueError) as err:
        print(err)
        return 1
    print(f"WindowSize: {window_size}, Threshold: {threshold}")
    print(f"Binarization completed, output file: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())