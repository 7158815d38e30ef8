"""Report the dimensions, palette and compression of a BMP file."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from typing import BinaryIO, Sequence

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")

RLE8 = 1
RLE4 = 2
JPEG = 4
PNG = 5

NOT_A_BITMAP = "Файл не bitmap, а другого расширения."
USAGE = "Error, enter the argumets: <input file> <output file>"
FILES_NOT_OPEN = "File(-s) not open(-s)"


class NotABitmapError(ValueError):
    """Raised when a stream is too short to hold the bitmap headers."""


@dataclass(frozen=True)
class BitmapInfo:
    """The fields of the bitmap headers that the report uses."""

    width: int
    height: int
    bit_count: int
    compression: int = 0
    size_image: int = 0
    colors_used: int = 0
    signature: bytes = b"BM"
    file_size: int = 0
    data_offset: int = 0


def read_header(stream: BinaryIO) -> BitmapInfo:
    """Read the file header and the info header from a binary stream."""
    file_header = stream.read(_FILE_HEADER.size)
    if len(file_header) < _FILE_HEADER.size:
        raise NotABitmapError(NOT_A_BITMAP)
    info_header = stream.read(_INFO_HEADER.size)
    if len(info_header) < _INFO_HEADER.size:
        raise NotABitmapError(NOT_A_BITMAP)

    signature, file_size, _, _, data_offset = _FILE_HEADER.unpack(file_header)
    (
        _size,
        width,
        height,
        _planes,
        bit_count,
        compression,
        size_image,
        _x_pixels_per_meter,
        _y_pixels_per_meter,
        colors_used,
        _colors_important,
    ) = _INFO_HEADER.unpack(info_header)
    return BitmapInfo(
        width=width,
        height=height,
        bit_count=bit_count,
        compression=compression,
        size_image=size_image,
        colors_used=colors_used,
        signature=signature,
        file_size=file_size,
        data_offset=data_offset,
    )


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def describe(info: BitmapInfo) -> list[str]:
    """Return the report lines for the given headers."""
    lines = [
        f"Ширина: {info.width}",
        f"Высота: {info.height}",
        f"Бит на пиксель: {info.bit_count}",
    ]
    if info.bit_count < 16 and info.colors_used == 0:
        lines.append(f"Палитра: {1 << info.bit_count}")
    if info.compression in (RLE8, RLE4):
        lines.append("Используется RLE компрессия")
    if info.compression == JPEG:
        lines.append("Используется JPEG компрессия")
    if info.compression == PNG:
        lines.append("Используется PNG компрессия")
    if info.size_image != 0:
        size = info.size_image
    else:
        size = _truncating_div(info.width * info.height * info.bit_count, 8)
    lines.append(f"Размер: {size}")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Write the report of <input file> into <output file>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(USAGE)
        return 1
    input_path, output_path = args
    try:
        with open(input_path, "rb") as source, open(
            output_path, "w", encoding="utf-8"
        ) as target:
            try:
                info = read_header(source)
            except NotABitmapError as error:
                print(error)
                return 1
            target.writelines(f"{line}\n" for line in describe(info))
    except OSError:
        print(FILES_NOT_OPEN)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())