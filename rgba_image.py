# rgba_image.py
"""
RGBA image container.

Pixels are packed RGBA words (see pixel_codec.py) kept in one flat,
row-major list of width*height entries. Point operations and histogram
scans work directly on that list.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator, List, Sequence, Tuple, Union

from decoders import ColorLayout, decode_file
from errors import IndexOutOfRange, InvalidBufferLength
from histogram import Histogram, build_histograms
from pixel_codec import RGBA, pack_u8, rgba_to_argb, unpack_u32

logger = logging.getLogger(__name__)

__all__ = ["ColorLayout", "RGBAImage"]


class RGBAImage:
    """Image in RGBA format, every pixel stored in a single 32-bit word."""

    def __init__(self, data: Sequence[int], width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        if len(data) != width * height:
            raise InvalidBufferLength(
                f"Expected {width * height} pixels for {width}x{height}, got {len(data)}"
            )
        self._data = list(data)
        self._width = width
        self._height = height

    # ==== Construction ====
    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, Sequence[int]], layout: ColorLayout,
                   width: int, height: int) -> "RGBAImage":
        """Group raw decoded bytes into pixels according to layout.

        RGB sources get a synthesized alpha of 255.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        bpp = layout.bytes_per_pixel
        if len(data) % bpp != 0:
            raise InvalidBufferLength(
                f"Buffer length {len(data)} is not a multiple of {bpp} ({layout.value})"
            )
        expected = width * height * bpp
        if len(data) != expected:
            raise InvalidBufferLength(
                f"Buffer length {len(data)} does not match {width}x{height} {layout.value} "
                f"({expected} bytes)"
            )

        if layout is ColorLayout.RGB:
            pixels = [pack_u8(data[i], data[i+1], data[i+2], 255) for i in range(0, expected, 3)]
        else:
            pixels = [pack_u8(data[i], data[i+1], data[i+2], data[i+3]) for i in range(0, expected, 4)]
        return cls(pixels, width, height)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RGBAImage":
        """Decode an image file and convert it to RGBA. Raises DecodeFailure."""
        decoded = decode_file(path)
        logger.info(f"Loaded {path} ({decoded.width}x{decoded.height}, {decoded.layout.value})")
        return cls.from_bytes(decoded.data, decoded.layout, decoded.width, decoded.height)

    def copy(self) -> "RGBAImage":
        return RGBAImage(list(self._data), self._width, self._height)

    # ==== Access ====
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> Tuple[int, ...]:
        return tuple(self._data)

    def dimensions(self) -> Tuple[int, int]:
        return self._width, self._height

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexOutOfRange(
                f"Pixel ({x}, {y}) outside image of size {self._width}x{self._height}"
            )
        return y * self._width + x

    def get_pixel(self, x: int, y: int) -> int:
        return self._data[self._index(x, y)]

    def get_pixel_unpacked(self, x: int, y: int) -> RGBA:
        return unpack_u32(self._data[self._index(x, y)])

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __eq__(self, other):
        if not isinstance(other, RGBAImage):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self._data == other._data

    # ==== In-place update ====
    def map_pixels(self, fn: Callable[[int], int]) -> None:
        """Replace every packed pixel with fn(pixel); the buffer is never resized."""
        data = self._data
        for i, px in enumerate(data):
            data[i] = fn(px)

    def __repr__(self):
        return f"RGBAImage(width={self._width}, height={self._height})"

    # ==== Export ====
    def export_display_buffer(self) -> List[int]:
        """ARGB framebuffer for the display collaborator."""
        return [rgba_to_argb(px) for px in self._data]

    def histogram(self) -> Tuple[Histogram, Histogram, Histogram]:
        return build_histograms(self)
