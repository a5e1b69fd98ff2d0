#!/usr/bin/env python3
"""
pcxdecoder.py - Manual PCX RLE decoder (no Pillow)

Reads:
- Header info (manufacturer, version, encoding, etc.)
- RLE-compressed scanlines
- Optional 256-color VGA palette at the end of the file
Returns:
    rgb_bytes (bytes, 3 bytes per pixel, row-major), width, height, header_info (dict)
"""

import io
import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

# 128-byte PCX header structure (little-endian)
PCX_HEADER_FMT = "<BBBBHHHHHH48sBBHHHH54s"
PCX_HEADER_SIZE = 128
PCX_MANUFACTURER = 0x0A
VGA_PALETTE_MARKER = 0x0C


@dataclass
class PCXHeader:
    manufacturer: int
    version: int
    encoding: int
    bits_per_pixel: int
    x_min: int
    y_min: int
    x_max: int
    y_max: int
    h_dpi: int
    v_dpi: int
    colormap: bytes
    reserved: int
    n_planes: int
    bytes_per_line: int
    palette_info: int
    h_screen_size: int
    v_screen_size: int
    filler: bytes

    @property
    def width(self): return self.x_max - self.x_min + 1
    @property
    def height(self): return self.y_max - self.y_min + 1


def read_pcx_header(fp: BinaryIO) -> PCXHeader:
    data = fp.read(PCX_HEADER_SIZE)
    if len(data) != PCX_HEADER_SIZE:
        raise ValueError("Incomplete PCX header")
    header = PCXHeader(*struct.unpack(PCX_HEADER_FMT, data))
    if header.manufacturer != PCX_MANUFACTURER:
        raise ValueError(f"Not a PCX file (manufacturer byte {header.manufacturer})")
    if header.width <= 0 or header.height <= 0:
        raise ValueError(f"Invalid PCX dimensions {header.width}x{header.height}")
    return header


def decode_pcx_rle(fp: BinaryIO, expected_bytes: int) -> bytes:
    """Decode one RLE scanline of expected_bytes bytes."""
    out = bytearray()
    while len(out) < expected_bytes:
        b = fp.read(1)
        if not b:
            raise ValueError("Truncated PCX image data")
        v = b[0]
        if v >= 0xC0:
            count = v & 0x3F
            data = fp.read(1)
            if not data:
                raise ValueError("Truncated RLE stream")
            out.extend(data * count)
        else:
            out.append(v)
    # runs spilling past the scanline end are cut
    return bytes(out[:expected_bytes])


def read_vga_palette(data: bytes) -> Optional[List[Tuple[int, int, int]]]:
    """256-color VGA palette: 0x0C marker followed by 768 bytes at end of file."""
    if len(data) < PCX_HEADER_SIZE + 769 or data[-769] != VGA_PALETTE_MARKER:
        return None
    raw = data[-768:]
    return [tuple(raw[i:i+3]) for i in range(0, 768, 3)]


def _header_info(path: Path, header: PCXHeader, file_size: int) -> Dict[str, object]:
    return {
        "Filename": path.name,
        "File Size": f"{file_size} bytes",
        "Manufacturer": f"ZSoft .pcx ({header.manufacturer})",
        "Version": header.version,
        "Encoding": header.encoding,
        "Bits per Pixel": header.bits_per_pixel,
        "Image Dimensions": f"{header.width}x{header.height}",
        "HDPI": header.h_dpi,
        "VDPI": header.v_dpi,
        "Color Planes": header.n_planes,
        "Bytes per Line": header.bytes_per_line,
    }


def decode_pcx(path: Path):
    """Return (rgb_bytes, width, height, header_info)."""
    path = Path(path)
    data = path.read_bytes()
    fp = io.BytesIO(data)

    header = read_pcx_header(fp)
    width, height = header.width, header.height
    bpl = header.bytes_per_line
    row_bytes = header.n_planes * bpl
    if bpl * 8 < width * header.bits_per_pixel:
        raise ValueError(f"Bytes per line ({bpl}) too small for width {width}")
    decoded_rows = [decode_pcx_rle(fp, row_bytes) for _ in range(height)]

    info = _header_info(path, header, len(data))
    out = bytearray()

    # ---- 8-bit Indexed ----
    if header.bits_per_pixel == 8 and header.n_planes == 1:
        palette = read_vga_palette(data)
        if palette is None:
            logger.debug(f"{path.name}: no VGA palette, using grayscale ramp")
            palette = [(i, i, i) for i in range(256)]
            info["Palette"] = "none (grayscale)"
        else:
            info["Palette"] = "VGA 256"
        for line in decoded_rows:
            for idx in line[:width]:
                out.extend(palette[idx])

    # ---- 24-bit RGB (three planes per scanline) ----
    elif header.bits_per_pixel == 8 and header.n_planes == 3:
        for line in decoded_rows:
            rplane = line[0:bpl]
            gplane = line[bpl:2*bpl]
            bplane = line[2*bpl:3*bpl]
            for x in range(width):
                out.extend((rplane[x], gplane[x], bplane[x]))

    # ---- 1-bit Black/White ----
    elif header.bits_per_pixel == 1 and header.n_planes == 1:
        for line in decoded_rows:
            for x in range(width):
                bit = (line[x >> 3] >> (7 - (x & 7))) & 1
                v = 255 if bit else 0
                out.extend((v, v, v))

    else:
        raise NotImplementedError(
            f"Unsupported PCX format: {header.bits_per_pixel}-bit, {header.n_planes}-plane"
        )

    logger.debug(f"Decoded PCX {path.name}: {width}x{height}")
    return bytes(out), width, height, info


if __name__ == "__main__":
    import sys
    if len(sys.argv) < 2:
        print("Usage: python pcxdecoder.py <file.pcx>")
    else:
        _, _, _, info = decode_pcx(Path(sys.argv[1]))
        for k, v in info.items():
            print(f"{k}: {v}")
