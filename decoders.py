# decoders.py
"""
Decoder collaborator: turns an image file into raw pixel bytes plus a
declared color layout. Pillow handles the common formats, PCX goes through
the manual decoder in pcxdecoder.py.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Union

from PIL import Image, UnidentifiedImageError

from errors import DecodeFailure
from pcxdecoder import decode_pcx as _decode_pcx_raw

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ColorLayout(Enum):
    """Byte layout of a raw decoded pixel buffer."""
    RGB = "RGB"
    RGBA = "RGBA"

    @property
    def bytes_per_pixel(self) -> int:
        return 3 if self is ColorLayout.RGB else 4


@dataclass
class DecodedImage:
    data: bytes
    layout: ColorLayout
    width: int
    height: int
    info: Dict[str, object] = field(default_factory=dict)


def decode_with_pillow(path: PathLike) -> DecodedImage:
    path = Path(path)
    try:
        with Image.open(path) as img:
            fmt = img.format
            if img.mode not in ("RGB", "RGBA"):
                has_alpha = "A" in img.getbands() or "transparency" in img.info
                img = img.convert("RGBA" if has_alpha else "RGB")
            layout = ColorLayout(img.mode)
            data = img.tobytes()
            width, height = img.size
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError, ValueError) as e:
        logger.error(f"Failed to decode {path}: {e}")
        raise DecodeFailure(f"Failed to decode {path}: {e}") from e

    info = {
        "Filename": path.name,
        "File Size": f"{path.stat().st_size} bytes",
        "Format": fmt,
        "Mode": layout.value,
        "Image Dimensions": f"{width}x{height}",
    }
    return DecodedImage(data, layout, width, height, info)


def decode_pcx(path: PathLike) -> DecodedImage:
    path = Path(path)
    try:
        data, width, height, info = _decode_pcx_raw(path)
    except (OSError, ValueError, NotImplementedError) as e:
        logger.error(f"Failed to decode PCX {path}: {e}")
        raise DecodeFailure(f"Failed to decode PCX {path}: {e}") from e
    return DecodedImage(data, ColorLayout.RGB, width, height, info)


def decode_file(path: PathLike) -> DecodedImage:
    """Decode any supported image file; .pcx uses the manual decoder."""
    path = Path(path)
    if path.suffix.lower() == ".pcx":
        return decode_pcx(path)
    return decode_with_pillow(path)
