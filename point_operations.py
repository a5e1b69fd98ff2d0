# point_operations.py
"""
Point operations on an RGBAImage.
Each operation rewrites every pixel in place from that pixel alone;
alpha is never touched.
"""

import logging
from enum import Enum
from typing import Optional

from pixel_codec import pack_u32, unpack_u32
from rgba_image import RGBAImage

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------
# 1. Grayscale Transformation
# ---------------------------------------------------------------------
def _grayscale_px(px: int) -> int:
    r, g, b, a = unpack_u32(px)
    s = (r + g + b) // 3
    return pack_u32(s, s, s, a)


def grayscale(image: RGBAImage) -> None:
    """Convert to grayscale using s = (R + G + B) // 3."""
    image.map_pixels(_grayscale_px)
    logger.debug(f"grayscale: {len(image)} pixels")

# ---------------------------------------------------------------------
# 2. Negative Transformation
# ---------------------------------------------------------------------
def _invert_px(px: int) -> int:
    r, g, b, a = unpack_u32(px)
    return pack_u32(255 - r, 255 - g, 255 - b, a)


def invert(image: RGBAImage) -> None:
    """Negative transformation: s = 255 - r (for each color channel)."""
    image.map_pixels(_invert_px)
    logger.debug(f"invert: {len(image)} pixels")

# ---------------------------------------------------------------------
# 3. Threshold (Black/White per channel)
# ---------------------------------------------------------------------
def threshold(image: RGBAImage, limit: int) -> None:
    """Channels above limit become 255, channels at or below it become 0."""
    def _threshold_px(px: int) -> int:
        r, g, b, a = unpack_u32(px)
        r = 255 if r > limit else 0
        g = 255 if g > limit else 0
        b = 255 if b > limit else 0
        return pack_u32(r, g, b, a)

    image.map_pixels(_threshold_px)
    logger.debug(f"threshold({limit}): {len(image)} pixels")

# ---------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------
class PointOperation(Enum):
    GRAYSCALE = "grayscale"
    INVERT = "invert"
    THRESHOLD = "threshold"


def apply_operation(image: RGBAImage, op: PointOperation, limit: Optional[int] = None) -> None:
    if op is PointOperation.GRAYSCALE:
        grayscale(image)
    elif op is PointOperation.INVERT:
        invert(image)
    elif op is PointOperation.THRESHOLD:
        if limit is None:
            raise ValueError("threshold requires a limit")
        threshold(image, limit)
    else:
        raise ValueError(f"Unknown point operation: {op!r}")


if __name__ == "__main__":
    import sys
    from display import display

    if len(sys.argv) < 3 or sys.argv[1] not in [op.value for op in PointOperation]:
        print("Usage: python point_operations.py {grayscale|invert|threshold} <image> [limit]")
    else:
        op = PointOperation(sys.argv[1])
        limit = int(sys.argv[3]) if len(sys.argv) > 3 else None
        if op is PointOperation.THRESHOLD and limit is None:
            import viewer_style as style
            limit = style.DEFAULT_THRESHOLD
        img = RGBAImage.from_file(sys.argv[2])
        apply_operation(img, op, limit)
        width, height = img.dimensions()
        display(img.export_display_buffer(), width, height)
