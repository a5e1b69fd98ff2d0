# pixel_codec.py
"""
Packed-pixel codec.

A pixel is one 32-bit word holding four 8-bit channels.

Storage order (RGBA):  R = bits 31-24, G = 23-16, B = 15-8, A = 7-0
Display order (ARGB):  A = bits 31-24, R = 23-16, G = 15-8, B = 7-0

Two pack/unpack pairs are offered:
- pack_u8 / unpack_u8: plain 8-bit channel values (construction from bytes)
- pack_u32 / unpack_u32: wide values coming out of arithmetic; only the low
  8 bits of each channel are kept, so 256 wraps to 0 and -1 wraps to 255
"""

from typing import Tuple

RGBA = Tuple[int, int, int, int]

MASK8 = 0xFF

# ---------------------------------------------------------------------
# Storage order (RGBA)
# ---------------------------------------------------------------------
def pack_u8(r: int, g: int, b: int, a: int) -> int:
    """Pack four 8-bit channel values into one RGBA word."""
    return ((r & MASK8) << 24) | ((g & MASK8) << 16) | ((b & MASK8) << 8) | (a & MASK8)


def pack_u32(r: int, g: int, b: int, a: int) -> int:
    """Pack four wide channel values, keeping the low 8 bits of each."""
    px = 0
    px |= (r & MASK8) << 24
    px |= (g & MASK8) << 16
    px |= (b & MASK8) << 8
    px |= a & MASK8
    return px


def unpack_u8(px: int) -> RGBA:
    """Split an RGBA word into its four 8-bit channels."""
    return (px >> 24) & MASK8, (px >> 16) & MASK8, (px >> 8) & MASK8, px & MASK8


def unpack_u32(px: int) -> RGBA:
    """Split an RGBA word into four ints ready for wide arithmetic."""
    r = (px >> 24) & MASK8
    g = (px >> 16) & MASK8
    b = (px >> 8) & MASK8
    a = px & MASK8
    return r, g, b, a

# ---------------------------------------------------------------------
# Display order (ARGB)
# ---------------------------------------------------------------------
def rgba_to_argb(px: int) -> int:
    """Move the alpha byte of an RGBA word to the top: RGBA -> ARGB."""
    return ((px & MASK8) << 24) | ((px >> 8) & 0x00FFFFFF)


def unpack_argb(px: int) -> RGBA:
    """Split an ARGB word into (a, r, g, b)."""
    return (px >> 24) & MASK8, (px >> 16) & MASK8, (px >> 8) & MASK8, px & MASK8
