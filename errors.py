# errors.py
"""
Error kinds raised by the image core.
"""


class ImageError(Exception):
    """Base class for every error raised by the image core."""


class InvalidBufferLength(ImageError, ValueError):
    """Raw byte buffer does not match the declared layout or dimensions."""


class IndexOutOfRange(ImageError, IndexError):
    """Pixel coordinate or histogram bin outside the valid bounds."""


class DecodeFailure(ImageError, ValueError):
    """An image file could not be decoded into raw pixel bytes."""
