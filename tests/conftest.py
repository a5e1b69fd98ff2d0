"""
Pytest configuration and fixtures for the RGBA image tests
"""

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from decoders import ColorLayout  # noqa: E402
from rgba_image import RGBAImage  # noqa: E402


@pytest.fixture
def rgb_bytes():
    """2x2 RGB buffer: red, green, blue, white"""
    return bytes([
        255, 0, 0,   0, 255, 0,
        0, 0, 255,   255, 255, 255,
    ])


@pytest.fixture
def rgb_image(rgb_bytes):
    """2x2 image built from rgb_bytes"""
    return RGBAImage.from_bytes(rgb_bytes, ColorLayout.RGB, 2, 2)


@pytest.fixture
def rgba_image():
    """3x1 image with varying alpha"""
    data = bytes([10, 20, 30, 0, 40, 50, 60, 128, 70, 80, 90, 255])
    return RGBAImage.from_bytes(data, ColorLayout.RGBA, 3, 1)


@pytest.fixture
def ramp_image():
    """Image where intensity i (in every channel) occurs i times, i = 0..255"""
    data = bytearray()
    for i in range(256):
        data.extend(bytes([i, i, i]) * i)
    count = sum(range(256))
    return RGBAImage.from_bytes(bytes(data), ColorLayout.RGB, count, 1)


@pytest.fixture
def ramp_counts():
    """256 counts where bin i holds i"""
    return list(range(256))
