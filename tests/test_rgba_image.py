"""
Tests for the RGBAImage container
"""

import pytest

from decoders import ColorLayout
from errors import IndexOutOfRange, InvalidBufferLength
from pixel_codec import pack_u8, unpack_argb
from rgba_image import RGBAImage


class TestConstruction:
    """Test building images from raw bytes"""

    def test_rgb_gets_opaque_alpha(self, rgb_image):
        """RGB sources get alpha 255"""
        assert rgb_image.get_pixel_unpacked(0, 0) == (255, 0, 0, 255)
        assert rgb_image.get_pixel_unpacked(1, 1) == (255, 255, 255, 255)

    def test_rgba_keeps_alpha(self, rgba_image):
        assert rgba_image.get_pixel_unpacked(0, 0) == (10, 20, 30, 0)
        assert rgba_image.get_pixel_unpacked(1, 0) == (40, 50, 60, 128)
        assert rgba_image.get_pixel_unpacked(2, 0) == (70, 80, 90, 255)

    def test_accepts_bytearray_and_list(self):
        img1 = RGBAImage.from_bytes(bytearray([1, 2, 3]), ColorLayout.RGB, 1, 1)
        img2 = RGBAImage.from_bytes([1, 2, 3], ColorLayout.RGB, 1, 1)
        assert img1 == img2

    def test_dimensions(self, rgb_image):
        assert rgb_image.dimensions() == (2, 2)
        assert rgb_image.width == 2
        assert rgb_image.height == 2
        assert len(rgb_image) == 4

    def test_not_multiple_of_pixel_size(self):
        """A partial trailing pixel is rejected, not truncated"""
        with pytest.raises(InvalidBufferLength):
            RGBAImage.from_bytes(bytes(7), ColorLayout.RGB, 2, 1)

    def test_length_mismatch(self):
        """Whole pixels but the wrong number of them"""
        with pytest.raises(InvalidBufferLength):
            RGBAImage.from_bytes(bytes(12), ColorLayout.RGBA, 2, 2)

    def test_rgba_buffer_declared_as_rgb(self):
        with pytest.raises(InvalidBufferLength):
            RGBAImage.from_bytes(bytes(8), ColorLayout.RGB, 2, 1)

    @pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-1, 2)])
    def test_invalid_dimensions(self, width, height):
        with pytest.raises(ValueError):
            RGBAImage.from_bytes(b"", ColorLayout.RGB, width, height)

    def test_invalid_buffer_length_is_value_error(self):
        """Error kinds also behave like the matching builtin"""
        with pytest.raises(ValueError):
            RGBAImage.from_bytes(bytes(5), ColorLayout.RGB, 1, 1)

    def test_owns_pixel_buffer(self):
        """Changing the caller's list afterwards does not reach the image"""
        buf = [pack_u8(1, 2, 3, 255)] * 4
        img = RGBAImage(buf, 2, 2)
        buf.append(pack_u8(9, 9, 9, 9))
        buf[0] = pack_u8(7, 7, 7, 7)
        assert len(img) == img.width * img.height == 4
        assert img.get_pixel_unpacked(0, 0) == (1, 2, 3, 255)
        for hist in img.histogram():
            assert hist.total() == 4

    def test_constructor_rejects_wrong_pixel_count(self):
        with pytest.raises(InvalidBufferLength):
            RGBAImage([0] * 3, 2, 2)

    def test_layout_bytes_per_pixel(self):
        assert ColorLayout.RGB.bytes_per_pixel == 3
        assert ColorLayout.RGBA.bytes_per_pixel == 4


class TestAddressing:
    """Test row-major pixel addressing"""

    @pytest.fixture
    def wide_image(self):
        """3x2 image whose red channel holds the row-major index"""
        data = bytearray()
        for i in range(6):
            data.extend([i, 0, 0])
        return RGBAImage.from_bytes(bytes(data), ColorLayout.RGB, 3, 2)

    def test_row_major_index(self, wide_image):
        """Pixel (x, y) lives at y * width + x"""
        for y in range(2):
            for x in range(3):
                assert wide_image.get_pixel_unpacked(x, y)[0] == y * 3 + x

    def test_get_pixel_returns_packed_word(self, rgb_image):
        assert rgb_image.get_pixel(1, 0) == pack_u8(0, 255, 0, 255)

    @pytest.mark.parametrize("x,y", [(3, 0), (0, 2), (3, 2), (-1, 0), (0, -1)])
    def test_out_of_range(self, wide_image, x, y):
        with pytest.raises(IndexOutOfRange):
            wide_image.get_pixel(x, y)

    def test_out_of_range_is_index_error(self, wide_image):
        with pytest.raises(IndexError):
            wide_image.get_pixel_unpacked(5, 5)


class TestMapPixels:
    """Test in-place pixel rewriting"""

    def test_rewrites_every_pixel(self, rgb_image):
        rgb_image.map_pixels(lambda px: pack_u8(1, 2, 3, 4))
        assert set(rgb_image) == {pack_u8(1, 2, 3, 4)}

    def test_length_unchanged(self, rgb_image):
        rgb_image.map_pixels(lambda px: px)
        assert len(rgb_image) == 4
        assert rgb_image.dimensions() == (2, 2)


class TestCopyAndExport:
    """Test copy and display export"""

    def test_copy_is_independent(self, rgb_image):
        dup = rgb_image.copy()
        assert dup == rgb_image
        dup.map_pixels(lambda px: 0)
        assert dup != rgb_image
        assert rgb_image.get_pixel_unpacked(0, 0) == (255, 0, 0, 255)

    def test_export_display_buffer(self, rgba_image):
        buffer = rgba_image.export_display_buffer()
        assert len(buffer) == 3
        assert unpack_argb(buffer[1]) == (128, 40, 50, 60)

    def test_export_does_not_mutate(self, rgba_image):
        before = rgba_image.pixels
        rgba_image.export_display_buffer()
        assert rgba_image.pixels == before

    def test_iteration_yields_packed_pixels(self, rgb_image):
        assert list(rgb_image) == list(rgb_image.pixels)

    def test_histogram_shortcut(self, rgb_image):
        r, g, b = rgb_image.histogram()
        assert r.get_count(255) == 2
        assert g.get_count(255) == 2
        assert b.get_count(0) == 2
