"""Unit tests for the ImageData model."""

import dataclasses

import numpy as np
import pytest
from PIL import Image

from image_analyzer.models.image_model import ImageData


class TestImageData:
    """Test suite for ImageData construction and pixel access."""

    def test_from_pil_converts_to_rgb(self):
        """RGBA and grayscale images are converted to three channels."""
        rgba = ImageData.from_pil(Image.new("RGBA", (3, 2), (10, 20, 30, 40)))
        gray = ImageData.from_pil(Image.new("L", (3, 2), 77))

        assert rgba.pil_image.mode == "RGB"
        assert gray.pil_image.mode == "RGB"
        assert gray.pixels()[0].tolist() == [77, 77, 77]

    def test_dimensions_from_image(self):
        """Width and height mirror the PIL size."""
        data = ImageData.from_pil(Image.new("RGB", (7, 3)), source="x.png", size_bytes=12)

        assert (data.width, data.height) == (7, 3)
        assert data.source == "x.png"
        assert data.size_bytes == 12

    def test_pixels_shape(self):
        """Pixels are returned as an (N, 3) uint8 array."""
        data = ImageData.from_pil(Image.new("RGB", (4, 5), (1, 2, 3)))
        pixels = data.pixels()

        assert pixels.shape == (20, 3)
        assert pixels.dtype.name == "uint8"

    def test_empty_image_has_no_pixels(self):
        """A zero-area image yields an empty pixel array."""
        data = ImageData.from_pil(Image.new("RGB", (0, 0)))

        assert data.is_empty
        assert data.pixels().shape == (0, 3)

    def test_is_frozen(self):
        """ImageData cannot be mutated after construction."""
        data = ImageData.from_pil(Image.new("RGB", (1, 1)))

        with pytest.raises(dataclasses.FrozenInstanceError):
            data.width = 2


class TestSixteenBitConversion:
    """Test suite for scaling 16-bit samples down to 8 bits."""

    def test_i16_is_scaled_not_clipped(self):
        img = Image.fromarray(np.full((4, 4), 32768, dtype=np.uint16))

        data = ImageData.from_pil(img)

        assert data.pixels().tolist()[0] == [128, 128, 128]

    def test_i32_uses_sixteen_bit_range(self):
        img = Image.fromarray(np.array([[0, 255, 65535, 70000]], dtype=np.int32))

        data = ImageData.from_pil(img)

        assert [p[0] for p in data.pixels().tolist()] == [0, 0, 255, 255]
