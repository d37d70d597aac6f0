"""Unit tests for numpy conversion and PNG export."""

import numpy as np
import pytest
from PIL import Image

from core.vector import Color3
from renderer.image_io import array_to_uint8, image_to_array, save_png
from renderer.ppm import color_to_rgb


class TestImageToArray:
    """Tests for image_to_array()."""

    def test_shape_and_values(self):
        """Rows become the first axis and components the last."""
        image = (
            (Color3(0.1, 0.2, 0.3), Color3(0.4, 0.5, 0.6)),
            (Color3(0.7, 0.8, 0.9), Color3(1.0, 1.0, 1.0)),
            (Color3(0.0, 0.0, 0.0), Color3(0.5, 0.5, 0.5)),
        )
        array = image_to_array(image)
        assert array.shape == (3, 2, 3)
        assert array.dtype == np.float64
        np.testing.assert_array_equal(array[0, 1], [0.4, 0.5, 0.6])
        np.testing.assert_array_equal(array[2, 0], [0.0, 0.0, 0.0])

    def test_values_not_clamped(self):
        """Out-of-range components pass through unchanged."""
        array = image_to_array(((Color3(-0.5, 1.5, 0.5),),))
        np.testing.assert_array_equal(array[0, 0], [-0.5, 1.5, 0.5])

    def test_empty_image_rejected(self):
        """An image without pixels cannot be converted."""
        with pytest.raises(ValueError):
            image_to_array(())


class TestArrayToUint8:
    """Tests for array_to_uint8()."""

    def test_matches_ppm_mapping(self):
        """Same channel values as the PPM serializer, including saturation."""
        colors = [
            Color3(0.0, 0.5, 1.0),
            Color3(0.25, 0.999, 0.1),
            Color3(-1.0, 2.0, float("nan")),
        ]
        array = array_to_uint8(image_to_array((tuple(colors),)))
        assert array.dtype == np.uint8
        for i, color in enumerate(colors):
            assert tuple(int(v) for v in array[0, i]) == color_to_rgb(color)


class TestSavePng:
    """Tests for save_png()."""

    def test_round_trip_through_pillow(self, tmp_path):
        """The saved PNG holds the expected 8-bit pixels."""
        image = (
            (Color3(1.0, 0.0, 0.0), Color3(0.0, 1.0, 0.0)),
            (Color3(0.0, 0.0, 1.0), Color3(0.5, 0.5, 0.5)),
        )
        path = tmp_path / "image.png"

        save_png(image, str(path))

        with Image.open(path) as loaded:
            assert loaded.size == (2, 2)
            assert loaded.mode == "RGB"
            assert loaded.getpixel((0, 0)) == (255, 0, 0)
            assert loaded.getpixel((1, 0)) == (0, 255, 0)
            assert loaded.getpixel((0, 1)) == (0, 0, 255)
            assert loaded.getpixel((1, 1)) == (127, 127, 127)
