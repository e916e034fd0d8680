"""Tests for image output."""

import io
import pytest
import numpy as np
from PIL import Image

from pathweaver.image import to_rgb8, write_ppm, save_image


class TestToRGB8:
    """Test radiance to 8-bit conversion."""

    def test_averages_and_gamma_corrects(self):
        summed = np.array([[[1.0, 4.0, 0.0]]])
        rgb = to_rgb8(summed, 4)
        assert rgb.dtype == np.uint8
        # 0.25 -> sqrt 0.5 -> 128, 1.0 -> clamped 0.999 -> 255
        assert rgb[0, 0].tolist() == [128, 255, 0]

    def test_clamps_out_of_range(self):
        summed = np.array([[[50.0, -3.0, 0.81]]])
        assert to_rgb8(summed, 1)[0, 0].tolist() == [255, 0, 230]

    def test_does_not_modify_input(self):
        summed = np.full((2, 2, 3), 2.0)
        to_rgb8(summed, 2)
        assert np.all(summed == 2.0)

    def test_rejects_non_positive_samples(self):
        with pytest.raises(ValueError):
            to_rgb8(np.zeros((1, 1, 3)), 0)


class TestWritePPM:
    """Test textual pixmap output."""

    def test_header_and_order(self):
        rgb = np.array([[[1, 2, 3], [4, 5, 6]],
                        [[7, 8, 9], [10, 11, 12]]], dtype=np.uint8)
        out = io.StringIO()
        write_ppm(out, rgb)
        lines = out.getvalue().splitlines()
        assert lines[:3] == ["P3", "2 2", "255"]
        assert lines[3:] == ["1 2 3", "4 5 6", "7 8 9", "10 11 12"]


class TestSaveImage:
    """Test writing files."""

    def test_save_ppm(self, tmp_path):
        path = tmp_path / "out.ppm"
        save_image(np.ones((3, 5, 3)), 1, path)
        text = path.read_text()
        assert text.startswith("P3\n5 3\n255\n")
        assert len(text.splitlines()) == 3 + 15

    def test_save_png(self, tmp_path):
        path = tmp_path / "out.png"
        summed = np.zeros((3, 5, 3))
        summed[0, 0] = [2.0, 0.0, 0.0]
        save_image(summed, 2, str(path))

        with Image.open(path) as img:
            assert img.size == (5, 3)
            assert img.getpixel((0, 0)) == (255, 0, 0)
            assert img.getpixel((4, 2)) == (0, 0, 0)
