"""Unit tests for image export.

Tests cover:
- Saving arrays and frame buffers as BMP
- Report-and-continue behavior when the write fails
- Shape validation
"""

import numpy as np
import pytest
from PIL import Image


class TestSaveImage:
    """Tests for successful saves."""

    def test_save_array_as_bmp(self, tmp_path):
        """Test that an array round-trips through a BMP file."""
        from src.raycaster.preview.export import save_image_from_array

        image = np.zeros((3, 4, 3), dtype=np.uint8)
        image[0, 0] = (10, 20, 30)
        image[2, 3] = (200, 200, 200)
        path = tmp_path / "test.bmp"

        assert save_image_from_array(image, str(path)) is True

        with Image.open(path) as img:
            assert img.format == "BMP"
            loaded = np.array(img)
        np.testing.assert_array_equal(loaded, image)

    def test_save_framebuffer(self, tmp_path):
        """Test saving a FrameBuffer directly."""
        from src.raycaster.preview.export import save_image
        from src.raycaster.preview.framebuffer import FrameBuffer

        path = tmp_path / "fb.bmp"
        assert save_image(FrameBuffer(6, 4), str(path)) is True

        with Image.open(path) as img:
            assert img.size == (6, 4)

    def test_extension_selects_format(self, tmp_path):
        """Test that other Pillow formats are chosen by extension."""
        from src.raycaster.preview.export import save_image_from_array

        path = tmp_path / "test.png"
        assert save_image_from_array(np.zeros((2, 2, 3), dtype=np.uint8), str(path)) is True

        with Image.open(path) as img:
            assert img.format == "PNG"


class TestSaveFailure:
    """Tests for failed saves."""

    def test_missing_directory(self, tmp_path, caplog):
        """Test that an unwritable path is logged and returns False."""
        from src.raycaster.preview.export import save_image_from_array

        path = tmp_path / "does" / "not" / "exist.bmp"

        with caplog.at_level("ERROR"):
            result = save_image_from_array(np.zeros((2, 2, 3), dtype=np.uint8), str(path))

        assert result is False
        assert "Failed to write out to image file" in caplog.text

    def test_unknown_extension(self, tmp_path, caplog):
        """Test that an unsupported extension is reported, not raised."""
        from src.raycaster.preview.export import save_image_from_array

        path = tmp_path / "image.notaformat"

        with caplog.at_level("ERROR"):
            result = save_image_from_array(np.zeros((2, 2, 3), dtype=np.uint8), str(path))

        assert result is False
        assert "Failed to write" in caplog.text

    def test_wrong_shape_rejected(self, tmp_path):
        """Test that a non-RGB array raises ValueError."""
        from src.raycaster.preview.export import save_image_from_array

        with pytest.raises(ValueError, match="shape"):
            save_image_from_array(np.zeros((2, 2), dtype=np.uint8), str(tmp_path / "x.bmp"))
