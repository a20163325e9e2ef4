"""Tests for image format detection."""

import pytest

from nn_compute_client.client.image_format_detector import (
    ImageFormat,
    detect_image_format,
)
from tests.utils.image_generation import create_test_image


@pytest.mark.parametrize(
    ("img_format", "expected"),
    [
        ("PNG", ImageFormat.PNG),
        ("JPEG", ImageFormat.JPEG),
        ("GIF", ImageFormat.GIF),
        ("BMP", ImageFormat.BMP),
        ("TIFF", ImageFormat.TIFF),
        ("WEBP", ImageFormat.WEBP),
        ("PPM", ImageFormat.PNM),
        ("ICO", ImageFormat.ICO),
    ],
)
def test_detect_encoded_images(img_format: str, expected: ImageFormat) -> None:
    """Test detection of images encoded by Pillow."""
    image_bytes = create_test_image(16, 16, img_format=img_format)

    assert detect_image_format(image_bytes) is expected


def test_formats_name_pillow_plugins() -> None:
    """Test that each format value names the plugin that decodes it."""
    assert ImageFormat.PNM.value == "PPM"
    assert ImageFormat.JPEG.value == "JPEG"


@pytest.mark.parametrize("header", [b"MM\x00*", b"II*\x00"])
def test_detect_tiff_byte_orders(header: bytes) -> None:
    """Test detection of big- and little-endian TIFF."""
    assert detect_image_format(header + b"\x00" * 16) is ImageFormat.TIFF


@pytest.mark.parametrize("header", [b"P1\n", b"P3\n", b"P6\n"])
def test_detect_netpbm_variants(header: bytes) -> None:
    """Test detection of plain and raw netpbm images."""
    assert detect_image_format(header + b"4 4\n255\n") is ImageFormat.PNM


def test_detect_webp_requires_form_type() -> None:
    """Test that other RIFF containers are not taken for WebP."""
    wav_header = b"RIFF" + b"\x00\x00\x00\x00" + b"WAVE" + b"\x00" * 16

    assert detect_image_format(wav_header) is None


@pytest.mark.parametrize(
    "data",
    [b"", b"hello world", b"PX", b"P7\n", b"\x89PN", b"RIFF"],
)
def test_detect_unknown_data(data: bytes) -> None:
    """Test that unrecognised or short data has no format."""
    assert detect_image_format(data) is None
