"""Source image format detection.

The decoder only accepts formats it can recognise from their leading bytes.
The detected format also pins the Pillow plugin used to decode the image, so
a file is never decoded as something other than what its header claims.
"""

import enum


class ImageFormat(enum.Enum):
    """Source image formats accepted by the decoder.

    Each value is the name of the Pillow plugin that decodes the format.
    """

    PNG = "PNG"
    JPEG = "JPEG"
    GIF = "GIF"
    BMP = "BMP"
    WEBP = "WEBP"
    TIFF = "TIFF"
    PNM = "PPM"
    ICO = "ICO"


_SIGNATURES: tuple[tuple[bytes, ImageFormat], ...] = (
    (b"\x89PNG\r\n\x1a\n", ImageFormat.PNG),
    (b"\xff\xd8\xff", ImageFormat.JPEG),
    (b"GIF87a", ImageFormat.GIF),
    (b"GIF89a", ImageFormat.GIF),
    (b"BM", ImageFormat.BMP),
    (b"II*\x00", ImageFormat.TIFF),
    (b"MM\x00*", ImageFormat.TIFF),
    (b"\x00\x00\x01\x00", ImageFormat.ICO),
    *((f"P{kind}".encode(), ImageFormat.PNM) for kind in range(1, 7)),
)


def detect_image_format(data: bytes) -> ImageFormat | None:
    """Identify the format of undecoded image bytes.

    Args:
    ----
        data: Raw source image bytes.

    Returns:
    -------
        The detected format, or None if no known signature matches.

    """
    for signature, image_format in _SIGNATURES:
        if data.startswith(signature):
            return image_format

    # RIFF container with a WEBP form type
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return ImageFormat.WEBP

    return None
