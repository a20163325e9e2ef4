"""Core transformation functions that turn image bytes into a model tensor.

The functions here are plain synchronous steps: decode the source bytes,
resize to the model geometry and normalize into a planar float32 tensor.
Each step is pure apart from logging.
"""

import enum
import logging
from io import BytesIO

import numpy as np
from PIL import Image, UnidentifiedImageError

from nn_compute_client.client.consts import (
    EXPECTED_CHANNELS,
    EXPECTED_HEIGHT,
    EXPECTED_WIDTH,
    IMAGENET_MEAN,
    IMAGENET_STD,
    TENSOR_DATATYPE,
    TENSOR_SHAPE,
)
from nn_compute_client.client.exceptions import DecodeError
from nn_compute_client.client.image_format_detector import detect_image_format
from nn_compute_client.client.models import Tensor

logger = logging.getLogger(__name__)

_target_size = (EXPECTED_WIDTH, EXPECTED_HEIGHT)
_raster_shape = (EXPECTED_HEIGHT, EXPECTED_WIDTH, EXPECTED_CHANNELS)

_mean = np.array(IMAGENET_MEAN, dtype=np.float32)
_std = np.array(IMAGENET_STD, dtype=np.float32)


class ResamplingAlgorithm(enum.Enum):
    """PIL Resampling Configuration.

    Enum for ease of configuration and type-safety when selecting PIL
    resampling filters. BILINEAR is the triangle filter used by the pipeline.
    """

    NEAREST = Image.Resampling.NEAREST
    BOX = Image.Resampling.BOX
    BILINEAR = Image.Resampling.BILINEAR
    LANCZOS = Image.Resampling.LANCZOS


def decode_image(image_bytes: bytes) -> Image.Image:
    """Decode compressed image bytes into an RGB image.

    The format is detected from the leading bytes and only the matching
    Pillow plugin is allowed to decode the data.

    Args:
    ----
        image_bytes: Undecoded source image in a supported format.

    Returns:
    -------
        A fully loaded PIL image in RGB mode at its source dimensions.

    Raises:
    ------
        DecodeError: If the bytes are empty, in an unsupported format or not
            a valid image of the detected format.

    """
    if not image_bytes:
        msg = f"{DecodeError.default_message}: empty input"
        raise DecodeError(msg)

    image_format = detect_image_format(image_bytes)
    if image_format is None:
        msg = f"{DecodeError.default_message}: unsupported image format"
        raise DecodeError(msg)

    logger.debug(
        "Decoding %d bytes as %s", len(image_bytes), image_format.name
    )

    try:
        with Image.open(
            BytesIO(image_bytes), formats=[image_format.value]
        ) as source_img:
            # convert() forces a full load, surfacing truncated streams here
            return source_img.convert("RGB")
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
        EOFError,
    ) as e:
        msg = f"{DecodeError.default_message} as {image_format.name}: {e}"
        raise DecodeError(msg) from e


def resize_image(
    image: Image.Image,
    sampling_algorithm: ResamplingAlgorithm = ResamplingAlgorithm.BILINEAR,
) -> np.ndarray:
    """Resize an RGB image to the expected model dimensions.

    Args:
    ----
        image: Decoded RGB image of arbitrary size.
        sampling_algorithm: The resampling filter to use for resizing.
            Defaults to BILINEAR.

    Returns:
    -------
        A uint8 array of shape (height, width, 3) in R, G, B channel order.

    """
    if image.mode != "RGB":
        image = image.convert("RGB")

    if image.size == _target_size:
        resized_img = image
    else:
        resized_img = image.resize(_target_size, sampling_algorithm.value)
        logger.debug(
            "Resized image from %dx%d to %dx%d",
            image.width,
            image.height,
            EXPECTED_WIDTH,
            EXPECTED_HEIGHT,
        )

    return np.asarray(resized_img, dtype=np.uint8).reshape(_raster_shape)


def load_raster(
    image_bytes: bytes,
    sampling_algorithm: ResamplingAlgorithm = ResamplingAlgorithm.BILINEAR,
) -> np.ndarray:
    """Decode image bytes and resize them to the model raster."""
    return resize_image(decode_image(image_bytes), sampling_algorithm)


def normalize_image(raster: np.ndarray) -> Tensor:
    """Convert an RGB raster into a normalized planar float32 tensor.

    Each channel value is scaled to [0, 1] and standardized with the ImageNet
    mean and standard deviation of its channel. The result is laid out
    channel-major: every red value, then every green value, then every blue
    value, each plane in row-major order.

    Args:
    ----
        raster: uint8 array of shape (224, 224, 3).

    Returns:
    -------
        Tensor of shape (1, 3, 224, 224) with datatype FP32.

    Raises:
    ------
        ValueError: If the raster does not have the expected shape.

    """
    if raster.shape != _raster_shape:
        msg = (
            f"Expected raster of shape {_raster_shape}, "
            f"got {tuple(raster.shape)}"
        )
        raise ValueError(msg)

    scaled = raster.astype(np.float32) / np.float32(255.0)
    normalized = (scaled - _mean) / _std

    # HWC -> CHW
    planar = np.ascontiguousarray(normalized.transpose(2, 0, 1))

    return Tensor(
        data=planar.reshape(-1),
        shape=TENSOR_SHAPE,
        datatype=TENSOR_DATATYPE,
    )
