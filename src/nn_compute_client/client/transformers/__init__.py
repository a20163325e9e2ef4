"""Pipeline transformers for the compute client."""

from nn_compute_client.client.transformers.core import (
    ResamplingAlgorithm,
    decode_image,
    load_raster,
    normalize_image,
    resize_image,
)
from nn_compute_client.client.transformers.payload_assembler import (
    assemble_payload,
)

__all__ = [
    "ResamplingAlgorithm",
    "assemble_payload",
    "decode_image",
    "load_raster",
    "normalize_image",
    "resize_image",
]
