"""JSON encoding of inference requests.

Requests are encoded as compact UTF-8 JSON with a fixed field order so the
same payload always produces the same bytes.
"""

import json
import logging
from typing import Any

from nn_compute_client.client.exceptions import EncodeError
from nn_compute_client.client.models import (
    InferencePayload,
    InputTensor,
    OutputTensor,
    Tensor,
)

logger = logging.getLogger(__name__)

_SEPARATORS = (",", ":")


def serialize_payload(payload: InferencePayload) -> bytes:
    """Encode an InferencePayload as JSON bytes.

    Args:
    ----
        payload: The request to encode.

    Returns:
    -------
        UTF-8 encoded JSON with fields ordered id, inputs, outputs.

    Raises:
    ------
        EncodeError: If the payload holds a value JSON cannot represent,
            such as NaN or infinite tensor data.

    """
    try:
        encoded = json.dumps(
            payload.to_dict(), separators=_SEPARATORS, allow_nan=False
        ).encode("utf-8")
    except (TypeError, ValueError) as e:
        msg = f"{EncodeError.default_message} '{payload.id}': {e}"
        raise EncodeError(msg) from e

    logger.debug(
        "Serialized request %s: %d inputs, %d outputs, %d bytes",
        payload.id,
        len(payload.inputs),
        len(payload.outputs),
        len(encoded),
    )
    return encoded


def _parse_input(raw: dict[str, Any]) -> InputTensor:
    return InputTensor(
        name=raw["name"],
        tensor=Tensor(
            data=raw["data"],
            shape=tuple(raw["shape"]),
            datatype=raw["datatype"],
        ),
    )


def deserialize_request(request: bytes) -> InferencePayload:
    """Decode JSON request bytes back into an InferencePayload.

    Args:
    ----
        request: Bytes produced by ``serialize_payload``.

    Returns:
    -------
        The decoded payload, with tensor data as float32.

    Raises:
    ------
        EncodeError: If the bytes are not a well-formed request.

    """
    try:
        raw = json.loads(request)
        return InferencePayload(
            id=raw["id"],
            inputs=[_parse_input(item) for item in raw["inputs"]],
            outputs=[
                OutputTensor(name=item["name"]) for item in raw["outputs"]
            ],
        )
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"Request is not valid JSON: {e}"
        raise EncodeError(msg) from e
    except KeyError as e:
        msg = f"Invalid request format: missing {e}"
        raise EncodeError(msg) from e
    except (TypeError, ValueError) as e:
        msg = f"Invalid request format: {e}"
        raise EncodeError(msg) from e
