"""Tests for inference request serialization."""

import json
import math

import numpy as np
import pytest

from nn_compute_client.client.exceptions import EncodeError
from nn_compute_client.client.models import (
    InferencePayload,
    InputTensor,
    OutputTensor,
    Tensor,
)
from nn_compute_client.client.serializer import (
    deserialize_request,
    serialize_payload,
)
from nn_compute_client.client.transformers import (
    assemble_payload,
    load_raster,
    normalize_image,
)
from tests.utils.image_generation import create_test_image


def make_payload(data: list[float]) -> InferencePayload:
    return InferencePayload(
        id="abc",
        inputs=[
            InputTensor(
                "x", Tensor(data=data, shape=(1, 1, 1, len(data)))
            )
        ],
        outputs=[OutputTensor("y")],
    )


@pytest.fixture
def pipeline_payload() -> InferencePayload:
    raster = load_raster(create_test_image(seed=5))
    return assemble_payload(normalize_image(raster))


def test_serialize_payload_exact_bytes() -> None:
    """Test the compact encoding and field order."""
    encoded = serialize_payload(make_payload([0.5, -1.25]))

    assert encoded == (
        b'{"id":"abc","inputs":[{"name":"x","shape":[1,1,1,2],'
        b'"datatype":"FP32","data":[0.5,-1.25]}],"outputs":[{"name":"y"}]}'
    )


def test_serialize_payload_shortest_float32_text() -> None:
    """Test that float32 values are written with their shortest text."""
    encoded = serialize_payload(make_payload([0.1, 2.2489083]))

    assert b'"data":[0.1,2.2489083]' in encoded
    assert b"0.10000000149011612" not in encoded


def test_serialize_payload_saturated_red_text() -> None:
    """Test the wire text of a normalized saturated red channel."""
    raster = np.zeros((224, 224, 3), dtype=np.uint8)
    raster[:, :, 0] = 255

    tensor = normalize_image(raster)
    encoded = serialize_payload(assemble_payload(tensor))

    text = str(tensor.data[0])
    assert text.startswith("2.24890")
    assert len(text) <= len("2.2489083")
    assert f'"data":[{text},{text},'.encode() in encoded


def test_serialize_payload_is_deterministic(
    pipeline_payload: InferencePayload,
) -> None:
    """Test that the same payload always encodes to the same bytes."""
    assert serialize_payload(pipeline_payload) == serialize_payload(
        pipeline_payload
    )


def test_serialize_payload_schema(pipeline_payload: InferencePayload) -> None:
    """Test the decoded document matches the request schema."""
    document = json.loads(serialize_payload(pipeline_payload))

    assert document["id"] == "smoke-test-1"
    assert len(document["inputs"]) == 1
    assert document["inputs"][0]["name"] == "INPUT0"
    assert document["inputs"][0]["shape"] == [1, 3, 224, 224]
    assert document["inputs"][0]["datatype"] == "FP32"
    assert len(document["inputs"][0]["data"]) == 3 * 224 * 224
    assert document["outputs"] == [{"name": "OUTPUT0"}]


def test_serialize_payload_round_trip(
    pipeline_payload: InferencePayload,
) -> None:
    """Test that decoding the bytes yields the source payload's values."""
    decoded = deserialize_request(serialize_payload(pipeline_payload))

    assert decoded.id == pipeline_payload.id
    assert decoded.outputs == pipeline_payload.outputs

    source = pipeline_payload.inputs[0]
    result = decoded.inputs[0]
    assert result.name == source.name
    assert result.tensor.shape == source.tensor.shape
    assert result.tensor.datatype == source.tensor.datatype
    assert np.array_equal(result.tensor.data, source.tensor.data)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_serialize_payload_non_finite(value: float) -> None:
    """Test that non-finite tensor values cannot be encoded."""
    with pytest.raises(EncodeError, match="abc"):
        _ = serialize_payload(make_payload([1.0, value]))


def test_deserialize_request_invalid_json() -> None:
    """Test that malformed bytes are rejected."""
    with pytest.raises(EncodeError, match="not valid JSON"):
        _ = deserialize_request(b"{not json")


def test_deserialize_request_missing_field() -> None:
    """Test that a request without inputs is rejected."""
    with pytest.raises(EncodeError, match="missing 'inputs'"):
        _ = deserialize_request(b'{"id":"abc","outputs":[]}')


def test_deserialize_request_shape_mismatch() -> None:
    """Test that tensor data must match its declared shape."""
    request = (
        b'{"id":"abc","inputs":[{"name":"x","shape":[1,1,1,3],'
        b'"datatype":"FP32","data":[1.0]}],"outputs":[]}'
    )

    with pytest.raises(EncodeError, match="Invalid request format"):
        _ = deserialize_request(request)
