"""Module containing the tensor and request model classes.

This module defines the structured inference request handed to a compute
backend: named input tensors carrying data, and named output descriptors that
ask the backend to populate and return a tensor. The ``to_dict`` methods fix
the field order used on the wire.
"""

import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from nn_compute_client.client.consts import TENSOR_DATATYPE


def _shortest_floats(data: np.ndarray) -> list[float]:
    # str() of a float32 is the shortest text that parses back to it
    return [float(str(value)) for value in data]


@dataclass
class Tensor:
    """Flat tensor data with its shape and datatype tag.

    Attributes:
        data: Flat float32 values in the tensor's element order.
        shape: Ordered dimensions, e.g. (batch, channels, height, width).
        datatype: Textual datatype tag understood by the compute host.

    """

    data: np.ndarray
    shape: tuple[int, ...]
    datatype: str = TENSOR_DATATYPE

    def __post_init__(self) -> None:
        """Validate that the data length matches the shape."""
        self.data = np.asarray(self.data, dtype=np.float32).reshape(-1)
        self.shape = tuple(int(dim) for dim in self.shape)
        expected = math.prod(self.shape)
        if self.data.size != expected:
            msg = (
                f"Tensor data has {self.data.size} elements but shape "
                f"{list(self.shape)} requires {expected}"
            )
            raise ValueError(msg)


@dataclass
class InputTensor:
    """Named input tensor with its data attached.

    Attributes:
        name: Input binding name expected by the model.
        tensor: Shape, datatype and values of the input.

    """

    name: str
    tensor: Tensor

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of this input."""
        return {
            "name": self.name,
            "shape": list(self.tensor.shape),
            "datatype": self.tensor.datatype,
            "data": _shortest_floats(self.tensor.data),
        }


@dataclass
class OutputTensor:
    """Named output binding requested from the compute host.

    Carries no data; the receiver populates and returns the tensor.
    """

    name: str

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of this output descriptor."""
        return {"name": self.name}


@dataclass
class InferencePayload:
    """Structured inference request.

    Attributes:
        id: Client-chosen request identifier.
        inputs: Ordered input tensors.
        outputs: Ordered output descriptors.

    """

    id: str
    inputs: list[InputTensor] = field(default_factory=list)
    outputs: list[OutputTensor] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of the payload."""
        return {
            "id": self.id,
            "inputs": [tensor.to_dict() for tensor in self.inputs],
            "outputs": [tensor.to_dict() for tensor in self.outputs],
        }
