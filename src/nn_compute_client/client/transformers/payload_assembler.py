"""Transform a normalized tensor into an InferencePayload."""

from nn_compute_client.client.consts import (
    DEFAULT_INPUT_NAME,
    DEFAULT_OUTPUT_NAME,
    DEFAULT_REQUEST_ID,
)
from nn_compute_client.client.models import (
    InferencePayload,
    InputTensor,
    OutputTensor,
    Tensor,
)


def assemble_payload(
    tensor: Tensor,
    request_id: str = DEFAULT_REQUEST_ID,
    input_name: str = DEFAULT_INPUT_NAME,
    output_name: str = DEFAULT_OUTPUT_NAME,
) -> InferencePayload:
    """Build a single-input, single-output inference request.

    Args:
        tensor: Normalized input tensor.
        request_id: Client-chosen request identifier.
        input_name: Input binding the tensor is attached to.
        output_name: Output binding requested from the compute host.

    Returns:
        The assembled InferencePayload.

    Raises:
        ValueError: If request_id is empty.

    """
    if not request_id:
        msg = "request_id cannot be empty"
        raise ValueError(msg)

    return InferencePayload(
        id=request_id,
        inputs=[InputTensor(name=input_name, tensor=tensor)],
        outputs=[OutputTensor(name=output_name)],
    )
