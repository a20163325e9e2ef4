"""Hand serialized requests across the compute boundary."""

import logging

from nn_compute_client.compute_wrappers.base import ComputeBackend

logger = logging.getLogger(__name__)


def invoke_compute(backend: ComputeBackend, request: bytes) -> int:
    """Invoke the compute entry point with a serialized request.

    ``request`` is held by this frame until the backend returns, which keeps
    the buffer alive for the duration of the foreign call.

    Args:
        backend: Compute backend to call.
        request: Serialized inference request.

    Returns:
        The backend's status code, 0 on success.

    Raises:
        TypeError: If the backend returns something other than an int.

    """
    logger.debug(
        "Invoking %s with %d byte request", type(backend).__name__, len(request)
    )
    status = backend.invoke(request)

    # bool is an int subclass but is not a status code
    if not isinstance(status, int) or isinstance(status, bool):
        msg = (
            f"{type(backend).__name__}.invoke returned "
            f"{type(status).__name__}, expected int"
        )
        raise TypeError(msg)

    logger.debug("Compute entry point returned status %d", status)
    return status
