"""HTTP compute backend for a remote inference server."""

import logging

import httpx

from nn_compute_client.client.consts import TRANSPORT_ERROR_STATUS
from nn_compute_client.client.exceptions import BackendError
from nn_compute_client.compute_wrappers.base import ComputeBackend

logger = logging.getLogger(__name__)


class HttpComputeBackend(ComputeBackend):
    """Compute backend that POSTs requests to an inference server.

    The server's reply body is not interpreted; only the outcome is mapped
    to a status code. A 2xx response maps to 0, any other response maps to
    its HTTP status code and transport failures map to
    ``TRANSPORT_ERROR_STATUS``.
    """

    def __init__(
        self,
        server_url: str,
        model_name: str,
        timeout: float | None = None,
    ) -> None:
        """Initialize the backend.

        Args:
            server_url: Base URL of the inference server.
            model_name: Model to address on the server.
            timeout: Request timeout in seconds, None to wait indefinitely.

        Raises:
            BackendError: If server_url or model_name is empty.

        """
        if not server_url:
            msg = f"{BackendError.default_message}: server_url cannot be empty"
            raise BackendError(msg)
        if not model_name:
            msg = f"{BackendError.default_message}: model_name cannot be empty"
            raise BackendError(msg)

        self.url = f"{server_url.rstrip('/')}/v2/models/{model_name}/infer"
        self._client = httpx.Client(timeout=timeout)

    def invoke(self, request: bytes) -> int:
        """POST the request and map the outcome to a status code."""
        try:
            response = self._client.post(
                self.url,
                content=request,
                headers={"content-type": "application/json"},
            )
            _ = response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Inference server returned %d: %s",
                e.response.status_code,
                e.response.text[:200],
            )
            return e.response.status_code
        except httpx.HTTPError as e:
            logger.warning(
                "Failed to reach inference server at %s: %s", self.url, e
            )
            return TRANSPORT_ERROR_STATUS

        logger.debug(
            "Inference server accepted request (%d)", response.status_code
        )
        return 0

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
