"""The Compute Client Class."""

import logging
import types
from typing import TextIO

from nn_compute_client.client.compute_options import ComputeOptions
from nn_compute_client.client.invoker import invoke_compute
from nn_compute_client.client.result import report_result
from nn_compute_client.client.serializer import serialize_payload
from nn_compute_client.client.transformers import (
    assemble_payload,
    load_raster,
    normalize_image,
)
from nn_compute_client.compute_wrappers.base import ComputeBackend


class ComputeClient:
    """The Compute Client Class.

    Runs the inference pipeline once per call: decode and resize the image,
    normalize it into a tensor, assemble and serialize the request, then hand
    it to the compute backend.
    """

    def __init__(
        self, backend: ComputeBackend, options: ComputeOptions | None = None
    ) -> None:
        """Initialize the Compute Client.

        Args:
            backend: The compute backend requests are handed to.
            options: Configuration options for the run.

        Raises:
            ConfigurationError: If the options cannot build a request.

        """
        self.logger = logging.getLogger(__name__)
        self.options = options if options is not None else ComputeOptions()
        self.options.validate()
        self.backend = backend

    def build_request(self, image_bytes: bytes) -> bytes:
        """Turn source image bytes into a serialized inference request.

        Raises:
            DecodeError: If the image bytes cannot be decoded.
            EncodeError: If the request cannot be serialized.

        """
        raster = load_raster(image_bytes, self.options.sampling_algorithm)
        tensor = normalize_image(raster)
        payload = assemble_payload(
            tensor,
            request_id=self.options.request_id,
            input_name=self.options.input_name,
            output_name=self.options.output_name,
        )
        return serialize_payload(payload)

    def run(self, image_bytes: bytes) -> int:
        """Run the full pipeline and return the compute status code.

        Decode and encode failures propagate before the backend is called.

        Example:
            ```python
            with ComputeClient(backend, ComputeOptions()) as client:
                status = client.run(Path("cat.jpg").read_bytes())
            ```

        """
        request = self.build_request(image_bytes)
        self.logger.info(
            "Sending request %s (%d bytes)",
            self.options.request_id,
            len(request),
        )
        status = invoke_compute(self.backend, request)
        self.logger.info(
            "Request %s finished with status %d",
            self.options.request_id,
            status,
        )
        return status

    def run_and_report(
        self, image_bytes: bytes, stream: TextIO | None = None
    ) -> bool:
        """Run the pipeline and report the outcome.

        Returns:
            True if the compute call succeeded.

        """
        return report_result(self.run(image_bytes), stream)

    def close(self) -> None:
        """Close the client and its compute backend."""
        self.backend.close()

    def __enter__(self) -> "ComputeClient":
        """Context manager entry point."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Context manager exit point."""
        self.close()
