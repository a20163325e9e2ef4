"""Options object for the compute client."""

import os
from dataclasses import dataclass

from nn_compute_client.client.consts import (
    COMPUTE_SYMBOL,
    DEFAULT_INPUT_NAME,
    DEFAULT_OUTPUT_NAME,
    DEFAULT_REQUEST_ID,
    STATS_SYMBOL,
)
from nn_compute_client.client.exceptions import ConfigurationError
from nn_compute_client.client.transformers.core import ResamplingAlgorithm

BACKEND_LIBRARY = "library"
BACKEND_HTTP = "http"
BACKENDS = (BACKEND_LIBRARY, BACKEND_HTTP)


@dataclass
class ComputeOptions:
    """Options for configuring a compute client run.

    Attributes:
        request_id: Identifier placed in the request's ``id`` field.
            Defaults to "smoke-test-1".
        input_name: Name of the input tensor binding.
            Defaults to "INPUT0".
        output_name: Name of the output tensor binding requested from the
            compute host. Defaults to "OUTPUT0".
        sampling_algorithm: Filter used when resizing to the model geometry.
            Defaults to BILINEAR.
        backend: Which compute backend to use, "library" or "http".
            Defaults to "library".
        library_path: Path to the native compute library for the "library"
            backend.
        compute_symbol: Name of the library's compute entry point.
        stats_symbol: Name of the library's statistics entry point.
        server_url: Base URL of the inference server for the "http" backend.
            Defaults to "http://localhost:8000".
        model_name: Model addressed on the inference server.
            Defaults to "default".
        timeout: HTTP request timeout in seconds. None waits indefinitely.
        image_path: Source image to run. None uses the bundled sample image.

    """

    request_id: str = DEFAULT_REQUEST_ID
    input_name: str = DEFAULT_INPUT_NAME
    output_name: str = DEFAULT_OUTPUT_NAME
    sampling_algorithm: ResamplingAlgorithm = ResamplingAlgorithm.BILINEAR
    backend: str = BACKEND_LIBRARY
    library_path: str | None = None
    compute_symbol: str = COMPUTE_SYMBOL
    stats_symbol: str = STATS_SYMBOL
    server_url: str = "http://localhost:8000"
    model_name: str = "default"
    timeout: float | None = None
    image_path: str | None = None

    @classmethod
    def from_env(cls) -> "ComputeOptions":
        """Build options from NN_* environment variables.

        Unset variables fall back to the dataclass defaults.

        Raises:
            ConfigurationError: If NN_TIMEOUT is not a number.

        """
        options = cls()
        options.request_id = os.getenv("NN_REQUEST_ID", options.request_id)
        options.backend = os.getenv("NN_BACKEND", options.backend)
        options.library_path = os.getenv(
            "NN_LIBRARY_PATH", options.library_path
        )
        options.server_url = os.getenv("NN_SERVER_URL", options.server_url)
        options.model_name = os.getenv("NN_MODEL_NAME", options.model_name)
        options.image_path = os.getenv("NN_IMAGE_PATH", options.image_path)

        timeout = os.getenv("NN_TIMEOUT")
        if timeout:
            try:
                options.timeout = float(timeout)
            except ValueError as e:
                msg = (
                    f"{ConfigurationError.default_message}: "
                    f"NN_TIMEOUT must be a number, got '{timeout}'"
                )
                raise ConfigurationError(msg) from e

        return options

    def validate(self) -> None:
        """Check the options a request is built from.

        Raises:
            ConfigurationError: If the request id or a tensor binding name
                is empty.

        """
        for name in ("request_id", "input_name", "output_name"):
            if not getattr(self, name):
                msg = f"{ConfigurationError.default_message}: {name} is empty"
                raise ConfigurationError(msg)
