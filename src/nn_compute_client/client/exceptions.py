"""Base classes for all compute client exceptions."""


class ComputeClientError(Exception):
    """Base class for all compute client exceptions."""


class DecodeError(ComputeClientError):
    """Raised when the source image bytes cannot be decoded."""

    default_message = "Failed to decode image data"


class EncodeError(ComputeClientError):
    """Raised when a payload cannot be represented in the wire format."""

    default_message = "Failed to encode inference request"


class ConfigurationError(ComputeClientError):
    """Raised when the run configuration is invalid."""

    default_message = "Invalid configuration"


class BackendError(ComputeClientError):
    """Raised when a compute backend cannot be set up."""

    default_message = "Compute backend unavailable"


class InvocationFailure(ComputeClientError):  # noqa: N818
    """Raised when the compute entry point returns a nonzero status."""

    default_message = "compute failed with error code {status}"

    def __init__(self, status: int) -> None:
        """Initialize with the status code returned by the backend.

        Args:
            status: The nonzero status code.

        """
        super().__init__(self.default_message.format(status=status))
        self.status = status
