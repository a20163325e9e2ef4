"""Interface shared by all compute backends."""

import types
from abc import ABC, abstractmethod


class ComputeBackend(ABC):
    """Capability interface to an external neural-network compute entry point.

    Implementations hand a serialized inference request to the compute host
    and return its integer status, 0 meaning success.

    The caller owns the request buffer. It must stay alive and unmodified
    until ``invoke`` returns; implementations must not retain or mutate it
    after returning.
    """

    @abstractmethod
    def invoke(self, request: bytes) -> int:
        """Hand a serialized request to the compute host.

        Args:
            request: Serialized inference request.

        Returns:
            Status code from the compute host, 0 on success.

        """
        message = "Subclasses must implement this method"
        raise NotImplementedError(message)

    def get_stats(self) -> int:
        """Query the compute host's statistics entry point.

        Optional extension point with no defined semantics; the pipeline
        never calls it.
        """
        message = f"{type(self).__name__} does not expose statistics"
        raise NotImplementedError(message)

    def close(self) -> None:
        """Release any resources held by the backend."""

    def __enter__(self) -> "ComputeBackend":
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
