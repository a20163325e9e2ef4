"""Low-level ctypes wrapper for a native compute library."""

import ctypes
import logging

from nn_compute_client.client.consts import (
    COMPUTE_SYMBOL,
    MAX_REQUEST_SIZE,
    STATS_SYMBOL,
)
from nn_compute_client.client.exceptions import BackendError, EncodeError
from nn_compute_client.compute_wrappers.base import ComputeBackend

logger = logging.getLogger(__name__)


class SharedLibraryBackend(ComputeBackend):
    """Compute backend calling an address/length entry point in a library.

    The library must export ``compute(address, size) -> int32``. The request
    is copied into a ctypes buffer owned by this call; the buffer is kept
    referenced until the foreign function returns, so its address stays
    valid for the whole call. The callee reads exactly ``size`` bytes and
    takes no ownership.
    """

    def __init__(
        self,
        library_path: str,
        compute_symbol: str = COMPUTE_SYMBOL,
        stats_symbol: str = STATS_SYMBOL,
    ) -> None:
        """Load the library and bind its entry points.

        Args:
            library_path: Path or name of the shared library to load.
            compute_symbol: Name of the compute entry point.
            stats_symbol: Name of the optional statistics entry point.

        Raises:
            BackendError: If the library cannot be loaded or does not export
                the compute entry point.

        """
        if not library_path:
            msg = f"{BackendError.default_message}: library path is empty"
            raise BackendError(msg)

        try:
            self._library = ctypes.CDLL(library_path)
        except OSError as e:
            msg = f"Failed to load compute library '{library_path}': {e}"
            raise BackendError(msg) from e

        try:
            self._compute = getattr(self._library, compute_symbol)
        except AttributeError as e:
            msg = (
                f"Compute library '{library_path}' does not export "
                f"'{compute_symbol}'"
            )
            raise BackendError(msg) from e

        self._compute.argtypes = [ctypes.c_void_p, ctypes.c_uint32]
        self._compute.restype = ctypes.c_int32

        self._get_stats = getattr(self._library, stats_symbol, None)
        if self._get_stats is not None:
            self._get_stats.argtypes = []
            self._get_stats.restype = ctypes.c_int32

        logger.debug(
            "Loaded compute library %s (stats entry point: %s)",
            library_path,
            "yes" if self._get_stats is not None else "no",
        )

    def invoke(self, request: bytes) -> int:
        """Pass the request address and size to the compute entry point."""
        size = len(request)
        if size > MAX_REQUEST_SIZE:
            msg = (
                f"Request of {size} bytes exceeds the {MAX_REQUEST_SIZE} "
                "byte limit of the compute entry point"
            )
            raise EncodeError(msg)

        buffer = (ctypes.c_ubyte * size).from_buffer_copy(request)
        status = self._compute(ctypes.addressof(buffer), size)
        # buffer must outlive the call above
        del buffer
        return int(status)

    def get_stats(self) -> int:
        """Call the library's statistics entry point, if it exports one."""
        if self._get_stats is None:
            return super().get_stats()
        return int(self._get_stats())
