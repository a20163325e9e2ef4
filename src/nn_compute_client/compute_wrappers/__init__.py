"""Compute backends that carry serialized requests to a compute host."""

from nn_compute_client.compute_wrappers.base import ComputeBackend
from nn_compute_client.compute_wrappers.http_service import HttpComputeBackend
from nn_compute_client.compute_wrappers.shared_library import (
    SharedLibraryBackend,
)

__all__ = ["ComputeBackend", "HttpComputeBackend", "SharedLibraryBackend"]
