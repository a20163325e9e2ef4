"""Compute Client.

This module provides a client that turns images into inference requests and
hands them to an external compute entry point.
"""

from nn_compute_client.client.compute_client import ComputeClient
from nn_compute_client.client.compute_options import ComputeOptions
from nn_compute_client.client.exceptions import (
    BackendError,
    ComputeClientError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    InvocationFailure,
)
from nn_compute_client.client.result import raise_for_status, report_result

__all__ = [
    "BackendError",
    "ComputeClient",
    "ComputeClientError",
    "ComputeOptions",
    "ConfigurationError",
    "DecodeError",
    "EncodeError",
    "InvocationFailure",
    "raise_for_status",
    "report_result",
]
