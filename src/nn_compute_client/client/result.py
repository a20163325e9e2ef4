"""Interpretation of compute status codes."""

import logging
import sys
from typing import TextIO

from nn_compute_client.client.consts import COMPLETION_MESSAGE
from nn_compute_client.client.exceptions import InvocationFailure

logger = logging.getLogger(__name__)


def raise_for_status(status: int) -> None:
    """Raise InvocationFailure if the status signals a failure."""
    if status != 0:
        raise InvocationFailure(status)


def report_result(status: int, stream: TextIO | None = None) -> bool:
    """Report the outcome of a compute call.

    A failed call is reported with a line naming the status code. The fixed
    completion line is always written afterwards, since a failed invocation
    does not stop the process.

    Args:
        status: Status code returned by the compute entry point.
        stream: Destination for the report. Defaults to standard output.

    Returns:
        True if the call succeeded, False otherwise.

    """
    out = stream if stream is not None else sys.stdout
    succeeded = True

    try:
        raise_for_status(status)
    except InvocationFailure as e:
        logger.warning("Inference request was not successful: %s", e)
        print(e, file=out)
        succeeded = False

    print(COMPLETION_MESSAGE, file=out)
    return succeeded
