"""Tests for compute status interpretation."""

import io

import pytest

from nn_compute_client.client.consts import COMPLETION_MESSAGE
from nn_compute_client.client.exceptions import InvocationFailure
from nn_compute_client.client.result import raise_for_status, report_result


def test_raise_for_status_success() -> None:
    """Test that status 0 does not raise."""
    raise_for_status(0)


@pytest.mark.parametrize("status", [1, 7, -1, 503])
def test_raise_for_status_failure(status: int) -> None:
    """Test that any nonzero status raises with the code attached."""
    with pytest.raises(InvocationFailure) as exc_info:
        raise_for_status(status)

    assert exc_info.value.status == status
    assert str(exc_info.value) == f"compute failed with error code {status}"


def test_report_result_success_prints_only_completion() -> None:
    """Test that a successful call reports only the completion line."""
    stream = io.StringIO()

    assert report_result(0, stream) is True
    assert stream.getvalue() == f"{COMPLETION_MESSAGE}\n"


def test_report_result_failure_names_code() -> None:
    """Test that a failed call names its code before completing."""
    stream = io.StringIO()

    assert report_result(7, stream) is False
    assert stream.getvalue().splitlines() == [
        "compute failed with error code 7",
        COMPLETION_MESSAGE,
    ]


def test_report_result_defaults_to_stdout(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Test that reports go to standard output by default."""
    _ = report_result(0)

    assert capsys.readouterr().out == f"{COMPLETION_MESSAGE}\n"
