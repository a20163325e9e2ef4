"""Command line entry point running the inference pipeline once."""

import argparse
import logging
import sys
from importlib import resources
from pathlib import Path

from dotenv import load_dotenv

from nn_compute_client.client.compute_client import ComputeClient
from nn_compute_client.client.compute_options import (
    BACKEND_HTTP,
    BACKEND_LIBRARY,
    BACKENDS,
    ComputeOptions,
)
from nn_compute_client.client.exceptions import (
    BackendError,
    ConfigurationError,
    DecodeError,
    EncodeError,
)
from nn_compute_client.compute_wrappers import (
    ComputeBackend,
    HttpComputeBackend,
    SharedLibraryBackend,
)

logger = logging.getLogger(__name__)

SAMPLE_IMAGE = "sample.ppm"


def load_image_bytes(image_path: str | None) -> bytes:
    """Read the source image, falling back to the bundled sample."""
    if image_path:
        logger.info("Loading image from: %s", image_path)
        return Path(image_path).read_bytes()

    logger.info("No image given, using bundled %s", SAMPLE_IMAGE)
    return (
        resources.files("nn_compute_client.resources")
        .joinpath(SAMPLE_IMAGE)
        .read_bytes()
    )


def create_backend(options: ComputeOptions) -> ComputeBackend:
    """Create the compute backend selected by the options.

    Raises:
        BackendError: If the backend is unknown or cannot be set up.

    """
    if options.backend == BACKEND_LIBRARY:
        if not options.library_path:
            msg = (
                "A compute library is required for the library backend "
                "(--library or NN_LIBRARY_PATH)"
            )
            raise BackendError(msg)
        return SharedLibraryBackend(
            options.library_path,
            compute_symbol=options.compute_symbol,
            stats_symbol=options.stats_symbol,
        )

    if options.backend == BACKEND_HTTP:
        return HttpComputeBackend(
            options.server_url, options.model_name, timeout=options.timeout
        )

    msg = f"Unknown backend '{options.backend}', expected one of {BACKENDS}"
    raise BackendError(msg)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="nn-compute-client",
        description=(
            "Preprocess an image into an FP32 tensor and hand the inference "
            "request to a compute backend"
        ),
    )
    parser.add_argument(
        "--image", help="Source image (default: bundled sample)"
    )
    parser.add_argument("--backend", choices=BACKENDS, help="Compute backend")
    parser.add_argument("--library", help="Native compute library to load")
    parser.add_argument("--server-url", help="Inference server base URL")
    parser.add_argument("--model", help="Model name on the inference server")
    parser.add_argument("--request-id", help="Request identifier")
    parser.add_argument(
        "--timeout", type=float, help="HTTP timeout in seconds"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser.parse_args(argv)


def _apply_args(options: ComputeOptions, args: argparse.Namespace) -> None:
    overrides = {
        "image_path": args.image,
        "backend": args.backend,
        "library_path": args.library,
        "server_url": args.server_url,
        "model_name": args.model,
        "request_id": args.request_id,
        "timeout": args.timeout,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(options, name, value)


def main(argv: list[str] | None = None) -> int:
    """Run the pipeline once and return the process exit code."""
    load_dotenv()
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        options = ComputeOptions.from_env()
        _apply_args(options, args)
        options.validate()
    except ConfigurationError:
        logger.exception("Invalid configuration")
        return 1

    try:
        image_bytes = load_image_bytes(options.image_path)
    except OSError:
        logger.exception("Failed to read source image")
        return 1

    try:
        backend = create_backend(options)
    except BackendError:
        logger.exception("Failed to set up compute backend")
        return 1

    try:
        with ComputeClient(backend, options) as client:
            client.run_and_report(image_bytes)
    except DecodeError:
        logger.exception("Source image could not be decoded")
        return 1
    except EncodeError:
        logger.exception("Inference request could not be encoded")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
