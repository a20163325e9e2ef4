"""Single point of truth for the version of the nn_compute_client package."""

import importlib.metadata

__version__ = importlib.metadata.version("nn_compute_client")
