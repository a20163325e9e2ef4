"""Allow running the client with ``python -m nn_compute_client``."""

import sys

from nn_compute_client.cli import main

sys.exit(main())
