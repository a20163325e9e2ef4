"""Constants shared across the compute client pipeline."""

# Model input geometry
EXPECTED_WIDTH = 224
EXPECTED_HEIGHT = 224
EXPECTED_CHANNELS = 3
BATCH_SIZE = 1

TENSOR_SHAPE = (BATCH_SIZE, EXPECTED_CHANNELS, EXPECTED_HEIGHT, EXPECTED_WIDTH)
TENSOR_DATATYPE = "FP32"

# ImageNet normalization, indexed by channel (R, G, B)
IMAGENET_MEAN = (0.485, 0.456, 0.406)
IMAGENET_STD = (0.229, 0.224, 0.225)

# Request defaults
DEFAULT_REQUEST_ID = "smoke-test-1"
DEFAULT_INPUT_NAME = "INPUT0"
DEFAULT_OUTPUT_NAME = "OUTPUT0"

# Native entry points exported by the compute host
COMPUTE_SYMBOL = "wasi_nn_compute"
STATS_SYMBOL = "wasi_nn_get_stats"

MAX_REQUEST_SIZE = 2**32 - 1

# Status returned by backends when the call never reached the compute host
TRANSPORT_ERROR_STATUS = -1

COMPLETION_MESSAGE = "Hello, world!"
