"""Constants used in business logic."""

# Together.ai completions endpoint used when nothing else is configured
DEFAULT_COMPLETIONS_URL = "https://api.together.xyz/v1/completions"

# Environment variables consumed at startup
ENV_API_KEY = "TOGETHER_API_KEY"
ENV_PORT = "PORT"
ENV_RUNTIME_MODE = "PLAYGROUND_ENV"
# path to configuration file, passed from the CLI to each uvicorn worker
ENV_CONFIG_PATH = "PLAYGROUND_CONFIG_PATH"

DEFAULT_PORT = 3000

# Runtime modes
MODE_DEVELOPMENT = "development"
MODE_PRODUCTION = "production"

# Generation parameter bounds
MAX_TOKENS_MIN = 1
MAX_TOKENS_MAX = 4096
TEMPERATURE_MIN = 0.0
TEMPERATURE_MAX = 2.0
TOP_P_MIN = 0.0
TOP_P_MAX = 1.0
TOP_K_MIN = 1
TOP_K_MAX = 100
REPETITION_PENALTY_MIN = 1.0
REPETITION_PENALTY_MAX = 2.0
FREQUENCY_PENALTY_MIN = -2.0
FREQUENCY_PENALTY_MAX = 2.0
DEFAULT_FREQUENCY_PENALTY = 0.0

# Model catalogue offered to the playground UI
DEFAULT_MODEL = "meta-llama/Llama-3.3-70B-Instruct-Turbo"
AVAILABLE_MODELS = (
    "meta-llama/Llama-3.3-70B-Instruct-Turbo",
    "meta-llama/Llama-3.1-70B-Instruct",
    "meta-llama/Llama-3.1-8B-Instruct",
    "mistralai/Mixtral-8x7B-Instruct-v0.1",
    "mistralai/Mistral-7B-Instruct-v0.2",
)

# History constants
DEFAULT_HISTORY_LIMIT = 50
HISTORY_TYPE_MEMORY = "memory"
HISTORY_TYPE_NOOP = "noop"

# Error messages
INVALID_REQUEST = "Invalid request parameters"
API_KEY_MISSING = (
    "API key not found. Please set TOGETHER_API_KEY in the environment "
    "or provide one in the request."
)
INTERNAL_ERROR = "An unexpected error occurred"
UPSTREAM_ERROR = "Error from Together.ai API"
MALFORMED_UPSTREAM_RESPONSE = "Malformed response from completion API"
HISTORY_NOT_SAVED = "Generation succeeded but history could not be saved"
HISTORY_CLEARED = "History cleared successfully"
