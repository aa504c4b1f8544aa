"""Constants used in business logic."""

# Service name used when configuration does not provide one
DEFAULT_SERVICE_NAME = "Justify service"

# Environment variable used to pass configuration path to Uvicorn workers
CONFIGURATION_PATH_ENV_VARIABLE = "JUSTIFY_SERVICE_CONFIG_PATH"
DEFAULT_CONFIGURATION_PATH = "justify-service.yaml"

# Justification
DEFAULT_LINE_WIDTH = 80

# Quota
DEFAULT_DAILY_WORD_LIMIT = 80000
DEFAULT_LOCK_SHARDS = 16

# Header carrying remaining words for the current quota window
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"

# Owner identity must look like an e-mail address
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

# Content type accepted by the justification endpoint
TEXT_PLAIN_CONTENT_TYPE = "text/plain"

# Authentication constants
BEARER_SCHEME = "bearer"
