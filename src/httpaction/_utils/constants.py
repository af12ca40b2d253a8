# Methods
METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PUT = "PUT"
METHOD_PATCH = "PATCH"
METHOD_DELETE = "DELETE"
METHOD_HEAD = "HEAD"
METHOD_OPTIONS = "OPTIONS"

SUPPORTED_METHODS = (
    METHOD_GET,
    METHOD_POST,
    METHOD_PUT,
    METHOD_PATCH,
    METHOD_DELETE,
    METHOD_HEAD,
    METHOD_OPTIONS,
)

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_URLENCODED = "application/x-www-form-urlencoded"

# Outputs
OUTPUT_RESPONSE = "response"
OUTPUT_HEADERS = "headers"
OUTPUT_STATUS = "status"
OUTPUT_REQUEST_ERROR = "requestError"

# Environment
ENV_GITHUB_ACTIONS = "GITHUB_ACTIONS"
ENV_GITHUB_OUTPUT = "GITHUB_OUTPUT"
ENV_INPUT_PREFIX = "INPUT_"
DOTENV_FILE = ".env"

# Defaults
DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_RETRY_DELAY_SECONDS = 3.0
