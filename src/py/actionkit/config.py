from os import getenv

# Status returned by an action response that never had one set explicitly
DEFAULT_STATUS: int = 200

# See Other, so that a redirect after a POST is followed with a GET
DEFAULT_REDIRECT_STATUS: int = 303

DEFAULT_PROTOCOL: str = "HTTP/1.1"

# Logs every built or merged action response at debug level
LOG_RESPONSES: bool = getenv("ACTIONKIT_LOG_RESPONSES", "0") == "1"

# EOF
