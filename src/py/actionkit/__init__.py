from .mvc.response import ActionResponse  # NOQA: F401
from .http.cookie import Cookie  # NOQA: F401
from .http.headers import Headers  # NOQA: F401
from .http.model import HTTPResponse  # NOQA: F401
from .http.stream import HTTPBodyStream  # NOQA: F401
from .utils.uri import URI  # NOQA: F401
from .errors import ActionKitError, InvalidCookie, InvalidHeader  # NOQA: F401


# EOF
