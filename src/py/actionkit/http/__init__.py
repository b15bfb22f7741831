from .cookie import Cookie  # NOQA: F401
from .headers import Headers, headername  # NOQA: F401
from .model import HTTPResponse  # NOQA: F401
from .stream import HTTPBodyStream  # NOQA: F401

# EOF
