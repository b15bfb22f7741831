from .response import ActionResponse  # NOQA: F401

# EOF
