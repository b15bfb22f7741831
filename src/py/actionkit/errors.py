class ActionKitError(Exception):
	"""Base class for the errors raised by the HTTP collaborators."""


class InvalidCookie(ActionKitError, ValueError):
	"""Raised when a cookie is created with an invalid name or attribute."""

	def __init__(self, message: str, name: str | None = None):
		super().__init__(message)
		self.name: str | None = name


class InvalidHeader(ActionKitError, ValueError):
	"""Raised when a header name or value can't be put on the wire."""

	def __init__(self, message: str, name: str | None = None):
		super().__init__(message)
		self.name: str | None = name


# EOF
