from typing import Any, NamedTuple, TypeAlias

from .. import config
from .headers import SET_COOKIE, headername
from .status import statusMessage
from .stream import HTTPBodyStream

# -----------------------------------------------------------------------------
#
# DATA MODEL
#
# -----------------------------------------------------------------------------

THeaderFields: TypeAlias = tuple[tuple[str, tuple[str, ...]], ...]


class HTTPResponseLine(NamedTuple):
	"""Represents a response status line"""

	protocol: str
	status: int
	message: str

	def __str__(self) -> str:
		return f"{self.protocol} {self.status} {self.message}"


# -----------------------------------------------------------------------------
#
# RESPONSE
#
# -----------------------------------------------------------------------------


class HTTPResponse(NamedTuple):
	"""The transport-level HTTP response, as written on the wire. Responses
	are immutable: the `with*` methods return updated copies and leave the
	original untouched."""

	protocol: str
	status: int
	message: str
	headers: THeaderFields
	body: HTTPBodyStream

	@staticmethod
	def Create(
		status: int = 200,
		headers: dict[str, str | list[str]] | None = None,
		body: Any = None,
		message: str | None = None,
		protocol: str | None = None,
	) -> "HTTPResponse":
		"""Factory method to create HTTP response objects."""
		res = HTTPResponse(
			protocol=protocol or config.DEFAULT_PROTOCOL,
			status=status,
			message=message or statusMessage(status),
			headers=(),
			body=HTTPBodyStream.For(body),
		)
		for name, value in (headers or {}).items():
			res = res.withHeader(name, value)
		return res

	@property
	def line(self) -> HTTPResponseLine:
		return HTTPResponseLine(self.protocol, self.status, self.message)

	def withStatus(self, status: int, message: str | None = None) -> "HTTPResponse":
		return self._replace(status=status, message=message or statusMessage(status))

	def withBody(self, body: Any) -> "HTTPResponse":
		return self._replace(body=HTTPBodyStream.For(body))

	def withHeader(self, name: str, value: str | list[str]) -> "HTTPResponse":
		"""Returns a copy with the given header replacing any existing one,
		keeping its position."""
		key: str = headername(name)
		values: tuple[str, ...] = tuple(value) if isinstance(value, list) else (value,)
		if self.hasHeader(key):
			return self._replace(
				headers=tuple((k, values if k == key else v) for k, v in self.headers)
			)
		else:
			return self._replace(headers=self.headers + ((key, values),))

	def withAddedHeader(self, name: str, value: str | list[str]) -> "HTTPResponse":
		"""Returns a copy with the given value(s) appended to the header."""
		key: str = headername(name)
		values: tuple[str, ...] = tuple(value) if isinstance(value, list) else (value,)
		if self.hasHeader(key):
			return self._replace(
				headers=tuple(
					(k, v + values if k == key else v) for k, v in self.headers
				)
			)
		else:
			return self._replace(headers=self.headers + ((key, values),))

	def withoutHeader(self, name: str) -> "HTTPResponse":
		key: str = headername(name)
		return self._replace(headers=tuple((k, v) for k, v in self.headers if k != key))

	def hasHeader(self, name: str) -> bool:
		key: str = headername(name)
		return any(k == key for k, _ in self.headers)

	def getHeader(self, name: str) -> list[str]:
		key: str = headername(name)
		for k, v in self.headers:
			if k == key:
				return list(v)
		return []

	def getHeaderLine(self, name: str) -> str:
		return ", ".join(self.getHeader(name))

	def getHeaders(self) -> dict[str, list[str]]:
		return {k: list(v) for k, v in self.headers}

	def head(self) -> bytes:
		"""Serializes the head as a payload."""
		lines: list[str] = [str(self.line)]
		for k, v in self.headers:
			# NOTE: Set-Cookie values can't be folded in a single line
			if k == SET_COOKIE:
				lines += [f"{k}: {_}" for _ in v]
			else:
				lines.append(f"{k}: {', '.join(v)}")
		lines.append("")
		lines.append("")
		return "\r\n".join(lines).encode("latin-1")

	def asBytes(self) -> bytes:
		"""Serializes the whole response, reading the body from its start."""
		payload: bytes = self.body.rewind().getContents()
		self.body.rewind()
		return self.head() + payload

	def __str__(self) -> str:
		return f"Response({self.protocol} {self.status} {self.message} {self.getHeaders()} {self.body})"


# EOF
