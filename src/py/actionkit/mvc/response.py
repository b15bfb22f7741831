from datetime import datetime
from typing import Any

from .. import config
from ..errors import InvalidHeader
from ..http.cache import CacheHeaders
from ..http.cookie import Cookie
from ..http.headers import SET_COOKIE, Headers, THeaderValue, headername
from ..http.model import HTTPResponse
from ..http.stream import HTTPBodyStream
from ..utils.logging import LogLevel, debug, logged
from ..utils.uri import URI, uri

__doc__ = """
The MVC action response, which is what controller actions interact with to
shape the HTTP response. It accumulates status, headers, cookies, content
and redirect target, and is then either merged into the response of a
parent action, or turned into the transport `HTTPResponse` with `build()`.
"""

CONTENT_TYPE: str = "Content-Type"

# -----------------------------------------------------------------------------
#
# ACTION RESPONSE
#
# -----------------------------------------------------------------------------


class ActionResponse(CacheHeaders):
	"""The minimal MVC response, one per action invocation. More specific
	requirements are better served by replacing the transport response
	altogether with `replaceTransportResponse()`."""

	__slots__ = [
		"content",
		"redirectUri",
		"statusCode",
		"cookies",
		"headers",
		"httpResponse",
	]

	def __init__(self) -> None:
		self.content: HTTPBodyStream = HTTPBodyStream.For()
		self.redirectUri: URI | None = None
		# NOTE: `None` means the status was never set explicitly, the
		# getter then returns the default status.
		self.statusCode: int | None = None
		self.cookies: dict[str, Cookie] = {}
		self.headers: Headers = Headers()
		self.httpResponse: HTTPResponse | None = None

	# =========================================================================
	# CONTENT
	# =========================================================================

	def setContent(self, content: Any) -> None:
		"""Sets the content, given as a string, bytes, file or iterator of
		chunks, or as a body stream."""
		self.content = HTTPBodyStream.For(content)

	def getContent(self) -> str:
		"""Returns the whole content, leaving it readable again afterwards."""
		self.content.rewind()
		content: str = self.content.getText()
		self.content.rewind()
		return content

	def getContentStream(self) -> HTTPBodyStream:
		return self.content

	def hasContent(self) -> bool:
		"""Tells if there is content, streams of unknown size counting as
		content."""
		size: int | None = self.content.getSize()
		return size is None or size > 0

	def setContentType(self, contentType: str) -> None:
		self.headers.set(CONTENT_TYPE, contentType)

	def hasContentType(self) -> bool:
		return bool(self.getContentType())

	def getContentType(self) -> str:
		content_type = self.headers.get(CONTENT_TYPE)
		return content_type if isinstance(content_type, str) else ""

	# =========================================================================
	# STATUS & REDIRECT
	# =========================================================================

	def setRedirect(
		self, target: URI | str, statusCode: int = config.DEFAULT_REDIRECT_STATUS
	) -> None:
		"""Sets the redirect target along with its status, `303 See Other` by
		default."""
		self.redirectUri = uri(target)
		self.statusCode = statusCode

	setRedirectUri = setRedirect

	def getRedirectUri(self) -> URI | None:
		return self.redirectUri

	def setStatusCode(self, statusCode: int) -> None:
		"""Sets the HTTP status code. Codes that are not HTTP status codes
		may lead to unpredictable results."""
		self.statusCode = statusCode

	def getStatusCode(self) -> int:
		return config.DEFAULT_STATUS if self.statusCode is None else self.statusCode

	# =========================================================================
	# COOKIES
	# =========================================================================

	def setCookie(self, cookie: Cookie) -> None:
		"""Sets a cookie, which results in a `Set-Cookie` header."""
		self.cookies[cookie.name] = cookie.copy()
		self.headers.setCookie(cookie)

	def deleteCookie(self, name: str) -> None:
		"""Replaces the cookie with an expired one, which results in a
		`Set-Cookie` header telling the client to delete it."""
		cookie: Cookie = Cookie(name).expired()
		self.cookies[cookie.name] = cookie
		self.headers.deleteCookie(name)

	def getCookie(self, name: str) -> Cookie | None:
		return self.cookies.get(name)

	def getCookies(self) -> dict[str, Cookie]:
		return dict(self.cookies)

	# =========================================================================
	# HEADERS
	# =========================================================================

	def setHeader(self, name: str, value: THeaderValue) -> None:
		"""Sets the header, overwriting any previous value. `Set-Cookie`
		values are set as cookies."""
		if headername(name) == SET_COOKIE:
			self._setCookieHeader(value)
		else:
			self.headers.set(name, value)

	def addHeader(self, name: str, value: THeaderValue) -> None:
		"""Adds the value(s) to the header, keeping previous values."""
		if headername(name) == SET_COOKIE:
			self._setCookieHeader(value)
		else:
			self.headers.set(name, value, False)

	def _setCookieHeader(self, value: THeaderValue) -> None:
		for line in value if isinstance(value, (list, tuple)) else (value,):
			if not isinstance(line, str):
				raise InvalidHeader(
					f"Unsupported value for header {SET_COOKIE}: {line!r}", SET_COOKIE
				)
			elif cookie := Cookie.Parse(line):
				self.setCookie(cookie)

	def getHeader(
		self, name: str
	) -> str | list[str] | datetime | list[datetime | str] | None:
		"""Returns the value of the header if there's only one, the list of
		values if there are many, and `None` if the header is not set. Dates
		are returned as GMT datetimes."""
		return self.headers.get(name)

	def getHeaders(self) -> Headers:
		return self.headers

	# =========================================================================
	# TRANSPORT
	# =========================================================================

	def replaceTransportResponse(self, response: HTTPResponse) -> None:
		"""Uses the given response as the base of the built response, for
		actions that build their own transport response."""
		self.httpResponse = response

	def getTransportResponse(self) -> HTTPResponse | None:
		return self.httpResponse

	def mergeInto(self, parent: "ActionResponse") -> "ActionResponse":
		"""Merges this response into the response of the parent action, and
		returns the parent."""
		if self.hasContent():
			parent.setContent(self.content)
		if self.hasContentType():
			parent.setContentType(self.getContentType())
		if self.redirectUri is not None:
			parent.setRedirectUri(self.redirectUri)
		if self.httpResponse is not None:
			parent.replaceTransportResponse(self.httpResponse)
		# NOTE: This has to come after the redirect, which sets a default
		# status of its own.
		if self.statusCode is not None:
			parent.setStatusCode(self.statusCode)
		for cookie in self.cookies.values():
			parent.setCookie(cookie)
		for name, values in self.headers:
			parent.setHeader(name, values)
		if config.LOG_RESPONSES and logged(LogLevel.Debug):
			debug(
				"Merged action response",
				Status=parent.statusCode,
				Headers=len(parent.headers),
				Cookies=len(parent.cookies),
			)
		return parent

	mergeIntoParentResponse = mergeInto

	def build(self) -> HTTPResponse:
		"""Applies the status, content, `Content-Type`, `Location`, headers
		and cookies to the replaced transport response, or to a new one."""
		res: HTTPResponse = self.httpResponse or HTTPResponse.Create()
		if self.statusCode is not None:
			res = res.withStatus(self.statusCode)
		if self.hasContent():
			res = res.withBody(self.content)
		content_type: str = self.getContentType()
		if content_type:
			res = res.withHeader(CONTENT_TYPE, content_type)
		if self.redirectUri is not None:
			res = res.withHeader("Location", str(self.redirectUri))
		for name, values in self.headers:
			# Already set above
			if name == CONTENT_TYPE and content_type:
				continue
			res = res.withAddedHeader(name, ", ".join(values))
		for cookie in self.cookies.values():
			res = res.withAddedHeader("Set-Cookie", str(cookie))
		if config.LOG_RESPONSES and logged(LogLevel.Debug):
			debug(
				"Built action response",
				Status=res.status,
				Headers=len(res.headers),
				Cookies=len(self.cookies),
			)
		return res

	buildHttpResponse = build

	def __str__(self) -> str:
		return f"ActionResponse({self.getStatusCode()} {self.headers} {self.content})"


# EOF
