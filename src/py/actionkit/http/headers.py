import re
from datetime import datetime
from typing import Iterator, TypeAlias

from ..errors import InvalidHeader
from ..utils.logging import warning
from .cookie import Cookie
from .dates import DATE_HEADERS, httpdate, parseHTTPDate

# -----------------------------------------------------------------------------
#
# HELPERS
#
# -----------------------------------------------------------------------------

# SEE: https://www.rfc-editor.org/rfc/rfc7230#section-3.2.6
RE_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
RE_CACHE_DIRECTIVE = re.compile(r'\s*([^=,\s]+)\s*(?:=\s*("[^"]*"|[^,]*))?\s*(?:,|$)')

TValue: TypeAlias = str | int | datetime
THeaderValue: TypeAlias = TValue | list[TValue] | tuple[TValue, ...]

CACHE_CONTROL: str = "Cache-Control"
SET_COOKIE: str = "Set-Cookie"


def headername(name: str, *, headers: dict[str, str] = {}) -> str:
	"""Normalizes the header name as `Kebab-Case`."""
	if name in headers:
		return headers[name]
	key: str = name.lower()
	if key in headers:
		return headers[key]
	else:
		normalized: str = "-".join(_.capitalize() for _ in key.split("-"))
		headers[key] = normalized
		return normalized


def headervalue(name: str, value: TValue) -> str:
	"""Converts the given value to its wire representation, dates being
	formatted as HTTP dates."""
	if isinstance(value, datetime):
		return httpdate(value)
	elif isinstance(value, bool):
		raise InvalidHeader(f"Unsupported value for header {name}: {value!r}", name)
	elif isinstance(value, int):
		return str(value)
	elif isinstance(value, str):
		if "\r" in value or "\n" in value:
			raise InvalidHeader(f"Header {name} value contains a line break", name)
		return value
	else:
		raise InvalidHeader(f"Unsupported value for header {name}: {value!r}", name)


# -----------------------------------------------------------------------------
#
# HEADERS
#
# -----------------------------------------------------------------------------


class Headers:
	"""An ordered, case-insensitive, multi-valued collection of HTTP headers.

	`Cache-Control` is kept as a set of directives, and cookies are kept
	apart from the header fields: they don't appear when iterating, and
	are turned into `Set-Cookie` lines when the response is built."""

	__slots__ = ["_fields", "_cacheDirectives", "_cookies"]

	@staticmethod
	def Create(fields: dict[str, THeaderValue] | None = None) -> "Headers":
		headers = Headers()
		for name, value in (fields or {}).items():
			headers.set(name, value)
		return headers

	def __init__(self) -> None:
		# NOTE: An empty Cache-Control entry keeps the position of the
		# header, its value is rendered from the directives.
		self._fields: dict[str, list[str]] = {}
		self._cacheDirectives: dict[str, str | None] = {}
		self._cookies: dict[str, Cookie] = {}

	# =========================================================================
	# FIELDS
	# =========================================================================

	def set(self, name: str, value: THeaderValue, overwrite: bool = True) -> "Headers":
		"""Sets the values of the given header, replacing any existing values
		unless `overwrite` is false, in which case they're appended."""
		if not RE_TOKEN.match(name):
			raise InvalidHeader(f"Invalid header name: {name!r}", name)
		key: str = headername(name)
		values: list[str] = [
			headervalue(key, _)
			for _ in (value if isinstance(value, (list, tuple)) else (value,))
		]
		if not values:
			# An empty list of values leaves no header at all
			if overwrite:
				self.remove(key)
		elif key == CACHE_CONTROL:
			if overwrite:
				self._cacheDirectives.clear()
			for _ in values:
				self._parseCacheControl(_)
			self._syncCacheControl()
		elif key == SET_COOKIE:
			for _ in values:
				if cookie := Cookie.Parse(_):
					self.setCookie(cookie)
		elif overwrite or key not in self._fields:
			self._fields[key] = values
		else:
			self._fields[key] += values
		return self

	def get(self, name: str) -> str | list[str] | datetime | list[datetime | str] | None:
		"""Returns `None` if there is no such header, the value if there is only
		one, or the list of values. Values of date headers are returned as
		datetimes when they parse as dates."""
		key: str = headername(name)
		values: list[str] | None = self.getRaw(key)
		if not values:
			return None
		elif key in DATE_HEADERS:
			dates: list[datetime | str] = []
			for _ in values:
				date = parseHTTPDate(_)
				if date is None:
					warning("Could not parse date header", Header=key, Value=_)
					dates.append(_)
				else:
					dates.append(date)
			return dates[0] if len(dates) == 1 else dates
		else:
			return values[0] if len(values) == 1 else list(values)

	def getRaw(self, name: str) -> list[str] | None:
		"""Returns the wire values of the given header, or `None`."""
		key: str = headername(name)
		if key == CACHE_CONTROL:
			return [self._renderCacheControl()] if self._cacheDirectives else None
		else:
			return self._fields.get(key)

	def getAll(self) -> dict[str, list[str]]:
		return {k: v for k, v in self}

	def has(self, name: str) -> bool:
		return bool(self.getRaw(name))

	def remove(self, name: str) -> "Headers":
		key: str = headername(name)
		if key == CACHE_CONTROL:
			self._cacheDirectives.clear()
		self._fields.pop(key, None)
		return self

	def __contains__(self, name: str) -> bool:
		return self.has(name)

	def __len__(self) -> int:
		return sum(1 for _ in self)

	def __iter__(self) -> Iterator[tuple[str, list[str]]]:
		for k, v in self._fields.items():
			if k == CACHE_CONTROL:
				if self._cacheDirectives:
					yield k, [self._renderCacheControl()]
			else:
				yield k, list(v)

	# =========================================================================
	# CACHE CONTROL
	# =========================================================================

	def setCacheControlDirective(self, name: str, value: str | None = None) -> "Headers":
		"""Sets the given `Cache-Control` directive. `public` and `private`
		exclude each other."""
		directive: str = name.strip().lower()
		if directive == "public":
			self._cacheDirectives.pop("private", None)
		elif directive == "private":
			self._cacheDirectives.pop("public", None)
		self._cacheDirectives[directive] = value
		self._syncCacheControl()
		return self

	def getCacheControlDirective(self, name: str) -> str | bool | None:
		"""Returns the value of the directive, `True` for a directive without
		value, or `None` when it is not set."""
		directive: str = name.strip().lower()
		if directive not in self._cacheDirectives:
			return None
		value: str | None = self._cacheDirectives[directive]
		return True if value is None else value

	def removeCacheControlDirective(self, name: str) -> "Headers":
		self._cacheDirectives.pop(name.strip().lower(), None)
		self._syncCacheControl()
		return self

	def _parseCacheControl(self, value: str) -> None:
		for match in RE_CACHE_DIRECTIVE.finditer(value):
			name, arg = match.group(1), match.group(2)
			if name:
				self.setCacheControlDirective(
					name, None if arg is None else arg.strip().strip('"')
				)

	def _renderCacheControl(self) -> str:
		return ", ".join(
			k
			if v is None
			else f'{k}="{v}"' if ("," in v or " " in v) else f"{k}={v}"
			for k, v in self._cacheDirectives.items()
		)

	def _syncCacheControl(self) -> None:
		if self._cacheDirectives:
			self._fields.setdefault(CACHE_CONTROL, [])
		else:
			self._fields.pop(CACHE_CONTROL, None)

	# =========================================================================
	# COOKIES
	# =========================================================================

	def setCookie(self, cookie: Cookie) -> "Headers":
		self._cookies[cookie.name] = cookie
		return self

	def getCookie(self, name: str) -> Cookie | None:
		return self._cookies.get(name)

	def getCookies(self) -> dict[str, Cookie]:
		return dict(self._cookies)

	def hasCookie(self, name: str) -> bool:
		return name in self._cookies

	def removeCookie(self, name: str) -> "Headers":
		self._cookies.pop(name, None)
		return self

	def deleteCookie(self, name: str) -> "Headers":
		"""Replaces the cookie with an expired one, so that the client
		deletes it."""
		cookie: Cookie | None = self._cookies.get(name)
		self._cookies[name] = (cookie or Cookie(name)).expired()
		return self

	def __str__(self) -> str:
		return f"Headers({self.getAll()})"


# EOF
