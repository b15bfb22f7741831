from datetime import datetime

from mypy_extensions import trait

from .headers import Headers

# -----------------------------------------------------------------------------
#
# CACHE HEADERS
#
# -----------------------------------------------------------------------------


def asAge(value: str | bool | None) -> int | None:
	if value is None or value is True or value is False:
		return None
	try:
		return int(value)
	except ValueError:
		return None


@trait
class CacheHeaders:
	"""Shortcuts to the caching related headers (`Cache-Control`, `Date`,
	`Last-Modified`, `Expires`) of anything that holds `headers`.

	Dates can be given either as datetimes or as RFC 2822 strings, and are
	read back as GMT datetimes. A stored value that isn't a valid date
	reads back as `None`."""

	headers: Headers

	def setPublic(self) -> None:
		"""Flags the response as cacheable by any cache, even shared ones."""
		self.headers.setCacheControlDirective("public")

	def setPrivate(self) -> None:
		"""Flags the response as intended for a single user, which must not
		be stored by shared caches."""
		self.headers.setCacheControlDirective("private")

	def _getDate(self, name: str) -> datetime | None:
		value = self.headers.get(name)
		return value if isinstance(value, datetime) else None

	def setDate(self, date: str | datetime) -> None:
		self.headers.set("Date", date)

	def getDate(self) -> datetime | None:
		return self._getDate("Date")

	def setLastModified(self, date: str | datetime) -> None:
		self.headers.set("Last-Modified", date)

	def getLastModified(self) -> datetime | None:
		return self._getDate("Last-Modified")

	def setExpires(self, date: str | datetime) -> None:
		"""Sets the `Expires` header. An already expired response uses the
		same date as `Date`, and expiration should not be more than one
		year in the future (RFC 2616 14.21)."""
		self.headers.set("Expires", date)

	def getExpires(self) -> datetime | None:
		return self._getDate("Expires")

	def setMaxAge(self, age: int) -> None:
		"""Sets the `max-age` directive, in seconds."""
		self.headers.setCacheControlDirective("max-age", str(age))

	def getMaxAge(self) -> int | None:
		return asAge(self.headers.getCacheControlDirective("max-age"))

	def setSharedMaxAge(self, age: int) -> None:
		"""Sets the `s-maxage` directive, the max age for shared caches
		such as proxies."""
		self.headers.setCacheControlDirective("s-maxage", str(age))

	def getSharedMaxAge(self) -> int | None:
		return asAge(self.headers.getCacheControlDirective("s-maxage"))


# EOF
