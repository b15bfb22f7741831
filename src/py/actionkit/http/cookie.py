import re
import time
from dataclasses import dataclass, replace
from urllib.parse import quote, unquote

from ..errors import InvalidCookie
from .dates import httpdate, parseHTTPDate

# -----------------------------------------------------------------------------
#
# COOKIE
#
# -----------------------------------------------------------------------------

# SEE: https://www.rfc-editor.org/rfc/rfc6265#section-4.1.1, names are tokens
RE_COOKIE_NAME = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")

# 1976-05-27, used as the expiry of deleted cookies
EXPIRED_TIMESTAMP: int = 202046400

SAME_SITE: dict[str, str] = {"lax": "Lax", "strict": "Strict", "none": "None"}


@dataclass(slots=True, frozen=True)
class Cookie:
	"""An HTTP cookie, as sent in a `Set-Cookie` response header. Cookies
	are immutable: `expired()` and `derive()` return new instances."""

	name: str
	value: str = ""
	# UNIX timestamp, 0 for a session cookie
	expires: int = 0
	maxAge: int | None = None
	domain: str | None = None
	path: str = "/"
	secure: bool = False
	httpOnly: bool = True
	sameSite: str | None = "Lax"

	@staticmethod
	def Parse(header: str) -> "Cookie | None":
		"""Parses the value of a `Set-Cookie` header, returning `None` when
		it has no `name=value` pair."""
		parts = [_.strip() for _ in header.split(";")]
		if not parts or "=" not in parts[0]:
			return None
		name, value = parts[0].split("=", 1)
		name = name.strip()
		if not name:
			return None
		attrs: dict = {"value": unquote(value.strip().strip('"')), "sameSite": None}
		for part in parts[1:]:
			key, _, attr = part.partition("=")
			key = key.strip().lower()
			attr = attr.strip()
			if key == "expires":
				date = parseHTTPDate(attr)
				if date is not None:
					attrs["expires"] = int(date.timestamp())
			elif key == "max-age":
				try:
					attrs["maxAge"] = int(attr)
				except ValueError:
					continue
			elif key == "domain" and attr:
				attrs["domain"] = attr
			elif key == "path":
				attrs["path"] = attr or "/"
			elif key == "secure":
				attrs["secure"] = True
			elif key == "httponly":
				attrs["httpOnly"] = True
			elif key == "samesite":
				attrs["sameSite"] = attr
		attrs.setdefault("httpOnly", False)
		return Cookie(name, **attrs)

	def __post_init__(self) -> None:
		if not RE_COOKIE_NAME.match(self.name):
			raise InvalidCookie(f"Invalid cookie name: {self.name!r}", self.name)
		if self.domain is not None:
			domain: str = self.domain.lstrip(".").lower()
			if not domain:
				raise InvalidCookie(f"Invalid cookie domain: {self.domain!r}", self.name)
			object.__setattr__(self, "domain", domain)
		if self.sameSite is not None:
			same_site: str | None = SAME_SITE.get(self.sameSite.lower())
			if same_site is None:
				raise InvalidCookie(
					f"Invalid cookie SameSite value: {self.sameSite!r}", self.name
				)
			object.__setattr__(self, "sameSite", same_site)

	def getName(self) -> str:
		return self.name

	def getValue(self) -> str:
		return self.value

	def isSecure(self) -> bool:
		return self.secure

	def isHttpOnly(self) -> bool:
		return self.httpOnly

	def isExpired(self, now: float | None = None) -> bool:
		if self.maxAge is not None and self.maxAge <= 0:
			return True
		t: float = time.time() if now is None else now
		return self.expires != 0 and self.expires <= t

	def expired(self) -> "Cookie":
		"""Returns an expired version of this cookie, which tells the client
		to delete it."""
		return replace(self, value="", expires=EXPIRED_TIMESTAMP, maxAge=0)

	def derive(self, **changes) -> "Cookie":
		return replace(self, **changes)

	def copy(self) -> "Cookie":
		return replace(self)

	def __str__(self) -> str:
		res: list[str] = [f"{self.name}={quote(self.value, safe='')}"]
		if self.expires:
			res.append(f"Expires={httpdate(self.expires)}")
		if self.maxAge is not None:
			res.append(f"Max-Age={self.maxAge}")
		if self.domain:
			res.append(f"Domain={self.domain}")
		if self.path:
			res.append(f"Path={self.path}")
		if self.secure:
			res.append("Secure")
		if self.httpOnly:
			res.append("HttpOnly")
		if self.sameSite:
			res.append(f"SameSite={self.sameSite}")
		return "; ".join(res)


# EOF
