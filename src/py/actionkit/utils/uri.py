from __future__ import annotations

from typing import Any
from urllib.parse import urlparse


class URI:
	"""A parsed URI, as used for redirect targets. Relative URIs (no scheme
	nor host) are supported and serialize back to their path."""

	__slots__ = (
		"path",
		"scheme",
		"user",
		"host",
		"port",
		"params",
		"query",
		"fragment",
	)

	@classmethod
	def Parse(cls, link: "URI|str") -> "URI":
		if isinstance(link, URI):
			return link
		res = urlparse(link)
		# NOTE: The host is kept as given, `hostname` would lowercase it
		# and strip the brackets of IPv6 addresses.
		user, _, hostport = res.netloc.rpartition("@")
		if hostport.startswith("["):
			host = hostport[1 : hostport.find("]")]
		else:
			host = hostport.partition(":")[0]
		return URI(
			scheme=res.scheme if res.scheme else None,
			user=user if user else None,
			host=host if host else None,
			port=res.port if res.netloc else None,
			path=res.path,
			params=res.params if res.params else None,
			query=res.query if res.query else None,
			fragment=res.fragment if res.fragment else None,
		)

	def __init__(
		self,
		*,
		path: str | None = None,
		scheme: str | None = None,
		user: str | None = None,
		host: str | None = None,
		port: int | None = None,
		params: str | None = None,
		query: str | None = None,
		fragment: str | None = None,
	):
		self.path = path
		self.scheme = scheme
		self.user = user
		self.host = host
		self.port = port
		self.params = params
		self.query = query
		self.fragment = fragment

	@property
	def isLocal(self) -> bool:
		return self.host is None

	def derive(
		self,
		path: str | None = None,
		scheme: str | None = None,
		user: str | None = None,
		host: str | None = None,
		port: int | None = None,
		params: str | None = None,
		query: str | None = None,
		fragment: str | None = None,
	) -> "URI":
		return URI(
			path=self.path if path is None else path,
			scheme=self.scheme if scheme is None else scheme,
			user=self.user if user is None else user,
			host=self.host if host is None else host,
			port=self.port if port is None else port,
			params=self.params if params is None else params,
			query=self.query if query is None else query,
			fragment=self.fragment if fragment is None else fragment,
		)

	def __eq__(self, other: Any) -> bool:
		if isinstance(other, str):
			return str(self) == other
		elif isinstance(other, URI):
			return str(self) == str(other)
		else:
			return False

	def __hash__(self) -> int:
		return hash(str(self))

	def __repr__(self) -> str:
		attr = dict(
			scheme=self.scheme,
			user=self.user,
			host=self.host,
			port=self.port,
			path=self.path,
			params=self.params,
			query=self.query,
			fragment=self.fragment,
		)
		return f"URI({' '.join(f'{k}={v}' for k, v in attr.items() if v)})"

	def __str__(self) -> str:
		res: list[str] = []
		if self.scheme:
			res.append(self.scheme)
			res.append(":")
		if self.host:
			res.append("//")
			if self.user:
				res.append(self.user)
				res.append("@")
			# IPv6 addresses are bracketed
			res.append(f"[{self.host}]" if ":" in self.host else self.host)
			if self.port:
				res.append(f":{self.port}")
		if self.path:
			# An authority must be followed by an absolute path
			if self.host and not self.path.startswith("/"):
				res.append("/")
			res.append(self.path)
		if self.params:
			res.append(";")
			res.append(self.params)
		if self.query:
			res.append("?")
			res.append(self.query)
		if self.fragment:
			res.append("#")
			res.append(self.fragment)
		return "".join(res)


def uri(value: str | URI) -> URI:
	return value if isinstance(value, URI) else URI.Parse(value)


# EOF
