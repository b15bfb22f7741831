from datetime import datetime, timedelta, timezone

import pytest

from actionkit import Cookie, Headers, InvalidHeader
from actionkit.http.headers import headername


def test_headername():
	assert headername("content-type") == "Content-Type"
	assert headername("CONTENT-TYPE") == "Content-Type"
	assert headername("x-tag") == "X-Tag"


def test_case_insensitive_and_ordered():
	headers = Headers.Create({"x-b": "1", "X-A": "2"})
	headers.set("X-C", "3")
	assert headers.get("X-B") == "1"
	assert headers.get("x-a") == "2"
	assert "x-c" in headers
	assert [k for k, _ in headers] == ["X-B", "X-A", "X-C"]
	assert len(headers) == 3


def test_multiple_values():
	headers = Headers()
	headers.set("Vary", "Accept")
	headers.set("Vary", "Cookie", False)
	assert headers.get("Vary") == ["Accept", "Cookie"]
	assert headers.getAll() == {"Vary": ["Accept", "Cookie"]}
	headers.set("Vary", "Origin")
	assert headers.get("Vary") == "Origin"
	headers.remove("vary")
	assert headers.get("Vary") is None
	assert not headers.has("Vary")


def test_int_values():
	headers = Headers()
	headers.set("Content-Length", 42)
	assert headers.get("Content-Length") == "42"


def test_dates_are_converted_to_gmt():
	headers = Headers()
	date = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone(timedelta(hours=2)))
	headers.set("Last-Modified", date)
	assert headers.getRaw("Last-Modified") == ["Mon, 15 Jan 2024 08:00:00 GMT"]
	value = headers.get("Last-Modified")
	assert isinstance(value, datetime)
	assert value == date
	assert value.utcoffset() == timedelta(0)


def test_unparsable_date_is_returned_raw():
	headers = Headers()
	headers.set("Date", "not a date")
	assert headers.get("Date") == "not a date"


def test_cache_control_directives():
	headers = Headers()
	assert headers.getCacheControlDirective("max-age") is None
	headers.setCacheControlDirective("no-cache")
	headers.setCacheControlDirective("max-age", "60")
	assert headers.getCacheControlDirective("no-cache") is True
	assert headers.getCacheControlDirective("max-age") == "60"
	assert headers.get("Cache-Control") == "no-cache, max-age=60"
	headers.removeCacheControlDirective("no-cache")
	assert headers.get("Cache-Control") == "max-age=60"
	headers.removeCacheControlDirective("max-age")
	assert headers.get("Cache-Control") is None
	assert list(headers) == []


def test_cache_control_raw_header_is_parsed():
	headers = Headers()
	headers.set("X-Before", "1")
	headers.set("cache-control", 'public, max-age=3600, no-cache="Set-Cookie, Vary"')
	headers.set("X-After", "2")
	assert headers.getCacheControlDirective("public") is True
	assert headers.getCacheControlDirective("max-age") == "3600"
	assert headers.getCacheControlDirective("no-cache") == "Set-Cookie, Vary"
	assert [k for k, _ in headers] == ["X-Before", "Cache-Control", "X-After"]
	headers.set("Cache-Control", "private")
	assert headers.get("Cache-Control") == "private"
	headers.set("Cache-Control", "max-age=5", False)
	assert headers.get("Cache-Control") == "private, max-age=5"


def test_public_and_private_exclude_each_other():
	headers = Headers()
	headers.setCacheControlDirective("public")
	headers.setCacheControlDirective("private")
	assert headers.getCacheControlDirective("public") is None
	assert headers.get("Cache-Control") == "private"


def test_cookies_are_kept_apart():
	headers = Headers()
	headers.setCookie(Cookie("theme", "dark"))
	assert headers.hasCookie("theme")
	assert headers.getCookie("theme").value == "dark"
	assert list(headers) == []
	headers.deleteCookie("theme")
	assert headers.getCookie("theme").isExpired()
	headers.removeCookie("theme")
	assert headers.getCookies() == {}


def test_set_cookie_header_is_parsed():
	headers = Headers()
	headers.set("Set-Cookie", "lang=fr; Path=/docs; Secure")
	cookie = headers.getCookie("lang")
	assert cookie is not None
	assert cookie.value == "fr"
	assert cookie.path == "/docs"
	assert cookie.secure
	assert headers.get("Set-Cookie") is None


def test_invalid_headers():
	headers = Headers()
	with pytest.raises(InvalidHeader):
		headers.set("Bad Name", "value")
	with pytest.raises(InvalidHeader):
		headers.set("X-Injected", "value\r\nSet-Cookie: a=b")
	with pytest.raises(InvalidHeader):
		headers.set("X-Object", object())


def test_empty_values_remove_the_header():
	headers = Headers()
	headers.set("X-Tag", "a")
	headers.set("X-Tag", [], False)
	assert headers.get("X-Tag") == "a"
	headers.set("X-Tag", [])
	assert "X-Tag" not in headers
	assert list(headers) == []
	headers.setCacheControlDirective("public")
	headers.set("Cache-Control", [])
	assert headers.get("Cache-Control") is None
	assert list(headers) == []


# EOF
