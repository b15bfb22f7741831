import pytest

from actionkit import Cookie, InvalidCookie
from actionkit.http.cookie import EXPIRED_TIMESTAMP


def test_defaults():
	cookie = Cookie("session")
	assert cookie.getName() == "session"
	assert cookie.getValue() == ""
	assert cookie.path == "/"
	assert cookie.isHttpOnly()
	assert not cookie.isSecure()
	assert not cookie.isExpired()
	assert str(cookie) == "session=; Path=/; HttpOnly; SameSite=Lax"


def test_serialization():
	cookie = Cookie(
		"prefs",
		"a b;c",
		expires=1700000000,
		maxAge=3600,
		domain=".Example.com",
		path="/app",
		secure=True,
		httpOnly=False,
		sameSite="strict",
	)
	assert cookie.domain == "example.com"
	assert cookie.sameSite == "Strict"
	assert str(cookie) == (
		"prefs=a%20b%3Bc; Expires=Tue, 14 Nov 2023 22:13:20 GMT; Max-Age=3600;"
		" Domain=example.com; Path=/app; Secure; SameSite=Strict"
	)


def test_expired_returns_a_new_cookie():
	cookie = Cookie("session", "abc", domain="example.com")
	expired = cookie.expired()
	assert expired is not cookie
	assert expired.isExpired()
	assert expired.expires == EXPIRED_TIMESTAMP
	assert expired.maxAge == 0
	assert expired.value == ""
	assert expired.domain == "example.com"
	assert cookie.value == "abc"
	assert not cookie.isExpired()


def test_is_expired():
	assert Cookie("a", expires=1000).isExpired(now=1001)
	assert not Cookie("a", expires=1000).isExpired(now=999)
	assert Cookie("a", maxAge=0).isExpired()


def test_copy_and_derive():
	cookie = Cookie("a", "1")
	assert cookie.copy() == cookie
	assert cookie.derive(value="2").value == "2"
	assert cookie.value == "1"


def test_parse():
	cookie = Cookie(
		"prefs", "a b", maxAge=60, domain="example.com", path="/app", secure=True
	)
	parsed = Cookie.Parse(str(cookie))
	assert parsed is not None
	assert parsed == cookie
	assert Cookie.Parse("invalid") is None
	assert Cookie.Parse("=value") is None


def test_invalid_cookies():
	with pytest.raises(InvalidCookie):
		Cookie("bad name")
	with pytest.raises(InvalidCookie):
		Cookie("")
	with pytest.raises(InvalidCookie):
		Cookie("a", sameSite="sometimes")
	with pytest.raises(ValueError):
		Cookie("a;b")


# EOF
