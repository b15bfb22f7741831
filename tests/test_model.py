import os
from io import BytesIO

from actionkit import HTTPBodyStream, HTTPResponse, URI
from actionkit.utils.uri import uri


def test_stream_from_bytes():
	stream = HTTPBodyStream.For("héllo")
	assert stream.getSize() == len("héllo".encode("utf8"))
	assert stream.read(2) == b"h\xc3"
	assert stream.getText() == "�llo"
	assert stream.eof()
	assert stream.rewind().getContents() == "héllo".encode("utf8")
	assert HTTPBodyStream.For(stream) is stream


def test_stream_from_iterator():
	stream = HTTPBodyStream.For(iter([b"ab", "cd", b"ef"]))
	assert stream.getSize() is None
	assert stream.read(3) == b"abc"
	assert stream.tell() == 3
	assert stream.getSize() is None
	assert stream.getContents() == b"def"
	assert stream.getSize() == 6
	assert stream.rewind().getContents() == b"abcdef"
	assert b"".join(stream.rewind()) == b"abcdef"


def test_stream_from_file():
	stream = HTTPBodyStream.For(BytesIO(b"file"))
	assert stream.getSize() == 4
	assert not stream.eof()
	assert stream.getContents() == b"file"
	assert stream.eof()


def test_response_is_immutable():
	res = HTTPResponse.Create()
	assert res.status == 200
	assert res.protocol == "HTTP/1.1"
	updated = res.withStatus(404).withHeader("x-tag", "a")
	assert res.status == 200
	assert res.headers == ()
	assert updated.status == 404
	assert updated.message == "Not Found"
	assert updated.getHeader("X-Tag") == ["a"]


def test_response_headers():
	res = HTTPResponse.Create(headers={"X-Tag": "a", "Vary": ["Accept", "Cookie"]})
	assert res.hasHeader("vary")
	assert res.getHeaderLine("Vary") == "Accept, Cookie"
	res = res.withAddedHeader("X-Tag", "b")
	assert res.getHeader("X-Tag") == ["a", "b"]
	res = res.withHeader("X-Tag", "c")
	assert res.getHeader("X-Tag") == ["c"]
	assert [k for k, _ in res.headers] == ["X-Tag", "Vary"]
	res = res.withoutHeader("x-tag")
	assert not res.hasHeader("X-Tag")
	assert res.getHeader("X-Tag") == []


def test_response_serialization():
	res = (
		HTTPResponse.Create(status=201, body="Created")
		.withHeader("Content-Type", "text/plain")
		.withAddedHeader("Set-Cookie", "a=1")
		.withAddedHeader("Set-Cookie", "b=2")
	)
	assert res.head() == (
		b"HTTP/1.1 201 Created\r\n"
		b"Content-Type: text/plain\r\n"
		b"Set-Cookie: a=1\r\n"
		b"Set-Cookie: b=2\r\n"
		b"\r\n"
	)
	assert res.asBytes().endswith(b"\r\n\r\nCreated")
	assert res.asBytes().endswith(b"\r\n\r\nCreated")


def test_unknown_status():
	assert HTTPResponse.Create(status=299).message == "Unknown status"


def test_uri():
	link = URI.Parse("https://example.com:8443/path;p?q=1#top")
	assert link.scheme == "https"
	assert link.host == "example.com"
	assert link.port == 8443
	assert link.path == "/path"
	assert link.params == "p"
	assert link.query == "q=1"
	assert link.fragment == "top"
	assert str(link) == "https://example.com:8443/path;p?q=1#top"
	assert link == "https://example.com:8443/path;p?q=1#top"
	assert uri(link) is link
	assert str(uri("/relative?x=1")) == "/relative?x=1"
	assert uri("/relative").isLocal
	assert str(link.derive(path="/other", query="")) == "https://example.com:8443/other;p#top"


def test_stream_from_pipe():
	for mode in ("rb", "r"):
		r, w = os.pipe()
		os.write(w, b"hi")
		os.close(w)
		with open(r, mode) as f:
			stream = HTTPBodyStream.For(f)
			assert stream.getSize() is None
			assert stream.getContents() == b"hi"
			assert stream.getSize() == 2
			assert stream.rewind().getText() == "hi"


def test_uri_authority_round_trip():
	for link in (
		"http://[::1]:8080/x",
		"http://[2001:db8::1]/",
		"https://user:pw@example.com/x",
		"https://user@Example.COM:444/x?q=1",
	):
		assert str(URI.Parse(link)) == link
	parsed = URI.Parse("https://user:pw@[::1]:8443/x")
	assert parsed.user == "user:pw"
	assert parsed.host == "::1"
	assert parsed.port == 8443


# EOF
