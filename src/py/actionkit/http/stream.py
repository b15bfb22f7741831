from io import BytesIO, IOBase
from typing import Any, BinaryIO, Iterable, Iterator, Union

from ..utils.io import asBytes, asText

# -----------------------------------------------------------------------------
#
# BODY STREAM
#
# -----------------------------------------------------------------------------

TBodyContent = Union[
	None, str, bytes, bytearray, BinaryIO, Iterable[str | bytes], "HTTPBodyStream"
]


def readChunks(io: IOBase, size: int = 64_000) -> Iterator[str | bytes]:
	"""Reads the given IO by chunks, stopping at the first empty one, which
	is `""` for text IOs and `b""` for binary ones."""
	while chunk := io.read(size):
		yield chunk


class HTTPBodyStream:
	"""A rewindable body stream. The stream is backed either by a seekable
	binary IO (size known) or by an iterator of chunks, in which case the
	consumed chunks are buffered so that the stream can be rewound, and the
	size is unknown until the iterator is exhausted."""

	__slots__ = ["_io", "_chunks", "_exhausted"]

	@staticmethod
	def For(content: Any = None) -> "HTTPBodyStream":
		"""Wraps the given content in a stream, returning streams as-is."""
		if isinstance(content, HTTPBodyStream):
			return content
		elif content is None or isinstance(content, (str, bytes, bytearray)):
			return HTTPBodyStream(BytesIO(asBytes(content)))
		elif isinstance(content, IOBase) and content.seekable():
			return HTTPBodyStream(content)
		elif isinstance(content, IOBase):
			return HTTPBodyStream(BytesIO(), readChunks(content))
		elif isinstance(content, Iterable):
			return HTTPBodyStream(BytesIO(), iter(content))
		else:
			raise ValueError(f"Unsupported content {type(content)}:{content}")

	def __init__(
		self, io: BinaryIO | IOBase, chunks: Iterator[str | bytes] | None = None
	):
		self._io: Any = io
		self._chunks: Iterator[str | bytes] | None = chunks
		self._exhausted: bool = chunks is None

	def _pull(self, size: int = -1) -> None:
		"""Buffers chunks from the iterator until at least `size` bytes are
		available after the current position, or all of them if `size` is
		negative."""
		if self._exhausted or self._chunks is None:
			return
		position: int = self._io.tell()
		self._io.seek(0, 2)
		available: int = self._io.tell() - position
		while size < 0 or available < size:
			chunk = next(self._chunks, None)
			if chunk is None:
				self._exhausted = True
				break
			data: bytes = asBytes(chunk)
			self._io.write(data)
			available += len(data)
		self._io.seek(position)

	def read(self, size: int = -1) -> bytes:
		self._pull(size)
		data = self._io.read(size)
		return data if isinstance(data, bytes) else asBytes(data)

	def getContents(self) -> bytes:
		"""Reads everything from the current position."""
		return self.read()

	def getText(self) -> str:
		return asText(self.getContents())

	def rewind(self) -> "HTTPBodyStream":
		self._io.seek(0)
		return self

	def tell(self) -> int:
		return int(self._io.tell())

	def eof(self) -> bool:
		self._pull(1)
		position: int = self._io.tell()
		self._io.seek(0, 2)
		end: int = self._io.tell()
		self._io.seek(position)
		return position >= end

	def getSize(self) -> int | None:
		"""Returns the size in bytes, or `None` when it is not known yet."""
		if not self._exhausted:
			return None
		position: int = self._io.tell()
		self._io.seek(0, 2)
		size: int = self._io.tell()
		self._io.seek(position)
		return size

	def close(self) -> None:
		self._io.close()

	def __iter__(self) -> Iterator[bytes]:
		while chunk := self.read(64_000):
			yield chunk

	def __str__(self) -> str:
		size = self.getSize()
		return f"HTTPBodyStream({'?' if size is None else size} bytes)"


# EOF
