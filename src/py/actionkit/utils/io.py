DEFAULT_ENCODING: str = "utf8"


def asBytes(value: str | bytes | bytearray | None) -> bytes:
	if isinstance(value, bytes):
		return value
	elif isinstance(value, bytearray):
		return bytes(value)
	elif isinstance(value, str):
		return bytes(value, DEFAULT_ENCODING)
	elif value is None:
		return b""
	else:
		raise ValueError(f"Expected bytes or str, got: {value}")


def asText(value: str | bytes | bytearray | None) -> str:
	if isinstance(value, str):
		return value
	elif value is None:
		return ""
	else:
		# NOTE: Bodies may be binary, we don't want reading them back to fail
		return bytes(value).decode(DEFAULT_ENCODING, errors="replace")


# EOF
