from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime

# Headers whose values are HTTP dates, and are read back as datetimes
DATE_HEADERS: frozenset[str] = frozenset(
	("Date", "Expires", "Last-Modified", "If-Modified-Since", "If-Unmodified-Since")
)


def httpdate(value: datetime | int | float) -> str:
	"""Formats the given datetime (or UNIX timestamp) as an HTTP date,
	like `Sun, 06 Nov 1994 08:49:37 GMT`. Naive datetimes are taken as UTC."""
	if isinstance(value, datetime):
		date = (
			value.replace(tzinfo=timezone.utc)
			if value.tzinfo is None
			else value.astimezone(timezone.utc)
		)
	else:
		date = datetime.fromtimestamp(value, tz=timezone.utc)
	return format_datetime(date, usegmt=True)


def parseHTTPDate(value: str) -> datetime | None:
	"""Parses an HTTP (RFC 2822) date, returning an aware UTC datetime, or
	`None` when the value is not a date."""
	try:
		date = parsedate_to_datetime(value.strip())
	except (TypeError, ValueError, IndexError):
		return None
	if date is None:
		return None
	return (
		date.replace(tzinfo=timezone.utc)
		if date.tzinfo is None
		else date.astimezone(timezone.utc)
	)


# EOF
