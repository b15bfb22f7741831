from io import StringIO

import pytest

from actionkit import ActionResponse, Headers, config
from actionkit.utils import logging
from actionkit.utils.logging import LogLevel, LogOutput, LogOrigin


@pytest.fixture
def out(monkeypatch):
	stream = StringIO()
	monkeypatch.setattr(logging, "LOG_LEVEL", LogLevel.Debug)
	monkeypatch.setattr(logging, "COLOR", False)
	monkeypatch.setattr(logging.Term, "BOLD", "")
	monkeypatch.setattr(logging.Term, "RESET", "")
	token = LogOutput.set(stream)
	yield stream
	LogOutput.reset(token)


def test_entry_carries_context(out):
	entry = logging.warning("Something odd", Header="X-Tag", Count=2)
	assert entry.level == LogLevel.Warning
	assert entry.origin == LogOrigin.get()
	assert entry.context == {"Header": "X-Tag", "Count": 2}
	assert out.getvalue() == "[actionkit] Something odd Header=X-Tag Count=2\n"


def test_level_filtering(out, monkeypatch):
	monkeypatch.setattr(logging, "LOG_LEVEL", LogLevel.Warning)
	logging.info("Not shown")
	assert out.getvalue() == ""
	assert not logging.logged(LogLevel.Debug)
	assert logging.logged(LogLevel.Error)


def test_unparsable_date_is_logged(out):
	Headers().set("Date", "yesterday").get("Date")
	assert "Could not parse date header" in out.getvalue()
	assert "Value=yesterday" in out.getvalue()


def test_build_is_logged(out, monkeypatch):
	monkeypatch.setattr(config, "LOG_RESPONSES", True)
	res = ActionResponse()
	res.setStatusCode(204)
	res.build()
	assert "Built action response Status=204" in out.getvalue()
	res.mergeInto(ActionResponse())
	assert "Merged action response" in out.getvalue()


def test_exception_returns_the_exception(out):
	try:
		raise ValueError("boom")
	except ValueError as e:
		assert logging.exception(e, "Failed") is e
	assert out.getvalue().startswith("!!! EXCP Failed: [ValueError] boom\n")


# EOF
