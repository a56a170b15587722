import logging

import pytest

from carbon_verify.logging.logger import Log


class TestRunLog:
    def test_prefixes_run_id(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="carbon_verify"):
            Log.for_run("abc123").info("Extracting")
        assert caplog.records[-1].getMessage() == "[run abc123] Extracting"
        assert caplog.records[-1].run_id == "abc123"

    def test_exception_attaches_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        try:
            raise ValueError("bad reply")
        except ValueError as exc:
            with caplog.at_level(logging.ERROR, logger="carbon_verify"):
                Log.exception("Extraction failed", exc)
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None


class TestConfigure:
    def test_sets_level(self) -> None:
        Log.configure("warning")
        assert logging.getLogger("carbon_verify").level == logging.WARNING
        Log.configure("INFO")
