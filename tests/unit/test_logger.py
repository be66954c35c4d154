import logging

import pytest

from app.logging.logger import Log


class TestLogDelegation:
    @pytest.mark.parametrize(
        ("method", "level"),
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_level_methods_emit_on_service_logger(
        self, caplog: pytest.LogCaptureFixture, method: str, level: int
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="scenario_prompt"):
            getattr(Log, method)("hello")
        assert [(r.name, r.levelno, r.message) for r in caplog.records] == [
            ("scenario_prompt", level, "hello")
        ]

    def test_level_methods_are_documented(self) -> None:
        for method in ("debug", "info", "warning", "error", "exception"):
            assert getattr(Log, method).__doc__

    def test_exception_attaches_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="scenario_prompt"):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                Log.exception("failed")
        assert caplog.records[0].exc_info is not None
