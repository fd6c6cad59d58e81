"""Logging coverage to ensure fetch problems are surfaced without stopping the run."""
import asyncio
import logging

from conftest import FakeSource, make_lead

from leadreport.core.logging import configure_logging
from leadreport.pipeline import build_report


def test_configure_logging_reads_env_level(monkeypatch):
    captured = {}
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    configure_logging()

    assert captured["level"] == "DEBUG"
    assert "%(name)s" in captured["format"]


def test_failed_page_is_logged_and_run_continues(caplog):
    source = FakeSource([make_lead() for _ in range(3)], fail_on_page=2)
    caplog.set_level("INFO")

    outcome = asyncio.run(build_report(source, 2025, page_size=2))

    assert outcome.status == "ok"
    assert "Error fetching Leads page 2" in caplog.text
    assert any("passed the filters" in message for message in caplog.messages)


def test_report_logs_summary(caplog):
    caplog.set_level("INFO")

    asyncio.run(build_report(FakeSource([make_lead()]), 2025))

    assert any("counts 1 leads" in message for message in caplog.messages)
