from __future__ import annotations

import json
import logging
from collections.abc import Generator

import httpx
import pytest

from tokbox import Tokbox
from tokbox.observability.logging import ExtrasFormatter, OtelContextLogFilter, configure_logging


def _record(*, name: str, msg: str) -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def restore_package_logger() -> Generator[None, None, None]:
    logger = logging.getLogger("tokbox")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_formatter_appends_data_payload() -> None:
    formatter = ExtrasFormatter("%(levelname)s %(name)s: %(message)s")
    record = _record(name="tokbox.auth", msg="project token lifetime exceeds the service maximum")
    record.data = {"lifetime_seconds": 7200, "max_lifetime_seconds": 300}

    rendered = formatter.format(record)

    assert rendered == (
        "DEBUG tokbox.auth: project token lifetime exceeds the service maximum"
        ' | data={"lifetime_seconds":7200,"max_lifetime_seconds":300}'
    )


def test_formatter_leaves_plain_records_alone() -> None:
    formatter = ExtrasFormatter("%(levelname)s %(name)s: %(message)s")

    assert formatter.format(_record(name="tokbox.client", msg="hello")) == "DEBUG tokbox.client: hello"


def test_formatter_includes_trace_ids_set_by_filter() -> None:
    formatter = ExtrasFormatter("%(message)s")
    record = _record(name="tokbox.client", msg="tokbox.session.create.complete")
    record.trace_id = "0" * 31 + "1"
    record.span_id = "0" * 15 + "2"

    _, encoded = formatter.format(record).split(" | data=", 1)

    assert json.loads(encoded) == {"trace_id": "0" * 31 + "1", "span_id": "0" * 15 + "2"}


def test_otel_filter_without_active_span_adds_nothing() -> None:
    record = _record(name="tokbox.client", msg="tokbox.session.create.complete")

    assert OtelContextLogFilter().filter(record) is True
    assert not hasattr(record, "trace_id")


@pytest.mark.usefixtures("restore_package_logger")
def test_configure_logging_renders_session_creation(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("debug")
    configure_logging("debug")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"sessionId": "abc123"}])

    Tokbox(
        api_key="45678901",
        partner_secret="partner-secret-0123456789abcdef-0123456789",
        transport=httpx.MockTransport(handler),
    ).create_session()

    lines = [line for line in capsys.readouterr().out.splitlines() if "tokbox.session.create.complete" in line]
    assert len(lines) == 1
    assert "DEBUG tokbox.client: tokbox.session.create.complete | data=" in lines[0]
    assert '"session_id":"abc123"' in lines[0]
    assert "partner-secret" not in lines[0]
