import json
import logging
import sys
from collections.abc import Iterator

import pytest

from siwx_cacao.core.config import settings
from siwx_cacao.observability.logging import EXTRA_FIELDS, JsonLogFormatter, configure_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord(
        name="siwx.verify_engine",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="capability_verification",
        args=(),
        exc_info=None,
    )
    record.event_name = "capability_verification"
    record.issuer = "did:pkh:eip155:1:0xabc"
    record.valid = False
    record.reason_code = "EXPIRED"

    payload = json.loads(JsonLogFormatter().format(record))

    assert payload["logger"] == "siwx.verify_engine"
    assert payload["level"] == "INFO"
    assert payload["event_name"] == "capability_verification"
    assert payload["issuer"] == "did:pkh:eip155:1:0xabc"
    assert payload["valid"] is False
    assert payload["reason_code"] == "EXPIRED"
    assert "cid" not in payload


@pytest.mark.usefixtures("restore_root_logger")
def test_configure_logging_falls_back_to_info(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(settings, "log_level", "chatty")

    with caplog.at_level(logging.WARNING, logger="siwx.logging"):
        configure_logging(force=True)

    root = logging.getLogger()
    assert root.level == logging.INFO
    assert isinstance(root.handlers[0].formatter, JsonLogFormatter)
    assert any(
        getattr(record, "configured_level", None) == "chatty" for record in caplog.records
    )


def test_json_formatter_keeps_only_registered_extras_and_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.getLogger("siwx.http").makeRecord(
            "siwx.http",
            logging.ERROR,
            __file__,
            1,
            "http_request",
            (),
            sys.exc_info(),
            extra={"status": 500, "namespace": "eip155"},
        )

    payload = json.loads(JsonLogFormatter().format(record))

    assert payload["status"] == 500
    assert "namespace" not in payload
    assert "RuntimeError: boom" in payload["exc_info"]
    assert set(payload) <= {"timestamp", "level", "logger", "message", "exc_info", *EXTRA_FIELDS}
