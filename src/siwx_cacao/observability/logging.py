import json
import logging
from datetime import UTC, datetime
from typing import Any

from siwx_cacao.core.config import settings

_LOGGING_CONFIGURED = False

# Structured fields attached through ``extra=`` by the verifier, codec and HTTP layers.
EXTRA_FIELDS = (
    "event_name",
    "issuer",
    "scheme",
    "valid",
    "reason_code",
    "cid",
    "status",
    "latency_ms",
    "path",
    "method",
    "configured_level",
)


class JsonLogFormatter(logging.Formatter):
    """One compact JSON object per record, with known extras lifted to the top level."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (field, value)
            for field in EXTRA_FIELDS
            if (value := getattr(record, field, None)) is not None
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level

    logging.getLogger("siwx.logging").warning(
        "invalid_log_level_fallback",
        extra={"event_name": "invalid_log_level_fallback", "configured_level": name},
    )
    return logging.INFO


def configure_logging(*, force: bool = False) -> None:
    """Route the root logger through a single JSON stream handler.

    Runs once per process unless ``force`` is set.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(JsonLogFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(settings.log_level))
    root_logger.handlers = [handler]

    _LOGGING_CONFIGURED = True
