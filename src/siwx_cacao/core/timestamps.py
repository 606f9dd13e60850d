import re
from datetime import UTC, datetime

# RFC 3339 date-time, the profile of ISO-8601 used in sign-in messages.
_DATE_TIME = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$"
)


def parse_timestamp(value: str) -> datetime:
    if not _DATE_TIME.match(value):
        raise ValueError(f"Invalid RFC 3339 timestamp: {value!r}")
    return as_utc(datetime.fromisoformat(value))


def is_valid_timestamp(value: str) -> bool:
    try:
        parse_timestamp(value)
    except ValueError:
        return False
    return True


def format_timestamp(moment: datetime) -> str:
    return as_utc(moment).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return format_timestamp(datetime.now(tz=UTC))


def as_utc(moment: datetime) -> datetime:
    """Convert ``moment`` to UTC, treating naive values as UTC already.

    Raises ``ValueError`` when the UTC instant falls outside years 1-9999.
    """
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    try:
        return moment.astimezone(UTC)
    except OverflowError as exc:
        raise ValueError(f"Timestamp out of range in UTC: {moment.isoformat()}") from exc
