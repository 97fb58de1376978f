from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """Fixed-width UTC timestamp; string order equals chronological order."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def from_iso(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def escape_sql_string(value: str) -> str:
    """Basic SQL escaping for string literals."""
    return value.replace("'", "''")


__all__ = [
    "utcnow",
    "to_iso",
    "from_iso",
    "escape_sql_string",
]
