from datetime import datetime, timezone


def utcnow() -> datetime:
    # naive UTC: DateTime columns are stored without tzinfo
    return datetime.now(timezone.utc).replace(tzinfo=None)
