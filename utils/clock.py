# utils/clock.py
from datetime import datetime, timezone


def now_iso() -> str:
     """Current UTC instant as an ISO-8601 string, e.g. 2024-01-01T09:30:00.000Z."""
     return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
