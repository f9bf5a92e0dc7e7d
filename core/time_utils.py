from datetime import datetime
from zoneinfo import ZoneInfo

from core.config import settings

LOCAL_TZ = ZoneInfo(settings.TIMEZONE)
UTC = ZoneInfo("UTC")

def get_current_time():
    """Returns the current time in the configured local timezone."""
    return datetime.now(LOCAL_TZ)

def to_local(dt: datetime):
    """Converts a datetime object to the configured local timezone."""
    if dt.tzinfo is None:
        # Assume naive datetimes are UTC
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(LOCAL_TZ)
