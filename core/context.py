from datetime import datetime
from core.config import settings
from models.suggestion import Context

def classify_context(timestamp: datetime, mood: int) -> Context:
    """
    Derives the time bucket, energy level and stress flag for a moment.

    Only the hour of the timestamp matters, minutes are ignored.
    Mood is on a 0-4 scale, low values mean more stress.
    """
    hour = timestamp.hour

    if hour < 10:
        time_bucket, energy_level = "morning", "high"
    elif hour < 14:
        time_bucket, energy_level = "afternoon", "medium"
    elif hour < 18:
        time_bucket, energy_level = "late_afternoon", "low"
    else:
        time_bucket, energy_level = "evening", "low"

    return Context(
        time_bucket=time_bucket,
        energy_level=energy_level,
        is_stressful=mood <= settings.LOW_MOOD_THRESHOLD,
    )
