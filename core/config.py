import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    APP_NAME: str = "HabitQuest"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Frontend
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:5173")

    # Local time used for context buckets and day rollover
    TIMEZONE: str = os.getenv("TIMEZONE", "Asia/Kolkata")

    # Suggestion Engine
    # Mood is on a 0-4 scale, anything at or below the threshold counts as stressful.
    LOW_MOOD_THRESHOLD: int = 2
    MAX_SUGGESTIONS: int = 3
    PERSONALITY_BONUS: int = 8

    # Strength Calculator
    # Weights sum to 1.20, a perfect habit computes to 120 before the display clamp.
    STRENGTH_WEIGHTS: dict = {
        "consistency": 0.40,
        "streak": 0.25,
        "timing": 0.15,
        "today": 0.20,
        "weekly": 0.20,
    }
    STRENGTH_NORMALIZE_WEIGHTS: bool = False
    STREAK_TARGET_DAYS: int = 30

    # Habit Defaults
    DEFAULT_WEEKLY_TARGET: int = 7
    DEFAULT_REMINDER_TIME: str = "09:00"

    # Maintenance
    ENABLE_SCHEDULER: bool = False
    MAINTENANCE_INTERVAL_HOURS: int = 1

    # Pydantic Settings Config
    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
