from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List, Literal
from datetime import datetime
from uuid import uuid4
from core.time_utils import get_current_time

Category = Literal["health", "productivity", "mindfulness", "social"]
HabitType = Literal["good", "bad"]
Level = Literal["low", "medium", "high"]

ALL_DAYS = [1, 2, 3, 4, 5, 6, 0]

def new_id() -> str:
    return uuid4().hex

class Reminder(BaseModel):
    enabled: bool = False
    time: str = "09:00" # "HH:MM"
    frequency: Literal["daily", "weekly", "custom"] = "daily"
    days_of_week: List[int] = Field(default_factory=lambda: list(ALL_DAYS)) # 0 = Sunday
    custom_interval: int = 1
    custom_unit: Literal["days", "weeks", "months"] = "days"

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

class BadHabitDetails(BaseModel):
    frequency: int = 0
    frequency_unit: Literal["times_per_day", "times_per_week"] = "times_per_day"
    time_of_day: List[str] = []
    triggers: List[str] = []
    severity: Level = "low"
    impact: str = ""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

class Habit(BaseModel):
    """
    Represents a Habit in the system.

    Types:
    - 'good' (Building): tracked with streaks and a weekly target.
    - 'bad' (Breaking): never carries weekly progress, its reminder is routed
      to the positive habit the pairing engine creates for it.

    Pairing:
    - paired_bad_habit_id / paired_bad_habit_title live on the positive habit
      and point back at the bad habit. They are lookup keys only, neither
      record owns the other.
    """
    id: str = Field(default_factory=new_id)
    title: str = Field(..., max_length=100)
    description: str = ""
    category: Category = "health"
    habit_type: HabitType = "good"

    # Progress
    streak: int = Field(0, ge=0)
    best_streak: int = 0
    completed_today: bool = False
    weekly_target: int = 7
    current_week_completed: int = 0
    completion_rate: float = Field(0, ge=0, le=100)

    # Scheduling
    target_time: Optional[str] = None
    reminder: Optional[Reminder] = None

    # Provenance
    ai_generated: bool = False
    ai_suggestion: Optional[str] = None
    paired_bad_habit_id: Optional[str] = None
    paired_bad_habit_title: Optional[str] = None

    bad_habit_details: Optional[BadHabitDetails] = None
    created_at: datetime = Field(default_factory=get_current_time)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @property
    def is_bad(self) -> bool:
        return self.habit_type == "bad"

    @property
    def is_paired_positive(self) -> bool:
        return self.habit_type == "good" and self.paired_bad_habit_title is not None

class HabitCreate(BaseModel):
    title: str = Field(..., max_length=100)
    description: str = ""
    category: Category = "health"
    habit_type: HabitType = "good"
    target_time: Optional[str] = None
    weekly_target: int = 7
    reminder: Optional[Reminder] = None
    bad_habit_details: Optional[BadHabitDetails] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

class ComplementaryHabit(BaseModel):
    title: str
    description: str
    category: Category
    reason: str
