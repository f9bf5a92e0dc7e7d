from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional, List, Literal, Tuple
from models.habit import Category, Level

TimeBucket = Literal["morning", "afternoon", "late_afternoon", "evening"]

class Context(BaseModel):
    time_bucket: TimeBucket
    energy_level: Level
    is_stressful: bool

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

class MicroHabit(BaseModel):
    """A catalog entry. Immutable."""
    id: str
    title: str
    description: str
    duration: int # minutes
    category: Category
    energy_required: Level
    context: Tuple[str, ...]
    success_rate: int # 0-100
    habit_stacking: Tuple[str, ...] = ()
    ai_reasoning: str
    priority: Level

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

class Suggestion(MicroHabit):
    # None when served from the demo / fallback path
    score: Optional[int] = None

class SuggestionResponse(BaseModel):
    context: Context
    demo_mode: bool = False
    suggestions: List[Suggestion] = []

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
