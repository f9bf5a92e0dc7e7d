from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Literal
from datetime import datetime, date
from models.habit import new_id, Level
from core.time_utils import get_current_time

GoalCategory = Literal["health", "productivity", "mindfulness", "social", "fitness"]

class GoalTemplate(BaseModel):
    title: str
    description: str
    target: float
    unit: str
    deadline_days: int # offset from creation
    category: GoalCategory
    priority: Level

    model_config = {"frozen": True}

class Goal(BaseModel):
    id: str = Field(default_factory=new_id)
    title: str
    description: str
    target: float
    current: float = 0
    unit: str
    deadline: date
    category: GoalCategory
    priority: Level = "medium"

    # Provenance
    ai_generated: bool = False
    source_habit: Optional[str] = None
    created_at: datetime = Field(default_factory=get_current_time)

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
