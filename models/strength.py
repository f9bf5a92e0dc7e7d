from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List, Literal

Tier = Literal["Seed", "Rooted", "Established", "Automatic", "Identity"]

class StrengthFactor(BaseModel):
    name: str
    value: float # 0-100, already clamped
    weight: float

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

class StrengthScore(BaseModel):
    """
    Derived, never persisted.

    raw_score keeps the unnormalized weighted sum (a perfect habit reaches 120),
    score is the same value clamped to 0-100 for display.
    """
    raw_score: int
    score: int
    tier: Tier
    short_label: str
    description: str
    next_milestone: str
    tier_progress: float # 0-100 within the current tier
    factors: List[StrengthFactor] = []

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
