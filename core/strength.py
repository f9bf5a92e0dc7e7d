import math
from core.config import settings
from models.habit import Habit
from models.strength import StrengthScore, StrengthFactor

# (name, short label, min score, max score, description, next milestone)
STRENGTH_TIERS = [
    ("Seed", "Seed", 0, 25, "Just starting out - every step counts!", "Reach 25% consistency to grow roots"),
    ("Rooted", "Root", 25, 50, "Building a foundation - keep it up!", "Reach 50% consistency to become established"),
    ("Established", "Est.", 50, 75, "Growing strong - you're making progress!", "Reach 75% consistency to become automatic"),
    ("Automatic", "Auto", 75, 90, "Almost effortless - you're doing great!", "Reach 90% consistency to become an identity habit"),
    ("Identity", "Identity", 90, 100, "Part of who you are - incredible!", "Maintain this level - you're a master!"),
]

def _clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(value, high))

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def get_tier(score: int):
    """Returns the tier row for a (raw) score. Anything above 100 is Identity."""
    for tier in reversed(STRENGTH_TIERS):
        if score >= tier[2]:
            return tier
    return STRENGTH_TIERS[0]

def strength_factors(habit: Habit):
    """
    Per-factor values (each clamped to 0-100) with their weights.

    A weekly target of 0 contributes nothing instead of dividing by zero.
    """
    weights = settings.STRENGTH_WEIGHTS

    streak_value = habit.streak / settings.STREAK_TARGET_DAYS * 100 if settings.STREAK_TARGET_DAYS > 0 else 0
    weekly_value = habit.current_week_completed / habit.weekly_target * 100 if habit.weekly_target > 0 else 0

    return [
        StrengthFactor(name="Consistency", value=_clamp(habit.completion_rate), weight=weights["consistency"]),
        StrengthFactor(name="Streak", value=_clamp(streak_value), weight=weights["streak"]),
        StrengthFactor(name="Timing", value=100 if habit.target_time else 0, weight=weights["timing"]),
        StrengthFactor(name="Today", value=100 if habit.completed_today else 0, weight=weights["today"]),
        StrengthFactor(name="Weekly", value=_clamp(weekly_value), weight=weights["weekly"]),
    ]

def calculate_strength(habit: Habit) -> StrengthScore:
    """
    Computes the Habit Strength score and tier.

    The weights sum to 1.20 and are applied as-is unless
    STRENGTH_NORMALIZE_WEIGHTS is set, so raw_score can reach 120.
    score is the display value clamped to 0-100. Bad habits carry no
    progress semantics and always land on 0 / Seed.
    """
    if habit.is_bad:
        factors = []
        raw = 0.0
    else:
        factors = strength_factors(habit)
        raw = sum(f.value * f.weight for f in factors)
        if settings.STRENGTH_NORMALIZE_WEIGHTS:
            total_weight = sum(f.weight for f in factors)
            raw = raw / total_weight if total_weight > 0 else 0

    raw_score = _round_half_up(raw)
    score = int(_clamp(raw_score))
    name, short_label, min_score, max_score, description, next_milestone = get_tier(raw_score)

    span = max_score - min_score
    tier_progress = _clamp((score - min_score) / span * 100) if span > 0 else 100

    return StrengthScore(
        raw_score=raw_score,
        score=score,
        tier=name,
        short_label=short_label,
        description=description,
        next_milestone=next_milestone,
        tier_progress=round(tier_progress, 2),
        factors=factors,
    )
