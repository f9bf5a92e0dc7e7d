"""
Strength calculator tests.

Verify:
1. A perfect habit computes to 120 before the display clamp, tier Identity
2. All-zero input with weekly_target=0 gives 0 / Seed without dividing by zero
3. Factor clamping and the weighted sum for ordinary input
4. Tier boundaries
5. Bad habits always score 0
6. Optional normalization divides by the weight sum
"""

import pytest

from core.config import settings
from core.strength import calculate_strength, get_tier, strength_factors


def test_perfect_habit_reaches_raw_120(make_habit):
    habit = make_habit(
        completion_rate=100,
        streak=30,
        target_time="07:00",
        completed_today=True,
        weekly_target=7,
        current_week_completed=7,
    )
    result = calculate_strength(habit)

    assert result.raw_score == 120
    assert result.score == 100
    assert result.tier == "Identity"
    assert result.short_label == "Identity"


def test_all_zero_with_zero_weekly_target(make_habit):
    habit = make_habit(weekly_target=0, current_week_completed=0)
    result = calculate_strength(habit)

    assert result.raw_score == 0
    assert result.score == 0
    assert result.tier == "Seed"
    assert all(f.value == 0 for f in result.factors)


def test_weighted_sum_for_ordinary_habit(make_habit):
    # 50*0.40 + 50*0.25 + 0 + 0 + (3/7*100)*0.20 = 41.07
    habit = make_habit(completion_rate=50, streak=15, weekly_target=7, current_week_completed=3)
    result = calculate_strength(habit)

    assert result.raw_score == 41
    assert result.tier == "Rooted"
    assert result.short_label == "Root"
    assert result.tier_progress == pytest.approx(64.0)


def test_factors_are_clamped(make_habit):
    habit = make_habit(streak=90, weekly_target=3, current_week_completed=6)
    factors = {f.name: f.value for f in strength_factors(habit)}

    assert factors["Streak"] == 100
    assert factors["Weekly"] == 100


def test_calculation_is_idempotent(make_habit):
    habit = make_habit(completion_rate=72, streak=4, completed_today=True)
    assert calculate_strength(habit) == calculate_strength(habit)


@pytest.mark.parametrize(
    "score,tier",
    [(0, "Seed"), (24, "Seed"), (25, "Rooted"), (49, "Rooted"), (50, "Established"),
     (74, "Established"), (75, "Automatic"), (89, "Automatic"), (90, "Identity"), (120, "Identity")],
)
def test_tier_boundaries(score, tier):
    assert get_tier(score)[0] == tier


def test_bad_habit_always_seed(make_habit):
    habit = make_habit(
        title="Smoking",
        habit_type="bad",
        completion_rate=100,
        streak=30,
        completed_today=True,
    )
    result = calculate_strength(habit)

    assert result.raw_score == 0
    assert result.tier == "Seed"
    assert result.factors == []


def test_normalized_weights(make_habit, monkeypatch):
    monkeypatch.setattr(settings, "STRENGTH_NORMALIZE_WEIGHTS", True)
    habit = make_habit(
        completion_rate=100,
        streak=30,
        target_time="07:00",
        completed_today=True,
        weekly_target=7,
        current_week_completed=7,
    )
    result = calculate_strength(habit)

    assert result.raw_score == 100
    assert result.tier == "Identity"
