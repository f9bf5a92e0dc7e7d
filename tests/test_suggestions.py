"""
Candidate scorer tests.

Verify:
1. Demo mode: no habits => first catalog entries, unscored
2. Never more than 3, exactly 3 with a catalog of >= 3 entries
3. Determinism and stable tie-breaking
4. Context, stress, energy and personality bonuses
5. Fallbacks: nothing relevant, empty catalog
6. Accepting a suggestion stamps provenance and a daily reminder
"""

import pytest
from datetime import datetime

from core.catalog import MICRO_HABIT_CATALOG, get_candidate, stacking_partners
from core.context import classify_context
from core.suggestions import (
    suggest_micro_habits,
    score_candidate,
    accept_suggestion,
    context_match,
    energy_match,
)
from models.suggestion import MicroHabit, Context


def _at(hour):
    return datetime(2026, 10, 19, hour, 15)


def _candidate(cid, energy="low", context=("morning",), success_rate=80, category="health"):
    return MicroHabit(
        id=cid,
        title=cid.title(),
        description="test",
        duration=1,
        category=category,
        energy_required=energy,
        context=context,
        success_rate=success_rate,
        ai_reasoning="because",
        priority="medium",
    )


@pytest.fixture
def habits(make_habit):
    return [make_habit()]


class TestDemoMode:
    def test_no_habits_returns_first_three_unscored(self):
        ctx = classify_context(_at(8), 4)
        result = suggest_micro_habits([], ctx)

        assert [s.id for s in result] == [c.id for c in MICRO_HABIT_CATALOG[:3]]
        assert all(s.score is None for s in result)

    def test_empty_catalog_returns_empty_list(self, habits):
        ctx = classify_context(_at(8), 4)
        assert suggest_micro_habits(habits, ctx, catalog=()) == []
        assert suggest_micro_habits([], ctx, catalog=()) == []


class TestRanking:
    def test_morning_ranking(self, habits):
        ctx = classify_context(_at(8), 4)
        result = suggest_micro_habits(habits, ctx)

        assert [s.id for s in result] == ["deep_breathing", "hydration_reminder", "gratitude_practice"]
        assert [s.score for s in result] == [107, 105, 104]

    def test_stressful_evening_favours_mindfulness(self, habits):
        ctx = classify_context(_at(20), 1)
        result = suggest_micro_habits(habits, ctx)

        assert [s.id for s in result] == ["deep_breathing", "gratitude_practice", "present_moment"]
        assert [s.score for s in result] == [137, 134, 116]
        assert all(s.category == "mindfulness" for s in result)

    def test_midday_ranking(self, habits):
        ctx = classify_context(_at(11), 3)
        result = suggest_micro_habits(habits, ctx)

        assert [s.id for s in result] == ["deep_breathing", "hydration_reminder", "eye_rest"]

    @pytest.mark.parametrize("hour", range(24))
    @pytest.mark.parametrize("mood", [0, 2, 4])
    def test_always_exactly_three(self, habits, hour, mood):
        ctx = classify_context(_at(hour), mood)
        assert len(suggest_micro_habits(habits, ctx)) == 3

    def test_determinism(self, habits):
        ctx = classify_context(_at(15), 2)
        first = suggest_micro_habits(habits, ctx, "Gandhi")
        second = suggest_micro_habits(habits, ctx, "Gandhi")
        assert first == second

    def test_ties_keep_catalog_order(self, habits):
        catalog = (
            _candidate("first", success_rate=80),
            _candidate("second", success_rate=80),
            _candidate("third", success_rate=80),
            _candidate("fourth", success_rate=80),
        )
        ctx = classify_context(_at(8), 4)
        result = suggest_micro_habits(habits, ctx, catalog=catalog)
        assert [s.id for s in result] == ["first", "second", "third"]


class TestScoring:
    def test_personality_bonus(self):
        ctx = classify_context(_at(8), 4)
        connection = get_candidate("connection_reach")

        assert score_candidate(connection, ctx) == 95
        assert score_candidate(connection, ctx, "Oprah") == 103
        # Affinity only applies to its own category
        assert score_candidate(connection, ctx, "Einstein") == 95
        assert score_candidate(connection, ctx, "Unknown") == 95

    def test_high_energy_bonus(self):
        ctx = classify_context(_at(8), 4)
        sprint = _candidate("sprint", energy="high", context=("gym",), success_rate=50)
        assert score_candidate(sprint, ctx) == 60

    def test_low_energy_bonus(self):
        ctx = classify_context(_at(15), 4)
        nap = _candidate("nap", energy="low", context=("late_afternoon",), success_rate=50)
        assert score_candidate(nap, ctx) == 75


class TestFilter:
    def test_stress_tags_only_match_when_stressful(self):
        calm = Context(time_bucket="late_afternoon", energy_level="low", is_stressful=False)
        tense = calm.model_copy(update={"is_stressful": True})
        candidate = _candidate("breathe", energy="high", context=("stressful_moments",))

        assert not context_match(candidate, calm)
        assert context_match(candidate, tense)

    def test_energy_rules(self):
        low = Context(time_bucket="evening", energy_level="low", is_stressful=False)
        medium = low.model_copy(update={"energy_level": "medium"})
        high = low.model_copy(update={"energy_level": "high"})

        assert energy_match(_candidate("a", energy="low"), low)
        assert not energy_match(_candidate("b", energy="medium"), low)
        assert energy_match(_candidate("c", energy="medium"), medium)
        assert not energy_match(_candidate("d", energy="high"), medium)
        assert energy_match(_candidate("e", energy="high"), high)

    def test_nothing_relevant_falls_back_to_defaults(self, habits):
        catalog = tuple(_candidate(f"c{i}", energy="high", context=("gym",)) for i in range(4))
        ctx = classify_context(_at(15), 4)
        result = suggest_micro_habits(habits, ctx, catalog=catalog)

        assert [s.id for s in result] == ["c0", "c1", "c2"]
        assert all(s.score is None for s in result)

    def test_short_scored_list_is_padded_from_catalog(self, habits):
        catalog = (
            _candidate("heavy1", energy="high", context=("gym",)),
            _candidate("light", energy="low", context=("late_afternoon",)),
            _candidate("heavy2", energy="high", context=("gym",)),
        )
        ctx = classify_context(_at(15), 4)
        result = suggest_micro_habits(habits, ctx, catalog=catalog)

        assert [s.id for s in result] == ["light", "heavy1", "heavy2"]
        assert result[0].score is not None
        assert result[1].score is None


class TestAcceptance:
    def test_accept_stamps_provenance_and_reminder(self):
        now = datetime(2026, 10, 19, 7, 45, 30)
        candidate = get_candidate("deep_breathing")
        habit = accept_suggestion(candidate, now)

        assert habit.title == "3 Deep Breaths"
        assert habit.category == "mindfulness"
        assert habit.habit_type == "good"
        assert habit.weekly_target == 7
        assert habit.ai_generated is True
        assert habit.ai_suggestion == (
            "Suggested during 07:45:30. Activates parasympathetic nervous system for calm focus"
        )
        assert habit.reminder.enabled is True
        assert habit.reminder.time == "07:45"
        assert habit.reminder.frequency == "daily"
        assert sorted(habit.reminder.days_of_week) == [0, 1, 2, 3, 4, 5, 6]


def test_stacking_partners_skip_unknown_ids():
    stretch = get_candidate("stretch_break")
    # 'drink_water' is not a catalog id
    assert [p.id for p in stacking_partners(stretch)] == ["deep_breathing"]


def test_catalog_ids_are_unique():
    ids = [c.id for c in MICRO_HABIT_CATALOG]
    assert len(ids) == len(set(ids))
