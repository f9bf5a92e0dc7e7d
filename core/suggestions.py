import logging
from datetime import datetime
from typing import List, Optional, Sequence

from core.catalog import MICRO_HABIT_CATALOG, PERSONALITY_AFFINITY
from core.config import settings
from models.habit import Habit, Reminder, ALL_DAYS
from models.suggestion import Context, MicroHabit, Suggestion

logger = logging.getLogger(__name__)

# Tags that match in every bucket
ALWAYS_RELEVANT_TAGS = {"general", "breaks", "transitions"}
STRESS_TAGS = {"stressful_moments", "challenging_moments"}


def _unscored(candidates: Sequence[MicroHabit]) -> List[Suggestion]:
    return [Suggestion(**c.model_dump()) for c in candidates]


def context_match(candidate: MicroHabit, context: Context) -> bool:
    tags = {context.time_bucket} | ALWAYS_RELEVANT_TAGS
    if context.is_stressful:
        tags |= STRESS_TAGS
    return bool(tags.intersection(candidate.context))


def energy_match(candidate: MicroHabit, context: Context) -> bool:
    required = candidate.energy_required
    level = context.energy_level
    return (
        required == level
        # Low energy habits work in any context
        or required == "low"
        or level == "high"
        or (level == "medium" and required in ("low", "medium"))
    )


def score_candidate(candidate: MicroHabit, context: Context, personality: Optional[str] = None) -> int:
    """
    Contextual score of one candidate.

    Starts from the catalog success rate and adds the context bonuses:
    +15 for a direct time bucket tag, +20 for mindfulness when stressed,
    +10 when low/high energy lines up, and the personality bonus.
    """
    score = candidate.success_rate

    if context.time_bucket in candidate.context:
        score += 15

    if context.is_stressful and candidate.category == "mindfulness":
        score += 20

    if context.energy_level == "low" and candidate.energy_required == "low":
        score += 10

    if context.energy_level == "high" and candidate.energy_required == "high":
        score += 10

    if personality and PERSONALITY_AFFINITY.get(personality) == candidate.category:
        score += settings.PERSONALITY_BONUS

    return score


def suggest_micro_habits(
    habits: Sequence[Habit],
    context: Context,
    personality: Optional[str] = None,
    catalog: Sequence[MicroHabit] = MICRO_HABIT_CATALOG,
) -> List[Suggestion]:
    """
    Ranks the catalog for the current context.

    Returns at most MAX_SUGGESTIONS entries and never an empty list while the
    catalog has entries:
    - no habits yet: the first catalog entries, unscored (demo mode)
    - nothing passes the filter: same defaults
    - otherwise: filter (context OR energy), score, stable sort descending
    """
    limit = settings.MAX_SUGGESTIONS
    defaults = list(catalog[:limit])

    if not habits:
        logger.debug("No habits yet, serving %d demo suggestions", len(defaults))
        return _unscored(defaults)

    logger.debug("Context analysis: %s", context)

    relevant = [c for c in catalog if context_match(c, context) or energy_match(c, context)]
    logger.debug("Relevant micro-habits found: %d", len(relevant))

    if not relevant:
        logger.debug("No relevant micro-habits, using defaults")
        return _unscored(defaults)

    scored = [
        Suggestion(**c.model_dump(), score=score_candidate(c, context, personality))
        for c in relevant
    ]
    # sorted() is stable, ties keep catalog order
    suggestions = sorted(scored, key=lambda s: s.score, reverse=True)[:limit]

    if len(suggestions) < limit:
        chosen = {s.id for s in suggestions}
        padding = [c for c in catalog if c.id not in chosen][: limit - len(suggestions)]
        suggestions.extend(_unscored(padding))

    logger.debug("Final suggestions: %s", [s.id for s in suggestions])
    return suggestions


def is_demo_mode(habits: Sequence[Habit]) -> bool:
    return not habits


def accept_suggestion(candidate: MicroHabit, now: datetime) -> Habit:
    """
    Turns an accepted suggestion into a new good habit.

    Stamps the AI provenance and seeds a daily reminder at the acceptance time.
    """
    return Habit(
        title=candidate.title,
        description=candidate.description,
        category=candidate.category,
        habit_type="good",
        weekly_target=settings.DEFAULT_WEEKLY_TARGET,
        ai_generated=True,
        ai_suggestion=f"Suggested during {now.strftime('%H:%M:%S')}. {candidate.ai_reasoning}",
        reminder=Reminder(
            enabled=True,
            time=now.strftime("%H:%M"),
            frequency="daily",
            days_of_week=list(ALL_DAYS),
            custom_interval=1,
            custom_unit="days",
        ),
        created_at=now,
    )
