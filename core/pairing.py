"""
Replacement pairing for bad habits.

Whenever a bad habit is registered a positive habit is generated to replace it.
Alternatives are looked up by keyword in the bad habit's title, and every
instance of "the same" bad habit (same title after trimming and case folding)
gets a different alternative. Once the table runs out, titles are cycled
with a numeric suffix ("Deep Breathing Exercise 2").

The positive habit points back at the bad habit through paired_bad_habit_id /
paired_bad_habit_title. That link is a lookup key, resolved against the live
collection; deleting either side deletes both (see cascade_ids).
"""

import logging
from typing import Dict, List, NamedTuple, Sequence, Set

from core.config import settings
from models.habit import Habit, Reminder, ALL_DAYS

logger = logging.getLogger(__name__)

# Keyword -> alternatives. First matching keyword wins, list order is selection order.
POSITIVE_ALTERNATIVES: Dict[str, List[dict]] = {
    "smoking": [
        {"title": "Deep Breathing Exercise", "description": "Take 5 deep breaths when you feel the urge to smoke", "category": "health"},
        {"title": "Drink a Glass of Water", "description": "Hydrate yourself instead of smoking", "category": "health"},
        {"title": "Take a Short Walk", "description": "Go for a 5-minute walk to distract yourself", "category": "health"},
    ],
    "drinking": [
        {"title": "Drink Water Instead", "description": "Replace alcoholic drinks with water or herbal tea", "category": "health"},
        {"title": "Call a Friend", "description": "Reach out to a friend for support", "category": "social"},
        {"title": "Go for a Walk", "description": "Take a walk to clear your mind", "category": "health"},
    ],
    "junk food": [
        {"title": "Healthy Snack Alternative", "description": "Choose fruits, nuts, or healthy snacks instead of junk food", "category": "health"},
        {"title": "Drink Water", "description": "Drink a glass of water before snacking", "category": "health"},
        {"title": "Eat a Salad", "description": "Prepare a fresh salad as a snack", "category": "health"},
    ],
    "procrastination": [
        {"title": "5-Minute Rule", "description": "Start any task for just 5 minutes to overcome procrastination", "category": "productivity"},
        {"title": "Make a To-Do List", "description": "Write down your tasks and pick one to start", "category": "productivity"},
        {"title": "Set a Timer for 10 Minutes", "description": "Work on a task for just 10 minutes", "category": "productivity"},
    ],
    "social media": [
        {"title": "Digital Detox Time", "description": "Spend time reading, meditating, or connecting with people in person", "category": "mindfulness"},
        {"title": "Read a Book", "description": "Pick up a book instead of scrolling", "category": "productivity"},
        {"title": "Go for a Walk", "description": "Take a walk outside without your phone", "category": "health"},
    ],
    "negative thinking": [
        {"title": "Gratitude Practice", "description": "Write down 3 things you're grateful for when negative thoughts arise", "category": "mindfulness"},
        {"title": "Positive Affirmations", "description": "Say a positive affirmation out loud", "category": "mindfulness"},
        {"title": "Smile at Yourself", "description": "Smile in the mirror to boost your mood", "category": "mindfulness"},
    ],
    "overspending": [
        {"title": "Mindful Spending", "description": "Wait 24 hours before making non-essential purchases", "category": "productivity"},
        {"title": "Track Your Expenses", "description": "Write down every purchase for a week", "category": "productivity"},
        {"title": "Set a Savings Goal", "description": "Set aside a small amount for savings", "category": "productivity"},
    ],
    "skipping exercise": [
        {"title": "Quick Movement Break", "description": "Do 10 jumping jacks or take a 5-minute walk", "category": "health"},
        {"title": "Stretch for 5 Minutes", "description": "Do a short stretching routine", "category": "health"},
        {"title": "Dance to a Song", "description": "Put on your favorite song and dance", "category": "health"},
    ],
    "staying up late": [
        {"title": "Bedtime Routine", "description": "Create a relaxing bedtime routine to improve sleep", "category": "health"},
        {"title": "Read Before Bed", "description": "Read a book instead of using screens", "category": "mindfulness"},
        {"title": "Meditate for 10 Minutes", "description": "Do a short meditation before sleep", "category": "mindfulness"},
    ],
    "complaining": [
        {"title": "Solution-Focused Thinking", "description": "Instead of complaining, think of one solution to the problem", "category": "mindfulness"},
        {"title": "Gratitude List", "description": "Write down something positive about your day", "category": "mindfulness"},
        {"title": "Compliment Someone", "description": "Say something nice to someone today", "category": "social"},
    ],
}

# Category -> generic alternative, used when no keyword matches
DEFAULT_ALTERNATIVES: Dict[str, List[dict]] = {
    "health": [
        {"title": "Healthy Alternative", "description": "Replace this habit with a healthier option", "category": "health"},
    ],
    "productivity": [
        {"title": "Productive Alternative", "description": "Replace this habit with a more productive activity", "category": "productivity"},
    ],
    "mindfulness": [
        {"title": "Mindful Alternative", "description": "Replace this habit with a mindful practice", "category": "mindfulness"},
    ],
    "social": [
        {"title": "Positive Social Habit", "description": "Replace this habit with a positive social interaction", "category": "social"},
    ],
}


class HabitPair(NamedTuple):
    bad_habit: Habit
    positive_habit: Habit


def normalize_title(title: str) -> str:
    return title.strip().casefold()


def get_positive_alternatives(bad_habit_title: str, category: str) -> List[dict]:
    """Alternatives for a bad habit. Never empty."""
    lower_title = bad_habit_title.lower()
    for keyword, alternatives in POSITIVE_ALTERNATIVES.items():
        if keyword in lower_title:
            return alternatives
    return DEFAULT_ALTERNATIVES.get(category, DEFAULT_ALTERNATIVES["health"])


def paired_positive_habits(bad_habit_title: str, habits: Sequence[Habit]) -> List[Habit]:
    """Positive habits already paired to a bad habit with the same normalized title."""
    norm_title = normalize_title(bad_habit_title)
    return [
        h for h in habits
        if h.is_paired_positive and normalize_title(h.paired_bad_habit_title) == norm_title
    ]


def select_alternative(bad_habit: Habit, habits: Sequence[Habit]) -> dict:
    """
    Picks the next unused alternative for this bad habit's title group.

    When every alternative has been used, cycles through the table again with
    a numeric suffix: the first pass past the table gets 2, the next 3, and so
    on. A synthesized title that is still in use is skipped.
    """
    alternatives = get_positive_alternatives(bad_habit.title, bad_habit.category)
    already_paired = paired_positive_habits(bad_habit.title, habits)
    used_titles: Set[str] = {normalize_title(h.title) for h in already_paired}

    available = [alt for alt in alternatives if normalize_title(alt["title"]) not in used_titles]
    if available:
        return available[0]

    # Every table title is taken, so used_count >= len(alternatives)
    used_count = len(already_paired)
    while True:
        base = alternatives[used_count % len(alternatives)]
        suffix = used_count // len(alternatives) + 1
        title = f"{base['title']} {suffix}"
        if normalize_title(title) not in used_titles:
            return {**base, "title": title}
        used_count += 1


def _positive_reminder(bad_habit: Habit) -> Reminder:
    if bad_habit.reminder is not None:
        return bad_habit.reminder.model_copy(update={"enabled": True})
    return Reminder(
        enabled=True,
        time=settings.DEFAULT_REMINDER_TIME,
        frequency="daily",
        days_of_week=list(ALL_DAYS),
        custom_interval=1,
        custom_unit="days",
    )


def pair_bad_habit(bad_habit: Habit, habits: Sequence[Habit]) -> HabitPair:
    """
    Builds the positive replacement for a newly registered bad habit.

    habits is the collection as it stands before the new bad habit is added.
    Returns both records; the bad habit comes back with its reminder disabled
    and its weekly fields zeroed, ready to be inserted together with the
    positive habit.
    """
    alternative = select_alternative(bad_habit, habits)

    bad_reminder = bad_habit.reminder.model_copy(update={"enabled": False}) if bad_habit.reminder else None
    bad = bad_habit.model_copy(update={
        "reminder": bad_reminder,
        "weekly_target": 0,
        "current_week_completed": 0,
    })

    positive = Habit(
        title=alternative["title"],
        description=alternative["description"],
        category=alternative["category"],
        habit_type="good",
        weekly_target=settings.DEFAULT_WEEKLY_TARGET,
        streak=0,
        best_streak=0,
        completed_today=False,
        current_week_completed=0,
        completion_rate=0,
        ai_generated=False,
        reminder=_positive_reminder(bad_habit),
        ai_suggestion=(
            f'This positive habit will help you replace "{bad_habit.title}". '
            "Try to do this instead when you feel the urge for the bad habit."
        ),
        paired_bad_habit_id=bad_habit.id,
        paired_bad_habit_title=bad_habit.title,
    )

    logger.info("Paired bad habit %r with %r", bad_habit.title, positive.title)
    return HabitPair(bad, positive)


def find_paired_habits(habits: Sequence[Habit]) -> List[HabitPair]:
    """Every (bad, positive) pair that resolves in this collection."""
    by_bad_id = {}
    for h in habits:
        if h.is_paired_positive and h.paired_bad_habit_id:
            by_bad_id.setdefault(h.paired_bad_habit_id, h)

    return [
        HabitPair(h, by_bad_id[h.id])
        for h in habits
        if h.is_bad and h.id in by_bad_id
    ]


def cascade_ids(habit_id: str, habits: Sequence[Habit]) -> Set[str]:
    """
    Ids to remove when habit_id is deleted.

    Deleting a bad habit takes its positive replacement with it and the other
    way round. Unknown ids give an empty set.
    """
    target = next((h for h in habits if h.id == habit_id), None)
    if target is None:
        return set()

    ids = {target.id}
    if target.is_bad:
        ids |= {h.id for h in habits if h.paired_bad_habit_id == target.id}
    elif target.paired_bad_habit_id:
        ids |= {h.id for h in habits if h.id == target.paired_bad_habit_id and h.is_bad}
    return ids
