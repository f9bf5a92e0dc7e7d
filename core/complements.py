from typing import List
from models.habit import Habit, ComplementaryHabit

def suggest_complementary_habits(habit: Habit) -> List[ComplementaryHabit]:
    """
    Follow-up habit ideas for one existing habit.

    Looks at the category and title keywords first, then the streak
    (>= 7 days suggests stacking) and completion rate (< 70% suggests
    reminders). Returns at most 3 ideas, never none.
    """
    suggestions = []
    title = habit.title.lower()
    category = habit.category

    # Health
    if category == "health" or any(k in title for k in ("exercise", "workout", "meditation")):
        if "meditation" in title or "mindfulness" in title:
            suggestions.append(ComplementaryHabit(
                title="Deep Breathing Exercise",
                description="Practice 5-10 minutes of deep breathing to enhance your meditation practice",
                category="health",
                reason="Complements your meditation habit for better stress management",
            ))
            suggestions.append(ComplementaryHabit(
                title="Yoga Stretching",
                description="Add gentle yoga stretches to improve flexibility and mindfulness",
                category="health",
                reason="Builds on your meditation foundation for holistic wellness",
            ))
        elif "exercise" in title or "workout" in title:
            suggestions.append(ComplementaryHabit(
                title="Post-Workout Stretching",
                description="5-10 minutes of stretching after your workout to prevent injury",
                category="health",
                reason="Enhances your exercise routine and improves recovery",
            ))
            suggestions.append(ComplementaryHabit(
                title="Hydration Tracking",
                description="Drink 8 glasses of water daily to support your fitness goals",
                category="health",
                reason="Essential for optimal performance during your workouts",
            ))
        else:
            suggestions.append(ComplementaryHabit(
                title="Morning Walk",
                description="Start your day with a 15-minute walk to boost energy",
                category="health",
                reason="Great complement to your health routine",
            ))

    # Productivity
    if category == "productivity" or any(k in title for k in ("read", "study", "work")):
        suggestions.append(ComplementaryHabit(
            title="Pomodoro Technique",
            description="Work in 25-minute focused sessions with 5-minute breaks",
            category="productivity",
            reason="Improves focus and productivity for your work/study habits",
        ))
        suggestions.append(ComplementaryHabit(
            title="Daily Planning",
            description="Spend 10 minutes each morning planning your day",
            category="productivity",
            reason="Helps organize and prioritize your daily tasks",
        ))

    # Mindfulness
    if category == "mindfulness" or "journal" in title or "gratitude" in title:
        suggestions.append(ComplementaryHabit(
            title="Gratitude Practice",
            description="Write down 3 things you're grateful for each day",
            category="mindfulness",
            reason="Enhances your mindfulness and positive thinking",
        ))
        suggestions.append(ComplementaryHabit(
            title="Digital Detox Hour",
            description="Spend one hour without screens before bed",
            category="mindfulness",
            reason="Improves sleep quality and mental clarity",
        ))

    # Social
    if category == "social" or "call" in title or "meet" in title:
        suggestions.append(ComplementaryHabit(
            title="Weekly Check-in",
            description="Call or message one friend or family member each week",
            category="social",
            reason="Strengthens your social connections and relationships",
        ))
        suggestions.append(ComplementaryHabit(
            title="Random Act of Kindness",
            description="Do one kind thing for someone else each day",
            category="social",
            reason="Builds positive social interactions and community",
        ))

    if habit.streak >= 7:
        suggestions.append(ComplementaryHabit(
            title="Habit Stacking",
            description="Add a new habit right after your current successful habit",
            category=category,
            reason="Your strong streak shows you're ready to build on this success",
        ))

    if habit.completion_rate < 70:
        suggestions.append(ComplementaryHabit(
            title="Habit Reminder Setup",
            description="Set up daily reminders to improve consistency",
            category=category,
            reason="Helpful for improving your current completion rate",
        ))

    if not suggestions:
        suggestions.append(ComplementaryHabit(
            title="Complementary Habit",
            description="Add a habit that supports your current goals",
            category=category,
            reason="Builds on your existing habit foundation",
        ))

    return suggestions[:3]
