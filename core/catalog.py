from typing import List, Tuple
from models.suggestion import MicroHabit

# Micro-habit library. Order matters: the demo / fallback path serves the first entries
# and ties in scoring keep this order.
MICRO_HABIT_CATALOG: Tuple[MicroHabit, ...] = (
    # Health
    MicroHabit(
        id="stretch_break",
        title="Quick Stretch Break",
        description="2-minute full body stretch to improve circulation and reduce stiffness",
        duration=2,
        category="health",
        energy_required="low",
        context=("after_sitting", "morning", "afternoon", "evening"),
        success_rate=85,
        habit_stacking=("drink_water", "deep_breathing"),
        ai_reasoning="Improves blood flow and reduces muscle tension from prolonged sitting",
        priority="medium",
    ),
    MicroHabit(
        id="hydration_reminder",
        title="Hydration Check",
        description="Drink a glass of water and assess your hydration level",
        duration=1,
        category="health",
        energy_required="low",
        context=("morning", "afternoon", "evening", "after_exercise"),
        success_rate=90,
        habit_stacking=("stretch_break", "gratitude_practice"),
        ai_reasoning="Maintains optimal cognitive function and energy levels",
        priority="high",
    ),
    MicroHabit(
        id="eye_rest",
        title="20-20-20 Eye Rule",
        description="Look at something 20 feet away for 20 seconds to reduce eye strain",
        duration=1,
        category="health",
        energy_required="low",
        context=("after_screen_time", "work_breaks", "afternoon"),
        success_rate=88,
        habit_stacking=("stretch_break", "deep_breathing"),
        ai_reasoning="Reduces digital eye strain and improves focus",
        priority="medium",
    ),

    # Productivity
    MicroHabit(
        id="task_planning",
        title="Next Action Planning",
        description="Identify the next 3 most important actions for your current project",
        duration=3,
        category="productivity",
        energy_required="medium",
        context=("morning", "work_start", "after_break", "evening"),
        success_rate=78,
        habit_stacking=("gratitude_practice", "deep_breathing"),
        ai_reasoning="Clarifies priorities and reduces decision fatigue",
        priority="high",
    ),
    MicroHabit(
        id="desk_organization",
        title="Quick Desk Tidy",
        description="Spend 2 minutes organizing your workspace for better focus",
        duration=2,
        category="productivity",
        energy_required="low",
        context=("morning", "work_start", "after_break"),
        success_rate=82,
        habit_stacking=("task_planning", "deep_breathing"),
        ai_reasoning="Clean environment reduces cognitive load and improves concentration",
        priority="medium",
    ),
    MicroHabit(
        id="learning_snippet",
        title="Micro Learning",
        description="Read one paragraph or watch a 2-minute educational video",
        duration=2,
        category="productivity",
        energy_required="medium",
        context=("morning", "afternoon", "evening", "breaks"),
        success_rate=75,
        habit_stacking=("gratitude_practice", "deep_breathing"),
        ai_reasoning="Continuous learning builds knowledge incrementally",
        priority="medium",
    ),

    # Mindfulness
    MicroHabit(
        id="deep_breathing",
        title="3 Deep Breaths",
        description="Take 3 slow, deep breaths to center yourself and reduce stress",
        duration=1,
        category="mindfulness",
        energy_required="low",
        context=("morning", "afternoon", "evening", "stressful_moments", "transitions"),
        success_rate=92,
        habit_stacking=("gratitude_practice", "stretch_break"),
        ai_reasoning="Activates parasympathetic nervous system for calm focus",
        priority="high",
    ),
    MicroHabit(
        id="gratitude_practice",
        title="Gratitude Moment",
        description="Think of one thing you're grateful for right now",
        duration=1,
        category="mindfulness",
        energy_required="low",
        context=("morning", "evening", "breaks", "challenging_moments"),
        success_rate=89,
        habit_stacking=("deep_breathing", "hydration_reminder"),
        ai_reasoning="Shifts focus to positive aspects, improving mood and resilience",
        priority="high",
    ),
    MicroHabit(
        id="present_moment",
        title="Present Moment Check",
        description="Notice 3 things you can see, hear, and feel right now",
        duration=2,
        category="mindfulness",
        energy_required="low",
        context=("transitions", "breaks", "stressful_moments"),
        success_rate=86,
        habit_stacking=("deep_breathing", "gratitude_practice"),
        ai_reasoning="Grounds you in the present, reducing anxiety about past/future",
        priority="medium",
    ),

    # Social
    MicroHabit(
        id="connection_reach",
        title="Quick Connection",
        description="Send a brief, positive message to someone you care about",
        duration=2,
        category="social",
        energy_required="low",
        context=("morning", "afternoon", "evening", "breaks"),
        success_rate=80,
        habit_stacking=("gratitude_practice", "deep_breathing"),
        ai_reasoning="Strengthens relationships and boosts social well-being",
        priority="medium",
    ),
    MicroHabit(
        id="compliment_giving",
        title="Genuine Compliment",
        description="Give a sincere compliment to someone you interact with",
        duration=1,
        category="social",
        energy_required="low",
        context=("work_interactions", "social_situations", "daily_encounters"),
        success_rate=85,
        habit_stacking=("gratitude_practice", "connection_reach"),
        ai_reasoning="Creates positive social interactions and improves relationships",
        priority="medium",
    ),
)

# Role-model personality -> category it boosts
PERSONALITY_AFFINITY = {
    "Einstein": "productivity",
    "Gandhi": "mindfulness",
    "Oprah": "social",
}

def get_candidate(candidate_id: str, catalog=MICRO_HABIT_CATALOG):
    """Returns the catalog entry with this id, or None."""
    for candidate in catalog:
        if candidate.id == candidate_id:
            return candidate
    return None

def stacking_partners(candidate: MicroHabit, catalog=MICRO_HABIT_CATALOG) -> List[MicroHabit]:
    """
    Resolves a candidate's stacking hints to catalog entries.

    Hints that point at ids missing from the catalog (e.g. 'drink_water') are skipped.
    """
    partners = []
    for partner_id in candidate.habit_stacking:
        partner = get_candidate(partner_id, catalog)
        if partner is not None:
            partners.append(partner)
    return partners
