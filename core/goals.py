import logging
import random
from datetime import timedelta
from typing import Dict, List, Optional

from core.time_utils import get_current_time
from models.goal import Goal, GoalTemplate
from models.habit import Habit

logger = logging.getLogger(__name__)

# Category -> complementary long-term goals. "{habit}" is replaced with the lower-cased habit title.
GOAL_TEMPLATES: Dict[str, List[GoalTemplate]] = {
    "health": [
        GoalTemplate(title="Complete a 30-Day Fitness Challenge", description='Build on your "{habit}" habit by taking on a comprehensive fitness challenge', target=30, unit="days", deadline_days=45, category="fitness", priority="high"),
        GoalTemplate(title="Achieve 10,000 Steps Daily for 21 Days", description="Enhance your physical activity with a consistent step count goal", target=21, unit="days", deadline_days=30, category="health", priority="medium"),
        GoalTemplate(title="Improve Sleep Quality Score to 85+", description="Track and optimize your sleep quality for better overall health", target=85, unit="sleep score", deadline_days=90, category="health", priority="high"),
        GoalTemplate(title="Complete 3 Different Types of Workouts", description="Diversify your exercise routine with strength, cardio, and flexibility training", target=3, unit="workout types", deadline_days=60, category="fitness", priority="medium"),
        GoalTemplate(title="Run Your First 5K Race", description="Train for and complete a 5K race to challenge your fitness level", target=1, unit="races", deadline_days=120, category="fitness", priority="medium"),
    ],
    "mindfulness": [
        GoalTemplate(title="Complete a 7-Day Digital Detox", description="Enhance your mindfulness practice by taking a break from screens", target=7, unit="days", deadline_days=30, category="mindfulness", priority="medium"),
        GoalTemplate(title="Learn 3 New Breathing Techniques", description="Expand your mindfulness toolkit with different breathing exercises", target=3, unit="techniques", deadline_days=60, category="mindfulness", priority="medium"),
        GoalTemplate(title="Write 50 Gratitude Letters", description="Express gratitude to people who have positively impacted your life", target=50, unit="letters", deadline_days=180, category="mindfulness", priority="medium"),
        GoalTemplate(title="Complete a Mindfulness Course", description="Deepen your understanding through a structured mindfulness course", target=1, unit="courses", deadline_days=90, category="mindfulness", priority="high"),
        GoalTemplate(title="Practice Mindful Eating for 30 Days", description="Apply mindfulness to your eating habits for better health and awareness", target=30, unit="days", deadline_days=45, category="mindfulness", priority="medium"),
    ],
    "productivity": [
        GoalTemplate(title="Read 12 Books This Year", description="Expand your knowledge and vocabulary through diverse reading", target=12, unit="books", deadline_days=365, category="productivity", priority="medium"),
        GoalTemplate(title="Complete 3 Online Courses", description="Develop new skills through structured online learning", target=3, unit="courses", deadline_days=180, category="productivity", priority="high"),
        GoalTemplate(title="Learn a New Language - Basic Proficiency", description="Achieve basic conversational skills in a new language", target=1, unit="languages", deadline_days=365, category="productivity", priority="medium"),
        GoalTemplate(title="Write 30 Blog Posts or Articles", description="Share your knowledge and improve your writing skills", target=30, unit="posts", deadline_days=180, category="productivity", priority="medium"),
        GoalTemplate(title="Master 5 New Skills", description="Learn and become proficient in 5 different skills or hobbies", target=5, unit="skills", deadline_days=365, category="productivity", priority="high"),
    ],
    "social": [
        GoalTemplate(title="Volunteer 50 Hours This Year", description="Give back to your community through regular volunteer work", target=50, unit="hours", deadline_days=365, category="social", priority="medium"),
        GoalTemplate(title="Reconnect with 10 Old Friends", description="Reach out and rebuild connections with people from your past", target=10, unit="friends", deadline_days=90, category="social", priority="medium"),
        GoalTemplate(title="Join 3 New Social Groups or Clubs", description="Expand your social network by joining new communities", target=3, unit="groups", deadline_days=120, category="social", priority="medium"),
        GoalTemplate(title="Organize 5 Community Events", description="Take initiative to bring people together through events", target=5, unit="events", deadline_days=180, category="social", priority="medium"),
        GoalTemplate(title="Mentor Someone for 6 Months", description="Share your knowledge and experience by mentoring another person", target=6, unit="months", deadline_days=180, category="social", priority="high"),
    ],
}

FALLBACK_GOAL_TEMPLATES: List[GoalTemplate] = [
    GoalTemplate(title="Complete a Personal Development Challenge", description="Take on a 90-day challenge that combines multiple areas of improvement", target=90, unit="days", deadline_days=120, category="productivity", priority="high"),
    GoalTemplate(title="Create a Morning Routine Mastery", description="Design and perfect a comprehensive morning routine that sets you up for success", target=30, unit="days", deadline_days=45, category="productivity", priority="high"),
    GoalTemplate(title="Achieve Work-Life Balance Score of 8/10", description="Improve your work-life balance through better time management and boundaries", target=8, unit="score", deadline_days=90, category="productivity", priority="high"),
]


def templates_for_category(category: str) -> List[GoalTemplate]:
    return GOAL_TEMPLATES.get(category, FALLBACK_GOAL_TEMPLATES)


class GoalTemplateService:
    """
    Derives a complementary long-term goal from a single habit.

    Holds nothing but its random source; pass a seeded random.Random for
    reproducible picks.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate_goal_for_habit(self, habit: Habit, now=None) -> Goal:
        now = now or get_current_time()
        template = self.rng.choice(templates_for_category(habit.category))

        goal = Goal(
            title=template.title,
            description=template.description.format(habit=habit.title.lower()),
            target=template.target,
            current=0,
            unit=template.unit,
            deadline=(now + timedelta(days=template.deadline_days)).date(),
            category=template.category,
            priority=template.priority,
            ai_generated=True,
            source_habit=habit.title,
            created_at=now,
        )
        logger.info("Generated goal %r from habit %r", goal.title, habit.title)
        return goal


goal_service = GoalTemplateService()
