"""
In-memory habit and goal collections owned by the host application.

The engine functions never mutate these; they read a snapshot and hand back
new records. Writes go through HabitStore so that the pairing "look up, then
append both records" sequence and cascade deletes happen under one lock.
"""

import logging
import threading
from datetime import datetime
from typing import Dict, List, Optional

from core.pairing import pair_bad_habit, cascade_ids
from core.time_utils import get_current_time
from models.goal import Goal
from models.habit import Habit

logger = logging.getLogger(__name__)


class HabitNotFoundError(KeyError):
    pass


class GoalNotFoundError(KeyError):
    pass


class HabitStore:
    def __init__(self):
        self.lock = threading.RLock()
        self.habits: Dict[str, Habit] = {}
        self.goals: Dict[str, Goal] = {}
        self.last_maintenance: datetime = get_current_time()

    # Habits
    def list_habits(self) -> List[Habit]:
        with self.lock:
            return list(self.habits.values())

    def get_habit(self, habit_id: str) -> Habit:
        with self.lock:
            habit = self.habits.get(habit_id)
        if habit is None:
            raise HabitNotFoundError(habit_id)
        return habit

    def insert_many(self, habits: List[Habit]) -> List[Habit]:
        """Adds every record or none of them."""
        with self.lock:
            if any(h.id in self.habits for h in habits):
                raise ValueError("Duplicate habit id")
            for h in habits:
                self.habits[h.id] = h
        return habits

    def register_habit(self, habit: Habit) -> List[Habit]:
        """
        Adds a new habit.

        A bad habit is paired with a generated positive habit and both are
        inserted together. Returns the inserted records.
        """
        with self.lock:
            if not habit.is_bad:
                return self.insert_many([habit])

            pair = pair_bad_habit(habit, self.list_habits())
            return self.insert_many([pair.bad_habit, pair.positive_habit])

    def replace_habit(self, habit: Habit) -> Habit:
        with self.lock:
            if habit.id not in self.habits:
                raise HabitNotFoundError(habit.id)
            self.habits[habit.id] = habit
        return habit

    def delete_habit(self, habit_id: str) -> List[str]:
        """Deletes a habit and, for a pair, its partner. Returns the removed ids."""
        with self.lock:
            ids = cascade_ids(habit_id, self.list_habits())
            if not ids:
                raise HabitNotFoundError(habit_id)
            for i in ids:
                del self.habits[i]
        logger.info("Deleted habits %s", sorted(ids))
        return sorted(ids)

    def toggle_habit(self, habit_id: str) -> Habit:
        """
        Flips completed_today.

        Completing adds one to streak and current_week_completed, undoing
        takes one off both. Bad habits carry no weekly progress.
        """
        with self.lock:
            habit = self.get_habit(habit_id)
            step = -1 if habit.completed_today else 1
            update = {
                "completed_today": not habit.completed_today,
                "streak": max(0, habit.streak + step),
            }
            if not habit.is_bad:
                update["current_week_completed"] = max(0, habit.current_week_completed + step)
            return self.replace_habit(habit.model_copy(update=update))

    # Goals
    def list_goals(self) -> List[Goal]:
        with self.lock:
            return list(self.goals.values())

    def add_goal(self, goal: Goal) -> Goal:
        with self.lock:
            self.goals[goal.id] = goal
        return goal

    def delete_goal(self, goal_id: str) -> None:
        with self.lock:
            if self.goals.pop(goal_id, None) is None:
                raise GoalNotFoundError(goal_id)

    def clear(self, now: Optional[datetime] = None) -> None:
        with self.lock:
            self.habits.clear()
            self.goals.clear()
            self.last_maintenance = now or get_current_time()


db = HabitStore()
