from fastapi import APIRouter, HTTPException
from typing import List
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from models.habit import Habit, HabitCreate, ComplementaryHabit
from models.goal import Goal
from models.strength import StrengthScore
from core.store import db, HabitNotFoundError
from core.strength import calculate_strength
from core.complements import suggest_complementary_habits
from core.goals import goal_service
from core.pairing import find_paired_habits
from core.time_utils import get_current_time

router = APIRouter(prefix="/habits", tags=["Habits"])

class HabitPairOut(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    bad_habit: Habit
    positive_habit: Habit

def _get_or_404(habit_id: str) -> Habit:
    try:
        return db.get_habit(habit_id)
    except HabitNotFoundError:
        raise HTTPException(status_code=404, detail="Habit not found")

@router.post("/", response_model=List[Habit], status_code=201)
def create_habit(habit_in: HabitCreate):
    """
    Create a habit.

    A bad habit is stored together with the positive habit generated to
    replace it; the response then holds both records (bad habit first) and
    only the positive one keeps an enabled reminder.
    """
    habit = Habit(**habit_in.model_dump(), created_at=get_current_time())
    return db.register_habit(habit)

@router.get("/", response_model=List[Habit])
def get_habits():
    return db.list_habits()

@router.get("/pairs", response_model=List[HabitPairOut])
def get_habit_pairs():
    return [
        HabitPairOut(bad_habit=pair.bad_habit, positive_habit=pair.positive_habit)
        for pair in find_paired_habits(db.list_habits())
    ]

@router.get("/{habit_id}", response_model=Habit)
def get_habit(habit_id: str):
    return _get_or_404(habit_id)

@router.delete("/{habit_id}")
def delete_habit(habit_id: str):
    try:
        deleted = db.delete_habit(habit_id)
    except HabitNotFoundError:
        raise HTTPException(status_code=404, detail="Habit not found")
    return {"message": "Habit deleted", "deleted_ids": deleted}

@router.post("/{habit_id}/toggle", response_model=Habit)
def toggle_habit(habit_id: str):
    try:
        return db.toggle_habit(habit_id)
    except HabitNotFoundError:
        raise HTTPException(status_code=404, detail="Habit not found")

@router.get("/{habit_id}/strength", response_model=StrengthScore)
def get_habit_strength(habit_id: str):
    return calculate_strength(_get_or_404(habit_id))

@router.get("/{habit_id}/complements", response_model=List[ComplementaryHabit])
def get_complementary_habits(habit_id: str):
    return suggest_complementary_habits(_get_or_404(habit_id))

@router.post("/{habit_id}/goal", response_model=Goal, status_code=201)
def generate_goal(habit_id: str):
    """Generate a complementary long-term goal from this habit and store it."""
    habit = _get_or_404(habit_id)
    goal = goal_service.generate_goal_for_habit(habit)
    return db.add_goal(goal)
