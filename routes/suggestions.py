from fastapi import APIRouter, HTTPException, Query
from models.habit import Habit
from typing import List, Optional
from models.suggestion import MicroHabit, SuggestionResponse
from core.store import db
from core.catalog import get_candidate, stacking_partners
from core.context import classify_context
from core.suggestions import suggest_micro_habits, accept_suggestion, is_demo_mode
from core.time_utils import get_current_time

router = APIRouter(prefix="/suggestions", tags=["Suggestions"])

@router.get("/", response_model=SuggestionResponse)
def get_suggestions(
    mood: int = Query(3, ge=0, le=4),
    personality: Optional[str] = None,
):
    """Ranked micro-habit suggestions for the current time and mood."""
    habits = db.list_habits()
    context = classify_context(get_current_time(), mood)
    return SuggestionResponse(
        context=context,
        demo_mode=is_demo_mode(habits),
        suggestions=suggest_micro_habits(habits, context, personality),
    )

@router.post("/{candidate_id}/accept", response_model=Habit, status_code=201)
def accept(candidate_id: str):
    """Turn a suggestion into a tracked habit with a daily reminder at the current time."""
    candidate = get_candidate(candidate_id)
    if candidate is None:
        raise HTTPException(status_code=404, detail="Suggestion not found")

    habit = accept_suggestion(candidate, get_current_time())
    db.register_habit(habit)
    return habit

@router.get("/{candidate_id}/stacking", response_model=List[MicroHabit])
def get_stacking_partners(candidate_id: str):
    """Catalog entries that pair well with this suggestion."""
    candidate = get_candidate(candidate_id)
    if candidate is None:
        raise HTTPException(status_code=404, detail="Suggestion not found")
    return stacking_partners(candidate)
