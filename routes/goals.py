from fastapi import APIRouter, HTTPException
from typing import List
from models.goal import Goal
from core.store import db, GoalNotFoundError

router = APIRouter(prefix="/goals", tags=["Goals"])

@router.get("/", response_model=List[Goal])
def get_goals():
    return db.list_goals()

@router.delete("/{goal_id}")
def delete_goal(goal_id: str):
    try:
        db.delete_goal(goal_id)
    except GoalNotFoundError:
        raise HTTPException(status_code=404, detail="Goal not found")
    return {"message": "Goal deleted"}
