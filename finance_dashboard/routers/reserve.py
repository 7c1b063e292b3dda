from typing import Dict

from fastapi import APIRouter, Depends, HTTPException

from finance_dashboard.core.dashboard import set_reserve_goal
from finance_dashboard.core.errors import InvalidGoal
from finance_dashboard.db.session_store import SessionStore, get_store
from finance_dashboard.models.dashboard import DashboardState, GoalUpdate
from finance_dashboard.utils.analyzer import reserve_progress
from finance_dashboard.utils.formatting import progress_label

router = APIRouter()


def _progress_payload(state: DashboardState) -> Dict:
    progress = reserve_progress(state.expenses, state.reserve_goal)
    return {
        **progress.to_dict(),
        "label": progress_label(progress.total_spent, progress.goal, progress.progress_pct),
    }


@router.get("/")
def get_reserve(store: SessionStore = Depends(get_store)) -> Dict:
    return _progress_payload(store.state)


@router.put("/goal")
def update_goal(update: GoalUpdate, store: SessionStore = Depends(get_store)) -> Dict:
    try:
        state = store.apply(lambda s: set_reserve_goal(s, update.goal))
    except InvalidGoal as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _progress_payload(state)
