from typing import Dict, List

from fastapi import APIRouter, Depends

from finance_dashboard.core.dashboard import summarize
from finance_dashboard.db.session_store import SessionStore, get_store
from finance_dashboard.utils.analyzer import aggregate_by_category

router = APIRouter()


@router.get("/")
def get_dashboard(store: SessionStore = Depends(get_store)) -> Dict:
    return summarize(store.state)


@router.delete("/")
def reset_dashboard(store: SessionStore = Depends(get_store)) -> Dict:
    """Start over with an empty session, like reloading the page."""
    return summarize(store.reset())


@router.get("/chart")
def get_chart_data(store: SessionStore = Depends(get_store)) -> List[Dict]:
    return [item.to_dict() for item in aggregate_by_category(store.state.expenses)]
