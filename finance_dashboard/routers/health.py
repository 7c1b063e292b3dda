"""
Health Check Router
Simple health check endpoint
"""
from fastapi import APIRouter, Depends
from datetime import datetime, timezone

from finance_dashboard.core.config import settings
from finance_dashboard.db.session_store import SessionStore, get_store

router = APIRouter()


@router.get("/health")
async def health_check(store: SessionStore = Depends(get_store)):
    """
    Health check endpoint.
    Returns API status and the size of the current session.
    """
    state = store.state
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "session": {
            "expenses": len(state.expenses),
            "invoices": len(state.invoices),
        },
    }
