"""
Dashboard session operations.

Every function takes the current DashboardState and returns a new one; the
caller's state is never touched. Validation failures raise InvalidAmount or
InvalidGoal and leave nothing half-applied.
"""
import logging
import math
from pathlib import PurePath
from typing import Any, Dict, Optional

from finance_dashboard.core.config import settings
from finance_dashboard.core.errors import InvalidAmount, InvalidGoal
from finance_dashboard.models.category import CATEGORIES
from finance_dashboard.models.dashboard import DashboardState
from finance_dashboard.models.expense import Expense, ExpenseDraft
from finance_dashboard.utils.analyzer import aggregate_by_category, reserve_progress
from finance_dashboard.utils.formatting import expense_line, progress_label

logger = logging.getLogger(__name__)


def new_session() -> DashboardState:
    return DashboardState(reserve_goal=settings.DEFAULT_RESERVE_GOAL)


def _to_finite_float(raw: Any) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def parse_amount(raw: Any) -> float:
    """Convert a raw form entry into an expense amount."""
    value = _to_finite_float(raw)
    # An untouched form holds 0, which is rejected like an empty entry.
    if value is None or value == 0:
        raise InvalidAmount(value=raw)
    return value


def update_draft(state: DashboardState, **changes: Any) -> DashboardState:
    """
    Replace the given draft fields. A field passed as None is cleared back
    to its empty default; fields not passed keep their value.
    """
    unknown = set(changes) - set(ExpenseDraft.model_fields)
    if unknown:
        raise TypeError(f"Unknown draft fields: {', '.join(sorted(unknown))}")
    if not changes:
        return state
    defaults = ExpenseDraft()
    cleaned: Dict[str, Any] = {
        field: getattr(defaults, field) if value is None else value
        for field, value in changes.items()
    }
    return state.model_copy(update={"draft": state.draft.model_copy(update=cleaned)})


def submit_expense(state: DashboardState, draft: Optional[ExpenseDraft] = None) -> DashboardState:
    """
    Commit `draft` (the session's own draft when omitted) as a new expense.

    On success the expense is appended and the draft goes back to its empty
    defaults. Raises InvalidAmount when the amount is missing or unusable.
    """
    draft = state.draft if draft is None else draft
    try:
        amount = parse_amount(draft.amount)
    except InvalidAmount:
        logger.warning(f"Rejected expense draft with amount {draft.amount!r}")
        raise

    expense = Expense(category=draft.category, amount=amount, description=draft.description)
    logger.info(f"Added expense: {expense.category} {expense.amount:.2f}")
    return state.model_copy(update={
        "expenses": state.expenses + (expense,),
        "draft": ExpenseDraft(),
    })


def invoice_name(file_handle: Any) -> Optional[str]:
    if file_handle is None:
        return None
    if isinstance(file_handle, str):
        return file_handle or None
    filename = getattr(file_handle, "filename", None)
    if filename:
        return filename
    # Open file objects carry their full path in `name`.
    name = getattr(file_handle, "name", None)
    if isinstance(name, str) and name:
        return PurePath(name).name
    return None


def record_invoice(state: DashboardState, file_handle: Any) -> DashboardState:
    """Append the selected file's name. No selection is a no-op."""
    name = invoice_name(file_handle)
    if name is None:
        return state
    logger.info(f"Recorded invoice: {name}")
    return state.model_copy(update={"invoices": state.invoices + (name,)})


def set_reserve_goal(state: DashboardState, raw: Any) -> DashboardState:
    goal = _to_finite_float(raw)
    if goal is None:
        logger.warning(f"Rejected reserve goal {raw!r}")
        raise InvalidGoal(value=raw)
    logger.info(f"Reserve goal set to {goal:.2f}")
    return state.model_copy(update={"reserve_goal": goal})


def summarize(state: DashboardState) -> Dict[str, Any]:
    """Everything the view needs to render, derived fresh from `state`."""
    progress = reserve_progress(state.expenses, state.reserve_goal)
    return {
        "title": settings.DASHBOARD_TITLE,
        "categories": list(CATEGORIES),
        "draft": state.draft.model_dump(),
        "expenses": [
            {**exp.model_dump(), "label": expense_line(exp)}
            for exp in state.expenses
        ],
        "invoices": list(state.invoices),
        "category_totals": [item.to_dict() for item in aggregate_by_category(state.expenses)],
        "total_spent": progress.total_spent,
        "reserve_goal": progress.goal,
        "progress_pct": progress.progress_pct,
        "progress_label": progress_label(progress.total_spent, progress.goal, progress.progress_pct),
    }
