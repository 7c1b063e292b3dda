from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Union

from finance_dashboard.models.category import CATEGORIES, color_for
from finance_dashboard.models.expense import Expense

ExpenseLike = Union[Expense, Mapping[str, Any]]


@dataclass(frozen=True)
class CategoryTotal:
    """One chart slice: the summed spend of a single category."""

    category: str
    total: float
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ReserveProgress:
    total_spent: float
    goal: float
    progress_pct: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _field(expense: ExpenseLike, name: str, default: Any = None) -> Any:
    if isinstance(expense, Mapping):
        return expense.get(name, default)
    return getattr(expense, name, default)


def safe_amount(expense: ExpenseLike) -> float:
    """
    Amount of a single record, or 0.0 when it is missing, unparseable or
    not finite. Aggregation must not fail because of one bad record.
    """
    raw = _field(expense, "amount")
    if raw is None or isinstance(raw, bool):
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def total_spent(expenses: Iterable[ExpenseLike]) -> float:
    return sum(safe_amount(exp) for exp in expenses)


def aggregate_by_category(
    expenses: Sequence[ExpenseLike],
    categories: Sequence[str] = CATEGORIES,
) -> List[CategoryTotal]:
    """
    Sum amounts per category, in the order of `categories`.

    Matching is exact and case-sensitive. Categories whose total is not
    positive are left out, so the result can be handed to a chart as is.
    """
    totals: List[CategoryTotal] = []
    for category in categories:
        total = sum(
            safe_amount(exp) for exp in expenses
            if _field(exp, "category") == category
        )
        if total > 0:
            totals.append(CategoryTotal(category=category, total=total, color=color_for(category)))
    return totals


def reserve_progress(expenses: Sequence[ExpenseLike], goal: float) -> ReserveProgress:
    """
    Spending measured against the reserve goal, as a percentage in [0, 100].

    A goal that is zero, negative or not finite has no meaningful ratio:
    progress is then 100 when anything was spent and 0 otherwise.
    """
    spent = total_spent(expenses)
    try:
        goal_value = float(goal)
    except (TypeError, ValueError):
        goal_value = 0.0

    if math.isfinite(goal_value) and goal_value > 0:
        pct = max(0.0, min(100.0, spent / goal_value * 100))
    else:
        pct = 100.0 if spent > 0 else 0.0

    return ReserveProgress(total_spent=spent, goal=goal_value, progress_pct=pct)
