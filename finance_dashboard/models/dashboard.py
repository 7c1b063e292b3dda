from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple, Union

from finance_dashboard.core.config import settings
from finance_dashboard.models.expense import Expense, ExpenseDraft


class DashboardState(BaseModel):
    """
    Everything one dashboard session owns. Instances are never mutated:
    update functions return a copy with the changed fields.
    """

    model_config = ConfigDict(frozen=True)

    draft: ExpenseDraft = Field(default_factory=ExpenseDraft)
    expenses: Tuple[Expense, ...] = ()
    invoices: Tuple[str, ...] = ()
    reserve_goal: float = Field(default_factory=lambda: settings.DEFAULT_RESERVE_GOAL)


class GoalUpdate(BaseModel):
    goal: Optional[Union[float, str]] = None
