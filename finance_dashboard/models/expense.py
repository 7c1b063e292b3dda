from pydantic import BaseModel, ConfigDict
from typing import Optional, Union


RawAmount = Optional[Union[float, str]]


class ExpenseDraft(BaseModel):
    """Entry form state. `amount` keeps whatever the user typed."""

    model_config = ConfigDict(frozen=True)

    category: str = ""
    amount: RawAmount = None
    description: str = ""


class DraftUpdate(BaseModel):
    category: Optional[str] = None
    amount: RawAmount = None
    description: Optional[str] = None


class Expense(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    amount: float
    description: str = ""
