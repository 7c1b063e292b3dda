from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from finance_dashboard.core.dashboard import submit_expense, update_draft
from finance_dashboard.core.errors import InvalidAmount
from finance_dashboard.db.session_store import SessionStore, get_store
from finance_dashboard.models.expense import DraftUpdate, Expense, ExpenseDraft

router = APIRouter()


@router.get("/", response_model=List[Expense])
def list_expenses(store: SessionStore = Depends(get_store)):
    return list(store.state.expenses)


@router.post("/", response_model=Expense, status_code=status.HTTP_201_CREATED)
def create_expense(draft: ExpenseDraft, store: SessionStore = Depends(get_store)):
    """
    Commit the given draft directly. The session's own draft is reset on
    success, the same as submitting the form.
    """
    try:
        state = store.apply(lambda s: submit_expense(s, draft))
    except InvalidAmount as e:
        raise HTTPException(status_code=400, detail=str(e))
    return state.expenses[-1]


@router.get("/draft", response_model=ExpenseDraft)
def get_draft(store: SessionStore = Depends(get_store)):
    return store.state.draft


@router.patch("/draft", response_model=ExpenseDraft)
def edit_draft(changes: DraftUpdate, store: SessionStore = Depends(get_store)):
    fields = changes.model_dump(exclude_unset=True)
    state = store.apply(lambda s: update_draft(s, **fields))
    return state.draft


@router.post("/draft/submit", response_model=Expense, status_code=status.HTTP_201_CREATED)
def submit_draft(store: SessionStore = Depends(get_store)):
    try:
        state = store.apply(submit_expense)
    except InvalidAmount as e:
        raise HTTPException(status_code=400, detail=str(e))
    return state.expenses[-1]
