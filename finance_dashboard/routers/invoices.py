from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status

from finance_dashboard.core.dashboard import record_invoice
from finance_dashboard.db.session_store import SessionStore, get_store

router = APIRouter()


@router.get("/", response_model=List[str])
def list_invoices(store: SessionStore = Depends(get_store)):
    return list(store.state.invoices)


@router.post("/", response_model=List[str], status_code=status.HTTP_201_CREATED)
def upload_invoice(
    file: Optional[UploadFile] = File(None),
    store: SessionStore = Depends(get_store),
):
    """
    Record the uploaded file's name. The content is not read or kept.
    Posting without a file leaves the list as it is.
    """
    state = store.apply(lambda s: record_invoice(s, file))
    return list(state.invoices)
