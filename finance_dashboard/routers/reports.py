import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from finance_dashboard.core.dashboard import summarize
from finance_dashboard.db.session_store import SessionStore, get_store
from finance_dashboard.utils import pdf_report

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/summary.pdf")
def download_summary_pdf(store: SessionStore = Depends(get_store)) -> Response:
    """
    One-page PDF snapshot of the current session: totals, reserve progress,
    category breakdown and the committed expenses.
    """
    summary = summarize(store.state)
    try:
        content = pdf_report.build_summary_pdf(summary)
    except Exception as e:
        logger.error(f"Error generating PDF summary: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to generate PDF: {str(e)}")
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="summary.pdf"'},
    )


@router.get("/expenses.csv")
def download_expenses_csv(store: SessionStore = Depends(get_store)) -> Response:
    content = pdf_report.build_expenses_csv(store.state.expenses)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="expenses.csv"'},
    )
