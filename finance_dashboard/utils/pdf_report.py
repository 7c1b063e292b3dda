import csv
import io
from typing import Any, Dict, Iterable

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from finance_dashboard.models.expense import Expense
from finance_dashboard.utils.formatting import format_currency

_NEXT_LINE = {"new_x": XPos.LMARGIN, "new_y": YPos.NEXT}


def _latin1(text: str) -> str:
    # Core PDF fonts only cover latin-1.
    return text.encode("latin-1", "replace").decode("latin-1")


def build_summary_pdf(summary: Dict[str, Any]) -> bytes:
    pdf = FPDF()
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 16)
    pdf.cell(0, 10, _latin1(summary["title"]), **_NEXT_LINE)

    pdf.set_font("Helvetica", "", 12)
    pdf.cell(0, 10, _latin1(f"Total Spent: {format_currency(summary['total_spent'])}"), **_NEXT_LINE)
    pdf.cell(0, 10, _latin1(summary["progress_label"]), **_NEXT_LINE)
    pdf.ln(5)

    pdf.set_font("Helvetica", "B", 12)
    pdf.cell(0, 10, "Spending by Category:", **_NEXT_LINE)
    pdf.set_font("Helvetica", "", 12)
    if summary["category_totals"]:
        for item in summary["category_totals"]:
            pdf.cell(0, 10, _latin1(f"- {item['category']}: {format_currency(item['total'])}"), **_NEXT_LINE)
    else:
        pdf.cell(0, 10, "None", **_NEXT_LINE)

    pdf.ln(5)
    pdf.set_font("Helvetica", "B", 12)
    pdf.cell(0, 10, "Expenses:", **_NEXT_LINE)
    pdf.set_font("Helvetica", "", 12)
    for expense in summary["expenses"]:
        line = expense["label"]
        if expense.get("description"):
            line = f"{line} ({expense['description']})"
        pdf.cell(0, 10, _latin1(f"- {line}"), **_NEXT_LINE)

    return bytes(pdf.output())


def build_expenses_csv(expenses: Iterable[Expense]) -> str:
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=["category", "amount", "description"])
    writer.writeheader()
    for e in expenses:
        writer.writerow({
            "category": e.category,
            "amount": f"{e.amount:.2f}",
            "description": e.description,
        })
    return output.getvalue()
