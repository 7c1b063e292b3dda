from finance_dashboard.core.config import settings


def format_currency(value: float) -> str:
    return f"{settings.CURRENCY_SYMBOL} {float(value):.2f}"


def expense_line(expense) -> str:
    return f"{expense.category} - {format_currency(expense.amount)}"


def progress_label(total_spent: float, goal: float, progress_pct: float) -> str:
    return (
        f"Progress: {format_currency(total_spent)} of {format_currency(goal)} "
        f"({progress_pct:.1f}%)"
    )
