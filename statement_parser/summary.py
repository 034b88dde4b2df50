# statement_parser/summary.py
from dataclasses import dataclass, field
from typing import Dict, Iterable

from statement_parser.core.models import ESSENTIALS, INCOME, SAVINGS, WANTS, Transaction


@dataclass
class BudgetSummary:
    total_income: float = 0.0
    total_expenses: float = 0.0
    net_cashflow: float = 0.0
    categories: Dict[str, float] = field(default_factory=dict)
    percentages: Dict[str, float] = field(default_factory=dict)


def summarize(transactions: Iterable[Transaction], income_category: str = INCOME) -> BudgetSummary:
    """
    Total income and spending, with spending broken down by category.

    Expenses are reported as positive numbers. Category keys are lower-case
    and always include essentials, wants and savings; percentages are shares
    of total expenses.
    """
    summary = BudgetSummary(
        categories={c.lower(): 0.0 for c in (ESSENTIALS, WANTS, SAVINGS)},
    )
    for tx in transactions:
        if tx.amount > 0:
            summary.total_income += tx.amount
            continue
        spent = abs(tx.amount)
        summary.total_expenses += spent
        if tx.category and tx.category != income_category:
            key = tx.category.lower()
            summary.categories[key] = summary.categories.get(key, 0.0) + spent

    summary.net_cashflow = summary.total_income - summary.total_expenses
    for key, spent in summary.categories.items():
        if summary.total_expenses > 0:
            summary.percentages[key] = spent / summary.total_expenses * 100
        else:
            summary.percentages[key] = 0.0
    return summary
