# statement_parser/core/models.py
from dataclasses import dataclass, field
from datetime import date

INCOME = "Income"
ESSENTIALS = "Essentials"
WANTS = "Wants"
SAVINGS = "Savings"


@dataclass
class Transaction:
    date: date
    description: str
    amount: float
    category: str = ESSENTIALS
    type: str = field(init=False)

    def __post_init__(self):
        self.type = "income" if self.amount > 0 else "expense"
