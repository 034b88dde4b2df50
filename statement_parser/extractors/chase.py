# statement_parser/extractors/chase.py
import logging
import re

from statement_parser.core.models import INCOME
from statement_parser.extractors.base import (
    BaseExtractor,
    BaseStrategy,
    LineScanStrategy,
    PatternStrategy,
)
from statement_parser.utils import parse_amount, parse_date

logger = logging.getLogger(__name__)

_MARKERS = ("CHASE", "JPMorgan Chase Bank")

# 01/15 Description -12.34 1,234.56 (amount followed by the running balance)
_LEDGER_RX = re.compile(r"(\d{2}/\d{2})\s+([^\d]+?)\s+(-?\d+\.\d{2})\s+(\d+,?\d*\.\d{2})")

# Payroll, Zelle and ACH credits, which Chase prints without a sign
_INCOME_RX = re.compile(
    r"(\d{2}/\d{2})\s+(Zelle Payment From|.*?Payroll|.*?Direct Deposit|.*?ACH Credit)"
    r".*?(\d+,?\d*\.\d{2})"
)

_SIMPLE_PATTERNS = [
    (re.compile(r"(\d{2}/\d{2})\s+(.+?)\s+(-?\d+\.\d{2})"), 1, 2, 3),
]

_SHORT_DATE = re.compile(r"(\d{2}/\d{2})")
_PLAIN_AMOUNT = re.compile(r"(-?\d+\.\d{2})")
_PUNCTUATION_ONLY = re.compile(r"^[\s.,;:]+$")

_BALANCE_ROWS = ("Beginning Balance", "Ending Balance")


class ChaseLedgerStrategy(BaseStrategy):
    """
    Reads the "Transaction Detail" section of a Chase checking statement.

    Income lines are collected first and always recorded as positive
    Income. Ledger lines follow; a negative ledger line that repeats an
    income line's date and description is the same deposit and is dropped.
    """

    name = "chase ledger"

    def extract(self, text):
        income_category = self.config.get('income_category', INCOME)
        txs = []

        for m in _INCOME_RX.finditer(text):
            try:
                amount = abs(parse_amount(m.group(3)))
                txs.append(self.build(m.group(1), m.group(2), amount, category=income_category))
            except (ValueError, OverflowError) as exc:
                logger.warning("Error processing Chase income match %r: %s", m.group(0), exc)

        for m in _LEDGER_RX.finditer(text):
            description = m.group(2).strip()
            if any(row in description for row in _BALANCE_ROWS):
                continue
            try:
                d = parse_date(m.group(1))
                amount = parse_amount(m.group(3))
                duplicate = any(
                    t.date == d and t.description == description and t.amount > 0 and amount < 0
                    for t in txs
                )
                if duplicate:
                    logger.debug("Skipping ledger line already recorded as income: %s", description)
                    continue
                txs.append(self.build(m.group(1), description, amount))
            except (ValueError, OverflowError) as exc:
                logger.warning("Error processing Chase transaction match %r: %s", m.group(0), exc)

        return txs


class ChaseExtractor(BaseExtractor):
    """Extractor for JPMorgan Chase checking statements."""

    name = "chase"

    @classmethod
    def matches(cls, text, filename=None):
        if any(marker in text for marker in _MARKERS):
            return True
        return bool(filename) and 'chase' in filename.lower()

    def strategies(self):
        return [
            ChaseLedgerStrategy(self.config),
            PatternStrategy(self.config, _SIMPLE_PATTERNS, skip=("Balance",)),
            LineScanStrategy(self.config, _SHORT_DATE, _PLAIN_AMOUNT, _PUNCTUATION_ONLY),
        ]
