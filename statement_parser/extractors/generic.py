# statement_parser/extractors/generic.py
import re

from statement_parser.extractors.base import (
    BaseExtractor,
    DatePairingStrategy,
    LineScanStrategy,
    PatternStrategy,
)

# (regex, date group, description group, amount group)
STANDARD_PATTERNS = [
    # 01/15/2024 Description 12.34
    (re.compile(r"(\d{1,2}/\d{1,2}/\d{2,4})\s+([A-Za-z0-9\s.,&'\-#]+?)\s+(\$?-?\d+\.\d{2})"), 1, 2, 3),
    # 01/15/2024 12.34 Description
    (re.compile(r"(\d{1,2}/\d{1,2}/\d{2,4})\s+(\$?-?\d+\.\d{2})\s+([A-Za-z0-9\s.,&'\-#]+)"), 1, 3, 2),
    # 01/15 Description 12.34
    (re.compile(r"(\d{1,2}/\d{1,2})\s+([A-Za-z0-9\s.,&'\-#]+?)\s+(\$?-?\d+\.\d{2})"), 1, 2, 3),
    # 01/15/2024 Description $ 12.34
    (re.compile(r"(\d{1,2}/\d{1,2}/\d{2,4})\s+([A-Za-z0-9\s.,&'\-#]+?)\s+\$\s*(-?\d+\.\d{2})"), 1, 2, 3),
    # 2024-01-15 Description 12.34
    (re.compile(r"(\d{4}-\d{1,2}-\d{1,2})\s+([A-Za-z0-9\s.,&'\-#]+?)\s+(-?\$?\d+\.\d{2})"), 1, 2, 3),
]

DATE_TOKENS = [
    re.compile(r"\d{1,2}/\d{1,2}/\d{2,4}"),
    re.compile(r"\d{1,2}/\d{1,2}"),
    re.compile(r"\d{4}-\d{1,2}-\d{1,2}"),
]

AMOUNT_TOKENS = [
    re.compile(r"\$?-?\d+\.\d{2}"),
    re.compile(r"\$\s*\d+\.\d{2}"),
    re.compile(r"\(\$?\d+\.\d{2}\)"),
]

LINE_DATE = re.compile(r"\d{1,2}/\d{1,2}(?:/\d{2,4})?|\d{4}-\d{1,2}-\d{1,2}")
LINE_AMOUNT = re.compile(r"\$?-?\d+\.\d{2}|\(\$?\d+\.\d{2}\)")


class GenericExtractor(BaseExtractor):
    """Best-effort extractor for statements from any bank."""

    name = "generic"

    @classmethod
    def matches(cls, text, filename=None):
        return True

    def strategies(self):
        return [
            PatternStrategy(self.config, STANDARD_PATTERNS),
            DatePairingStrategy(self.config, DATE_TOKENS, AMOUNT_TOKENS),
            LineScanStrategy(self.config, LINE_DATE, LINE_AMOUNT),
        ]
