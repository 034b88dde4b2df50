# statement_parser/extractors/base.py
import logging
import re
from abc import ABC, abstractmethod

from statement_parser.config import with_defaults
from statement_parser.core.categorizer import categorize
from statement_parser.core.models import Transaction
from statement_parser.utils import parse_amount, parse_date, placeholder_description

logger = logging.getLogger(__name__)

LINE_SPLIT = re.compile(r"\r?\n|\r|\s{4,}")


class BaseStrategy(ABC):
    """One attempt at pulling transactions out of raw statement text."""

    name = "strategy"

    def __init__(self, config=None):
        self.config = with_defaults(config)

    @abstractmethod
    def extract(self, text):
        """Return a list of Transaction instances found in ``text``."""
        pass

    def build(self, date_token, description, amount, category=None):
        """
        Turn raw tokens into a Transaction.

        ``amount`` may be a raw token or an already parsed number. A blank
        description is replaced by a placeholder naming the date token.
        """
        d = parse_date(date_token)
        if not isinstance(amount, (int, float)):
            amount = parse_amount(amount)
        description = (description or "").strip() or placeholder_description(date_token)
        if category is None:
            category = categorize(description, amount, self.config)
        return Transaction(date=d, description=description, amount=amount, category=category)


class PatternStrategy(BaseStrategy):
    """
    Apply every pattern to the whole text and keep every match.

    Each pattern is a tuple ``(regex, date_group, desc_group, amount_group)``.
    Patterns are not exclusive, so the same span of text may produce more
    than one transaction. Descriptions containing any of ``skip`` are ignored.
    """

    name = "patterns"

    def __init__(self, config=None, patterns=(), skip=()):
        super().__init__(config)
        self.patterns = list(patterns)
        self.skip = tuple(skip)

    def extract(self, text):
        txs = []
        for regex, date_idx, desc_idx, amt_idx in self.patterns:
            for m in regex.finditer(text):
                description = m.group(desc_idx).strip()
                if any(word in description for word in self.skip):
                    continue
                try:
                    txs.append(self.build(m.group(date_idx), description, m.group(amt_idx)))
                except (ValueError, OverflowError) as exc:
                    logger.warning("Error processing match %r: %s", m.group(0), exc)
        return txs


class DatePairingStrategy(BaseStrategy):
    """
    Collect every date-like and amount-like token independently and pair
    them by position, up to the shorter of the two lists.
    """

    name = "date/amount pairing"

    def __init__(self, config=None, date_patterns=(), amount_patterns=()):
        super().__init__(config)
        self.date_patterns = list(date_patterns)
        self.amount_patterns = list(amount_patterns)

    def extract(self, text):
        dates = [tok for rx in self.date_patterns for tok in rx.findall(text)]
        amounts = [tok for rx in self.amount_patterns for tok in rx.findall(text)]
        logger.debug("Found %d date token(s) and %d amount token(s)", len(dates), len(amounts))

        txs = []
        for date_token, amount_token in zip(dates, amounts):
            try:
                txs.append(self.build(date_token, placeholder_description(date_token), amount_token))
            except (ValueError, OverflowError) as exc:
                logger.warning("Error pairing %s with %s: %s", date_token, amount_token, exc)
        return txs


class LineScanStrategy(BaseStrategy):
    """
    Split text into pseudo-lines and read one transaction from each line
    holding both a date and an amount. Whatever is left of the line after
    removing those two tokens becomes the description.
    """

    name = "line scan"

    def __init__(self, config=None, date_regex=None, amount_regex=None, blank_regex=None):
        super().__init__(config)
        self.date_regex = date_regex
        self.amount_regex = amount_regex
        self.blank_regex = blank_regex

    def extract(self, text):
        txs = []
        for line in LINE_SPLIT.split(text):
            date_m = self.date_regex.search(line)
            amount_m = self.amount_regex.search(line)
            if not (date_m and amount_m):
                continue
            date_token = date_m.group(0)
            description = line.replace(date_token, "", 1).replace(amount_m.group(0), "", 1).strip()
            if self.blank_regex is not None and self.blank_regex.match(description):
                description = ""
            try:
                txs.append(self.build(date_token, description, amount_m.group(0)))
            except (ValueError, OverflowError) as exc:
                logger.warning("Error processing line %r: %s", line, exc)
        return txs


class BaseExtractor(ABC):
    """
    Extracts transactions from statement text by trying an ordered list of
    strategies until one of them finds something.
    """

    name = "base"

    def __init__(self, config=None):
        self.config = with_defaults(config)

    @classmethod
    def matches(cls, text, filename=None):
        """Return True when this extractor recognizes the statement."""
        return False

    @abstractmethod
    def strategies(self):
        pass

    def extract(self, text):
        for strategy in self.strategies():
            txs = strategy.extract(text)
            if txs:
                logger.info("%s extractor: %s found %d transaction(s)",
                            self.name, strategy.name, len(txs))
                return txs
            logger.warning("%s extractor: no transactions found with %s, trying next method",
                           self.name, strategy.name)
        return []
