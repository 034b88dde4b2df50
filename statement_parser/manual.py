# statement_parser/manual.py
from datetime import date

import yaml

from statement_parser.config import with_defaults
from statement_parser.core.categorizer import categorize
from statement_parser.core.models import Transaction
from statement_parser.utils import parse_amount, parse_date, placeholder_description


def load_manual_transactions(path, config=None):
    """
    Load hand-entered transactions from a YAML list.

    Each entry needs a ``date`` and an ``amount``; ``description`` and
    ``category`` are optional. Without a category the entry is categorized
    like any parsed transaction.
    """
    cfg = with_defaults(config)
    with open(path) as f:
        data = yaml.safe_load(f) or []
    if not isinstance(data, list):
        raise ValueError(f"Manual transactions file {path} must contain a list")

    txs = []
    for entry in data:
        if not isinstance(entry, dict):
            raise ValueError(f"Manual entry must be a mapping, got: {entry}")
        raw_date = entry.get('date')
        if not raw_date:
            raise ValueError(f"Missing 'date' in manual entry: {entry}")
        if 'amount' not in entry:
            raise ValueError(f"Missing 'amount' in manual entry: {entry}")

        d = raw_date if isinstance(raw_date, date) else parse_date(str(raw_date))
        amount = parse_amount(entry['amount'])
        desc = str(entry.get('description') or '').strip() or placeholder_description(d.isoformat())
        txs.append(Transaction(
            date=d,
            description=desc,
            amount=amount,
            category=entry.get('category') or categorize(desc, amount, cfg),
        ))
    return txs
