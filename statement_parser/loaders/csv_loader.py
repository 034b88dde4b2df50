# statement_parser/loaders/csv_loader.py
import logging

import pandas as pd

from statement_parser.core.categorizer import categorize
from statement_parser.core.models import Transaction
from statement_parser.exceptions import ParseError
from statement_parser.loaders.base import BaseLoader
from statement_parser.utils import find_field, parse_amount, parse_date

logger = logging.getLogger(__name__)


def _skip_bad_line(fields):
    logger.warning("Skipping malformed CSV line: %s", fields)
    return None


def _cell(row, col):
    value = row[col]
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ''
    return str(value).strip()


class CSVLoader(BaseLoader):
    """
    Loader for CSV exports from any bank.

    The first row holds the headers. Date, description and amount columns
    are located by name using the aliases under ``csv_fields`` in the config;
    rows missing any of them are skipped with a warning.
    """
    label = "CSV"

    def load(self, source, filename=None):
        fields = self.config.get('csv_fields', {})
        try:
            df = pd.read_csv(
                source,
                header=0,
                index_col=False,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                encoding='utf-8-sig',
                engine='python',
                on_bad_lines=_skip_bad_line,
            )
        except pd.errors.EmptyDataError as exc:
            raise ParseError("No data found in CSV file") from exc

        if df.empty:
            raise ParseError("No data found in CSV file")

        txs = []
        for idx, row in enumerate(df.to_dict('records')):
            date_col = find_field(row, fields.get('date', []))
            desc_col = find_field(row, fields.get('description', []))
            amt_col = find_field(row, fields.get('amount', []))

            missing = [name for name, col in (('date', date_col),
                                              ('description', desc_col),
                                              ('amount', amt_col)) if col is None]
            if missing:
                logger.warning("Row %d: could not identify %s field", idx, ', '.join(missing))
                continue

            desc = _cell(row, desc_col) or 'Unknown'
            amount = parse_amount(_cell(row, amt_col))
            txs.append(Transaction(
                date=parse_date(_cell(row, date_col)),
                description=desc,
                amount=amount,
                category=categorize(desc, amount, self.config),
            ))

        if not txs:
            raise ParseError("Could not extract any valid transactions from CSV")

        logger.info("Read %d transaction(s) from CSV", len(txs))
        return txs
