# statement_parser/outputs/csv_output.py

import csv
import logging
import os
from decimal import Decimal

from statement_parser.outputs.base import BaseOutput

logger = logging.getLogger(__name__)

COLUMNS = ['date', 'description', 'amount', 'category', 'type']


class CSVOutput(BaseOutput):
    """
    Writes transactions to Transactions<Year>.csv in the output directory,
    sorted by date (oldest first). The year is taken from the oldest
    transaction. Returns the path written, or None when there is nothing
    to write.
    """
    def __init__(self, config):
        super().__init__(config)
        self.output_dir = config.get('output_dir', 'data')

    def write(self, transactions):
        if not transactions:
            logger.info("No transactions to write.")
            return None

        os.makedirs(self.output_dir, exist_ok=True)
        ordered = sorted(transactions, key=lambda tx: tx.date)
        out_path = os.path.join(self.output_dir, f"Transactions{ordered[0].date.year}.csv")

        with open(out_path, 'w', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(COLUMNS)
            for tx in ordered:
                writer.writerow([
                    tx.date.isoformat(),
                    tx.description,
                    f"{Decimal(str(tx.amount)):.2f}",
                    tx.category,
                    tx.type,
                ])

        logger.info("Written %d transactions to %s", len(ordered), out_path)
        return out_path
