# statement_parser/outputs/table_output.py
import click

from statement_parser.outputs.base import BaseOutput


class TableOutput(BaseOutput):
    """Echoes transactions as aligned text rows."""

    def write(self, transactions):
        for tx in transactions:
            click.echo(
                f"{tx.date.isoformat()}  {tx.amount:>12.2f}  {tx.category:<12}  {tx.description}"
            )
        return None
