# statement_parser/cli.py
import logging
import sys

import click

from statement_parser.config import load_config
from statement_parser.core.models import INCOME
from statement_parser.exceptions import ParseError
from statement_parser.manual import load_manual_transactions
from statement_parser.outputs import get_output
from statement_parser.parser import StatementParser
from statement_parser.summary import summarize
from statement_parser.utils import filter_transactions_by_month


def _echo_summary(summary):
    click.echo(f"Income:    {summary.total_income:>12.2f}")
    click.echo(f"Expenses:  {summary.total_expenses:>12.2f}")
    click.echo(f"Net:       {summary.net_cashflow:>12.2f}")
    for cat, spent in summary.categories.items():
        click.echo(f"  {cat:<12} {spent:>12.2f}  ({summary.percentages[cat]:.1f}%)")


@click.command()
@click.argument('files', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to config.yaml (defaults are used when omitted)'
)
@click.option(
    '--output', 'output_format',
    default='table',
    type=click.Choice(['csv', 'table']),
    help='Output target: csv file or a table on stdout'
)
@click.option(
    '--output-dir', 'output_dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory for CSV output (overrides config)'
)
@click.option(
    '--month',
    default=None,
    help='Only keep transactions from this month (YYYY-MM)'
)
@click.option(
    '--manual-file', 'manual_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='YAML file of manual transactions to add'
)
@click.option(
    '--summary', 'show_summary',
    is_flag=True,
    default=False,
    help='Print income, expenses and spending per category'
)
@click.option(
    '--preview',
    is_flag=True,
    default=False,
    help='Only show a sample of each PDF\'s first page text'
)
@click.option('-v', '--verbose', is_flag=True, default=False, help='Debug logging')
def main(files, config_path, output_format, output_dir, month, manual_file,
         show_summary, preview, verbose):
    """
    Parse CSV and PDF bank statements into categorized transactions.

    Each file is parsed on its own; a file that cannot be parsed is reported
    and the rest are still processed, but the command exits with status 1.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    cfg = load_config(config_path)
    if output_dir:
        cfg['output_dir'] = output_dir
    parser = StatementParser(cfg)

    if preview:
        for path in files:
            try:
                click.echo(f"{path}: {parser.preview(path)}")
            except ParseError as e:
                click.echo(f"{path}: {e}", err=True)
        return

    all_txs = []
    failed = []
    for path in files:
        try:
            all_txs.extend(parser.parse(path))
        except ParseError as e:
            click.echo(f"Error in {path}: {e}", err=True)
            failed.append(path)

    if manual_file:
        try:
            all_txs.extend(load_manual_transactions(manual_file, cfg))
        except Exception as e:
            click.echo(f"Error loading manual transactions: {e}", err=True)
            failed.append(manual_file)

    if month:
        try:
            all_txs = filter_transactions_by_month(all_txs, month)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint='--month')

    outputter = get_output(output_format, cfg)
    out_path = outputter.write(all_txs)
    if out_path:
        click.echo(f"Wrote {len(all_txs)} transaction(s) to {out_path}.")

    if show_summary:
        _echo_summary(summarize(all_txs, cfg.get('income_category', INCOME)))

    if failed:
        click.echo(f"{len(failed)} file(s) could not be parsed.", err=True)
        sys.exit(1)
