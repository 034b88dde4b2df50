from datetime import date

from statement_parser.extractors.chase import ChaseExtractor, ChaseLedgerStrategy

LEDGER = (
    "CHASE\n"
    "TRANSACTION DETAIL\n"
    "01/01 Beginning Balance 1500.00 1500.00\n"
    "01/15 Acme Corp Payroll -2000.00 3500.00\n"
    "01/16 Coffee Shop -4.50 3495.50\n"
)


def test_matches_marker_or_filename():
    assert ChaseExtractor.matches("JPMorgan Chase Bank, N.A.")
    assert ChaseExtractor.matches("CHASE TOTAL CHECKING")
    assert ChaseExtractor.matches("01/15 Coffee -4.50", "chase_jan.pdf")
    assert not ChaseExtractor.matches("Chase is mentioned in passing", "statement.pdf")
    assert not ChaseExtractor.matches("nothing here")


def test_income_wins_over_duplicate_ledger_line():
    txs = ChaseExtractor().extract(LEDGER)
    assert [(t.description, t.amount, t.category) for t in txs] == [
        ('Acme Corp Payroll', 2000.0, 'Income'),
        ('Coffee Shop', -4.5, 'Wants'),
    ]
    assert all(t.date == date(date.today().year, 1, d) for t, d in zip(txs, (15, 16)))


def test_balance_rows_are_skipped():
    txs = ChaseLedgerStrategy().extract(LEDGER)
    assert not any('Balance' in t.description for t in txs)


def test_zelle_income_is_positive():
    text = "CHASE\n02/02 Zelle Payment From Jane Doe 1,200.00 4,000.00\n"
    txs = ChaseLedgerStrategy().extract(text)
    assert len(txs) == 1
    assert txs[0].description == 'Zelle Payment From'
    assert txs[0].amount == 1200.0
    assert txs[0].category == 'Income'


def test_falls_back_to_simple_pattern():
    text = "CHASE\n02/03 Corner Store -12.00\n02/04 Ending Balance 300.00\n"
    txs = ChaseExtractor().extract(text)
    assert [(t.description, t.amount) for t in txs] == [('Corner Store', -12.0)]


def test_falls_back_to_line_scan():
    text = "CHASE\n02/05 13.37\n02/06 -8.00 .\n"
    txs = ChaseExtractor().extract(text)
    assert [(t.description, t.amount) for t in txs] == [
        ('Transaction on 02/05', 13.37),
        ('Transaction on 02/06', -8.0),
    ]
    assert [t.date for t in txs] == [date(date.today().year, 2, 5), date(date.today().year, 2, 6)]


def test_nothing_found():
    assert ChaseExtractor().extract("CHASE\nNo activity this period") == []
