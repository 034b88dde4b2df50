from datetime import date

import anyio
import pytest

from statement_parser import (
    ParseError,
    StatementParser,
    UnsupportedFileError,
    parse_file,
    parse_file_async,
    parse_files,
)

CSV_TEXT = "Date,Description,Amount\n01/15/2024,Amazon.com,-42.99\n01/16/2024,Payroll,1500.00\n"


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / 'january.csv'
    path.write_text(CSV_TEXT)
    return str(path)


def test_parse_csv_file(csv_path):
    txs = parse_file(csv_path)
    assert [(t.date, t.description, t.amount, t.category) for t in txs] == [
        (date(2024, 1, 15), 'Amazon.com', -42.99, 'Wants'),
        (date(2024, 1, 16), 'Payroll', 1500.0, 'Income'),
    ]


def test_parse_open_file_object(csv_path):
    with open(csv_path, 'rb') as f:
        txs = parse_file(f)
    assert len(txs) == 2


def test_pdf_without_transactions(fake_pdf):
    fake_pdf("Thank you for banking with us.")
    with pytest.raises(ParseError, match="unsupported format") as excinfo:
        parse_file("statement.pdf")
    assert str(excinfo.value).startswith("Error parsing PDF:")
    assert isinstance(excinfo.value.__cause__, ParseError)


def test_chase_detected_from_file_name(fake_pdf):
    opened = fake_pdf("01/15 Acme Corp Payroll -2000.00 3500.00")
    txs = parse_file("chase_march.pdf")
    assert opened == ["chase_march.pdf"]
    assert len(txs) == 1
    assert txs[0].date == date(date.today().year, 1, 15)
    assert txs[0].amount == 2000.0
    assert txs[0].category == 'Income'
    assert txs[0].type == 'income'


def test_generic_pdf(fake_pdf):
    fake_pdf("ACCOUNT SUMMARY", "01/15/2024 Coffee Shop -4.50\n01/16/2024 Rent Payment -1200.00")
    txs = parse_file("bank.pdf")
    assert [(t.description, t.amount, t.category) for t in txs] == [
        ('Coffee Shop', -4.5, 'Wants'),
        ('Rent Payment', -1200.0, 'Essentials'),
    ]


def test_excel_is_not_supported_yet():
    with pytest.raises(UnsupportedFileError, match=r"Excel files \(xlsx\) are not yet supported"):
        parse_file("statement.xlsx")


def test_unknown_extension():
    with pytest.raises(UnsupportedFileError, match="Unsupported file type: txt"):
        parse_file("notes.txt")
    with pytest.raises(UnsupportedFileError, match="Unsupported file type: README"):
        parse_file("README")


def test_io_errors_are_wrapped(tmp_path):
    with pytest.raises(ParseError, match="Error parsing CSV") as excinfo:
        parse_file(str(tmp_path / 'missing.csv'))
    assert isinstance(excinfo.value.__cause__, OSError)


def test_parse_files_keeps_results_per_file(tmp_path, csv_path):
    other = tmp_path / 'february.csv'
    other.write_text("Date,Description,Amount\n02/01/2024,Rent,-1200.00\n")
    results = parse_files([csv_path, str(other)])
    assert list(results) == [csv_path, str(other)]
    assert len(results[csv_path]) == 2
    assert results[str(other)][0].description == 'Rent'


def test_parse_file_async(csv_path):
    txs = anyio.run(parse_file_async, csv_path)
    assert txs == parse_file(csv_path)


def test_loaders_are_reused():
    parser = StatementParser()
    assert parser.loader_for("a.pdf") is parser.loader_for("B.PDF")
    assert parser.loader_for("a.csv") is not parser.loader_for("a.pdf")


def test_preview_only_for_pdf(fake_pdf, csv_path):
    fake_pdf("01/15/2024 Coffee Shop -4.50")
    parser = StatementParser()
    assert parser.preview("bank.pdf").startswith("PDF parsed successfully!")
    with pytest.raises(UnsupportedFileError, match="only available for PDF"):
        parser.preview(csv_path)


def test_xls_names_its_extension():
    with pytest.raises(UnsupportedFileError, match=r"Excel files \(xls\) are not yet supported"):
        parse_file("statement.xls")


def test_partial_config_is_filled_from_defaults(tmp_path):
    path = tmp_path / 'pets.csv'
    path.write_text("Date,Description,Amount\n03/01/2024,PETCO #123,-15.00\n03/02/2024,Coffee,-3.00\n")
    txs = parse_file(str(path), config={'categories': {'Pets': ['petco']}})
    assert [t.category for t in txs] == ['Pets', 'Wants']
