# statement_parser/utils.py
import logging
import math
import re
from datetime import date, timedelta

import pandas as pd

logger = logging.getLogger(__name__)

_DATE_JUNK = re.compile(r"[^\d/\-.]")
_MMDDYYYY = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{2,4})")
_MMDD = re.compile(r"(\d{1,2})/(\d{1,2})")
_NO_YEAR = re.compile(r"\d{1,2}/\d{1,2}")

_DEBIT_HINT = re.compile(r"debit|payment|withdrawal|sent", re.I)
_AMOUNT_JUNK = re.compile(r"[$,()]")
_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def find_field(row, possible_names):
    """
    Return the column of ``row`` that best matches one of ``possible_names``.

    Exact (case-insensitive) matches are tried first, then substring matches
    in either direction. The order of ``possible_names`` decides ties.
    Returns None when nothing matches.
    """
    keys = [k for k in row.keys() if str(k).strip()]
    lowered = [(k, str(k).strip().lower()) for k in keys]

    for name in possible_names:
        name = name.lower()
        for key, low in lowered:
            if low == name:
                return key

    for name in possible_names:
        name = name.lower()
        for key, low in lowered:
            if name in low or low in name:
                return key

    return None


def _calendar_date(year, month, day):
    # Out-of-range months and days roll over into the following period,
    # e.g. 02/30/2024 becomes 2024-03-01.
    month_index = month - 1
    year += month_index // 12
    month_index %= 12
    return date(year, month_index + 1, 1) + timedelta(days=day - 1)


def parse_date(date_str):
    """
    Parse a statement date, falling back to today's date.

    Never raises: anything unparseable is logged and replaced with today.
    """
    if date_str is None or not str(date_str).strip():
        logger.warning("Empty date string")
        return date.today()

    cleaned = _DATE_JUNK.sub("", str(date_str).strip())

    # pandas gives a year-less MM/DD an arbitrary year; those go to the regex below
    if cleaned and not _NO_YEAR.fullmatch(cleaned):
        try:
            parsed = pd.to_datetime(cleaned, format="mixed")
        except (ValueError, TypeError, OverflowError):
            parsed = None
        if parsed is not None and not pd.isna(parsed):
            return parsed.date()

    m = _MMDDYYYY.search(cleaned)
    if m:
        month, day, year = (int(g) for g in m.groups())
        if year < 100:
            year += 2000
        try:
            return _calendar_date(year, month, day)
        except (ValueError, OverflowError):
            pass

    m = _MMDD.search(cleaned)
    if m:
        month, day = (int(g) for g in m.groups())
        try:
            return _calendar_date(date.today().year, month, day)
        except (ValueError, OverflowError):
            pass

    logger.warning("Could not parse date: %s", date_str)
    return date.today()


def parse_amount(amount_str):
    """
    Parse a money amount into a signed float.

    Parentheses, a minus sign, or words like "debit" and "payment" mark an
    outflow, which is returned negative. Unparseable input yields 0.0.
    """
    if isinstance(amount_str, (int, float)) and not isinstance(amount_str, bool):
        if math.isnan(amount_str):
            logger.warning("Empty amount string")
            return 0.0
        return float(amount_str)

    text = str(amount_str).strip() if amount_str is not None else ""
    if not text:
        logger.warning("Empty amount string")
        return 0.0

    is_debit = bool(_DEBIT_HINT.search(text)) or "(" in text or "-" in text
    cleaned = _AMOUNT_JUNK.sub("", text)

    m = _NUMBER.search(cleaned)
    if not m:
        logger.warning("Could not parse amount: %s", amount_str)
        return 0.0

    amount = float(m.group())
    if is_debit and amount > 0:
        amount = -amount
    return amount


def placeholder_description(date_token):
    return f"Transaction on {date_token}"


def filter_transactions_by_month(transactions, month_str):
    """
    Return only those transactions whose date falls in the given YYYY-MM.
    """
    try:
        year, month = map(int, month_str.split('-'))
    except ValueError:
        raise ValueError(f"Month must be formatted as YYYY-MM, got '{month_str}'")
    return [tx for tx in transactions if tx.date.year == year and tx.date.month == month]
