import pytest

from statement_parser.core.categorizer import categorize, categorize_transaction


@pytest.mark.parametrize('description, amount, expected', [
    ('Whole Foods Market', -54.21, 'Essentials'),
    ('Paycheck Direct Deposit', 2000, 'Income'),
    ('Random Store XYZ', -10, 'Essentials'),
    ('Starbucks Coffee', -5.25, 'Wants'),
    ('AMAZON MKTPLACE', -19.99, 'Wants'),
    ('Vanguard Brokerage', -500, 'Savings'),
    ('Transfer to Savings', -250, 'Savings'),
    ('City Water Utility', -40, 'Essentials'),
    ('Refund from Amazon', 20, 'Income'),
    ('Zero amount coffee', 0, 'Wants'),
])
def test_default_rules(description, amount, expected):
    assert categorize_transaction(description, amount) == expected


def test_essentials_checked_before_wants():
    # "restaurant" is a want, but "food" matches the essentials list first
    assert categorize_transaction('Fast Food Restaurant', -12) == 'Essentials'


def test_custom_categories_and_default():
    categories = {'Dining': ['bistro'], 'Transport': ['uber', 'transit']}
    assert categorize_transaction('Le Bistro', -30, categories) == 'Dining'
    assert categorize_transaction('UBER TRIP', -8, categories) == 'Transport'
    assert categorize_transaction('Hardware', -8, categories, default_category='Other') == 'Other'
    assert categorize_transaction('Salary', 100, categories, income_category='Pay') == 'Pay'


def test_categorize_reads_config():
    cfg = {'categories': {'Pets': ['petco']}, 'default_category': 'Misc'}
    assert categorize('PETCO #123', -15, cfg) == 'Pets'
    assert categorize('Something', -15, cfg) == 'Misc'
    assert categorize('Something', 15, cfg) == 'Income'
