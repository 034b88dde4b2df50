# statement_parser/core/categorizer.py
from statement_parser.core.models import ESSENTIALS, INCOME, SAVINGS, WANTS

# Checked in order; the first category with a matching keyword wins.
DEFAULT_CATEGORIES = {
    ESSENTIALS: [
        "rent", "mortgage", "electric", "water", "gas", "grocery", "groceries",
        "food", "pharmacy", "doctor", "medical", "insurance", "bill", "utility",
    ],
    WANTS: [
        "restaurant", "cafe", "coffee", "cinema", "movie", "theater", "amazon",
        "shopping", "travel", "hotel", "flight", "subscription", "entertainment",
    ],
    SAVINGS: [
        "investment", "401k", "ira", "saving", "deposit", "transfer to",
        "vanguard", "fidelity",
    ],
}


def categorize_transaction(description, amount, categories=None,
                           default_category=ESSENTIALS, income_category=INCOME):
    """
    Pick a budget category for a transaction.

    Any inflow is income regardless of its description. Outflows are matched
    by substring against each category's keywords, in mapping order, and fall
    back to ``default_category``.
    """
    if amount > 0:
        return income_category

    desc = (description or "").lower()
    for cat, keywords in (categories or DEFAULT_CATEGORIES).items():
        for kw in keywords or ():
            if str(kw).lower() in desc:
                return cat
    return default_category


def categorize(description, amount, config):
    """Categorize using the category settings in ``config``."""
    return categorize_transaction(
        description,
        amount,
        config.get('categories'),
        config.get('default_category', ESSENTIALS),
        config.get('income_category', INCOME),
    )
