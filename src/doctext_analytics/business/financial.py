"""Financial amount extraction."""

import re
from typing import List, Optional, Tuple

from ..models.business import FinancialAmount, FinancialData, FinancialRatio
from ..models.enums import FinancialCategory, RatioStatus

SYMBOL_CURRENCIES = {
    "$": "USD",
    "€": "EUR",
    "£": "GBP",
    "¥": "JPY",
}

CURRENCY_CODES = ("USD", "EUR", "GBP", "JPY", "CAD", "AUD")

AMOUNT_PATTERNS = [
    re.compile(r"\$[\d,]+(?:\.\d{2})?"),
    re.compile(r"€[\d,]+(?:\.\d{2})?"),
    re.compile(r"£[\d,]+(?:\.\d{2})?"),
    re.compile(r"¥[\d,]+(?:\.\d{2})?"),
    re.compile(r"[\d,]+(?:\.\d{2})?\s*(?:" + "|".join(CURRENCY_CODES) + r")"),
]

_CODE_SUFFIX = re.compile(r"\s*(" + "|".join(CURRENCY_CODES) + r")$")

PROFIT_MARGIN_BENCHMARK = 15.0


def parse_amount(amount_string: str) -> Optional[FinancialAmount]:
    """
    Parse a matched amount such as ``$1,250.00`` or ``300 EUR``.

    Returns None when no number remains after removing the currency
    marker and thousands separators.
    """
    currency, number = _split_currency(amount_string)
    number = number.replace(",", "").strip()
    try:
        value = float(number)
    except ValueError:
        return None

    # No contextual revenue/expense detection yet; every amount is OTHER.
    return FinancialAmount(
        value=value,
        currency=currency,
        description="Extracted amount",
        category=FinancialCategory.OTHER,
    )


def _split_currency(amount_string: str) -> Tuple[str, str]:
    symbol = amount_string[:1]
    if symbol in SYMBOL_CURRENCIES:
        return SYMBOL_CURRENCIES[symbol], amount_string[1:]
    match = _CODE_SUFFIX.search(amount_string)
    if match:
        return match.group(1), amount_string[:match.start()]
    return "USD", amount_string


def find_amounts(text: str) -> List[FinancialAmount]:
    """All amounts, pattern by pattern, in match order within each pattern."""
    amounts = []
    for pattern in AMOUNT_PATTERNS:
        for match in pattern.finditer(text):
            amount = parse_amount(match.group(0))
            if amount is not None:
                amounts.append(amount)
    return amounts


def ratio_status(profit_margin: float) -> RatioStatus:
    if profit_margin > 20:
        return RatioStatus.EXCELLENT
    if profit_margin > 10:
        return RatioStatus.GOOD
    return RatioStatus.AVERAGE


def generate_ratios(revenue: float, expenses: float) -> List[FinancialRatio]:
    ratios = []
    if revenue > 0:
        margin = (revenue - expenses) / revenue * 100
        ratios.append(FinancialRatio(
            name="Profit Margin",
            value=margin,
            benchmark=PROFIT_MARGIN_BENCHMARK,
            status=ratio_status(margin),
        ))
    return ratios


def extract_financial_data(text: str) -> FinancialData:
    """Collect amounts, currencies and the derived totals and ratios."""
    amounts = find_amounts(text)

    currencies: List[str] = []
    for amount in amounts:
        if amount.currency not in currencies:
            currencies.append(amount.currency)

    revenue = sum(a.value for a in amounts if a.category == FinancialCategory.REVENUE)
    expenses = sum(a.value for a in amounts if a.category == FinancialCategory.EXPENSE)

    return FinancialData(
        amounts=amounts,
        currencies=currencies,
        total_revenue=revenue if revenue > 0 else None,
        total_expenses=expenses if expenses > 0 else None,
        profit_margin=(revenue - expenses) / revenue * 100 if revenue > 0 else None,
        cash_flow=revenue - expenses,
        key_financial_ratios=generate_ratios(revenue, expenses),
    )
