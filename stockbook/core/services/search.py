"""Search filters over products and debts."""

from collections.abc import Iterable

from stockbook.core.entities.debt import Debt
from stockbook.core.entities.product import Product
from stockbook.core.services.naming import normalize_name


def filter_products(products: Iterable[Product], term: str) -> list[Product]:
    """Products whose name contains term, case-insensitive."""
    needle = normalize_name(term)
    return [p for p in products if needle in normalize_name(p.name)]


def filter_debts(debts: Iterable[Debt], term: str) -> list[Debt]:
    """Debts whose "first last" name contains term, case-insensitive."""
    needle = normalize_name(term)
    return [d for d in debts if needle in normalize_name(d.full_name)]
