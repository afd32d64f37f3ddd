"""Core domain services."""

from stockbook.core.services.form_validation import (
    DebtFormResult,
    ProductFormResult,
    validate_debt_form,
    validate_product_form,
)
from stockbook.core.services.naming import (
    find_duplicate,
    is_duplicate_name,
    normalize_name,
)
from stockbook.core.services.reports import ProductRanking
from stockbook.core.services.search import filter_debts, filter_products
from stockbook.core.services.shop_repository import ShopRepository

__all__ = [
    # Repository
    "ShopRepository",
    # Naming
    "normalize_name",
    "is_duplicate_name",
    "find_duplicate",
    # Form validation
    "validate_product_form",
    "validate_debt_form",
    "ProductFormResult",
    "DebtFormResult",
    # Search
    "filter_products",
    "filter_debts",
    # Reports
    "ProductRanking",
]
