"""Core domain entities."""

from stockbook.core.entities.base import EntityModel, new_id, utc_now
from stockbook.core.entities.debt import Debt, DebtDraft
from stockbook.core.entities.product import Product, ProductDraft
from stockbook.core.entities.sale import Sale, SaleLineItem

__all__ = [
    "EntityModel",
    "new_id",
    "utc_now",
    # Product entities
    "Product",
    "ProductDraft",
    # Sale entities
    "Sale",
    "SaleLineItem",
    # Debt entities
    "Debt",
    "DebtDraft",
]
