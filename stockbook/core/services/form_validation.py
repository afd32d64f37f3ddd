"""
Validation of raw product and debt form input.

Forms arrive as strings (possibly with Persian digits and thousands
separators). Each rule maps a field to the translation key the
presentation displays next to it.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from stockbook.core.entities.debt import DebtDraft
from stockbook.core.entities.product import Product, ProductDraft
from stockbook.core.services.naming import find_duplicate
from stockbook.core.services.number_format import safe_parse_float, safe_parse_int

FIELD_REQUIRED = "fieldRequired"
PRODUCT_NAME_EXISTS = "productNameExists"
INVALID_PRICE = "invalidPrice"
INVALID_QUANTITY = "invalidQuantity"
INVALID_AMOUNT = "invalidAmount"


@dataclass
class ProductFormResult:
    """Outcome of validating a product form."""

    issues: dict[str, str] = field(default_factory=dict)
    draft: ProductDraft | None = None
    # Purchase price above sale price blocks the save with a warning
    price_below_cost: bool = False

    @property
    def is_valid(self) -> bool:
        return self.draft is not None


@dataclass
class DebtFormResult:
    """Outcome of validating a debt form."""

    issues: dict[str, str] = field(default_factory=dict)
    draft: DebtDraft | None = None

    @property
    def is_valid(self) -> bool:
        return self.draft is not None


def validate_product_form(
    name: str,
    quantity: str,
    purchase_price: str,
    sale_price: str,
    products: Iterable[Product],
    editing_id: str | None = None,
) -> ProductFormResult:
    """
    Validate product form fields against the current catalog.

    Args:
        name: Product name as typed.
        quantity: Units in stock as typed.
        purchase_price: Cost per unit as typed.
        sale_price: Price per unit as typed.
        products: Current catalog, for the duplicate-name check.
        editing_id: Id of the product being edited, if any.

    Returns:
        ProductFormResult with a draft only when every rule passes.
    """
    issues: dict[str, str] = {}
    trimmed_name = name.strip()

    if not trimmed_name:
        issues["name"] = FIELD_REQUIRED
    elif find_duplicate(products, trimmed_name, exclude_id=editing_id) is not None:
        issues["name"] = PRODUCT_NAME_EXISTS

    if not quantity.strip():
        issues["quantity"] = FIELD_REQUIRED
    elif safe_parse_int(quantity) < 0:
        issues["quantity"] = INVALID_QUANTITY

    for field_name, raw in (("purchase_price", purchase_price), ("sale_price", sale_price)):
        if not raw.strip():
            issues[field_name] = FIELD_REQUIRED
        elif safe_parse_float(raw) <= 0:
            issues[field_name] = INVALID_PRICE

    if issues:
        return ProductFormResult(issues=issues)

    p_price = safe_parse_float(purchase_price)
    s_price = safe_parse_float(sale_price)
    if p_price > s_price:
        return ProductFormResult(price_below_cost=True)

    return ProductFormResult(
        draft=ProductDraft(
            name=trimmed_name,
            quantity=safe_parse_int(quantity),
            purchase_price=p_price,
            sale_price=s_price,
        )
    )


def validate_debt_form(
    first_name: str,
    last_name: str,
    items_description: str,
    amount: str,
    contact_number: str = "",
    note: str = "",
) -> DebtFormResult:
    """Validate debt form fields. An empty amount means zero."""
    issues: dict[str, str] = {}

    for field_name, raw in (
        ("first_name", first_name),
        ("last_name", last_name),
        ("items_description", items_description),
    ):
        if not raw.strip():
            issues[field_name] = FIELD_REQUIRED

    parsed_amount = safe_parse_float(amount)
    if parsed_amount < 0:
        issues["amount"] = INVALID_AMOUNT

    if issues:
        return DebtFormResult(issues=issues)

    return DebtFormResult(
        draft=DebtDraft(
            first_name=first_name,
            last_name=last_name,
            items_description=items_description,
            amount=parsed_amount,
            contact_number=contact_number.strip() or None,
            note=note,
        )
    )
