"""Request DTOs for the presentation layer.

Pydantic v2 models for validating incoming form and sale input.
Form fields stay as typed strings; parsing happens in validation.
"""

from collections.abc import Mapping

from pydantic import BaseModel, Field

from stockbook.core.services.number_format import safe_parse_int


class ProductFormRequest(BaseModel):
    """Product add/edit form."""

    product_id: str | None = Field(
        default=None,
        description="Id of the product being edited, None to add a new one",
    )
    name: str = Field(default="", description="Product name")
    quantity: str = Field(default="", description="Units in stock")
    purchase_price: str = Field(default="", description="Cost per unit")
    sale_price: str = Field(default="", description="Price per unit")


class DebtFormRequest(BaseModel):
    """Debt add/edit form."""

    debt_id: str | None = Field(
        default=None,
        description="Id of the debt being edited, None to add a new one",
    )
    first_name: str = Field(default="", description="Debtor first name")
    last_name: str = Field(default="", description="Debtor last name")
    items_description: str = Field(default="", description="Goods or services owed")
    amount: str = Field(default="0", description="Amount owed")
    contact_number: str = Field(default="", description="Optional phone number")
    note: str = Field(default="", description="Free-text note")


class SaleItemRequest(BaseModel):
    """A single line of a sale batch."""

    product_id: str = Field(..., description="Product id")
    quantity: int = Field(default=0, description="Units to sell")


class RecordSaleRequest(BaseModel):
    """Request to record a sale batch."""

    items: list[SaleItemRequest] = Field(
        default_factory=list, description="Line items to sell"
    )

    @classmethod
    def from_quantities(cls, quantities: Mapping[str, str]) -> "RecordSaleRequest":
        """Build a batch from per-product quantity inputs (product id -> typed text)."""
        return cls(
            items=[
                SaleItemRequest(product_id=product_id, quantity=safe_parse_int(text))
                for product_id, text in quantities.items()
            ]
        )
