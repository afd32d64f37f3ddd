"""Sale entities."""

from datetime import datetime

from pydantic import BaseModel, Field

from stockbook.core.entities.base import EntityModel, new_id, utc_now
from stockbook.core.entities.product import Product


class SaleLineItem(BaseModel):
    """One {product_id, quantity} entry of a sale batch."""

    product_id: str
    quantity: int


class Sale(EntityModel):
    """
    Immutable record of one sold line item.

    Name and prices are a snapshot of the product at the moment of sale.
    product_id is a weak reference: the product may have been deleted since.
    """

    id: str = Field(default_factory=new_id)
    product_id: str
    product_name: str
    quantity: int = Field(..., gt=0)
    purchase_price: float = Field(default=0.0, ge=0)  # older records lack it
    sale_price: float = Field(..., ge=0)
    total: float  # sale_price * quantity at sale time
    date: datetime = Field(default_factory=utc_now)

    @property
    def profit(self) -> float:
        """Profit from the snapshot prices, never from the live product."""
        return (self.sale_price - self.purchase_price) * self.quantity

    @classmethod
    def from_product(
        cls,
        product: Product,
        quantity: int,
        when: datetime | None = None,
    ) -> "Sale":
        """Snapshot a product's name and prices into a new sale."""
        return cls(
            product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            purchase_price=product.purchase_price,
            sale_price=product.sale_price,
            total=product.sale_price * quantity,
            date=when or utc_now(),
        )
