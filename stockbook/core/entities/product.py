"""Product catalog entities."""

from pydantic import Field

from stockbook.core.entities.base import EntityModel, new_id


class ProductDraft(EntityModel):
    """Product fields supplied by the caller before an id is assigned."""

    name: str = Field(..., min_length=1)
    quantity: int = Field(default=0, ge=0)  # units in stock
    purchase_price: float = Field(..., gt=0)  # cost per unit
    sale_price: float = Field(..., gt=0)  # price charged per unit

    @property
    def stock_value(self) -> float:
        """Inventory cost of the units on hand."""
        return self.purchase_price * self.quantity

    @property
    def potential_revenue(self) -> float:
        return self.sale_price * self.quantity


class Product(ProductDraft):
    """A catalog product with a stable identifier."""

    id: str = Field(default_factory=new_id)

    @classmethod
    def from_draft(cls, draft: ProductDraft) -> "Product":
        return cls(**draft.model_dump(exclude={"id"}))
