"""Response DTOs for the presentation layer.

Pydantic v2 models returned by use cases.
These are the ONLY contracts between use cases and presentation.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from stockbook.core.entities import Debt, Product, Sale


class ProductResponse(BaseModel):
    """Product response DTO."""

    id: str
    name: str
    quantity: int
    purchase_price: float
    sale_price: float

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(**product.model_dump())


class SaleResponse(BaseModel):
    """Recorded sale response DTO."""

    id: str
    product_id: str
    product_name: str
    quantity: int
    purchase_price: float
    sale_price: float
    total: float
    profit: float
    date: datetime

    @classmethod
    def from_entity(cls, sale: Sale) -> "SaleResponse":
        return cls(**sale.model_dump(), profit=sale.profit)


class DebtResponse(BaseModel):
    """Debt response DTO."""

    id: str
    first_name: str
    last_name: str
    full_name: str
    items_description: str
    amount: float
    contact_number: str | None = None
    note: str = ""

    @classmethod
    def from_entity(cls, debt: Debt) -> "DebtResponse":
        return cls(**debt.model_dump(), full_name=debt.full_name)


class RecordSaleResponse(BaseModel):
    """Outcome of a sale batch."""

    success: bool
    message_key: str = Field(..., description="Translation key of the outcome")
    error_code: str | None = None
    sales: list[SaleResponse] = Field(default_factory=list)


class SaveProductResponse(BaseModel):
    """Outcome of saving a product form."""

    saved: bool
    product: ProductResponse | None = None
    errors: dict[str, str] = Field(
        default_factory=dict, description="Field -> translation key"
    )
    price_below_cost: bool = False


class SaveDebtResponse(BaseModel):
    """Outcome of saving a debt form."""

    saved: bool
    debt: DebtResponse | None = None
    errors: dict[str, str] = Field(default_factory=dict)


class ProductRankingResponse(BaseModel):
    """Leading product of a sales aggregate."""

    product_id: str
    product_name: str
    value: float


class InventoryChartEntry(BaseModel):
    """Per-product stock figures."""

    name: str
    quantity: int
    value: float


class DashboardResponse(BaseModel):
    """Dashboard figures."""

    total_inventory_value: float
    potential_revenue: float
    product_variants: int
    total_units: int
    total_revenue: float
    total_profit: float
    best_selling_product: ProductRankingResponse | None = None
    top_profit_product: ProductRankingResponse | None = None
    inventory_chart: list[InventoryChartEntry] = Field(default_factory=list)
    display: dict[str, str] = Field(
        default_factory=dict, description="Money figures formatted for the locale"
    )


class RevenueShare(BaseModel):
    """Potential revenue held in one product's stock."""

    name: str
    value: float


class ReportsResponse(BaseModel):
    """Report figures."""

    total_inventory_value: float
    potential_revenue: float
    potential_profit: float
    profit_margin: float
    revenue_by_product: list[RevenueShare] = Field(default_factory=list)
    display: dict[str, str] = Field(default_factory=dict)
