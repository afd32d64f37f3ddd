"""Data Transfer Objects for the presentation layer.

Request DTOs: Validate and parse incoming form and sale input.
Response DTOs: Structure use case results.
"""

from stockbook.application.dto.requests import (
    DebtFormRequest,
    ProductFormRequest,
    RecordSaleRequest,
    SaleItemRequest,
)
from stockbook.application.dto.responses import (
    DashboardResponse,
    DebtResponse,
    InventoryChartEntry,
    ProductRankingResponse,
    ProductResponse,
    RecordSaleResponse,
    ReportsResponse,
    RevenueShare,
    SaleResponse,
    SaveDebtResponse,
    SaveProductResponse,
)

__all__ = [
    # Requests
    "ProductFormRequest",
    "DebtFormRequest",
    "SaleItemRequest",
    "RecordSaleRequest",
    # Responses
    "ProductResponse",
    "SaleResponse",
    "DebtResponse",
    "RecordSaleResponse",
    "SaveProductResponse",
    "SaveDebtResponse",
    "ProductRankingResponse",
    "InventoryChartEntry",
    "DashboardResponse",
    "RevenueShare",
    "ReportsResponse",
]
