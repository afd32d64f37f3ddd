"""
Application layer - Use cases, DTOs, and the composition root.

This layer sits between the presentation and the core:
1. Defining request/response DTOs for the presentation
2. Implementing use cases that coordinate the repository and services
3. Building the repository from settings

Presentation code reaches the repository through these use cases.
"""

from stockbook.application.dto.requests import (
    DebtFormRequest,
    ProductFormRequest,
    RecordSaleRequest,
    SaleItemRequest,
)
from stockbook.application.services import (
    bootstrap,
    get_repository,
    reset_repository,
)
from stockbook.application.use_cases import (
    ClearAllDataUseCase,
    DeleteDebtUseCase,
    DeleteProductUseCase,
    GetDashboardUseCase,
    GetReportsUseCase,
    RecordSaleUseCase,
    SaveDebtUseCase,
    SaveProductUseCase,
)

__all__ = [
    # Requests
    "ProductFormRequest",
    "DebtFormRequest",
    "SaleItemRequest",
    "RecordSaleRequest",
    # Use cases
    "RecordSaleUseCase",
    "SaveProductUseCase",
    "SaveDebtUseCase",
    "GetDashboardUseCase",
    "GetReportsUseCase",
    "DeleteProductUseCase",
    "DeleteDebtUseCase",
    "ClearAllDataUseCase",
    # Composition root
    "bootstrap",
    "get_repository",
    "reset_repository",
]
