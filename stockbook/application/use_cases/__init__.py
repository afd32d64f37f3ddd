"""Application use cases."""

from stockbook.application.use_cases.delete_records import (
    ClearAllDataUseCase,
    DeleteDebtUseCase,
    DeleteProductUseCase,
)
from stockbook.application.use_cases.get_dashboard import GetDashboardUseCase
from stockbook.application.use_cases.get_reports import GetReportsUseCase
from stockbook.application.use_cases.record_sale import (
    RecordSaleResult,
    RecordSaleUseCase,
)
from stockbook.application.use_cases.save_debt import SaveDebtResult, SaveDebtUseCase
from stockbook.application.use_cases.save_product import (
    SaveProductResult,
    SaveProductUseCase,
)

__all__ = [
    "RecordSaleUseCase",
    "RecordSaleResult",
    "SaveProductUseCase",
    "SaveProductResult",
    "SaveDebtUseCase",
    "SaveDebtResult",
    "GetDashboardUseCase",
    "GetReportsUseCase",
    "DeleteProductUseCase",
    "DeleteDebtUseCase",
    "ClearAllDataUseCase",
]
