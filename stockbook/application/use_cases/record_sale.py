"""Record Sale Use Case: atomic sale batch with a reported outcome."""

from dataclasses import dataclass, field

from stockbook.application.dto.requests import RecordSaleRequest
from stockbook.application.dto.responses import RecordSaleResponse, SaleResponse
from stockbook.application.use_cases._base import RepositoryUseCase
from stockbook.config import get_logger
from stockbook.core.entities.sale import Sale, SaleLineItem
from stockbook.core.exceptions import NoSaleItemsError, SaleError

logger = get_logger(__name__)

SALE_SUCCESS = "saleSuccess"


@dataclass
class RecordSaleResult:
    """Result of recording a sale batch."""

    success: bool
    message_key: str
    sales: list[Sale] = field(default_factory=list)
    error: SaleError | None = None


class RecordSaleUseCase(RepositoryUseCase):
    """
    Record a sale batch.

    Rejected batches (no items, unknown product, insufficient stock) are
    reported outcomes, not exceptions, and leave the repository untouched.
    Storage failures propagate as StoreWriteError with the repository
    restored, so the same batch can be retried.
    """

    async def execute(self, request: RecordSaleRequest) -> RecordSaleResult:
        """Execute record sale use case."""
        logger.info("record_sale_started", items=len(request.items))

        lines = [
            SaleLineItem(product_id=item.product_id, quantity=item.quantity)
            for item in request.items
            if item.quantity > 0
        ]
        # Reject before touching the repository
        if not lines:
            return self._rejected(NoSaleItemsError())

        repository = await self._get_repository()
        try:
            sales = await repository.record_sale(lines)
        except SaleError as e:
            return self._rejected(e)

        logger.info(
            "record_sale_complete",
            lines=len(sales),
            total=sum(s.total for s in sales),
        )
        return RecordSaleResult(success=True, message_key=SALE_SUCCESS, sales=sales)

    def _rejected(self, error: SaleError) -> RecordSaleResult:
        logger.info("record_sale_rejected", code=error.code, details=error.details)
        return RecordSaleResult(
            success=False, message_key=error.message_key, error=error
        )

    def to_response(self, result: RecordSaleResult) -> RecordSaleResponse:
        """Convert result to presentation response."""
        return RecordSaleResponse(
            success=result.success,
            message_key=result.message_key,
            error_code=result.error.code if result.error else None,
            sales=[SaleResponse.from_entity(s) for s in result.sales],
        )
