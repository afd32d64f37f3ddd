"""Delete Use Cases: remove a product or debt, or wipe all shop data."""

from stockbook.application.use_cases._base import RepositoryUseCase
from stockbook.config import get_logger

logger = get_logger(__name__)


class DeleteProductUseCase(RepositoryUseCase):
    """Remove a product. Sales already recorded keep their snapshot."""

    async def execute(self, product_id: str) -> bool:
        """Returns False when no product has this id."""
        repository = await self._get_repository()
        return await repository.delete_product(product_id)


class DeleteDebtUseCase(RepositoryUseCase):
    async def execute(self, debt_id: str) -> bool:
        """Returns False when no debt has this id."""
        repository = await self._get_repository()
        return await repository.delete_debt(debt_id)


class ClearAllDataUseCase(RepositoryUseCase):
    """Empty products, sales and debts after the user confirms."""

    async def execute(self) -> None:
        repository = await self._get_repository()
        logger.info("clear_all_data_requested")
        await repository.clear_all_data()
