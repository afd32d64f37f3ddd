"""Shared repository resolution for use cases."""

from stockbook.core.services.shop_repository import ShopRepository


class RepositoryUseCase:
    """Use case operating on the shop repository."""

    def __init__(self, repository: ShopRepository | None = None):
        self._repository = repository

    async def _get_repository(self) -> ShopRepository:
        if self._repository is None:
            from stockbook.application.services import get_repository

            self._repository = await get_repository()
        return self._repository
