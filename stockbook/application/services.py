"""
Composition root.

Wires the configured key-value store into a loaded ShopRepository.
Use cases receive the repository through their constructor and only
fall back to this module when none is given.
"""

from typing import TYPE_CHECKING

from stockbook.config import configure_logging, get_logger, get_settings
from stockbook.core.services.shop_repository import ShopRepository

if TYPE_CHECKING:
    from stockbook.core.interfaces import IKeyValueStore

logger = get_logger(__name__)

# Singleton repository instance
_repository: ShopRepository | None = None


async def get_repository(store: "IKeyValueStore | None" = None) -> ShopRepository:
    """
    Get or create the application's ShopRepository.

    Args:
        store: Optional store override. An override builds a fresh,
            non-shared repository.

    Returns:
        A repository with its collections loaded.
    """
    global _repository

    if _repository is not None and store is None:
        return _repository

    # Lazy import infrastructure to avoid circular imports
    from stockbook.infrastructure.storage import create_kv_store

    repository = ShopRepository(store or create_kv_store())
    await repository.load()

    if store is None:
        _repository = repository
    return repository


async def bootstrap() -> ShopRepository:
    """
    Application startup: configure logging and load the shared repository.

    Hosts call this once before running use cases.
    """
    configure_logging()
    settings = get_settings()
    repository = await get_repository()
    logger.info(
        "application_started",
        backend=settings.storage.backend,
        language=settings.locale.language,
    )
    return repository


async def reset_repository() -> None:
    """Drop the shared repository and close storage (for testing)."""
    global _repository
    _repository = None

    from stockbook.infrastructure.storage.sqlite import close_database

    await close_database()
    logger.info("repository_reset")
