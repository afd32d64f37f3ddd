"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest

from stockbook.config import reset_settings
from stockbook.core.entities import DebtDraft, Product, ProductDraft
from stockbook.core.services.shop_repository import ShopRepository
from stockbook.infrastructure.storage.memory_store import InMemoryKeyValueStore


@pytest.fixture(autouse=True)
def isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Point storage at a temp directory and rebuild settings per test."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("STORAGE_BACKEND", "sqlite")
    monkeypatch.setenv("LOCALE_LANGUAGE", "en")
    monkeypatch.setenv("LOCALE_CURRENCY_SYMBOL", "$")
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def memory_store() -> InMemoryKeyValueStore:
    """Empty in-memory key-value store."""
    return InMemoryKeyValueStore(namespace="test")


@pytest.fixture
async def repository(
    memory_store: InMemoryKeyValueStore,
) -> AsyncGenerator[ShopRepository, None]:
    """Loaded repository over the in-memory store."""
    repo = ShopRepository(memory_store)
    await repo.load()
    yield repo


@pytest.fixture
def apple_draft() -> ProductDraft:
    return ProductDraft(name="Apple", quantity=5, purchase_price=10.0, sale_price=15.0)


@pytest.fixture
def pear_draft() -> ProductDraft:
    return ProductDraft(name="Pear", quantity=20, purchase_price=2.0, sale_price=3.5)


@pytest.fixture
async def apple(repository: ShopRepository, apple_draft: ProductDraft) -> Product:
    """Apple product already in the repository (5 in stock, 10 -> 15)."""
    return await repository.add_product(apple_draft)


@pytest.fixture
async def pear(repository: ShopRepository, pear_draft: ProductDraft) -> Product:
    """Pear product already in the repository (20 in stock, 2 -> 3.5)."""
    return await repository.add_product(pear_draft)


@pytest.fixture
def debt_draft() -> DebtDraft:
    return DebtDraft(
        first_name="Sara",
        last_name="Karimi",
        items_description="2 bags of rice",
        amount=450000.0,
        contact_number="09121234567",
        note="Pays at month end",
    )
