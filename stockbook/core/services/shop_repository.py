"""
Shop repository: products, sales and debts.

Owns the three collections in memory and writes each one through to the
key-value store after every change. Recording a sale is the only
operation with cross-record rules:

- a batch is validated against one snapshot of the catalog and applied
  all-or-nothing,
- stock never goes negative, counting repeated product ids cumulatively,
- every sale snapshots the product's name and prices.

Validation and the in-memory apply contain no await, so no other
coroutine can observe a half-applied batch. Persistence follows as two
independent writes (products, then sales). A failed write puts the
previous collections back, and rewrites the previous stock when only the
sales write failed, so the caller can retry without selling twice.
"""

from collections.abc import Iterable
from typing import TypeVar

from pydantic import ValidationError as PydanticValidationError

from stockbook.config import get_logger
from stockbook.core.entities.base import EntityModel, utc_now
from stockbook.core.entities.debt import Debt, DebtDraft
from stockbook.core.entities.product import Product, ProductDraft
from stockbook.core.entities.sale import Sale, SaleLineItem
from stockbook.core.exceptions import (
    InsufficientStockError,
    NoSaleItemsError,
    ProductNotFoundError,
    StoreWriteError,
    ValidationError,
)
from stockbook.core.interfaces.kv_store import IKeyValueStore

logger = get_logger(__name__)

PRODUCTS_KEY = "products"
SALES_KEY = "sales"
DEBTS_KEY = "debts"

E = TypeVar("E", bound=EntityModel)


def _revalidate(entity: E) -> E:
    """Re-run field validation (model_copy(update=...) skips it)."""
    try:
        return type(entity).model_validate(entity.model_dump())
    except PydanticValidationError as e:
        error = e.errors()[0]
        raise ValidationError(
            field=".".join(str(part) for part in error["loc"]),
            message=error["msg"],
            value=error.get("input"),
        ) from e


def _replace(items: list[E], entity: E) -> list[E] | None:
    """Copy of items with the entity of the same id swapped in, None if absent."""
    for index, existing in enumerate(items):
        if existing.id == entity.id:  # type: ignore[attr-defined]
            updated = list(items)
            updated[index] = entity
            return updated
    return None


class ShopRepository:
    """
    In-memory collections backed by a key-value store.

    Update and delete of a missing id are no-ops that return False.
    """

    def __init__(self, store: IKeyValueStore) -> None:
        self._store = store
        self._products: list[Product] = []
        self._sales: list[Sale] = []
        self._debts: list[Debt] = []

    # Loading

    async def load(self) -> None:
        """Read all three collections from the store."""
        self._products = await self._load_collection(PRODUCTS_KEY, Product)
        self._sales = await self._load_collection(SALES_KEY, Sale)
        self._debts = await self._load_collection(DEBTS_KEY, Debt)
        logger.info(
            "repository_loaded",
            products=len(self._products),
            sales=len(self._sales),
            debts=len(self._debts),
        )

    async def _load_collection(self, key: str, model: type[E]) -> list[E]:
        raw = await self._store.read(key, [])
        if not isinstance(raw, list):
            logger.warning(
                "store_collection_invalid", key=key, type=type(raw).__name__
            )
            return []

        records: list[E] = []
        for index, item in enumerate(raw):
            try:
                records.append(model.model_validate(item))
            except PydanticValidationError as e:
                logger.warning(
                    "store_record_invalid",
                    key=key,
                    index=index,
                    errors=e.error_count(),
                )
        return records

    async def _persist(self, key: str, items: list[E]) -> None:
        await self._store.write(key, [item.to_record() for item in items])

    async def _commit(self, key: str, attr: str, items: list[E]) -> None:
        """
        Swap in a new collection and persist it.

        A failed write restores the previous collection before the error
        propagates, so memory and store stay in step.
        """
        previous = getattr(self, attr)
        setattr(self, attr, items)
        try:
            await self._persist(key, items)
        except StoreWriteError:
            setattr(self, attr, previous)
            logger.warning("collection_write_failed", key=key)
            raise

    # Read access

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def sales(self) -> tuple[Sale, ...]:
        return tuple(self._sales)

    @property
    def debts(self) -> tuple[Debt, ...]:
        return tuple(self._debts)

    def get_product(self, product_id: str) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)

    def get_debt(self, debt_id: str) -> Debt | None:
        return next((d for d in self._debts if d.id == debt_id), None)

    # Products

    async def add_product(self, draft: ProductDraft) -> Product:
        """Create a product with a fresh id and append it to the catalog."""
        product = Product.from_draft(_revalidate(draft))
        await self._commit(PRODUCTS_KEY, "_products", self._products + [product])
        logger.info("product_added", product_id=product.id, name=product.name)
        return product

    async def update_product(self, product: Product) -> bool:
        """Replace the product with the same id."""
        product = _revalidate(product)
        updated = _replace(self._products, product)
        if updated is None:
            logger.warning("product_not_found", product_id=product.id)
            return False
        await self._commit(PRODUCTS_KEY, "_products", updated)
        logger.info("product_updated", product_id=product.id)
        return True

    async def delete_product(self, product_id: str) -> bool:
        """Remove a product. Recorded sales keep their snapshot."""
        remaining = [p for p in self._products if p.id != product_id]
        if len(remaining) == len(self._products):
            logger.warning("product_not_found", product_id=product_id)
            return False
        await self._commit(PRODUCTS_KEY, "_products", remaining)
        logger.info("product_deleted", product_id=product_id)
        return True

    # Sales

    async def record_sale(self, items: Iterable[SaleLineItem]) -> list[Sale]:
        """
        Record a sale batch atomically.

        Lines with a quantity of zero or less are ignored. Repeated product
        ids are decremented independently, in list order, and their demand
        is checked cumulatively.

        Args:
            items: Line items of the batch.

        Returns:
            The new sales, one per line, in line order.

        Raises:
            NoSaleItemsError: No line has a positive quantity.
            ProductNotFoundError: A line references an unknown product.
            InsufficientStockError: Cumulative demand exceeds stock.
        """
        lines = [item for item in items if item.quantity > 0]
        if not lines:
            raise NoSaleItemsError()

        # Validate against one snapshot of the catalog
        products = list(self._products)
        position_by_id = {p.id: i for i, p in enumerate(products)}
        demand: dict[str, int] = {}
        for line in lines:
            position = position_by_id.get(line.product_id)
            if position is None:
                logger.warning("sale_product_not_found", product_id=line.product_id)
                raise ProductNotFoundError(line.product_id)

            demand[line.product_id] = demand.get(line.product_id, 0) + line.quantity
            available = products[position].quantity
            if demand[line.product_id] > available:
                logger.warning(
                    "sale_insufficient_stock",
                    product_id=line.product_id,
                    requested=demand[line.product_id],
                    available=available,
                )
                raise InsufficientStockError(
                    product_id=line.product_id,
                    requested=demand[line.product_id],
                    available=available,
                )

        # Apply
        now = utc_now()
        new_sales: list[Sale] = []
        for line in lines:
            position = position_by_id[line.product_id]
            product = products[position]
            new_sales.append(Sale.from_product(product, line.quantity, now))
            products[position] = product.model_copy(
                update={"quantity": product.quantity - line.quantity}
            )

        previous_products, previous_sales = self._products, self._sales
        self._products = products
        self._sales = self._sales + new_sales

        products_written = False
        try:
            await self._persist(PRODUCTS_KEY, self._products)
            products_written = True
            await self._persist(SALES_KEY, self._sales)
        except StoreWriteError:
            self._products, self._sales = previous_products, previous_sales
            logger.warning("sale_write_failed", products_written=products_written)
            if products_written:
                await self._restore_products(previous_products)
            raise

        logger.info(
            "sale_recorded",
            lines=len(new_sales),
            total=sum(s.total for s in new_sales),
        )
        return new_sales

    async def _restore_products(self, products: list[Product]) -> None:
        """Put back the stock of a sale whose sales write failed."""
        try:
            await self._persist(PRODUCTS_KEY, products)
        except StoreWriteError as e:
            # Stored stock stays decremented until the next products write
            logger.error("sale_stock_restore_failed", error=e.message)

    # Debts

    async def add_debt(self, draft: DebtDraft) -> Debt:
        debt = Debt.from_draft(_revalidate(draft))
        await self._commit(DEBTS_KEY, "_debts", self._debts + [debt])
        logger.info("debt_added", debt_id=debt.id)
        return debt

    async def update_debt(self, debt: Debt) -> bool:
        debt = _revalidate(debt)
        updated = _replace(self._debts, debt)
        if updated is None:
            logger.warning("debt_not_found", debt_id=debt.id)
            return False
        await self._commit(DEBTS_KEY, "_debts", updated)
        logger.info("debt_updated", debt_id=debt.id)
        return True

    async def delete_debt(self, debt_id: str) -> bool:
        remaining = [d for d in self._debts if d.id != debt_id]
        if len(remaining) == len(self._debts):
            logger.warning("debt_not_found", debt_id=debt_id)
            return False
        await self._commit(DEBTS_KEY, "_debts", remaining)
        logger.info("debt_deleted", debt_id=debt_id)
        return True

    # Maintenance

    async def clear_all_data(self) -> None:
        """
        Empty all three collections and persist the empty state.

        Each collection is emptied in memory only once its write succeeds.
        """
        for key, attr in (
            (PRODUCTS_KEY, "_products"),
            (SALES_KEY, "_sales"),
            (DEBTS_KEY, "_debts"),
        ):
            await self._commit(key, attr, [])
        logger.info("all_data_cleared")
