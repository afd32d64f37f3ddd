"""
Derived read views over products and sales.

Pure functions: recomputed on every call, never cached or persisted.
Realized figures always use each sale's snapshot prices.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from stockbook.core.entities.product import Product
from stockbook.core.entities.sale import Sale


@dataclass(frozen=True)
class ProductRanking:
    """Leading product of a sales aggregate."""

    product_id: str
    product_name: str
    value: float


# Inventory figures


def total_inventory_cost(products: Iterable[Product]) -> float:
    return sum(p.purchase_price * p.quantity for p in products)


def potential_revenue(products: Iterable[Product]) -> float:
    return sum(p.sale_price * p.quantity for p in products)


def potential_profit(products: Sequence[Product]) -> float:
    return potential_revenue(products) - total_inventory_cost(products)


def profit_margin(products: Sequence[Product]) -> float:
    """Potential profit as a percentage of potential revenue (0 without revenue)."""
    revenue = potential_revenue(products)
    if revenue <= 0:
        return 0.0
    return potential_profit(products) / revenue * 100


def total_units(products: Iterable[Product]) -> int:
    return sum(p.quantity for p in products)


# Sales figures


def realized_revenue(sales: Iterable[Sale]) -> float:
    return sum(s.total for s in sales)


def realized_profit(sales: Iterable[Sale]) -> float:
    return sum(s.profit for s in sales)


def profit_by_product(sales: Iterable[Sale], product_id: str) -> float:
    """Realized profit attributable to one product id, deleted or not."""
    return sum(s.profit for s in sales if s.product_id == product_id)


def _top_product(
    sales: Sequence[Sale],
    products: Iterable[Product],
    measure: Callable[[Sale], float],
) -> ProductRanking | None:
    """
    Group sales by product id and return the largest aggregate.

    Ties go to the product id encountered first in sale order: a later id
    only takes the lead when strictly greater. The display name is the
    live product's current name, else the name on its first sale.
    """
    totals: dict[str, float] = {}
    snapshot_names: dict[str, str] = {}
    for sale in sales:
        totals[sale.product_id] = totals.get(sale.product_id, 0) + measure(sale)
        snapshot_names.setdefault(sale.product_id, sale.product_name)

    best_id: str | None = None
    for product_id, value in totals.items():
        if best_id is None or value > totals[best_id]:
            best_id = product_id

    if best_id is None:
        return None

    live_names = {p.id: p.name for p in products}
    name = live_names.get(best_id, snapshot_names[best_id])
    return ProductRanking(product_id=best_id, product_name=name, value=totals[best_id])


def best_selling_product(
    sales: Sequence[Sale], products: Iterable[Product]
) -> ProductRanking | None:
    """Product with the highest cumulative quantity sold."""
    return _top_product(sales, products, lambda s: s.quantity)


def top_profit_product(
    sales: Sequence[Sale], products: Iterable[Product]
) -> ProductRanking | None:
    """Product with the highest cumulative realized profit."""
    return _top_product(sales, products, lambda s: s.profit)
