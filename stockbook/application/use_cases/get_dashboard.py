"""Get Dashboard Use Case: inventory and sales figures."""

from stockbook.application.dto.responses import (
    DashboardResponse,
    InventoryChartEntry,
    ProductRankingResponse,
)
from stockbook.application.use_cases._base import RepositoryUseCase
from stockbook.config import LocaleSettings, get_settings
from stockbook.core.services import reports
from stockbook.core.services.number_format import format_currency
from stockbook.core.services.shop_repository import ShopRepository


def _ranking(ranking: reports.ProductRanking | None) -> ProductRankingResponse | None:
    if ranking is None:
        return None
    return ProductRankingResponse(
        product_id=ranking.product_id,
        product_name=ranking.product_name,
        value=ranking.value,
    )


class GetDashboardUseCase(RepositoryUseCase):
    """Compute dashboard figures from the live collections."""

    def __init__(
        self,
        repository: ShopRepository | None = None,
        locale: LocaleSettings | None = None,
    ):
        super().__init__(repository)
        self._locale = locale

    async def execute(self) -> DashboardResponse:
        """Execute get dashboard use case."""
        repository = await self._get_repository()
        locale = self._locale or get_settings().locale
        products = repository.products
        sales = repository.sales

        inventory_value = reports.total_inventory_cost(products)
        revenue_potential = reports.potential_revenue(products)
        revenue = reports.realized_revenue(sales)
        profit = reports.realized_profit(sales)

        def money(amount: float) -> str:
            return format_currency(amount, locale.language, locale.currency_symbol)

        return DashboardResponse(
            total_inventory_value=inventory_value,
            potential_revenue=revenue_potential,
            product_variants=len(products),
            total_units=reports.total_units(products),
            total_revenue=revenue,
            total_profit=profit,
            best_selling_product=_ranking(reports.best_selling_product(sales, products)),
            top_profit_product=_ranking(reports.top_profit_product(sales, products)),
            inventory_chart=[
                InventoryChartEntry(name=p.name, quantity=p.quantity, value=p.stock_value)
                for p in products
            ],
            display={
                "total_inventory_value": money(inventory_value),
                "potential_revenue": money(revenue_potential),
                "total_revenue": money(revenue),
                "total_profit": money(profit),
            },
        )
