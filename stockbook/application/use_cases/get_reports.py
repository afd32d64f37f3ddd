"""Get Reports Use Case: potential profit and revenue breakdown."""

from stockbook.application.dto.responses import ReportsResponse, RevenueShare
from stockbook.application.use_cases._base import RepositoryUseCase
from stockbook.config import LocaleSettings, get_settings
from stockbook.core.services import reports
from stockbook.core.services.number_format import format_currency, format_percent
from stockbook.core.services.shop_repository import ShopRepository


class GetReportsUseCase(RepositoryUseCase):
    """Compute report figures from the current stock."""

    def __init__(
        self,
        repository: ShopRepository | None = None,
        locale: LocaleSettings | None = None,
    ):
        super().__init__(repository)
        self._locale = locale

    async def execute(self) -> ReportsResponse:
        """Execute get reports use case."""
        repository = await self._get_repository()
        locale = self._locale or get_settings().locale
        products = repository.products

        profit = reports.potential_profit(products)
        margin = reports.profit_margin(products)
        revenue = reports.potential_revenue(products)

        return ReportsResponse(
            total_inventory_value=reports.total_inventory_cost(products),
            potential_revenue=revenue,
            potential_profit=profit,
            profit_margin=margin,
            revenue_by_product=[
                RevenueShare(name=p.name, value=p.potential_revenue) for p in products
            ],
            display={
                "potential_profit": format_currency(
                    profit, locale.language, locale.currency_symbol
                ),
                "potential_revenue": format_currency(
                    revenue, locale.language, locale.currency_symbol
                ),
                "profit_margin": format_percent(margin, locale.language),
            },
        )
