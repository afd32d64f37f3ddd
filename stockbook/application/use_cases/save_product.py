"""Save Product Use Case: validate a product form, then add or update."""

from dataclasses import dataclass, field

from stockbook.application.dto.requests import ProductFormRequest
from stockbook.application.dto.responses import ProductResponse, SaveProductResponse
from stockbook.application.use_cases._base import RepositoryUseCase
from stockbook.config import get_logger
from stockbook.core.entities.product import Product
from stockbook.core.services.form_validation import validate_product_form

logger = get_logger(__name__)


@dataclass
class SaveProductResult:
    """Result of saving a product form."""

    product: Product | None = None
    errors: dict[str, str] = field(default_factory=dict)
    price_below_cost: bool = False

    @property
    def saved(self) -> bool:
        return self.product is not None


class SaveProductUseCase(RepositoryUseCase):
    """Add a new product or update an existing one from form input."""

    async def execute(self, request: ProductFormRequest) -> SaveProductResult:
        """Execute save product use case."""
        repository = await self._get_repository()

        validation = validate_product_form(
            name=request.name,
            quantity=request.quantity,
            purchase_price=request.purchase_price,
            sale_price=request.sale_price,
            products=repository.products,
            editing_id=request.product_id,
        )
        if validation.draft is None:
            logger.info(
                "product_form_rejected",
                errors=validation.issues,
                price_below_cost=validation.price_below_cost,
            )
            return SaveProductResult(
                errors=validation.issues,
                price_below_cost=validation.price_below_cost,
            )

        if request.product_id is None:
            product = await repository.add_product(validation.draft)
            return SaveProductResult(product=product)

        product = Product(id=request.product_id, **validation.draft.model_dump())
        if not await repository.update_product(product):
            return SaveProductResult()
        return SaveProductResult(product=product)

    def to_response(self, result: SaveProductResult) -> SaveProductResponse:
        """Convert result to presentation response."""
        return SaveProductResponse(
            saved=result.saved,
            product=ProductResponse.from_entity(result.product) if result.product else None,
            errors=result.errors,
            price_below_cost=result.price_below_cost,
        )
