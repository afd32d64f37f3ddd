"""Save Debt Use Case: validate a debt form, then add or update."""

from dataclasses import dataclass, field

from stockbook.application.dto.requests import DebtFormRequest
from stockbook.application.dto.responses import DebtResponse, SaveDebtResponse
from stockbook.application.use_cases._base import RepositoryUseCase
from stockbook.config import get_logger
from stockbook.core.entities.debt import Debt
from stockbook.core.services.form_validation import validate_debt_form

logger = get_logger(__name__)


@dataclass
class SaveDebtResult:
    """Result of saving a debt form."""

    debt: Debt | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def saved(self) -> bool:
        return self.debt is not None


class SaveDebtUseCase(RepositoryUseCase):
    """Add a new debt or update an existing one from form input."""

    async def execute(self, request: DebtFormRequest) -> SaveDebtResult:
        """Execute save debt use case."""
        validation = validate_debt_form(
            first_name=request.first_name,
            last_name=request.last_name,
            items_description=request.items_description,
            amount=request.amount,
            contact_number=request.contact_number,
            note=request.note,
        )
        if validation.draft is None:
            logger.info("debt_form_rejected", errors=validation.issues)
            return SaveDebtResult(errors=validation.issues)

        repository = await self._get_repository()
        if request.debt_id is None:
            debt = await repository.add_debt(validation.draft)
            return SaveDebtResult(debt=debt)

        debt = Debt(id=request.debt_id, **validation.draft.model_dump())
        if not await repository.update_debt(debt):
            return SaveDebtResult()
        return SaveDebtResult(debt=debt)

    def to_response(self, result: SaveDebtResult) -> SaveDebtResponse:
        """Convert result to presentation response."""
        return SaveDebtResponse(
            saved=result.saved,
            debt=DebtResponse.from_entity(result.debt) if result.debt else None,
            errors=result.errors,
        )
