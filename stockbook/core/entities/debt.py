"""Debt tracking entities."""

from pydantic import Field

from stockbook.core.entities.base import EntityModel, new_id


class DebtDraft(EntityModel):
    """Debt fields supplied by the caller before an id is assigned."""

    first_name: str
    last_name: str
    items_description: str = ""
    amount: float = Field(default=0.0, ge=0)
    contact_number: str | None = None
    note: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Debt(DebtDraft):
    """An outstanding debt owed by a customer."""

    id: str = Field(default_factory=new_id)

    @classmethod
    def from_draft(cls, draft: DebtDraft) -> "Debt":
        return cls(**draft.model_dump(exclude={"id"}))
