"""Domain entity — a single income or expense line in a personal budget."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from recordbook.domain.validation import require_present, require_text


@dataclass(frozen=True)
class Transaction:
    """An income or expense, looked up by its description.

    ``date`` is stamped at creation and survives edits and save/load.
    """

    description: str
    amount: Decimal
    is_expense: bool
    category: str
    date: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        require_text("description", self.description)
        require_text("category", self.category)
        require_present("amount", self.amount)
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

    @property
    def key(self) -> str:
        return self.description

    @property
    def kind(self) -> str:
        return "Expense" if self.is_expense else "Income"

    @property
    def signed_amount(self) -> Decimal:
        """Amount as it affects the balance: negative for expenses."""
        return -self.amount if self.is_expense else self.amount
