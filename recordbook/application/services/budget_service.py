"""Application service (use case) for the personal budgeting tool."""

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from recordbook.application.interfaces import RecordRepository
from recordbook.application.schemas import TransactionCreate, TransactionUpdate
from recordbook.domain.entities import Transaction
from recordbook.domain.query import (
    count,
    distinct,
    field_between,
    field_contains,
    field_equals,
    group_by,
    total,
)

logger = logging.getLogger(__name__)

_is_expense = field_equals("is_expense", True)
_is_income = field_equals("is_expense", False)


@dataclass
class BudgetReport:
    """Totals for a set of transactions."""

    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal
    transaction_count: int
    expenses_by_category: dict[str, Decimal] = field(default_factory=dict)


class BudgetService:
    """Orchestrates budget bookkeeping. Depends on the repository port (DI)."""

    def __init__(self, repository: RecordRepository[Transaction]):
        self._repository = repository

    def add_transaction(self, data: TransactionCreate) -> Transaction:
        transaction = Transaction(
            description=data.description,
            amount=data.amount,
            is_expense=data.is_expense,
            category=data.category,
        )
        return self._repository.add(transaction)

    def list_transactions(self) -> list[Transaction]:
        return self._repository.list_records()

    # ── Totals ──────────────────────────────────────────────────────

    def total_income(self) -> Decimal:
        return Decimal(self._repository.aggregate(lambda t: t.amount, total, _is_income))

    def total_expenses(self) -> Decimal:
        return Decimal(self._repository.aggregate(lambda t: t.amount, total, _is_expense))

    def balance(self) -> Decimal:
        return self.total_income() - self.total_expenses()

    # ── Filters ─────────────────────────────────────────────────────

    def by_category(self, category: str) -> list[Transaction]:
        return list(self._repository.find_all(field_equals("category", category)))

    def by_date_range(self, start: date, end: date) -> list[Transaction]:
        """Transactions dated on any calendar day from ``start`` to ``end`` inclusive."""
        return list(
            self._repository.find_all(
                field_between("date", start, end, transform=datetime.date)
            )
        )

    def by_amount_range(self, minimum: Decimal, maximum: Decimal) -> list[Transaction]:
        return list(self._repository.find_all(field_between("amount", minimum, maximum)))

    def search(self, term: str) -> list[Transaction]:
        return list(self._repository.find_all(field_contains("description", term)))

    def unique_categories(self) -> list[str]:
        return self._repository.aggregate(lambda t: t.category, distinct)

    # ── Reports ─────────────────────────────────────────────────────

    def summary_report(self) -> BudgetReport:
        income = self.total_income()
        expenses = self.total_expenses()
        by_category = self._repository.aggregate(
            lambda t: (t.category, t.amount), group_by(total), _is_expense
        )
        return BudgetReport(
            total_income=income,
            total_expenses=expenses,
            balance=income - expenses,
            transaction_count=self._repository.aggregate(lambda t: t, count),
            expenses_by_category=by_category,
        )

    def monthly_report(self, month: int, year: int) -> BudgetReport | None:
        """Totals for one calendar month, or None when nothing was recorded."""
        in_month = [
            t for t in self._repository.find_all()
            if t.date.month == month and t.date.year == year
        ]
        if not in_month:
            logger.info("No transactions for %04d-%02d", year, month)
            return None

        income = total(t.amount for t in in_month if not t.is_expense)
        expenses = total(t.amount for t in in_month if t.is_expense)
        return BudgetReport(
            total_income=Decimal(income),
            total_expenses=Decimal(expenses),
            balance=Decimal(income - expenses),
            transaction_count=len(in_month),
            expenses_by_category=group_by(total)(
                (t.category, t.amount) for t in in_month if t.is_expense
            ),
        )

    # ── Edit / delete ───────────────────────────────────────────────

    def delete_transaction(self, description: str) -> bool:
        return self._repository.delete_by_key(description) is not None

    def edit_transaction(self, description: str, data: TransactionUpdate) -> Transaction | None:
        """Replace a transaction's amount, kind and category; it moves to the end of the list."""
        return self._repository.update_by_key(
            description,
            lambda old: replace(
                old,
                amount=data.amount,
                is_expense=data.is_expense,
                category=data.category,
            ),
        )

    # ── Persistence ─────────────────────────────────────────────────

    def save(self, path: str | Path) -> int:
        return self._repository.save_to_file(path)

    def load(self, path: str | Path, *, strict: bool = False) -> int:
        return self._repository.load_from_file(path, strict=strict)
