"""Line format for budget transactions: ``description|amount|isExpense|category|date``."""

from recordbook.application.interfaces import RecordCodec
from recordbook.domain.entities import Transaction

from .fields import format_bool, parse_bool, parse_datetime, parse_decimal


class TransactionCodec(RecordCodec[Transaction]):
    field_count = 5

    def encode(self, record: Transaction) -> list[str]:
        return [
            record.description,
            str(record.amount),
            format_bool(record.is_expense),
            record.category,
            record.date.isoformat(),
        ]

    def decode(self, fields: list[str]) -> Transaction:
        description, amount, is_expense, category, date = fields
        return Transaction(
            description=description,
            amount=parse_decimal(amount),
            is_expense=parse_bool(is_expense),
            category=category,
            date=parse_datetime(date),
        )
