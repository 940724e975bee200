"""Interactive Budgeting Tool."""

from calendar import month_name
from decimal import Decimal

from rich.markup import escape

from recordbook.application.schemas import TransactionCreate, TransactionUpdate
from recordbook.application.services import BudgetReport, BudgetService
from recordbook.config import Settings
from recordbook.domain.entities import Transaction
from recordbook.presentation.cli.console import Console, money
from recordbook.presentation.cli.menu import Menu, MenuOption
from recordbook.presentation.cli.prompts import Prompter

_COLUMNS = [
    ("kind", "Type"),
    ("description", "Description"),
    ("amount", "Amount"),
    ("date", "Date"),
    ("category", "Category"),
]


def _positive(value: Decimal) -> bool:
    return value > 0


class BudgetMenu(Menu):
    title = "Budgeting Tool"

    def __init__(
        self, service: BudgetService, console: Console, prompter: Prompter, settings: Settings
    ):
        super().__init__(console, prompter)
        self._service = service
        self._settings = settings

    def options(self) -> list[MenuOption]:
        return [
            ("Add Transaction", self.add_transaction),
            ("View Transactions", self.view_transactions),
            ("View Total Income", self.view_income),
            ("View Total Expenses", self.view_expenses),
            ("View Balance", self.view_balance),
            ("View Transactions by Category", self.view_by_category),
            ("View Transactions by Date Range", self.view_by_date_range),
            ("View Transactions by Amount Range", self.view_by_amount),
            ("Save Transactions to File", self.save),
            ("Load Transactions from File", self.load),
            ("Search Transactions", self.search),
            ("Generate Summary Report", self.summary_report),
            ("View Unique Categories", self.unique_categories),
            ("Delete Transaction", self.delete),
            ("Edit Transaction", self.edit),
            ("Generate Monthly Report", self.monthly_report),
        ]

    # ── Options ─────────────────────────────────────────────────────

    def add_transaction(self) -> None:
        description = self.prompt.text("Enter transaction description")
        amount = self.prompt.decimal("Enter amount", check=_positive)
        is_expense = self.prompt.yes_no("Is this an expense?")
        category = self.prompt.text("Enter category")
        self._service.add_transaction(
            TransactionCreate(
                description=description, amount=amount, is_expense=is_expense, category=category
            )
        )
        self.console.success("Transaction added successfully.")

    def view_transactions(self) -> None:
        self._show(self._service.list_transactions(), "No transactions available.")

    def view_income(self) -> None:
        self.console.print(f"Total Income: {self._money(self._service.total_income())}")

    def view_expenses(self) -> None:
        self.console.print(f"Total Expenses: {self._money(self._service.total_expenses())}")

    def view_balance(self) -> None:
        self.console.print(f"Balance: {self._money(self._service.balance())}")

    def view_by_category(self) -> None:
        category = self.prompt.text("Enter category to filter")
        self._show(
            self._service.by_category(category),
            f"No transactions found for category: {escape(category)}",
        )

    def view_by_date_range(self) -> None:
        start = self.prompt.date("Enter start date")
        end = self.prompt.date("Enter end date")
        self._show(
            self._service.by_date_range(start, end),
            "No transactions found for the selected date range.",
        )

    def view_by_amount(self) -> None:
        minimum = self.prompt.decimal(
            "Enter minimum amount",
            check=lambda v: v >= 0,
            error="Please enter a valid minimum amount",
        )
        maximum = self.prompt.decimal(
            "Enter maximum amount",
            check=lambda v: v >= minimum,
            error="Please enter a valid maximum amount",
        )
        self._show(
            self._service.by_amount_range(minimum, maximum),
            "No transactions found in the specified amount range.",
        )

    def save(self) -> None:
        path = self._path("Enter file path to save transactions")
        written = self._service.save(path)
        self.console.success(f"Transactions saved successfully. ({written} written)")

    def load(self) -> None:
        path = self._path("Enter file path to load transactions")
        loaded = self._service.load(path, strict=self._settings.strict_load)
        self.console.success(f"Transactions loaded successfully. ({loaded} loaded)")

    def search(self) -> None:
        term = self.prompt.text("Enter search term")
        self._show(
            self._service.search(term),
            f"No transactions found for search term: {escape(term)}",
        )

    def summary_report(self) -> None:
        report = self._service.summary_report()
        self._print_report("Budget Summary Report", report)
        self.console.print("Expenses by Category:")
        for category, amount in report.expenses_by_category.items():
            self.console.print(f"{escape(category)}: {self._money(amount)}")

    def unique_categories(self) -> None:
        categories = self._service.unique_categories()
        if not categories:
            self.console.warning("No categories found.")
            return
        self.console.print("Unique Categories:")
        self.console.print_lines([escape(c) for c in categories])

    def delete(self) -> None:
        description = self.prompt.text("Enter transaction description to delete")
        if self._service.delete_transaction(description):
            self.console.success(f"Transaction '{escape(description)}' deleted successfully.")
        else:
            self.console.warning(f"No transaction found with description: {escape(description)}")

    def edit(self) -> None:
        description = self.prompt.text("Enter transaction description to edit")
        amount = self.prompt.decimal(
            "Enter new amount", check=_positive, error="Please enter a valid new amount"
        )
        is_expense = self.prompt.yes_no("Is this a new expense?")
        category = self.prompt.text("Enter new category")
        updated = self._service.edit_transaction(
            description,
            TransactionUpdate(amount=amount, is_expense=is_expense, category=category),
        )
        if updated is None:
            self.console.warning(f"No transaction found with description: {escape(description)}")
        else:
            self.console.success(f"Transaction '{escape(description)}' updated successfully.")

    def monthly_report(self) -> None:
        month = self.prompt.integer(
            "Enter month (1-12)",
            check=lambda m: 1 <= m <= 12,
            error="Please enter a valid month (1-12)",
        )
        year = self.prompt.integer("Enter year", error="Please enter a valid year")
        report = self._service.monthly_report(month, year)
        if report is None:
            self.console.warning("No transactions found for the specified month and year.")
            return
        self._print_report(f"Monthly Report for {month_name[month]} {year}", report)

    # ── Helpers ─────────────────────────────────────────────────────

    def _print_report(self, title: str, report: BudgetReport) -> None:
        self.console.key_values(
            [
                ("Total Income", self._money(report.total_income)),
                ("Total Expenses", self._money(report.total_expenses)),
                ("Balance", self._money(report.balance)),
                ("Total Transactions", report.transaction_count),
            ],
            title=title,
        )

    def _show(self, transactions: list[Transaction], empty_message: str) -> None:
        self.console.table(
            [self._row(t) for t in transactions], _COLUMNS, empty_message=empty_message
        )

    def _row(self, t: Transaction) -> dict:
        return {
            "kind": t.kind,
            "description": t.description,
            "amount": self._money(t.amount),
            "date": t.date.date().isoformat(),
            "category": t.category,
        }

    def _money(self, value: Decimal) -> str:
        return money(value, self._settings.currency_symbol)

    def _path(self, label: str):
        return self._settings.data_path(
            self.prompt.text(label, default=self._settings.transactions_file)
        )
