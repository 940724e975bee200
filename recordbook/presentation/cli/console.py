"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output. All menu
output goes through this module.
"""

from decimal import Decimal
from typing import IO, Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


def money(value: Decimal | float, symbol: str = "$") -> str:
    """Format an amount with a currency symbol: ``-$4.50``, ``$1,995.50``."""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


class Console:
    """CLI output manager wrapping rich.

    ``file`` redirects both normal and error output (used by tests to
    capture a whole session).
    """

    def __init__(
        self,
        *,
        file: IO[str] | None = None,
        force_terminal: bool | None = None,
        quiet: bool = False,
        width: int | None = None,
    ) -> None:
        self._console = RichConsole(
            file=file,
            force_terminal=force_terminal,
            stderr=False,
            width=width,
            highlight=False,
        )
        self._err_console = RichConsole(
            file=file,
            force_terminal=force_terminal,
            stderr=file is None,
            width=width,
            highlight=False,
        )
        self._quiet = quiet

    @property
    def rich(self) -> RichConsole:
        """The underlying rich console, for prompts."""
        return self._console

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str) -> None:
        """Print an info message (suppressed in quiet mode)."""
        if not self._quiet:
            self._console.print(f"[dim]{message}[/dim]")

    # -------------------------------------------------------------------------
    # Structured output
    # -------------------------------------------------------------------------

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._console.print(*args, **kwargs)

    def print_lines(self, lines: list[str]) -> None:
        for line in lines:
            self._console.print(line)

    def heading(self, title: str) -> None:
        self._console.print()
        self._console.print(f"[bold]{title}[/bold]")

    def table(
        self,
        rows: list[dict[str, Any]],
        columns: list[tuple[str, str]],  # (key, header)
        *,
        title: str | None = None,
        numbered: bool = False,
        empty_message: str | None = None,
    ) -> None:
        """Print a table, or ``empty_message`` as a warning when there are no rows.

        Args:
            rows: List of dicts containing row data.
            columns: List of (key, header) tuples defining columns.
            title: Optional table title.
            numbered: Add a # column with row numbers.
            empty_message: Shown instead of an empty table.
        """
        if not rows and empty_message:
            self.warning(empty_message)
            return

        table = Table(title=title, show_header=True, header_style="bold")

        if numbered:
            table.add_column("#", style="dim", width=3)

        for key, header in columns:
            table.add_column(header)

        for i, row in enumerate(rows, 1):
            values = [escape(str(row.get(key, ""))) for key, _ in columns]
            if numbered:
                table.add_row(str(i), *values)
            else:
                table.add_row(*values)

        self._console.print(table)

    def panel(
        self,
        content: str,
        *,
        title: str | None = None,
        subtitle: str | None = None,
        border_style: str = "dim",
    ) -> None:
        self._console.print(
            Panel(
                content,
                title=title,
                subtitle=subtitle,
                border_style=border_style,
            )
        )

    def key_values(self, pairs: list[tuple[str, Any]], *, title: str | None = None) -> None:
        """Print ``label: value`` lines, optionally under a bold title."""
        if title:
            self.heading(title)
        for label, value in pairs:
            self._console.print(f"{label}: {escape(str(value))}")
