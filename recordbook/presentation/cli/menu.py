"""Numbered-menu loop shared by the interactive programs."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

from pydantic import ValidationError as SchemaValidationError

from recordbook.domain.exceptions import (
    RecordFileNotFoundError,
    RecordParseError,
    ValidationError,
)
from recordbook.presentation.cli.console import Console
from recordbook.presentation.cli.prompts import Prompter

logger = logging.getLogger(__name__)

MenuOption = tuple[str, Callable[[], None]]


def describe_schema_error(exc: SchemaValidationError) -> str:
    """One line per failing field: ``amount: Input should be greater than 0``."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ())) or "input"
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


class Menu(ABC):
    """Prints numbered options, runs the chosen one, repeats until the exit number.

    A failing option reports its error and returns to the menu; nothing is
    retried automatically.
    """

    title: str = ""
    exit_label: str = "Exit"

    def __init__(self, console: Console, prompter: Prompter):
        self.console = console
        self.prompt = prompter

    @abstractmethod
    def options(self) -> list[MenuOption]:
        ...

    def run(self) -> None:
        options = self.options()
        exit_choice = str(len(options) + 1)
        handlers = {str(i): handler for i, (_, handler) in enumerate(options, 1)}

        while True:
            self._render(options)
            try:
                choice = self.prompt.choice().strip()
            except EOFError:
                return
            if choice == exit_choice:
                self.on_exit()
                return

            handler = handlers.get(choice)
            if handler is None:
                self.console.warning("Invalid option, please try again.")
                continue
            try:
                self.dispatch(handler)
            except EOFError:
                return

    def dispatch(self, handler: Callable[[], None]) -> None:
        try:
            handler()
        except SchemaValidationError as exc:
            self.console.error(f"Invalid input: {describe_schema_error(exc)}")
        except ValidationError as exc:
            self.console.error(f"Invalid input: {exc}")
        except RecordFileNotFoundError as exc:
            self.console.error("File not found.", hint=exc.path)
        except RecordParseError as exc:
            self.console.error(f"Could not read file: {exc}")
        except OSError as exc:
            logger.warning("File operation failed: %s", exc)
            self.console.error(f"File operation failed: {exc}")

    def on_exit(self) -> None:
        pass

    def _render(self, options: list[MenuOption]) -> None:
        self.console.heading(self.title)
        lines = [f"{i}. {label}" for i, (label, _) in enumerate(options, 1)]
        lines.append(f"{len(options) + 1}. {self.exit_label}")
        self.console.print_lines(lines)
