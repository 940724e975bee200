"""Line-based input for the interactive menus.

Every numeric or date prompt loops until the operator enters something that
parses (rich's prompt loop prints the error and asks again). Reading from an
exhausted input stream raises EOFError so a scripted session ends cleanly.
"""

import math
from collections.abc import Callable
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import IO, Any

from rich.console import Console as RichConsole
from rich.prompt import InvalidResponse, Prompt, PromptBase

from recordbook.presentation.cli.console import Console


class _StreamInput:
    """Prompt mixin: EOF on a scripted stream ends the session instead of looping."""

    @classmethod
    def get_input(
        cls,
        console: RichConsole,
        prompt: Any,
        password: bool,
        stream: IO[str] | None = None,
    ) -> str:
        if stream is None:
            return console.input(prompt, password=password)
        console.print(prompt, end="")
        line = stream.readline()
        if not line:
            raise EOFError
        line = line.rstrip("\r\n")
        console.print(line, markup=False, highlight=False)
        return line


class _TextPrompt(_StreamInput, Prompt):
    pass


class _ParsedPrompt(_StreamInput, PromptBase[Any]):
    """Prompt whose answer goes through ``parse``; ValueError means ask again."""

    def __init__(
        self,
        prompt: str,
        *,
        parse: Callable[[str], Any],
        error: str,
        console: RichConsole | None = None,
    ):
        super().__init__(prompt, console=console)
        self._parse = parse
        self.validate_error_message = f"[prompt.invalid]{error}"

    def process_response(self, value: str) -> Any:
        try:
            return self._parse(value.strip())
        except (ValueError, InvalidOperation) as exc:
            raise InvalidResponse(self.validate_error_message) from exc


def _parse_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(raw)
    return value


def _parse_decimal(raw: str) -> Decimal:
    value = Decimal(raw)
    if not value.is_finite():
        raise ValueError(raw)
    return value


def _checked(parse: Callable[[str], Any], check: Callable[[Any], bool] | None) -> Callable[[str], Any]:
    if check is None:
        return parse

    def parse_and_check(raw: str) -> Any:
        value = parse(raw)
        if not check(value):
            raise ValueError(raw)
        return value

    return parse_and_check


class Prompter:
    """Asks the operator for typed values, one line at a time."""

    def __init__(self, console: Console, stream: IO[str] | None = None):
        self._console = console
        self._stream = stream

    def text(self, label: str, *, default: str | None = None) -> str:
        prompt = _TextPrompt(label, console=self._console.rich, show_default=bool(default))
        if default is None:
            return prompt(stream=self._stream)
        return prompt(default=default, stream=self._stream)

    def choice(self, label: str = "Choose an option") -> str:
        return self.text(label)

    def integer(
        self, label: str, *, check: Callable[[int], bool] | None = None, error: str | None = None
    ) -> int:
        return self._parsed(label, int, check, error or "Please enter a valid whole number")

    def number(
        self, label: str, *, check: Callable[[float], bool] | None = None, error: str | None = None
    ) -> float:
        return self._parsed(label, _parse_float, check, error or "Please enter a valid number")

    def decimal(
        self, label: str, *, check: Callable[[Decimal], bool] | None = None, error: str | None = None
    ) -> Decimal:
        return self._parsed(label, _parse_decimal, check, error or "Please enter a valid amount")

    def date(self, label: str, *, error: str | None = None) -> date:
        return self._parsed(
            f"{label} (yyyy-mm-dd)", date.fromisoformat, None, error or "Please enter a valid date"
        )

    def yes_no(self, label: str) -> bool:
        """``y``/``yes`` is True; anything else is False."""
        return self.text(f"{label} (y/n)").strip().lower() in ("y", "yes")

    def _parsed(
        self,
        label: str,
        parse: Callable[[str], Any],
        check: Callable[[Any], bool] | None,
        error: str,
    ) -> Any:
        prompt = _ParsedPrompt(
            label, parse=_checked(parse, check), error=error, console=self._console.rich
        )
        return prompt(stream=self._stream)
