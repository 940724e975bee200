"""One-shot number drills. Any value not given on the command line is prompted for."""

from recordbook.application.services import math_drills
from recordbook.domain.exceptions import ValidationError
from recordbook.presentation.cli.console import Console
from recordbook.presentation.cli.prompts import Prompter

CELSIUS_TO_KELVIN = 1
KELVIN_TO_CELSIUS = 2


def armstrong(console: Console, prompter: Prompter, number: int | None = None) -> bool:
    if number is None:
        number = prompter.integer("Enter a number")
    result = math_drills.is_armstrong(number)
    verdict = "is" if result else "is not"
    console.print(f"The number {number} {verdict} an Armstrong number.")
    return result


def factorial(console: Console, prompter: Prompter, number: int | None = None) -> int | None:
    if number is None:
        number = prompter.integer("Enter a number")
    try:
        result = math_drills.factorial(number)
    except ValidationError as exc:
        console.error(str(exc))
        return None
    console.print(f"{number}! = {result}")
    return result


def interest(
    console: Console,
    prompter: Prompter,
    principal: float | None = None,
    rate: float | None = None,
    years: float | None = None,
    currency_symbol: str = "$",
) -> float:
    if principal is None:
        principal = prompter.number("Enter principal amount", check=lambda p: p >= 0)
    if rate is None:
        rate = prompter.number("Enter rate of interest (in %)", check=lambda r: r >= 0)
    if years is None:
        years = prompter.number("Enter time period (in years)", check=lambda y: y >= 0)
    result = math_drills.simple_interest(principal, rate, years)
    console.print(f"Simple interest for the given amount is: {currency_symbol}{result:,.2f}")
    return result


def temperature(
    console: Console,
    prompter: Prompter,
    value: float | None = None,
    direction: int | None = None,
) -> float | None:
    """Convert between Celsius and Kelvin; ``direction`` is 1 (C to K) or 2 (K to C)."""
    if direction is None:
        console.heading("Temperature Converter")
        console.print_lines(["1. Celsius to Kelvin", "2. Kelvin to Celsius"])
        direction = prompter.integer("Choose an option")

    if direction == CELSIUS_TO_KELVIN:
        if value is None:
            value = prompter.number("Enter temperature to be converted (in Celsius)")
        result = math_drills.celsius_to_kelvin(value)
        console.print(f"The temperature in Kelvin is: {result:g} K")
        return result
    if direction == KELVIN_TO_CELSIUS:
        if value is None:
            value = prompter.number("Enter temperature to be converted (in Kelvin)")
        result = math_drills.kelvin_to_celsius(value)
        console.print(f"The temperature in Celsius is: {result:g} C")
        return result

    console.error("Please choose a valid option.")
    return None
