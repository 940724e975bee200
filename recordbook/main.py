"""Command-line entry point (cyclopts).

The five record-keeping programs run as interactive numbered menus; the
number drills are one-shot commands that prompt for anything not passed on
the command line.
"""

import logging
from typing import Literal

import cyclopts

from recordbook.config import get_settings
from recordbook.infrastructure.dependencies import (
    get_budget_service,
    get_fitness_service,
    get_hotel_service,
    get_movie_rental_service,
    get_recipe_service,
)
from recordbook.infrastructure.logging.log_config import setup_logging
from recordbook.presentation.cli import math_commands
from recordbook.presentation.cli.budget_menu import BudgetMenu
from recordbook.presentation.cli.console import Console
from recordbook.presentation.cli.fitness_menu import FitnessMenu
from recordbook.presentation.cli.hotel_menu import HotelMenu
from recordbook.presentation.cli.movie_menu import MovieMenu
from recordbook.presentation.cli.prompts import Prompter
from recordbook.presentation.cli.recipe_menu import RecipeMenu

logger = logging.getLogger(__name__)

app = cyclopts.App(
    name="recordbook",
    help="Record Book - budgeting, hotel, movie rental, recipe and fitness record keepers",
    version=lambda: get_settings().app_version,
)


def _io() -> tuple[Console, Prompter]:
    console = Console()
    return console, Prompter(console)


@app.command
def budget() -> None:
    """Budgeting Tool: income and expense transactions."""
    console, prompter = _io()
    BudgetMenu(get_budget_service(), console, prompter, get_settings()).run()


@app.command
def hotel() -> None:
    """Hotel Reservation System: rooms, reservations and customers."""
    console, prompter = _io()
    HotelMenu(get_hotel_service(), console, prompter, get_settings()).run()


@app.command
def movies() -> None:
    """Movie Rental System: movies, customers and rentals."""
    console, prompter = _io()
    MovieMenu(get_movie_rental_service(), console, prompter, get_settings()).run()


@app.command
def recipes() -> None:
    """Recipe Management System."""
    console, prompter = _io()
    RecipeMenu(get_recipe_service(), console, prompter, get_settings()).run()


@app.command
def fitness() -> None:
    """Personal Fitness Tracker."""
    console, prompter = _io()
    FitnessMenu(get_fitness_service(), console, prompter).run()


@app.command
def armstrong(number: int | None = None) -> None:
    """Check whether a number is an Armstrong number.

    Args:
        number: Number to check.
    """
    math_commands.armstrong(*_io(), number)


@app.command
def factorial(number: int | None = None) -> None:
    """Print the factorial of a non-negative whole number.

    Args:
        number: Number to take the factorial of.
    """
    math_commands.factorial(*_io(), number)


@app.command
def interest(
    principal: float | None = None,
    rate: float | None = None,
    years: float | None = None,
) -> None:
    """Compute simple interest.

    Args:
        principal: Amount borrowed or invested.
        rate: Yearly interest rate in percent.
        years: Time period in years.
    """
    console, prompter = _io()
    math_commands.interest(
        console,
        prompter,
        principal,
        rate,
        years,
        currency_symbol=get_settings().currency_symbol,
    )


@app.command
def temperature(
    value: float | None = None,
    *,
    to: Literal["kelvin", "celsius"] | None = None,
) -> None:
    """Convert a temperature between Celsius and Kelvin.

    Args:
        value: Temperature to convert.
        to: Target scale; prompts with a menu when omitted.
    """
    direction = {
        "kelvin": math_commands.CELSIUS_TO_KELVIN,
        "celsius": math_commands.KELVIN_TO_CELSIUS,
        None: None,
    }[to]
    math_commands.temperature(*_io(), value, direction)


def main() -> None:
    setup_logging()
    logger.debug("Starting %s", get_settings().app_title)
    app()


if __name__ == "__main__":
    main()
