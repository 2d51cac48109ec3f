"""Interactive payroll menu.

Reads a menu choice, validates it, and dispatches to the registry or the
report renderer until the operator chooses Exit.
"""

import logging
from typing import Callable

import click

from payroll.sdk.errors import FormatError, RangeError
from payroll.sdk.registry import EchoFunc, EmployeeRegistry, PromptFunc
from payroll.sdk.validators import parse_menu_choice

logger = logging.getLogger(__name__)

MENU_MIN = 1
MENU_MAX = 5
EXIT_CHOICE = 5

MENU_TEXT = "\n".join([
    "",
    "=============================",
    "    PAYROLL SYSTEM MENU    ",
    "=============================",
    "[1] Full-time Employee",
    "[2] Part-time Employee",
    "[3] Contractual Employee",
    "[4] Display Payroll Report",
    "[5] Exit",
    "=============================",
])

MSG_INVALID_CHOICE = f"Invalid choice. Please enter a number between {MENU_MIN} and {MENU_MAX}."
MSG_GOODBYE = "Exiting program. Goodbye!"


def click_prompt(text: str) -> str:
    """Read one line from the operator, allowing empty input."""
    return click.prompt(text, default="", show_default=False, prompt_suffix="")


def run_menu(
    registry: EmployeeRegistry,
    show_report: Callable[[EmployeeRegistry], None],
    prompt: PromptFunc,
    echo: EchoFunc = click.echo,
) -> None:
    """Run the menu loop until the operator picks Exit.

    Args:
        registry: Registry that receives new employees
        show_report: Called with the registry for option 4
        prompt: Reads one line of operator input
        echo: Writes one line of output
    """
    actions = {
        1: registry.add_full_time,
        2: registry.add_part_time,
        3: registry.add_contractual,
        4: lambda: show_report(registry),
    }

    while True:
        echo(MENU_TEXT)
        text = prompt("Enter your choice: ")
        try:
            choice = parse_menu_choice(text, MENU_MIN, MENU_MAX)
        except (FormatError, RangeError) as e:
            logger.debug(str(e))
            echo(MSG_INVALID_CHOICE)
            continue

        if choice == EXIT_CHOICE:
            echo(MSG_GOODBYE)
            return
        actions[choice]()
