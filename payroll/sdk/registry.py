"""Employee registry - owns the in-memory employee collection.

The registry is the only owner of employee records. It enforces ID
uniqueness and mediates interactive, validated creation of each employee
kind. Every prompting loop blocks until valid input arrives; errors from
the validators are caught, explained to the operator, and the field is
asked for again.

Prompt and echo functions are injectable so the same flow can be driven
by the CLI at the terminal or by a scripted list of answers in tests.
"""

import logging
import os
from decimal import Decimal
from typing import Callable, Iterator, Optional, Tuple

from .employees import (
    ContractualEmployee,
    Employee,
    FullTimeEmployee,
    PartTimeEmployee,
)
from .errors import DuplicateError, EmptyInputError, FormatError, RangeError
from .validators import parse_decimal, parse_integer, validate_id

# Configure logging based on LOG_LEVEL environment variable (default WARNING)
_log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.WARNING),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)

PromptFunc = Callable[[str], str]
EchoFunc = Callable[[str], None]

# Operator-facing diagnostics
MSG_ID_EMPTY = "ID cannot be empty. Please try again."
MSG_ID_FORMAT = (
    "Invalid ID format! ID must contain only alphanumeric characters: "
    "ID must contain only letters and numbers with no spaces or special characters."
)
MSG_ID_DUPLICATE = "Duplicate ID! Please enter a unique ID."
MSG_NAME_EMPTY = "Name cannot be empty. Please try again."
MSG_DECIMAL_FORMAT = "Invalid format. Please enter a valid number."
MSG_DECIMAL_NOT_POSITIVE = "Value must be greater than zero. Please try again."
MSG_INTEGER_FORMAT = "Invalid input. Please enter a valid number."
MSG_INTEGER_NEGATIVE = "Value cannot be negative. Please try again."


class EmployeeRegistry:
    """Ordered, append-only collection of employees with unique IDs."""

    def __init__(self, prompt: PromptFunc, echo: EchoFunc):
        self._employees: list[Employee] = []
        self._prompt = prompt
        self._echo = echo

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    @property
    def employees(self) -> Tuple[Employee, ...]:
        """Snapshot of all employees in insertion order."""
        return tuple(self._employees)

    def get(self, employee_id: str) -> Optional[Employee]:
        """Look up an employee by ID."""
        for employee in self._employees:
            if employee.id == employee_id:
                return employee
        return None

    def is_id_unique(self, employee_id: str) -> bool:
        """True if no stored employee has this ID."""
        return self.get(employee_id) is None

    def add(self, employee: Employee) -> Employee:
        """Append a constructed employee.

        Raises:
            DuplicateError: If an employee with the same ID already exists
        """
        if not self.is_id_unique(employee.id):
            raise DuplicateError(f"Employee ID already exists: {employee.id}")
        self._employees.append(employee)
        logger.info(f"added {employee.kind} employee {employee.id}")
        return employee

    def total_payroll(self) -> Decimal:
        """Sum of every employee's computed pay."""
        return sum((e.calculate_salary() for e in self._employees), Decimal("0"))

    # =========================================================================
    # Interactive field collection
    # =========================================================================

    def _check_id(self, employee_id: str) -> str:
        if not employee_id:
            raise EmptyInputError("ID is empty")
        if not validate_id(employee_id):
            raise FormatError(f"ID is not alphanumeric: {employee_id!r}")
        if not self.is_id_unique(employee_id):
            raise DuplicateError(f"ID already exists: {employee_id}")
        return employee_id

    def prompt_id(self) -> str:
        """Ask for an employee ID until it is non-empty, valid and unique."""
        while True:
            try:
                return self._check_id(self._prompt("Enter Employee ID: "))
            except EmptyInputError:
                self._echo(MSG_ID_EMPTY)
            except FormatError as e:
                logger.debug(str(e))
                self._echo(MSG_ID_FORMAT)
            except DuplicateError as e:
                logger.debug(str(e))
                self._echo(MSG_ID_DUPLICATE)

    def prompt_name(self) -> str:
        """Ask for an employee name until it is non-empty."""
        while True:
            name = self._prompt("Enter Employee Name: ")
            if name:
                return name
            self._echo(MSG_NAME_EMPTY)

    def prompt_decimal(self, prompt: str, must_be_positive: bool = True) -> Decimal:
        """Ask for a decimal amount with at most two fractional digits.

        Args:
            prompt: Text shown to the operator
            must_be_positive: Require > 0 (default); otherwise >= 0 is accepted
        """
        while True:
            text = self._prompt(prompt)
            try:
                value = parse_decimal(text)
                if must_be_positive and value <= 0:
                    raise RangeError(f"{value} is not greater than zero")
                return value
            except FormatError as e:
                logger.debug(str(e))
                self._echo(MSG_DECIMAL_FORMAT)
            except RangeError as e:
                logger.debug(str(e))
                self._echo(MSG_DECIMAL_NOT_POSITIVE)

    def prompt_non_negative_integer(self, prompt: str) -> int:
        """Ask for an integer >= 0."""
        while True:
            text = self._prompt(prompt)
            try:
                value = parse_integer(text)
                if value < 0:
                    raise RangeError(f"{value} is negative")
                return value
            except FormatError as e:
                logger.debug(str(e))
                self._echo(MSG_INTEGER_FORMAT)
            except RangeError as e:
                logger.debug(str(e))
                self._echo(MSG_INTEGER_NEGATIVE)

    # =========================================================================
    # Adding employees
    # =========================================================================

    def add_full_time(self) -> FullTimeEmployee:
        employee_id = self.prompt_id()
        name = self.prompt_name()
        salary = self.prompt_decimal("Enter Monthly Salary: $")

        employee = self.add(FullTimeEmployee(id=employee_id, name=name, monthly_salary=salary))
        self._echo("Full-time employee added successfully!")
        return employee

    def add_part_time(self) -> PartTimeEmployee:
        employee_id = self.prompt_id()
        name = self.prompt_name()
        hourly_wage = self.prompt_decimal("Enter Hourly Wage: $")
        hours_worked = self.prompt_decimal("Enter Number of Hours Worked: ")

        employee = self.add(PartTimeEmployee(
            id=employee_id,
            name=name,
            hourly_wage=hourly_wage,
            hours_worked=hours_worked,
        ))
        self._echo("Part-time employee added successfully!")
        return employee

    def add_contractual(self) -> ContractualEmployee:
        employee_id = self.prompt_id()
        name = self.prompt_name()
        payment = self.prompt_decimal("Enter Payment Per Project: $")
        projects = self.prompt_non_negative_integer("Enter Number of Projects Completed: ")

        employee = self.add(ContractualEmployee(
            id=employee_id,
            name=name,
            payment_per_project=payment,
            projects_completed=projects,
        ))
        self._echo("Contractual employee added successfully!")
        return employee
