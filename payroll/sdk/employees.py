"""Employee variants and their pay computation.

The closed set of compensation kinds is modelled as pydantic models that
share the identity fields of ``Employee``. Each variant computes its own
pay and lays out its own report lines; pay is always derived, never
stored.

Models are frozen so an employee's ID cannot change after creation, and
use extra='forbid' so unknown fields are rejected.
"""

from abc import abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .validators import validate_id


CENTS = Decimal("0.01")


def format_money(amount: Decimal, currency: str = "$") -> str:
    """Format a money amount rounded half-up to cents, without grouping separators."""
    return f"{currency}{amount.quantize(CENTS, ROUND_HALF_UP)}"


class Employee(BaseModel):
    """Identity fields shared by every employee kind."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., description="Alphanumeric employee ID, unique in the registry")
    name: str = Field(..., min_length=1, description="Employee name")

    @field_validator("id")
    @classmethod
    def check_id(cls, value: str) -> str:
        if not validate_id(value):
            raise ValueError("ID must contain only letters and numbers")
        return value

    @property
    def kind_label(self) -> str:
        """Human-readable variant name, e.g. 'Full-time'."""
        return KIND_LABELS[self.kind]

    @abstractmethod
    def calculate_salary(self) -> Decimal:
        """Compute this employee's pay."""

    @abstractmethod
    def detail_lines(self, currency: str = "$") -> List[str]:
        """Variant-specific report lines (no identity header)."""

    def report_lines(self, currency: str = "$") -> List[str]:
        """Full report block for this employee."""
        return [f"Employee: {self.name} (ID: {self.id})"] + self.detail_lines(currency)


class FullTimeEmployee(Employee):
    """Fixed monthly salary."""

    kind: Literal["full_time"] = "full_time"
    monthly_salary: Decimal = Field(..., ge=0, decimal_places=2)

    def calculate_salary(self) -> Decimal:
        return self.monthly_salary

    def detail_lines(self, currency: str = "$") -> List[str]:
        return [f"Fixed Monthly Salary: {format_money(self.monthly_salary, currency)}"]


class PartTimeEmployee(Employee):
    """Paid by the hour."""

    kind: Literal["part_time"] = "part_time"
    hourly_wage: Decimal = Field(..., gt=0, decimal_places=2)
    hours_worked: Decimal = Field(..., gt=0, decimal_places=2)

    def calculate_salary(self) -> Decimal:
        return self.hourly_wage * self.hours_worked

    def detail_lines(self, currency: str = "$") -> List[str]:
        return [
            f"Hourly Wage: {format_money(self.hourly_wage, currency)}",
            f"Hours Worked: {self.hours_worked}",
            f"Total Salary: {format_money(self.calculate_salary(), currency)}",
        ]


class ContractualEmployee(Employee):
    """Paid per completed project."""

    kind: Literal["contractual"] = "contractual"
    payment_per_project: Decimal = Field(..., gt=0, decimal_places=2)
    projects_completed: int = Field(..., ge=0)

    def calculate_salary(self) -> Decimal:
        return self.payment_per_project * self.projects_completed

    def detail_lines(self, currency: str = "$") -> List[str]:
        return [
            f"Contract Payment Per Project: {format_money(self.payment_per_project, currency)}",
            f"Projects Completed: {self.projects_completed}",
            f"Total Salary: {format_money(self.calculate_salary(), currency)}",
        ]


KIND_LABELS = {
    "full_time": "Full-time",
    "part_time": "Part-time",
    "contractual": "Contractual",
}

# Discriminated union over the closed set of variants
AnyEmployee = Annotated[
    Union[FullTimeEmployee, PartTimeEmployee, ContractualEmployee],
    Field(discriminator="kind"),
]
