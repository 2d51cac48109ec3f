"""Unit tests for the employee registry and its prompting loops.

Prompts are driven by scripted answers; echoed lines are captured.
"""

from decimal import Decimal

import pytest

from payroll.sdk.employees import ContractualEmployee, FullTimeEmployee, PartTimeEmployee
from payroll.sdk.errors import DuplicateError
from payroll.sdk.registry import (
    EmployeeRegistry,
    MSG_DECIMAL_FORMAT,
    MSG_DECIMAL_NOT_POSITIVE,
    MSG_ID_DUPLICATE,
    MSG_ID_EMPTY,
    MSG_ID_FORMAT,
    MSG_INTEGER_FORMAT,
    MSG_INTEGER_NEGATIVE,
    MSG_NAME_EMPTY,
)


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything shown."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def prompt(self, text):
        self.prompts.append(text)
        if not self.answers:
            raise AssertionError(f"Ran out of scripted answers at prompt {text!r}")
        return self.answers.pop(0)

    def echo(self, text):
        self.output.append(text)


def make_registry(answers):
    console = ScriptedConsole(answers)
    return EmployeeRegistry(prompt=console.prompt, echo=console.echo), console


def make_full_time(employee_id="E1", name="Ann", salary="1000.00"):
    return FullTimeEmployee(id=employee_id, name=name, monthly_salary=Decimal(salary))


class TestCollection:

    def test_starts_empty(self):
        registry, _ = make_registry([])
        assert len(registry) == 0
        assert registry.employees == ()

    def test_add_preserves_insertion_order(self):
        registry, _ = make_registry([])
        registry.add(make_full_time("B2"))
        registry.add(make_full_time("A1"))
        registry.add(make_full_time("C3"))
        assert [e.id for e in registry] == ["B2", "A1", "C3"]

    def test_add_duplicate_raises(self):
        registry, _ = make_registry([])
        registry.add(make_full_time("E1"))
        with pytest.raises(DuplicateError):
            registry.add(make_full_time("E1", name="Other"))
        assert len(registry) == 1

    def test_is_id_unique(self):
        registry, _ = make_registry([])
        assert registry.is_id_unique("E1")
        registry.add(make_full_time("E1"))
        assert not registry.is_id_unique("E1")
        assert registry.is_id_unique("e1")

    def test_get(self):
        registry, _ = make_registry([])
        emp = registry.add(make_full_time("E1"))
        assert registry.get("E1") is emp
        assert registry.get("E9") is None

    def test_total_payroll(self):
        registry, _ = make_registry([])
        assert registry.total_payroll() == Decimal("0")
        registry.add(make_full_time("E1", salary="1000.00"))
        registry.add(ContractualEmployee(
            id="E3", name="Cy", payment_per_project=Decimal("200"), projects_completed=3,
        ))
        assert registry.total_payroll() == Decimal("1600")


class TestPromptId:

    def test_accepts_first_valid(self):
        registry, console = make_registry(["E1"])
        assert registry.prompt_id() == "E1"
        assert console.output == []
        assert console.prompts == ["Enter Employee ID: "]

    def test_each_failure_has_its_own_message(self):
        registry, console = make_registry(["", "ab 12", "ab-12", "E1", "E2"])
        registry.add(make_full_time("E1"))

        assert registry.prompt_id() == "E2"
        assert console.output == [MSG_ID_EMPTY, MSG_ID_FORMAT, MSG_ID_FORMAT, MSG_ID_DUPLICATE]
        assert len(console.prompts) == 5


class TestPromptName:

    def test_reprompts_on_empty(self):
        registry, console = make_registry(["", "", "Ann Lee"])
        assert registry.prompt_name() == "Ann Lee"
        assert console.output == [MSG_NAME_EMPTY, MSG_NAME_EMPTY]


class TestPromptDecimal:

    def test_format_and_zero_rejected(self):
        registry, console = make_registry(["abc", "12.345", "-1.5", "0", "0.00", "12.5"])
        assert registry.prompt_decimal("Amount: ") == Decimal("12.5")
        assert console.output == [
            MSG_DECIMAL_FORMAT,
            MSG_DECIMAL_FORMAT,
            MSG_DECIMAL_FORMAT,
            MSG_DECIMAL_NOT_POSITIVE,
            MSG_DECIMAL_NOT_POSITIVE,
        ]
        assert set(console.prompts) == {"Amount: "}

    def test_zero_allowed_when_not_required_positive(self):
        registry, console = make_registry(["0"])
        assert registry.prompt_decimal("Amount: ", must_be_positive=False) == Decimal("0")
        assert console.output == []


class TestPromptNonNegativeInteger:

    def test_rejects_until_valid(self):
        registry, console = make_registry(["x", "1.5", "-2", "0"])
        assert registry.prompt_non_negative_integer("Count: ") == 0
        assert console.output == [MSG_INTEGER_FORMAT, MSG_INTEGER_FORMAT, MSG_INTEGER_NEGATIVE]


class TestAddVariants:

    def test_add_full_time(self):
        registry, console = make_registry(["E1", "Ann", "1000.00"])
        emp = registry.add_full_time()

        assert isinstance(emp, FullTimeEmployee)
        assert emp.monthly_salary == Decimal("1000.00")
        assert registry.employees == (emp,)
        assert console.prompts == ["Enter Employee ID: ", "Enter Employee Name: ", "Enter Monthly Salary: $"]
        assert console.output == ["Full-time employee added successfully!"]

    def test_add_part_time(self):
        registry, console = make_registry(["E2", "Bo", "10.5", "8"])
        emp = registry.add_part_time()

        assert isinstance(emp, PartTimeEmployee)
        assert emp.calculate_salary() == Decimal("84.0")
        assert console.prompts[2:] == ["Enter Hourly Wage: $", "Enter Number of Hours Worked: "]
        assert console.output == ["Part-time employee added successfully!"]

    def test_add_contractual(self):
        registry, console = make_registry(["E3", "Cy", "200", "3"])
        emp = registry.add_contractual()

        assert isinstance(emp, ContractualEmployee)
        assert emp.projects_completed == 3
        assert emp.calculate_salary() == Decimal("600")
        assert console.prompts[2:] == ["Enter Payment Per Project: $", "Enter Number of Projects Completed: "]
        assert console.output == ["Contractual employee added successfully!"]

    def test_duplicate_id_rejected_until_distinct(self):
        registry, console = make_registry([
            "E1", "Ann", "1000",
            "E1", "E1", "E2", "Bo", "10", "4",
        ])
        registry.add_full_time()
        registry.add_part_time()

        assert [e.id for e in registry] == ["E1", "E2"]
        assert console.output.count(MSG_ID_DUPLICATE) == 2


class TestIoInjection:

    def test_prompt_and_echo_are_required(self):
        with pytest.raises(TypeError):
            EmployeeRegistry()
