"""Payroll report rendering.

SDK layer - returns text, no printing. Pay values are always derived from
each employee's own computation.
"""

from typing import Iterable

from .employees import Employee

REPORT_HEADER = "------ Employee Payroll Report ------"
EMPTY_NOTICE = "No employees to display."


def render_report(registry: Iterable[Employee], currency: str = "$") -> str:
    """Render every employee in insertion order.

    Args:
        registry: EmployeeRegistry (or any iterable of employees)
        currency: Symbol prefixed to money amounts

    Returns:
        The empty-state notice, or the header followed by one block per
        employee, each block followed by a blank line.
    """
    employees = list(registry)
    if not employees:
        return EMPTY_NOTICE

    lines = [REPORT_HEADER]
    for employee in employees:
        lines.extend(employee.report_lines(currency))
        lines.append("")
    return "\n".join(lines)
