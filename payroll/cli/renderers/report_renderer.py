"""Rich renderer for the payroll report.

Renders the same employees as ``payroll.sdk.report`` in a table.
"""

from rich.console import Console
from rich.table import Table
from rich import box

from payroll.sdk.employees import format_money
from payroll.sdk.report import EMPTY_NOTICE
from payroll.sdk.registry import EmployeeRegistry


def render_report_table(console: Console, registry: EmployeeRegistry, currency: str = "$") -> None:
    """Render the payroll report as a Rich table.

    Args:
        console: Rich Console instance
        registry: Registry whose employees are listed
        currency: Symbol prefixed to money amounts
    """
    if not len(registry):
        console.print(f"[yellow]{EMPTY_NOTICE}[/yellow]")
        return

    table = Table(title="Employee Payroll Report", box=box.ROUNDED)
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Type", style="dim")
    table.add_column("Details")
    table.add_column("Pay", justify="right", min_width=12)

    for employee in registry:
        table.add_row(
            employee.id,
            employee.name,
            employee.kind_label,
            "\n".join(employee.detail_lines(currency)),
            _fmt(employee.calculate_salary(), currency),
        )

    table.add_section()
    table.add_row(
        "[bold]TOTAL[/bold]", "", "", "",
        f"[bold green]{_fmt(registry.total_payroll(), currency)}[/bold green]",
    )

    console.print(table)


def _fmt(amount, currency: str) -> str:
    """Format currency amount."""
    return format_money(amount, currency)
