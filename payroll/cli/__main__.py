"""Payroll CLI - interactive payroll record manager."""

import click
from rich.console import Console

from payroll import __version__
from payroll.sdk import EmployeeRegistry, SettingsError, load_effective_settings, render_report

from .menu import MSG_GOODBYE, click_prompt, run_menu
from .renderers.report_renderer import render_report_table
from .settings_commands import settings as settings_group


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="payroll")
@click.pass_context
def cli(ctx):
    """Payroll Manager - collect employee records and print pay reports.

    Run without a command to start the interactive menu. Records live
    in memory only and are discarded on exit.

    Settings are loaded from (in order):

    \b
    1. PAYROLL_CONFIG_PATH environment variable
    2. ~/.config/payroll/settings.json (XDG default)
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


cli.add_command(settings_group)


@cli.command("menu")
def menu():
    """Start the interactive payroll menu."""
    try:
        prefs = load_effective_settings()
    except SettingsError as e:
        raise click.ClickException(str(e))

    if prefs.report_format == "table":
        console = Console()

        def show_report(registry):
            render_report_table(console, registry, prefs.currency_symbol)
    else:
        def show_report(registry):
            click.echo(render_report(registry, prefs.currency_symbol))

    registry = EmployeeRegistry(prompt=click_prompt, echo=click.echo)
    try:
        run_menu(registry, show_report, prompt=click_prompt)
    except click.Abort:
        # End of input or Ctrl-C at a prompt ends the session like option 5
        click.echo()
        click.echo(MSG_GOODBYE)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
