"""Settings CLI commands for Payroll Manager.

Manages settings.json - report presentation preferences.
"""

import click

from payroll.sdk import (
    SETTING_KEYS,
    Settings,
    SettingsError,
    get_setting,
    get_settings_path,
    load_effective_settings,
    load_settings,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - currency_symbol: prefix for money amounts (default "$")
    - report_format: "text" or "table" (default "text")
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their effective values."""
    settings_path = get_settings_path()
    try:
        current = load_settings()
        effective = load_effective_settings()
    except SettingsError as e:
        raise click.ClickException(str(e))

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    click.echo("Effective settings:")
    for key, value in effective.model_dump().items():
        source = "" if key in current else " (default)"
        click.echo(f"  {key}: {value}{source}")


@settings.command("set")
@click.argument("key", type=click.Choice(SETTING_KEYS))
@click.argument("value")
def settings_set(key, value):
    """Set KEY to VALUE.

    Examples:
        payroll settings set currency_symbol €
        payroll settings set report_format table
    """
    try:
        path = set_setting(key, value)
    except SettingsError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key}: {value}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key", type=click.Choice(SETTING_KEYS))
def settings_unset(key):
    """Clear KEY so its default applies again."""
    try:
        removed = unset_setting(key)
    except SettingsError as e:
        raise click.ClickException(str(e))

    if removed:
        click.echo(f"Cleared {key} setting.")
    else:
        click.echo(f"{key} was not set.")


@settings.command("get")
@click.argument("key", type=click.Choice(SETTING_KEYS))
def settings_get(key):
    """Print the value of KEY, or its default if not set."""
    try:
        value = get_setting(key)
    except SettingsError as e:
        raise click.ClickException(str(e))

    if value is None:
        value = Settings.model_fields[key].default
        click.echo(f"{value} (default)")
    else:
        click.echo(value)
