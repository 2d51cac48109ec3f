"""Payroll SDK - validation, employee records and pay reports."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    load_effective_settings,
    get_setting,
    set_setting,
    unset_setting,
    Settings,
    SettingsError,
    SETTING_KEYS,
)

from .errors import (
    PayrollError,
    FormatError,
    RangeError,
    DuplicateError,
    EmptyInputError,
)

from .validators import (
    parse_integer,
    parse_menu_choice,
    parse_decimal,
    validate_id,
)

from .employees import (
    Employee,
    FullTimeEmployee,
    PartTimeEmployee,
    ContractualEmployee,
    AnyEmployee,
    format_money,
)

from .registry import EmployeeRegistry

from .report import render_report

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "load_effective_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "Settings",
    "SettingsError",
    "SETTING_KEYS",
    # Errors
    "PayrollError",
    "FormatError",
    "RangeError",
    "DuplicateError",
    "EmptyInputError",
    # Validators
    "parse_integer",
    "parse_menu_choice",
    "parse_decimal",
    "validate_id",
    # Employees
    "Employee",
    "FullTimeEmployee",
    "PartTimeEmployee",
    "ContractualEmployee",
    "AnyEmployee",
    "format_money",
    # Registry
    "EmployeeRegistry",
    # Report
    "render_report",
]
