"""Payroll Manager - interactive payroll records and pay reports."""

__version__ = "0.1.0"
