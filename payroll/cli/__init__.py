"""Payroll CLI package."""
