"""Error taxonomy for payroll input handling.

Every error here is recoverable: prompting loops catch them, echo a
targeted message and ask again.
"""


class PayrollError(Exception):
    """Base class for payroll input errors."""
    pass


class FormatError(PayrollError):
    """Text does not have the expected lexical shape."""
    pass


class RangeError(PayrollError):
    """Numeric value lies outside an allowed bound."""
    pass


class DuplicateError(PayrollError):
    """Employee ID is already taken in the registry."""
    pass


class EmptyInputError(PayrollError):
    """Required text field was left blank."""
    pass
