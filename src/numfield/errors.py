"""Custom exceptions for numfield."""


class NumfieldError(Exception):
    """Base class for all numfield errors."""


class OptionsError(NumfieldError, ValueError):
    """Raised when a format options record is built with invalid values."""
