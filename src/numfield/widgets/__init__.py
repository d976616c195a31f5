"""Textual widgets for formatted numeric entry."""

from __future__ import annotations

from numfield.widgets.formatted_input import FormattedInput

__all__ = ["FormattedInput"]
