"""Demo Textual application with one field per codec."""

from __future__ import annotations

import math

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, Static

from numfield.codecs import float_codec, percent_codec, si_codec
from numfield.config import FieldOptions
from numfield.widgets import FormattedInput


def _negative_class(value: float | None) -> str:
    return "negative" if value is not None and value < 0 else ""


class NumfieldApp(App):
    """Three formatted inputs and a status line with their canonical values."""

    TITLE = "numfield"

    CSS = """
    .field-row { height: auto; }
    .field-label { width: 10; padding: 1 1; }
    FormattedInput { width: 30; }
    FormattedInput.negative { color: $error; }
    #status-bar { padding: 1 1; }
    """

    def __init__(
        self,
        options: FieldOptions | None = None,
        number: float = 0.0,
        ratio: float = 0.0,
        magnitude: float | None = None,
    ) -> None:
        """Initialize the app.

        Args:
            options: Format options for each field.
            number: Initial value of the plain number field.
            ratio: Initial value of the percentage field, as a fraction.
            magnitude: Initial value of the SI field.
        """
        super().__init__()
        self.options = options or FieldOptions()
        self.number = number
        self.ratio = ratio
        self.magnitude = magnitude
        self.magnitude_valid = True

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        with Vertical():
            with Horizontal(classes="field-row"):
                yield Label("Number:", classes="field-label")
                yield FormattedInput(
                    self.number,
                    float_codec(self.options.float_format),
                    on_change=self._accept_number,
                    classes_for=_negative_class,
                    placeholder="0",
                    id="number",
                )
            with Horizontal(classes="field-row"):
                yield Label("Percent:", classes="field-label")
                yield FormattedInput(
                    self.ratio,
                    percent_codec(self.options.percent_format),
                    on_change=self._accept_ratio,
                    classes_for=_negative_class,
                    placeholder="0.00",
                    id="ratio",
                )
            with Horizontal(classes="field-row"):
                yield Label("SI:", classes="field-label")
                yield FormattedInput(
                    self.magnitude,
                    si_codec(self.options.si_format),
                    on_change=self._accept_magnitude,
                    classes_for=_negative_class,
                    placeholder="e.g. 2.5k",
                    id="magnitude",
                )
        yield Static(self._status_text(), id="status-bar")

    def _status_text(self) -> str:
        magnitude = repr(self.magnitude) if self.magnitude_valid else "invalid"
        return f"number={self.number!r}  ratio={self.ratio!r}  si={magnitude}"

    def _refresh_status(self) -> None:
        self.query_one("#status-bar", Static).update(self._status_text())

    def _accept_number(self, value: float) -> None:
        self.number = value
        self.query_one("#number", FormattedInput).canonical_value = value
        self._refresh_status()

    def _accept_ratio(self, value: float) -> None:
        self.ratio = value
        self.query_one("#ratio", FormattedInput).canonical_value = value
        self._refresh_status()

    def _accept_magnitude(self, value: float | None) -> None:
        # Empty input (NaN) and garbage (None) keep the last good value.
        self.magnitude_valid = value is not None
        if value is not None and not math.isnan(value):
            self.magnitude = value
            self.query_one("#magnitude", FormattedInput).canonical_value = value
        self._refresh_status()
