"""Input widget that edits a typed value through a format/parse codec."""

from __future__ import annotations

from typing import Any, Callable

from textual.events import Blur, Focus
from textual.message import Message
from textual.widgets import Input

from numfield.codecs import Codec
from numfield.editable import EditableValue


class FormattedInput(Input):
    """An Input showing a formatted value that is edited as raw text.

    While idle the field shows ``format(canonical_value)``.  Focusing it
    keeps that text as the starting point; every keystroke is parsed and
    handed to ``on_change`` and posted as a :class:`FormattedInput.Parsed`
    message.  The canonical value only changes when the owner assigns
    ``canonical_value``, and leaving the field reverts it to the formatted
    display of that value.
    """

    class Parsed(Message):
        """Posted after every edit with the parse of the new text."""

        def __init__(self, formatted_input: FormattedInput, value: Any) -> None:
            super().__init__()
            self.formatted_input = formatted_input
            self.value = value

        @property
        def control(self) -> FormattedInput:
            """The input that was edited."""
            return self.formatted_input

    def __init__(
        self,
        value: Any = None,
        codec: Codec | None = None,
        *,
        format: Callable[[Any], str] | None = None,
        parse: Callable[[str], Any] | None = None,
        on_change: Callable[[Any], None] | None = None,
        on_focus: Callable[[], None] | None = None,
        on_blur: Callable[[], None] | None = None,
        classes_for: Callable[[Any], str] | None = None,
        **kwargs,
    ) -> None:
        """Initialize the input.

        Args:
            value: The initial canonical value.
            codec: Format/parse pair used for the displayed text.
            format: Overrides the codec's format function.
            parse: Overrides the codec's parse function.
            on_change: Called with the parsed value after every edit.
            on_focus: Called when the input gains focus.
            on_blur: Called when the input loses focus.
            classes_for: Returns extra CSS classes for the canonical value.
            **kwargs: Passed through to :class:`~textual.widgets.Input`.
        """
        self.editor = EditableValue(
            value,
            format,
            parse,
            codec=codec,
            on_change=self._report_parsed,
            on_focus=on_focus,
            on_blur=on_blur,
        )
        self._owner_on_change = on_change
        self._classes_for = classes_for
        self._value_classes: list[str] = []
        # Text set by the widget itself is never an edit.
        self._syncing_text = True
        super().__init__(value=self.editor.text, **kwargs)
        self._syncing_text = False
        self._apply_value_classes()

    @property
    def canonical_value(self) -> Any:
        """The value owned by the application."""
        return self.editor.value

    @canonical_value.setter
    def canonical_value(self, value: Any) -> None:
        self.editor.value = value
        self._apply_value_classes()
        if not self.editor.editing:
            self._show(self.editor.text)

    def _show(self, text: str) -> None:
        """Replace the displayed text without treating it as user input."""
        if self.value == text:
            return
        self._syncing_text = True
        try:
            self.value = text
        finally:
            self._syncing_text = False

    def _apply_value_classes(self) -> None:
        if self._classes_for is None:
            return
        if self._value_classes:
            self.remove_class(*self._value_classes)
        self._value_classes = self._classes_for(self.editor.value).split()
        if self._value_classes:
            self.add_class(*self._value_classes)

    def _report_parsed(self, value: Any) -> None:
        if self._owner_on_change is not None:
            self._owner_on_change(value)
        self.post_message(self.Parsed(self, value))

    def watch_value(self, value: str) -> None:
        """Forward user edits of the text to the editing state."""
        if self._syncing_text:
            return
        self.editor.edit(value)

    def _on_focus(self, event: Focus) -> None:
        """Start editing from the displayed text."""
        self.editor.focus()

    def _on_blur(self, event: Blur) -> None:
        """Drop the raw text and show the formatted canonical value."""
        self.editor.blur()
        self._show(self.editor.text)
