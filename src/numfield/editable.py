"""Editing state for a field showing a formatted value while accepting raw keystrokes."""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from numfield.codecs import Codec

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _identity(text: str):
    return text


class EditableValue(Generic[T]):
    """Reconciles the text being typed with a value owned elsewhere.

    While the field is idle it shows ``format(value)``.  Once focused or
    edited it shows the raw text verbatim until blurred, whether or not that
    text parses.  Edits are reported through ``on_change`` with the parsed
    value; the controller never assigns ``value`` itself, that is up to the
    owner, so a rejected parse does not make the text jump while typing.
    """

    def __init__(
        self,
        value: T,
        format: Callable[[T], str] | None = None,
        parse: Callable[[str], T] | None = None,
        *,
        codec: Codec[T] | None = None,
        on_change: Callable[[T], None] | None = None,
        on_focus: Callable[[], None] | None = None,
        on_blur: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            value: The current canonical value.
            format: Renders a value as text. Defaults to ``str``.
            parse: Reads text back into a value. Defaults to identity.
            codec: A format/parse pair, used for whichever of ``format``
                and ``parse`` is not given.
            on_change: Called with the parsed value after every edit.
            on_focus: Called after the field gains focus.
            on_blur: Called after the field loses focus.
        """
        if codec is not None:
            format = format or codec.format
            parse = parse or codec.parse
        self.value = value
        self.format = format or str
        self.parse = parse or _identity
        self.on_change = on_change
        self.on_focus = on_focus
        self.on_blur = on_blur
        self.raw_text: str | None = None

    @property
    def editing(self) -> bool:
        """Whether raw text currently overrides the formatted value."""
        return self.raw_text is not None

    @property
    def text(self) -> str:
        """The text to display."""
        if self.raw_text is not None:
            return self.raw_text
        return self.format(self.value)

    def edit(self, new_text: str) -> None:
        """Record typed text and report its parse to the owner."""
        logger.debug("edit %r", new_text)
        self.raw_text = new_text
        if self.on_change is not None:
            self.on_change(self.parse(new_text))

    def focus(self) -> None:
        """Start editing from the text currently displayed."""
        if self.raw_text is None:
            self.raw_text = self.text
        if self.on_focus is not None:
            self.on_focus()

    def blur(self) -> None:
        """Drop the raw text and go back to showing the formatted value."""
        self.raw_text = None
        if self.on_blur is not None:
            self.on_blur()
