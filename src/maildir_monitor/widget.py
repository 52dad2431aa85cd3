"""Display widget interface the block pushes its summary into."""

from __future__ import annotations

from typing import Protocol

from .models import Severity


class StatusWidget(Protocol):
    """Anything that accepts a text and a severity."""

    def set_text(self, text: str) -> None:
        ...

    def set_state(self, state: Severity) -> None:
        ...


class TextWidget:
    """In-memory widget holding the last text and severity it was given."""

    def __init__(self, text: str = "", state: Severity = Severity.IDLE) -> None:
        self.text = text
        self.state = state

    def set_text(self, text: str) -> None:
        self.text = text

    def set_state(self, state: Severity) -> None:
        self.state = state

    def __repr__(self) -> str:
        return f"TextWidget(text={self.text!r}, state={self.state.value!r})"
