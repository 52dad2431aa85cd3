"""Maildir block: one poll of the scan pipeline and the emitted summary."""

from __future__ import annotations

import dataclasses
import logging
import uuid

from .errors import ScanError
from .models import MaildirConfig, MonitorState, PollResult, ScanResult
from .scanner import scan_maildir
from .state import compute_state, format_summary
from .widget import StatusWidget, TextWidget

logger = logging.getLogger(__name__)


def emit(state: MonitorState, scan_result: ScanResult) -> MonitorState:
    """Return *state* with the summary of *scan_result* in place of the old one."""
    return dataclasses.replace(
        state,
        display_text=format_summary(state.label, scan_result),
        severity=compute_state(scan_result.count),
    )


def poll(state: MonitorState) -> tuple[MonitorState, PollResult]:
    """Run one scan against *state*.

    Returns the new state and the delay before the next poll.  On failure the
    state comes back unchanged and the error rides along in the result; the
    delay is the configured interval either way.
    """
    try:
        scan_result = scan_maildir(state.path)
    except ScanError as e:
        return state, PollResult(delay=state.interval, error=e)
    return emit(state, scan_result), PollResult(delay=state.interval)


class MaildirBlock:
    """Status block showing how many mails sit in a maildir and who sent them."""

    def __init__(self, config: MaildirConfig, widget: StatusWidget | None = None) -> None:
        self.id = uuid.uuid4().hex
        self.state = MonitorState.from_config(config)
        self.widget = widget if widget is not None else TextWidget()
        self._push()

    def _push(self) -> None:
        self.widget.set_text(self.state.display_text)
        self.widget.set_state(self.state.severity)

    def update(self) -> PollResult:
        """Poll once and push the new summary to the widget on success."""
        self.state, result = poll(self.state)
        if result.error is not None:
            logger.warning("Poll failed, keeping last summary: %s", result.error)
            return result

        self._push()
        return result

    def view(self) -> list[StatusWidget]:
        return [self.widget]
