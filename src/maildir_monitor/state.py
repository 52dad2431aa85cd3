"""Severity and summary text for a scan."""

from .constants import COUNT_SEPARATOR, SENDER_SEPARATOR
from .models import ScanResult, Severity


def compute_state(count: int) -> Severity:
    """Warn as soon as there is a single mail."""
    if count > 0:
        return Severity.WARNING
    return Severity.IDLE


def format_summary(label: str, scan_result: ScanResult) -> str:
    """Return ``"<label>:<count> <sender>, <sender>"``, or ``""`` when empty."""
    if scan_result.count == 0:
        return ""
    senders = SENDER_SEPARATOR.join(scan_result.senders)
    return f"{label}{COUNT_SEPARATOR}{scan_result.count} {senders}"
