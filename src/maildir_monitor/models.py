"""Data models for Maildir Monitor."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any

from .constants import DEFAULT_INTERVAL, DEFAULT_LABEL, DEFAULT_PATH, PLACEHOLDER_TEXT
from .errors import ConfigError


class Severity(str, enum.Enum):
    """Signal shown next to the summary text."""

    IDLE = "idle"
    WARNING = "warning"


@dataclass(frozen=True)
class MailEntry:
    """Sender extracted from a single mail file."""

    sender: str  # Decoded From header value
    path: Path


@dataclass
class ScanResult:
    """Result of one maildir scan, in directory-enumeration order."""

    entries: list[MailEntry] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.entries)

    @property
    def senders(self) -> list[str]:
        return [entry.sender for entry in self.entries]


def _parse_interval(value: Any) -> timedelta:
    if isinstance(value, timedelta):
        interval = value
    elif isinstance(value, bool):
        raise ConfigError("interval", f"expected a number of seconds, got {value!r}")
    elif isinstance(value, (int, float, str)):
        try:
            interval = timedelta(seconds=float(value))
        except (ValueError, OverflowError) as e:
            raise ConfigError("interval", f"expected a finite number of seconds, got {value!r}") from e
    else:
        raise ConfigError("interval", f"expected a number of seconds, got {value!r}")

    if interval < timedelta(0):
        raise ConfigError("interval", "must not be negative")
    return interval


@dataclass(frozen=True)
class MaildirConfig:
    """Block configuration, fixed for the lifetime of the block."""

    path: str = DEFAULT_PATH  # Directory to scan
    label: str = DEFAULT_LABEL  # Prefix shown in the summary text
    interval: timedelta = DEFAULT_INTERVAL  # Delay between polls

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MaildirConfig:
        """Build a config from a block table, rejecting unknown keys.

        ``interval`` is given in seconds (int, float or numeric string) or as
        a ``timedelta``.
        """
        unknown = sorted(set(data) - {"path", "label", "interval"})
        if unknown:
            raise ConfigError(unknown[0], "unknown field")

        for key in ("path", "label"):
            if key in data and not isinstance(data[key], str):
                raise ConfigError(key, f"expected a string, got {data[key]!r}")

        return cls(
            path=data.get("path", DEFAULT_PATH),
            label=data.get("label", DEFAULT_LABEL),
            interval=_parse_interval(data.get("interval", DEFAULT_INTERVAL)),
        )


@dataclass(frozen=True)
class MonitorState:
    """Long-lived block state: configuration plus the last emitted summary."""

    path: str
    label: str
    interval: timedelta
    display_text: str = PLACEHOLDER_TEXT
    severity: Severity = Severity.IDLE

    @classmethod
    def from_config(cls, config: MaildirConfig) -> MonitorState:
        return cls(path=config.path, label=config.label, interval=config.interval)


@dataclass(frozen=True)
class PollResult:
    """What a poll reports back to the scheduler.

    ``delay`` is ``None`` when the block asks not to be polled again.
    """

    delay: timedelta | None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
