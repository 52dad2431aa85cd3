"""Exception hierarchy for Maildir Monitor.

Every scan-time fault is a ``ScanError``.  A poll that hits any of them is
aborted as a whole; nothing is retried here.
"""

from __future__ import annotations

import os


class MaildirError(Exception):
    """Base class for every error raised by the monitor."""


class ScanError(MaildirError):
    """I/O or parse fault hit while scanning; carries the path and the cause."""

    reason = "scan failed"

    def __init__(self, path: str | os.PathLike[str], cause: BaseException | None = None) -> None:
        self.path = os.fspath(path)
        self.cause = cause
        message = f"{self.reason}: {self.path}"
        if cause is not None:
            message += f" ({cause})"
        super().__init__(message)


class DirectoryOpenError(ScanError):
    reason = "failed to open maildir"


class EntryListError(ScanError):
    reason = "failed to list files"


class MetadataError(ScanError):
    reason = "failed to get file metadata"


class FileOpenError(ScanError):
    reason = "failed to open mail file"


class LineReadError(ScanError):
    reason = "failed to read email"


class HeaderParseError(ScanError):
    reason = "failed to parse header"


class ConfigError(MaildirError):
    """Invalid block configuration, raised while building a ``MaildirConfig``."""

    def __init__(self, option: str, detail: str) -> None:
        self.option = option
        self.detail = detail
        super().__init__(f"invalid configuration for '{option}': {detail}")
