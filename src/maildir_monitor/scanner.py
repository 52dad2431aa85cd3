"""Scan orchestration - lists the maildir, extracts senders, aggregates."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .errors import DirectoryOpenError, EntryListError, MetadataError
from .headers import extract_sender
from .models import MailEntry, ScanResult

logger = logging.getLogger(__name__)


def iter_mail_files(path: str | os.PathLike[str]) -> Iterator[Path]:
    """Yield the regular files directly under *path*, in enumeration order.

    Symlinks are followed; anything that does not resolve to a regular file
    is skipped.
    """
    try:
        entries = os.scandir(path)
    except OSError as e:
        raise DirectoryOpenError(path, e) from e

    with entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as e:
                raise EntryListError(path, e) from e

            try:
                is_file = entry.is_file()
            except OSError as e:
                raise MetadataError(entry.path, e) from e

            if not is_file:
                logger.debug("Skipping %s (not a regular file)", entry.path)
                continue
            yield Path(entry.path)


def scan_maildir(path: str | os.PathLike[str]) -> ScanResult:
    """Run a full scan: list files, extract the sender of each one.

    Any error aborts the scan; there are no partial results.
    """
    entries: list[MailEntry] = []
    for mail_file in iter_mail_files(path):
        sender = extract_sender(mail_file)
        if sender is not None:
            entries.append(MailEntry(sender=sender, path=mail_file))

    logger.debug("Scanned %s: %d mails", path, len(entries))
    return ScanResult(entries=entries)
