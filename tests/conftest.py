"""Shared fixtures for tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


def make_mail(sender: str, subject: str = "Hello") -> str:
    return (
        "Return-Path: <bounce@example.com>\n"
        "Delivered-To: me@example.com\n"
        f"From: {sender}\n"
        "To: me@example.com\n"
        f"Subject: {subject}\n"
        "\n"
        "Body text.\n"
    )


@pytest.fixture
def maildir(tmp_path: Path) -> Path:
    """An empty maildir ``new`` directory."""
    path = tmp_path / "Mail" / "new"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def add_mail(maildir: Path) -> Callable[..., Path]:
    """Write a mail file with the given sender into the maildir."""
    counter = iter(range(1, 10_000))

    def _add(sender: str, name: str | None = None) -> Path:
        mail_path = maildir / (name or f"1700000000.M{next(counter)}.host")
        mail_path.write_text(make_mail(sender), encoding="utf-8")
        return mail_path

    return _add


@pytest.fixture
def populated_maildir(maildir: Path, add_mail) -> Path:
    """Maildir with two mails and one file without a From header."""
    add_mail("Alice Smith <alice@example.com>")
    add_mail("bob@example.com")
    (maildir / "notes.txt").write_text("Subject: no sender here\n\nnothing\n", encoding="utf-8")
    return maildir
