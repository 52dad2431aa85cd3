"""Sender extraction from the From header of a mail file."""

from __future__ import annotations

import email.header
import logging
import os
from email import errors as email_errors

from .constants import FROM_PREFIX, MAIL_ENCODING
from .errors import FileOpenError, HeaderParseError, LineReadError

logger = logging.getLogger(__name__)


def decode_header_value(value: str) -> str:
    """Decode RFC 2047 encoded words in a header value.

    Text outside encoded words is kept as is.  Decoding is strict: a malformed
    encoded word, an unknown charset or bytes that are invalid in their
    declared charset raise instead of being replaced.
    """
    # [text, charset, encoding, encoded, text, ...]
    parts = email.header.ecre.split(value)
    last = len(parts) - 1
    out: list[str] = []
    for index in range(0, len(parts), 4):
        text = parts[index]
        # Whitespace between two encoded words is not part of the value
        if text and not (0 < index < last and text.isspace()):
            out.append(text)
        if index == last:
            break

        charset, encoding, encoded = parts[index + 1:index + 4]
        word = f"=?{charset}?{encoding}?{encoded}?="
        for chunk, chunk_charset in email.header.decode_header(word):
            if isinstance(chunk, bytes):
                chunk = chunk.decode(chunk_charset or "us-ascii")
            out.append(chunk)
    return "".join(out).strip()


def parse_from_line(line: str) -> str:
    """Return the decoded sender of a ``From: `` header line."""
    return decode_header_value(line.rstrip("\r\n")[len(FROM_PREFIX):])


def extract_sender(path: str | os.PathLike[str]) -> str | None:
    """Return the sender of the first ``From: `` line in *path*.

    Reading stops at that line.  Returns ``None`` when the file has no such
    line.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise FileOpenError(path, e) from e

    with f:
        try:
            for raw in f:
                line = raw.decode(MAIL_ENCODING)
                if not line.startswith(FROM_PREFIX):
                    continue
                try:
                    return parse_from_line(line)
                except (email_errors.HeaderParseError, LookupError, UnicodeDecodeError) as e:
                    raise HeaderParseError(path, e) from e
        except (OSError, UnicodeDecodeError) as e:
            raise LineReadError(path, e) from e

    logger.debug("No From header in %s", path)
    return None
