"""Tests for the header extraction module."""

import pytest

from maildir_monitor import headers
from maildir_monitor.errors import FileOpenError, HeaderParseError, LineReadError
from maildir_monitor.headers import decode_header_value, extract_sender, parse_from_line


def test_extract_plain_sender(tmp_path):
    mail = tmp_path / "m1"
    mail.write_text("To: me@example.com\nFrom: Alice <alice@example.com>\nSubject: Hi\n\nBody\n")
    assert extract_sender(mail) == "Alice <alice@example.com>"


def test_extract_encoded_sender(tmp_path):
    """RFC 2047 encoded words should decode to readable text."""
    mail = tmp_path / "m1"
    mail.write_text("From: =?utf-8?q?J=C3=B6rg_M=C3=BCller?= <jorg@example.com>\n\nBody\n")
    assert extract_sender(mail) == "Jörg Müller <jorg@example.com>"


def test_extract_base64_sender(tmp_path):
    mail = tmp_path / "m1"
    mail.write_text("From: =?UTF-8?B?w4lsb2RpZQ==?= <elodie@example.com>\n")
    assert extract_sender(mail) == "Élodie <elodie@example.com>"


def test_extract_first_from_line_only(tmp_path):
    mail = tmp_path / "m1"
    mail.write_text("From: first@example.com\nFrom: second@example.com\n")
    assert extract_sender(mail) == "first@example.com"


def test_crlf_line_endings(tmp_path):
    mail = tmp_path / "m1"
    mail.write_bytes(b"Subject: x\r\nFrom: carol@example.com\r\n\r\nBody\r\n")
    assert extract_sender(mail) == "carol@example.com"


def test_no_from_header(tmp_path):
    """Files without a From line contribute nothing."""
    mail = tmp_path / "m1"
    mail.write_text("Subject: nothing\n\nFrom the desk of nobody\n")
    assert extract_sender(mail) is None


def test_empty_file(tmp_path):
    mail = tmp_path / "m1"
    mail.write_text("")
    assert extract_sender(mail) is None


def test_prefix_is_exact(tmp_path):
    """mbox separators and lowercase headers are not sender lines."""
    mail = tmp_path / "m1"
    mail.write_text("From alice@example.com Sat Jan  1 00:00:00 2000\nfrom: alice@example.com\nFrom:alice@example.com\n")
    assert extract_sender(mail) is None


def test_stops_reading_after_header(tmp_path):
    """Bytes after the From line are never decoded."""
    mail = tmp_path / "m1"
    mail.write_bytes(b"From: dave@example.com\n" + b"x" * 100 + b"\n\xff\xfe invalid utf-8\n")
    assert extract_sender(mail) == "dave@example.com"


def test_missing_file(tmp_path):
    with pytest.raises(FileOpenError) as exc_info:
        extract_sender(tmp_path / "missing")
    assert "failed to open mail file" in str(exc_info.value)
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_open_denied(tmp_path, monkeypatch):
    mail = tmp_path / "m1"
    mail.write_text("From: a@example.com\n")

    def _deny(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(headers, "open", _deny, raising=False)
    with pytest.raises(FileOpenError):
        extract_sender(mail)


def test_invalid_utf8_before_header(tmp_path):
    mail = tmp_path / "m1"
    mail.write_bytes(b"Subject: \xff\xfe\nFrom: a@example.com\n")
    with pytest.raises(LineReadError) as exc_info:
        extract_sender(mail)
    assert exc_info.value.path == str(mail)


def test_unknown_charset(tmp_path):
    mail = tmp_path / "m1"
    mail.write_text("From: =?x-no-such-charset?q?abc?= <a@example.com>\n")
    with pytest.raises(HeaderParseError):
        extract_sender(mail)


def test_invalid_bytes_in_declared_charset(tmp_path):
    mail = tmp_path / "m1"
    mail.write_text("From: =?utf-8?q?=FF=FE?= <a@example.com>\n")
    with pytest.raises(HeaderParseError) as exc_info:
        extract_sender(mail)
    assert isinstance(exc_info.value.cause, UnicodeDecodeError)


def test_decode_header_value_plain():
    assert decode_header_value("  Bob <bob@example.com>  ") == "Bob <bob@example.com>"


def test_decode_adjacent_encoded_words():
    """Whitespace between adjacent encoded words is dropped."""
    value = "=?utf-8?q?Ren=C3=A9?= =?utf-8?q?e?= <renee@example.com>"
    assert decode_header_value(value) == "Renée <renee@example.com>"


def test_parse_from_line():
    assert parse_from_line("From: eve@example.com\r\n") == "eve@example.com"


def test_extract_accepts_str_path(tmp_path):
    mail = tmp_path / "m1"
    mail.write_text("From: frank@example.com\n")
    assert extract_sender(str(mail)) == "frank@example.com"


def test_backslash_next_to_encoded_word(tmp_path):
    """Backslashes in plain text beside an encoded word are kept verbatim."""
    mail = tmp_path / "m1"
    mail.write_text('From: =?utf-8?q?J=C3=B6rg?= "CORP\\users" <jorg@example.com>\n', encoding="utf-8")
    assert extract_sender(mail) == 'Jörg "CORP\\users" <jorg@example.com>'


def test_escape_like_text_not_interpreted():
    assert decode_header_value("=?utf-8?q?A?= x\\u0041y <a@example.com>") == "A x\\u0041y <a@example.com>"


def test_non_ascii_text_next_to_encoded_word():
    assert decode_header_value("=?utf-8?q?Ren=C3=A9?= Müller <rm@example.com>") == "René Müller <rm@example.com>"
