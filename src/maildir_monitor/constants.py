"""Constants for Maildir Monitor."""

from datetime import timedelta

# --- Block defaults ---
DEFAULT_PATH = "/"
DEFAULT_LABEL = "/"
DEFAULT_INTERVAL = timedelta(seconds=20)
PLACEHOLDER_TEXT = "Maildir"  # shown until the first successful poll

# --- Header extraction ---
FROM_PREFIX = "From: "
MAIL_ENCODING = "utf-8"

# --- Summary ---
COUNT_SEPARATOR = ":"
SENDER_SEPARATOR = ", "

# --- CLI ---
ENV_PREFIX = "MAILDIR_MONITOR"
