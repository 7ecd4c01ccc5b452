"""Submission line parser — converts raw CSV lines into ApplicantRecord objects.

Validation order (first failure rejects the line):
  1. Exactly 4 comma-separated fields (trailing empty fields are ignored)
  2. Email grammar, exactly one '@'
  3. Delivery timestamp in yyyy-MM-ddTHH:mm:ss
  4. Score grammar (integer or up to 2 decimals), then range [0, 10]
  5. Name with at least two tokens (enforced by ApplicantRecord)

A rejected line is never an error: it is logged at DEBUG and dropped.
"""

import calendar
import logging
import re
from collections.abc import Iterable
from datetime import datetime

from pydantic import ValidationError

from applicants.core.schemas import TRIM_CHARS, ApplicantRecord, ParseResult

logger = logging.getLogger(__name__)

HEADER = "name,email,delivery_datetime,score"
FIELD_COUNT = 4

# Character classes are spelled out so that non-ASCII letters and digits never match.
EMAIL_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9.@_]*@[a-zA-Z0-9._]+[a-zA-Z]")
SCORE_RE = re.compile(r"[0-9]+(\.[0-9]{1,2})?")
DATETIME_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
)

MIN_SCORE = 0.0
MAX_SCORE = 10.0


def is_valid_email(text: str) -> bool:
    """Return True if text matches the email grammar with exactly one '@'."""
    if EMAIL_RE.fullmatch(text) is None:
        return False
    return text.count("@") == 1


def is_valid_score(text: str) -> bool:
    """Return True for an unsigned integer or decimal with at most 2 fraction digits."""
    return SCORE_RE.fullmatch(text) is not None


def parse_delivery_datetime(text: str) -> datetime | None:
    """Parse a zero-padded ``yyyy-MM-ddTHH:mm:ss`` timestamp, or return None.

    A day of month between 01 and 31 that does not exist in the given month
    resolves to the month's last day (2023-02-29 -> 2023-02-28). Month, hour,
    minute and second out of range reject the timestamp.
    """
    match = DATETIME_RE.fullmatch(text)
    if match is None:
        return None
    year, month, day, hour, minute, second = (int(g) for g in match.groups())
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return None
    try:
        day = min(day, calendar.monthrange(year, month)[1])
        return datetime(year, month, day, hour, minute, second)
    except ValueError:
        return None


def split_fields(line: str) -> list[str]:
    """Split on commas, dropping trailing empty fields ("a,b,c,d," has 4 fields)."""
    parts = line.split(",")
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def parse_line(line: str, line_number: int | None = None) -> ApplicantRecord | None:
    """Parse one data line into an ApplicantRecord.

    Returns None if any validation step fails.
    """
    parts = split_fields(line)
    if len(parts) != FIELD_COUNT:
        return _reject(line_number, f"expected {FIELD_COUNT} fields, got {len(parts)}")

    name, email, delivered_text, score_text = (p.strip(TRIM_CHARS) for p in parts)

    if not is_valid_email(email):
        return _reject(line_number, f"invalid email '{email}'")

    delivered_at = parse_delivery_datetime(delivered_text)
    if delivered_at is None:
        return _reject(line_number, f"invalid delivery timestamp '{delivered_text}'")

    if not is_valid_score(score_text):
        return _reject(line_number, f"invalid score '{score_text}'")
    score = float(score_text)
    if not MIN_SCORE <= score <= MAX_SCORE:
        return _reject(line_number, f"score {score_text} outside [0, 10]")

    try:
        return ApplicantRecord(
            name=name,
            email=email,
            delivered_at=delivered_at,
            score=score,
        )
    except ValidationError as e:
        return _reject(line_number, e.errors()[0]["msg"])


def parse_lines(lines: Iterable[str]) -> ParseResult:
    """Parse every line of an input file, skipping a leading header line."""
    result = ParseResult()
    for index, line in enumerate(lines):
        if index == 0 and line.startswith(HEADER):
            result.header_skipped = True
            logger.debug("Skipping header line")
            continue
        result.lines_read += 1
        record = parse_line(line, line_number=index + 1)
        if record is None:
            result.rejected += 1
        else:
            result.records.append(record)

    logger.info(
        "Parsed %d data lines: %d valid, %d rejected",
        result.lines_read, len(result.records), result.rejected,
    )
    return result


def _reject(line_number: int | None, reason: str) -> None:
    if line_number is None:
        logger.debug("Rejected line: %s", reason)
    else:
        logger.debug("Rejected line %d: %s", line_number, reason)
    return None
