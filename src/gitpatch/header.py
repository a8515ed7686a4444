"""Parsing of the email-style header at the top of a patch."""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

HEADER_LINE_COUNT = 4

HASH_PATTERN = re.compile(r"^From (\S*)")
AUTHOR_PATTERN = re.compile(r"^From:\s?([^<].*[^>])?\s+(<(.*)>)?")
DATE_PREFIX = "Date: "
SUBJECT_PREFIX = "Subject: "


@dataclass(frozen=True)
class PatchHeader:
    """Metadata taken from the first four lines of a patch."""

    hash: str
    author_name: str
    author_email: str
    date: str
    message: str


def _value_after(line: str, prefix: str) -> str:
    """Return the text following the first occurrence of ``prefix``, or ''."""
    parts = line.split(prefix, 1)
    return parts[1] if len(parts) > 1 else ""


def parse_header(lines: List[str]) -> Optional[PatchHeader]:
    """Parse hash, author, date and subject lines.

    ``lines`` are the lines of one patch; only the first four are read. Returns
    None when any of them is missing or empty, or when the hash or author line
    does not have the expected shape.
    """
    header_lines = lines[:HEADER_LINE_COUNT]
    if len(header_lines) < HEADER_LINE_COUNT or not all(header_lines):
        logger.debug(
            "Patch header incomplete",
            extra={"header_lines": sum(1 for line in header_lines if line)},
        )
        return None

    hash_line, author_line, date_line, message_line = header_lines

    hash_match = HASH_PATTERN.match(hash_line)
    if not hash_match:
        logger.debug("Hash line not recognized", extra={"line": hash_line})
        return None

    author_match = AUTHOR_PATTERN.match(author_line)
    if not author_match:
        logger.debug("Author line not recognized", extra={"line": author_line})
        return None

    author_name = (author_match.group(1) or "").strip()
    author_email = author_match.group(3) or ""

    return PatchHeader(
        hash=hash_match.group(1),
        author_name=author_name,
        author_email=author_email,
        date=_value_after(date_line, DATE_PREFIX),
        message=_value_after(message_line, SUBJECT_PREFIX),
    )
