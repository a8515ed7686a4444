"""Entry points for parsing ``git format-patch`` output."""

import logging
from typing import Optional

from .diffpack import DiffProcessor
from .errors import PatchInputTypeError
from .header import HEADER_LINE_COUNT, parse_header
from .models import ParsedPatch, ParseResult
from .splitter import FILE_SECTION_MARKER, split_into_parts, split_into_patches

logger = logging.getLogger(__name__)

_processor = DiffProcessor()


def parse_single_patch(patch: str) -> Optional[ParsedPatch]:
    """Parse the text of exactly one patch, or return None if its header is malformed."""
    lines = patch.split("\n")

    header = parse_header(lines)
    if header is None:
        return None

    files = []
    for section in split_into_parts(lines[HEADER_LINE_COUNT:], FILE_SECTION_MARKER):
        parsed_file = _processor.process_file_section(section)
        if parsed_file is not None:
            files.append(parsed_file)

    logger.debug("Parsed patch", extra={"hash": header.hash, "files": len(files)})
    return ParsedPatch(
        hash=header.hash,
        author_name=header.author_name,
        author_email=header.author_email,
        date=header.date,
        message=header.message,
        files=tuple(files),
    )


def parse_git_patch(patch: str) -> ParseResult:
    """Parse one or more concatenated patches.

    Returns None when no patch is found, a single ParsedPatch (or None) when
    there is exactly one, and a list of ParsedPatch-or-None in input order when
    there are several.

    Raises:
        PatchInputTypeError: if ``patch`` is not a string.
    """
    if not isinstance(patch, str):
        raise PatchInputTypeError(patch)

    patches = split_into_patches(patch)
    if not patches:
        logger.debug("No patch found in input")
        return None
    if len(patches) == 1:
        return parse_single_patch(patches[0])

    results = [parse_single_patch(text) for text in patches]
    logger.debug(
        "Parsed patch set",
        extra={
            "patches": len(results),
            "failed": sum(1 for result in results if result is None),
        },
    )
    return results
