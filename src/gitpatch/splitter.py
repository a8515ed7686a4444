"""Splitting of patch text into patches, file sections and hunks."""

import logging
import re
from typing import List, Optional

logger = logging.getLogger(__name__)

# Opening line of a patch: "From <hash> <DayOfWeek> <Month> <Day> <Time> <Year>"
PATCH_START_PATTERN = re.compile(
    r"^From (\S+) (Mon|Tues?|Wed|Thu(?:rs)?|Fri|Sat|Sun) "
    r"(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec) "
    r"\b(0?[1-9]|[12][0-9]|3[01])\b "
    r"\b(?:(?:([01]?\d|2[0-3]):)?([0-5]?\d):)?([0-5]?\d)\b "
    r"\b\d{4}\b\r?$",
    re.MULTILINE,
)

FILE_SECTION_MARKER = "diff --git"
HUNK_MARKER = "@@ "


def split_into_patches(combined_patch: str) -> List[str]:
    """Slice a blob of concatenated patches at each patch-start line.

    Each slice runs from its opening line up to the next opening line, or to the
    end of the input for the last one. Text before the first opening line is
    dropped.
    """
    starts = [match.start() for match in PATCH_START_PATTERN.finditer(combined_patch)]
    ends = starts[1:] + [len(combined_patch)]

    patches = [combined_patch[start:end] for start, end in zip(starts, ends)]
    logger.debug("Split input into %s patches", len(patches))
    return patches


def split_into_parts(lines: List[str], separator: str) -> List[List[str]]:
    """Group lines into runs that each start with a line beginning with ``separator``.

    Lines before the first separator line are discarded.
    """
    parts: List[List[str]] = []
    current_part: Optional[List[str]] = None

    for line in lines:
        if line.startswith(separator):
            current_part = [line]
            parts.append(current_part)
        elif current_part is not None:
            current_part.append(line)

    return parts
