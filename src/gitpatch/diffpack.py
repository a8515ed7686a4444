"""Per-file diff processing and hunk walking for gitpatch."""

import logging
import re
from typing import List, Optional, Tuple

from .models import ModifiedLine, ParsedFile
from .splitter import HUNK_MARKER, split_into_parts

logger = logging.getLogger(__name__)

FILE_NAME_PATTERN = re.compile(r'^diff --git "?a/(.*?)"?\s*"?b/(.*?)"?\s*$')
QUOTED_FILE_NAME_PATTERN = re.compile(r'^diff --git "a/(.*)" "b/(.*)"\s*$')
FILE_SECTION_PREFIX = "diff --git "
HUNK_HEADER_PATTERN = re.compile(r"^@@ -(\d+),?\S* \+(\d+),?")

ADDED_FILE_MODE_PREFIX = "new file mode "
DELETED_FILE_MODE_PREFIX = "deleted file mode "
SIMILARITY_INDEX_PREFIX = "similarity index "

# "-- " opens the signature trailer of a format-patch email.
TRAILER_PREFIX = "-- "


def split_file_names(line: str) -> Optional[Tuple[str, str]]:
    """Return the before and after paths named by a ``diff --git`` line.

    When both paths are the same, as for any change that is not a rename, the
    line is split in the middle so that a path containing ``" b/"`` stays whole.
    """
    match = QUOTED_FILE_NAME_PATTERN.match(line)
    if match:
        return match.group(1).strip(), match.group(2).strip()

    match = FILE_NAME_PATTERN.match(line)
    if not match:
        return None

    paths = line[len(FILE_SECTION_PREFIX):].rstrip()
    name_length, odd = divmod(len(paths) - len("a/ b/"), 2)
    if paths.startswith("a/") and name_length > 0 and not odd:
        before = paths[2:2 + name_length]
        if paths[2 + name_length:] == " b/" + before:
            return before.strip(), before.strip()

    return match.group(1).strip(), match.group(2).strip()


class DiffProcessor:
    """Turns ``diff --git`` sections into ParsedFile values."""

    def process_file_section(self, section: List[str]) -> Optional[ParsedFile]:
        """Process one file section.

        The section starts with its ``diff --git`` line. Returns None when the
        file-name line is not recognized or the meta line is missing.
        """
        if not section:
            return None

        file_name_line = section[0]
        names = split_file_names(file_name_line)
        if names is None:
            logger.debug("Skipping unrecognized file header", extra={"line": file_name_line})
            return None

        meta_line = section[1] if len(section) > 1 else ""
        if not meta_line:
            logger.debug("Skipping file section without meta line", extra={"line": file_name_line})
            return None

        before_name, after_name = names
        added = meta_line.startswith(ADDED_FILE_MODE_PREFIX)
        deleted = meta_line.startswith(DELETED_FILE_MODE_PREFIX)

        if meta_line.startswith(SIMILARITY_INDEX_PREFIX):
            logger.debug(
                "Rename or copy without line changes",
                extra={"before": before_name, "after": after_name},
            )
            return ParsedFile(
                before_name=before_name,
                after_name=after_name,
                added=added,
                deleted=deleted,
            )

        modified_lines: List[ModifiedLine] = []
        for hunk in split_into_parts(section[2:], HUNK_MARKER):
            modified_lines.extend(self.walk_hunk(hunk))

        logger.debug(
            "Processed file section",
            extra={
                "before": before_name,
                "after": after_name,
                "added": added,
                "deleted": deleted,
                "modified_lines": len(modified_lines),
            },
        )
        return ParsedFile(
            before_name=before_name,
            after_name=after_name,
            added=added,
            deleted=deleted,
            modified_lines=tuple(modified_lines),
        )

    def walk_hunk(self, hunk: List[str]) -> List[ModifiedLine]:
        """Classify the lines of one hunk and number them.

        Both counters advance on every line; an added line then steps the old
        counter back and a removed line steps the new counter back. Trailer lines
        starting with ``"-- "`` keep their tick and are not classified.
        """
        if not hunk:
            return []

        match = HUNK_HEADER_PATTERN.match(hunk[0])
        if not match:
            logger.debug("Skipping unrecognized hunk header", extra={"line": hunk[0]})
            return []

        n_a = int(match.group(1))
        n_b = int(match.group(2))
        modified_lines = []

        for line in hunk[1:]:
            n_a += 1
            n_b += 1

            if line.startswith(TRAILER_PREFIX):
                continue
            if line.startswith("+"):
                n_a -= 1
                modified_lines.append(ModifiedLine(added=True, line_number=n_b, line=line[1:]))
            elif line.startswith("-"):
                n_b -= 1
                modified_lines.append(ModifiedLine(added=False, line_number=n_a, line=line[1:]))

        return modified_lines
