"""Value types produced by the patch parser."""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class ModifiedLine:
    """A single added or removed line.

    ``line_number`` is the position in the new file for added lines and the
    position in the old file for removed lines.
    """

    added: bool
    line_number: int
    line: str


@dataclass(frozen=True)
class ParsedFile:
    """One file touched by a patch."""

    before_name: str
    after_name: str
    added: bool = False
    deleted: bool = False
    modified_lines: Tuple[ModifiedLine, ...] = ()


@dataclass(frozen=True)
class ParsedPatch:
    """Commit metadata plus the files changed by one patch."""

    hash: str
    author_name: str
    author_email: str
    date: str
    message: str
    files: Tuple[ParsedFile, ...] = ()


# None: no patch found. ParsedPatch/None: one patch. List: several patches.
ParseResult = Union[None, ParsedPatch, List[Optional[ParsedPatch]]]
