"""gitpatch.

Parses ``git format-patch`` output into commit metadata and per-file lists of
added and removed lines with their line numbers.
"""

from .errors import GitPatchError, PatchInputTypeError
from .models import ModifiedLine, ParsedFile, ParsedPatch
from .parser import parse_git_patch, parse_single_patch

__version__ = "1.0.0"

__all__ = [
    "GitPatchError",
    "ModifiedLine",
    "ParsedFile",
    "ParsedPatch",
    "PatchInputTypeError",
    "parse_git_patch",
    "parse_single_patch",
]
