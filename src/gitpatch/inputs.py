"""Loading patch text from files, stdin or a git repository."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from .config import ParseConfig
from .errors import InputTooLargeError, PatchReadError
from .vcs import GitRepository

logger = logging.getLogger(__name__)


def check_input_size(text: str, limit: int, encoding: str = "utf-8") -> None:
    """Raise InputTooLargeError when ``text`` encodes to more than ``limit`` bytes."""
    size = len(text.encode(encoding, errors="replace"))
    if size > limit:
        raise InputTooLargeError(size, limit)


def load_patch_text(config: ParseConfig, stdin: Optional[TextIO] = None) -> str:
    """Return the patch text named by ``config``."""
    if config.repo_path:
        text = GitRepository(config).format_patch()
    elif config.patch_path and config.patch_path != "-":
        path = Path(config.patch_path)
        try:
            text = path.read_text(encoding=config.encoding)
        except FileNotFoundError as e:
            raise PatchReadError(str(path), "file not found") from e
        except UnicodeDecodeError as e:
            raise PatchReadError(str(path), f"cannot decode as {config.encoding}") from e
        except OSError as e:
            raise PatchReadError(str(path), e.strerror or str(e)) from e
    else:
        try:
            if stdin is not None:
                text = stdin.read()
            else:
                text = sys.stdin.buffer.read().decode(config.encoding)
        except UnicodeDecodeError as e:
            raise PatchReadError("stdin", f"cannot decode as {config.encoding}") from e

    check_input_size(text, config.max_input_bytes, config.encoding)
    logger.debug(
        "Loaded patch text",
        extra={"source": config.source_label, "chars": len(text)},
    )
    return text
