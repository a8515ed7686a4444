"""Capturing ``git format-patch`` output from a local repository."""

import logging
import re
import subprocess
from pathlib import Path
from typing import List, Optional

from .config import ParseConfig
from .errors import GitCommandError, GitTimeoutError, GitVersionUnsupportedError

logger = logging.getLogger(__name__)

MINIMUM_GIT_VERSION = (2, 0)


class GitRepository:
    """Read-only git operations on a local repository."""

    def __init__(self, config: ParseConfig):
        """Initialize with configuration."""
        if not config.repo_path:
            raise ValueError("GitRepository requires config.repo_path")
        self.config = config
        self.repo_path = Path(config.repo_path)
        self._git_version: Optional[str] = None

    def _run_git(self, args: List[str]) -> subprocess.CompletedProcess:
        """Run git command with proper environment and error handling."""
        # Enforce deterministic git behavior across platforms
        cmd = [
            "git",
            "-c",
            "core.autocrlf=false",
            "-c",
            "color.ui=false",
        ] + args
        logger.debug("Running git", extra={"git_args": args, "cwd": str(self.repo_path)})
        try:
            return subprocess.run(
                cmd,
                cwd=self.repo_path,
                env=self.config.git_env,
                timeout=self.config.git_timeout,
                check=True,
                capture_output=True,
                text=True,
                encoding=self.config.encoding,
                errors="replace",
            )
        except subprocess.TimeoutExpired as e:
            raise GitTimeoutError(args[0], self.config.git_timeout) from e
        except subprocess.CalledProcessError as e:
            raise GitCommandError(args[0], (e.stderr or str(e)).strip()) from e
        except OSError as e:
            raise GitCommandError(args[0], str(e)) from e

    def validate_git_version(self) -> str:
        """Validate Git version meets minimum requirements."""
        if self._git_version:
            return self._git_version

        required = ".".join(str(part) for part in MINIMUM_GIT_VERSION)
        try:
            result = subprocess.run(
                ["git", "--version"],
                capture_output=True,
                text=True,
                check=True,
                timeout=10,
            )
        except (OSError, subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
            raise GitVersionUnsupportedError("unavailable", required) from e

        # Extract version number from "git version 2.34.1"
        match = re.search(r"git version (\d+)\.(\d+)(?:\.\d+)?", result.stdout)
        if not match:
            raise GitVersionUnsupportedError("unknown", required)

        version = (int(match.group(1)), int(match.group(2)))
        if version < MINIMUM_GIT_VERSION:
            raise GitVersionUnsupportedError(f"{version[0]}.{version[1]}", required)

        self._git_version = match.group(0).split()[-1]
        return self._git_version

    def format_patch(self) -> str:
        """Return ``git format-patch --stdout`` output for the configured range."""
        self.validate_git_version()

        if not self.repo_path.is_dir():
            raise GitCommandError("format-patch", f"not a directory: {self.repo_path}")

        result = self._run_git(
            [
                "format-patch",
                "--stdout",
                "--no-signature",
                self.config.revision_range,
            ]
        )
        logger.info(
            "Captured format-patch output",
            extra={
                "repo": str(self.repo_path),
                "range": self.config.revision_range,
                "bytes": len(result.stdout.encode(self.config.encoding, errors="replace")),
            },
        )
        return result.stdout
