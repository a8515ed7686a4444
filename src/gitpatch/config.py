"""Configuration management for gitpatch."""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .settings import get_max_input_bytes


@dataclass(frozen=True)
class ParseConfig:
    """Where patch text comes from and how results are written."""

    # Input source: a file, a git repository, or stdin when both are None
    patch_path: Optional[str] = None
    repo_path: Optional[str] = None
    revision_range: Optional[str] = None

    # Output options
    json_output_path: Optional[str] = None

    # Input handling
    encoding: str = "utf-8"
    max_input_bytes: int = field(default_factory=get_max_input_bytes)

    # Git capture
    git_timeout: int = 120  # seconds

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_input_bytes <= 0:
            raise ValueError("max_input_bytes must be positive")
        if self.git_timeout <= 0:
            raise ValueError("git_timeout must be positive")
        if self.patch_path and self.repo_path:
            raise ValueError("patch_path and repo_path are mutually exclusive")
        if self.revision_range and not self.repo_path:
            raise ValueError("revision_range requires repo_path")
        if self.repo_path and not self.revision_range:
            raise ValueError("repo_path requires revision_range")

    @property
    def source_label(self) -> str:
        """Human-readable name of the input source."""
        if self.repo_path:
            return f"git:{self.repo_path}@{self.revision_range}"
        if self.patch_path and self.patch_path != "-":
            return self.patch_path
        return "stdin"

    @property
    def git_env(self) -> Dict[str, str]:
        """Get Git environment variables for deterministic output."""
        env = os.environ.copy()

        # Use platform-appropriate null device
        null_device = "NUL" if os.name == "nt" else "/dev/null"

        env.update(
            {
                "LC_ALL": "C",
                "GIT_CONFIG_GLOBAL": null_device,
                "GIT_CONFIG_SYSTEM": null_device,
                "GIT_TERMINAL_PROMPT": "0",
                "GIT_PAGER": "cat",
            }
        )
        return env

    def to_provenance_dict(self) -> Dict[str, Any]:
        """Convert config to provenance dictionary for output."""
        provenance: Dict[str, Any] = {
            "source": self.source_label,
            "encoding": self.encoding,
            "max_input_bytes": self.max_input_bytes,
        }
        if self.repo_path:
            provenance["git"] = {
                "repo_path": self.repo_path,
                "revision_range": self.revision_range,
            }
        return provenance
