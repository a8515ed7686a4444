"""Pytest configuration and fixtures for gitpatch tests."""

import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from gitpatch.settings import get_max_input_bytes

SINGLE_PATCH = """\
From 0f6f88c98fff3afa0289f46bf4eab469f45eebc6 Mon Sep 17 00:00:00 2001
From: Jane Doe <jane@example.com>
Date: Sat, 25 Jan 2020 19:21:35 +0200
Subject: [PATCH] Update greeting and add notes

---
 hello.txt | 3 ++-
 notes.md  | 2 ++
 2 files changed, 4 insertions(+), 1 deletion(-)
 create mode 100644 notes.md

diff --git a/hello.txt b/hello.txt
index 1e8f2a0..c0d0fb4 100644
--- a/hello.txt
+++ b/hello.txt
@@ -1,3 +1,4 @@
 first
-helo
+hello
+world
 last
diff --git a/notes.md b/notes.md
new file mode 100644
index 0000000..3b18e51
--- /dev/null
+++ b/notes.md
@@ -0,0 +1,2 @@
+# Notes
+todo
--\x20
2.25.0

"""

SECOND_PATCH = """\
From 8a1b2c3d4e5f60718293a4b5c6d7e8f901234567 Mon Sep 17 00:00:00 2001
From: John Roe <john@example.com>
Date: Sun, 26 Jan 2020 10:00:00 +0200
Subject: [PATCH 2/2] Rename and remove files

---
diff --git a/old_name.py b/new_name.py
similarity index 100%
rename from old_name.py
rename to new_name.py
diff --git a/obsolete.txt b/obsolete.txt
deleted file mode 100644
index 3b18e51..0000000
--- a/obsolete.txt
+++ /dev/null
@@ -1,2 +0,0 @@
-line one
-line two
"""

BROKEN_PATCH = """\
From 1111111111111111111111111111111111111111 Mon Sep 17 00:00:00 2001
Date: Mon, 27 Jan 2020 08:00:00 +0200
Subject: [PATCH] Author line is missing

diff --git a/a.txt b/a.txt
index 1111111..2222222 100644
@@ -1,1 +1,1 @@
-a
+b
"""


@pytest.fixture
def single_patch() -> str:
    """A complete one-commit format-patch email."""
    return SINGLE_PATCH


@pytest.fixture
def patch_series() -> str:
    """Two concatenated patches."""
    return SINGLE_PATCH + SECOND_PATCH


@pytest.fixture
def series_with_broken_patch() -> str:
    """Three patches, the middle one without an author line."""
    return SINGLE_PATCH + BROKEN_PATCH + SECOND_PATCH


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reset cached settings so environment changes apply per test."""
    get_max_input_bytes.cache_clear()
    yield
    get_max_input_bytes.cache_clear()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="gitpatch_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path, ignore_errors=True)


class GitRepoHelper:
    """Helper class for git repository operations in tests."""

    def __init__(self, repo_path: Path):
        self.repo_path = repo_path
        self.env = os.environ.copy()
        self.env.update({
            "GIT_AUTHOR_NAME": "Test User",
            "GIT_AUTHOR_EMAIL": "test@example.com",
            "GIT_COMMITTER_NAME": "Test User",
            "GIT_COMMITTER_EMAIL": "test@example.com",
        })

    def run_git(self, args: list) -> subprocess.CompletedProcess:
        """Run git command in the repository."""
        return subprocess.run(
            ["git"] + args,
            cwd=self.repo_path,
            env=self.env,
            check=True,
            capture_output=True,
            text=True,
        )

    def write_file(self, path: str, content: str) -> None:
        """Create or overwrite a file."""
        file_path = self.repo_path / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)

    def commit_all(self, message: str) -> str:
        """Stage everything, commit, and return the commit SHA."""
        self.run_git(["add", "-A"])
        self.run_git(["commit", "-m", message])
        return self.run_git(["rev-parse", "HEAD"]).stdout.strip()


@pytest.fixture
def git_helper(temp_dir: Path) -> GitRepoHelper:
    """A throwaway repository with one initial commit."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    helper = GitRepoHelper(repo_path)
    helper.run_git(["init"])
    helper.run_git(["config", "user.name", "Test User"])
    helper.run_git(["config", "user.email", "test@example.com"])
    helper.run_git(["config", "commit.gpgsign", "false"])

    helper.write_file("README.md", "# Test Repository\n")
    helper.commit_all("Initial commit")
    return helper
