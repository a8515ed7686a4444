#!/usr/bin/env python3
"""Check that gitpatch is installed and working."""

import subprocess
import sys

SAMPLE_PATCH = (
    "From 0f6f88c98fff3afa0289f46bf4eab469f45eebc6 Mon Sep 17 00:00:00 2001\n"
    "From: Jane Doe <jane@example.com>\n"
    "Date: Sat, 25 Jan 2020 19:21:35 +0200\n"
    "Subject: [PATCH] Fix greeting\n"
    "\n"
    "diff --git a/hello.txt b/hello.txt\n"
    "index 1e8f2a0..c0d0fb4 100644\n"
    "@@ -1,1 +1,1 @@\n"
    "-helo\n"
    "+hello\n"
)


def check_import():
    """Check that the package can be imported."""
    try:
        import gitpatch
        print(f"✓ Package import successful (version: {gitpatch.__version__})")
        return True
    except ImportError as e:
        print(f"✗ Package import failed: {e}")
        return False


def check_parse():
    """Check that a sample patch parses."""
    try:
        from gitpatch import parse_git_patch

        patch = parse_git_patch(SAMPLE_PATCH)
        if patch is not None and len(patch.files) == 1:
            print(f"✓ Sample patch parsed ({len(patch.files[0].modified_lines)} modified lines)")
            return True
        print("✗ Sample patch did not parse")
        return False
    except Exception as e:
        print(f"✗ Parse check failed: {e}")
        return False


def check_cli():
    """Check that the CLI command is available."""
    try:
        result = subprocess.run(
            [sys.executable, "-m", "gitpatch.main", "--help"],
            capture_output=True,
            text=True,
            timeout=10,
        )
        if result.returncode == 0:
            print("✓ CLI command available")
            return True
        print(f"✗ CLI command failed: {result.stderr}")
        return False
    except Exception as e:
        print(f"✗ CLI check failed: {e}")
        return False


def main():
    """Run all installation checks."""
    print("Checking gitpatch installation...")
    print("=" * 40)

    checks = [
        ("Package Import", check_import),
        ("Sample Parse", check_parse),
        ("CLI Command", check_cli),
    ]

    passed = 0
    for name, check_func in checks:
        print(f"\n{name}:")
        if check_func():
            passed += 1

    print("\n" + "=" * 40)
    print(f"Checks passed: {passed}/{len(checks)}")
    return 0 if passed == len(checks) else 1


if __name__ == "__main__":
    sys.exit(main())
