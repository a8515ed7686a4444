#!/usr/bin/env python3
"""Post a patch file to a running gitpatch API and summarize the response."""

import argparse
import json
import sys
from pathlib import Path

import requests


def main():
    """Send the patch and print a short report."""
    parser = argparse.ArgumentParser(description="Smoke test a running gitpatch API")
    parser.add_argument("patch", help="Patch file to send")
    parser.add_argument(
        "--url",
        default="http://127.0.0.1:8000",
        help="Base URL of the API (default: http://127.0.0.1:8000)",
    )
    parser.add_argument("--save", help="Write the full JSON response to this file")
    args = parser.parse_args()

    patch_text = Path(args.patch).read_text(encoding="utf-8")
    print(f"Sending {args.patch} ({len(patch_text)} characters) to {args.url}/parse")

    try:
        response = requests.post(
            f"{args.url}/parse", json={"patch": patch_text}, timeout=60
        )
    except requests.exceptions.RequestException as e:
        print(f"❌ Request failed: {e}")
        return 1

    print(f"Status Code: {response.status_code}")
    if response.status_code != 200:
        print(response.text[:500])
        return 1

    result = response.json()
    if not result.get("ok"):
        error = result.get("error", {})
        print(f"❌ {error.get('code')}: {error.get('message')}")
        return 1

    data = result["data"]
    print("✅ Success!")
    print(f"Patches: {data['patch_count']} (parsed: {data['parsed_count']})")
    print(f"Checksum: {data['provenance']['checksum']}")
    for note in data["notes"]:
        print(f"Note: {note}")

    if args.save:
        Path(args.save).write_text(json.dumps(result, indent=2), encoding="utf-8")
        print(f"Response saved to {args.save}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
