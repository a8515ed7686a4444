"""Tests for serialization module."""

import json

import pytest

from gitpatch.config import ParseConfig
from gitpatch.parser import parse_git_patch
from gitpatch.serialize import PatchSerializer


@pytest.fixture
def serializer() -> PatchSerializer:
    return PatchSerializer(ParseConfig(patch_path="series.patch", max_input_bytes=1000))


class TestPatchSerializer:
    """Test PatchSerializer class."""

    def test_serialize_single_patch(self, serializer, single_patch):
        """A single patch becomes one camelCase object."""
        data = serializer.serialize_result(parse_git_patch(single_patch))

        assert data["hash"] == "0f6f88c98fff3afa0289f46bf4eab469f45eebc6"
        assert data["authorName"] == "Jane Doe"
        assert data["authorEmail"] == "jane@example.com"
        assert data["date"] == "Sat, 25 Jan 2020 19:21:35 +0200"
        assert data["message"] == "[PATCH] Update greeting and add notes"
        assert [f["afterName"] for f in data["files"]] == ["hello.txt", "notes.md"]

        notes_file = data["files"][1]
        assert notes_file == {
            "added": True,
            "deleted": False,
            "beforeName": "notes.md",
            "afterName": "notes.md",
            "modifiedLines": [
                {"added": True, "lineNumber": 2, "line": "# Notes"},
                {"added": True, "lineNumber": 3, "line": "todo"},
            ],
        }

    def test_serialize_keeps_shape(self, serializer, series_with_broken_patch):
        """None stays None and lists keep their None entries in place."""
        assert serializer.serialize_result(None) is None

        data = serializer.serialize_result(parse_git_patch(series_with_broken_patch))

        assert isinstance(data, list)
        assert len(data) == 3
        assert data[1] is None
        assert data[2]["authorName"] == "John Roe"

    def test_serialize_output(self, serializer, series_with_broken_patch):
        """The payload carries counts, notes and provenance."""
        payload = serializer.serialize_output(parse_git_patch(series_with_broken_patch))

        assert payload["patch_count"] == 3
        assert payload["parsed_count"] == 2
        assert payload["notes"] == ["1 of 3 patches could not be parsed"]
        assert payload["provenance"]["source"] == "series.patch"
        assert payload["provenance"]["max_input_bytes"] == 1000
        assert len(payload["provenance"]["checksum"]) == 64

    def test_serialize_output_for_no_patch(self, serializer):
        """An empty result still produces a payload with a note."""
        payload = serializer.serialize_output(None)

        assert payload["result"] is None
        assert payload["patch_count"] == 0
        assert payload["parsed_count"] == 0
        assert payload["notes"] == ["No patch found in input"]

    def test_source_override(self, serializer, single_patch):
        """An explicit source label replaces the configured one."""
        payload = serializer.serialize_output(parse_git_patch(single_patch), source="request")

        assert payload["provenance"]["source"] == "request"

    def test_checksum_is_deterministic(self, serializer, patch_series):
        """The same result always produces the same checksum."""
        first = serializer.serialize_output(parse_git_patch(patch_series))
        second = serializer.serialize_output(parse_git_patch(patch_series))

        assert first["provenance"]["checksum"] == second["provenance"]["checksum"]

    def test_checksum_depends_on_content(self, serializer, single_patch):
        """Different content gives a different checksum."""
        original = serializer.serialize_output(parse_git_patch(single_patch))
        changed = serializer.serialize_output(
            parse_git_patch(single_patch.replace("+world", "+planet"))
        )

        assert original["provenance"]["checksum"] != changed["provenance"]["checksum"]

    def test_checksum_excludes_itself(self, serializer, single_patch):
        """The checksum covers the payload without the checksum field."""
        payload = serializer.serialize_output(parse_git_patch(single_patch))
        checksum = payload["provenance"]["checksum"]

        assert serializer._compute_checksum(payload) == checksum

    def test_notes_for_empty_patch(self, serializer):
        """Patches without file changes are noted."""
        text = (
            "From abc123 Mon Sep 17 00:00:00 2001\n"
            "From: Jane Doe <jane@example.com>\n"
            "Date: Sat, 25 Jan 2020 19:21:35 +0200\n"
            "Subject: [PATCH] Empty commit\n"
        )

        assert serializer.collect_notes(parse_git_patch(text)) == [
            "1 patches without file changes"
        ]

    def test_to_json_string_keeps_list_order(self, serializer, patch_series):
        """Rendering sorts keys but never reorders patches or lines."""
        payload = serializer.serialize_output(parse_git_patch(patch_series))
        rendered = json.loads(serializer.to_json_string(payload))

        assert [p["hash"][:7] for p in rendered["result"]] == ["0f6f88c", "8a1b2c3"]
        lines = rendered["result"][0]["files"][0]["modifiedLines"]
        assert [line["line"] for line in lines] == ["helo", "hello", "world"]

    def test_envelopes(self, serializer):
        """Success and error envelopes."""
        assert serializer.create_success_envelope({"a": 1}) == {"ok": True, "data": {"a": 1}}
        assert serializer.create_error_envelope("X", "boom") == {
            "ok": False,
            "error": {"code": "X", "message": "boom"},
        }
        assert serializer.create_error_envelope("X", "boom", {"k": "v"})["error"]["details"] == {
            "k": "v"
        }
