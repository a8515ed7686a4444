"""Deterministic serialization of parse results."""

import hashlib
import json
import logging
from typing import Any, Dict, List, Optional

from .config import ParseConfig
from .models import ModifiedLine, ParsedFile, ParsedPatch, ParseResult

logger = logging.getLogger(__name__)


class PatchSerializer:
    """Renders parse results as JSON-ready structures.

    Patch, file and line order is meaningful and is kept as parsed; only object
    keys are sorted when rendering.
    """

    def __init__(self, config: Optional[ParseConfig] = None):
        """Initialize with configuration."""
        self.config = config

    def serialize_result(self, result: ParseResult) -> Any:
        """Serialize a driver result, keeping its None / object / list shape."""
        if result is None:
            return None
        if isinstance(result, ParsedPatch):
            return self._serialize_patch(result)
        return [self._serialize_patch(patch) if patch is not None else None for patch in result]

    def serialize_output(
        self, result: ParseResult, source: Optional[str] = None
    ) -> Dict[str, Any]:
        """Serialize the complete output to a deterministic dictionary.

        ``source`` overrides the input label taken from the configuration.
        """
        patches = self._as_list(result)
        parsed_count = sum(1 for patch in patches if patch is not None)
        notes = self.collect_notes(result)

        provenance: Dict[str, Any] = {}
        if self.config is not None:
            provenance.update(self.config.to_provenance_dict())
        if source is not None:
            provenance["source"] = source

        payload = {
            "provenance": provenance,
            "result": self.serialize_result(result),
            "patch_count": len(patches),
            "parsed_count": parsed_count,
            "notes": notes,
        }

        checksum = self._compute_checksum(payload)
        payload["provenance"]["checksum"] = checksum

        logger.debug(
            "Serialization finished",
            extra={"patches": len(patches), "parsed": parsed_count, "checksum": checksum},
        )
        return payload

    def collect_notes(self, result: ParseResult) -> List[str]:
        """Collect notes about the parse."""
        if result is None:
            return ["No patch found in input"]

        notes = []
        patches = self._as_list(result)
        failed = sum(1 for patch in patches if patch is None)
        if failed:
            notes.append(f"{failed} of {len(patches)} patches could not be parsed")

        empty = sum(1 for patch in patches if patch is not None and not patch.files)
        if empty:
            notes.append(f"{empty} patches without file changes")

        return notes

    def _as_list(self, result: ParseResult) -> List[Optional[ParsedPatch]]:
        if result is None:
            return []
        if isinstance(result, ParsedPatch):
            return [result]
        return list(result)

    def _serialize_patch(self, patch: ParsedPatch) -> Dict[str, Any]:
        """Serialize a single patch to dictionary."""
        return {
            "hash": patch.hash,
            "authorName": patch.author_name,
            "authorEmail": patch.author_email,
            "date": patch.date,
            "message": patch.message,
            "files": [self._serialize_file(parsed_file) for parsed_file in patch.files],
        }

    def _serialize_file(self, parsed_file: ParsedFile) -> Dict[str, Any]:
        return {
            "added": parsed_file.added,
            "deleted": parsed_file.deleted,
            "beforeName": parsed_file.before_name,
            "afterName": parsed_file.after_name,
            "modifiedLines": [
                self._serialize_line(line) for line in parsed_file.modified_lines
            ],
        }

    def _serialize_line(self, line: ModifiedLine) -> Dict[str, Any]:
        return {
            "added": line.added,
            "lineNumber": line.line_number,
            "line": line.line,
        }

    def _compute_checksum(self, payload: Dict[str, Any]) -> str:
        """Compute SHA-256 checksum of the payload."""
        payload_copy = self._deep_copy_without_checksum(payload)
        json_bytes = self._to_deterministic_json_bytes(payload_copy)
        return hashlib.sha256(json_bytes).hexdigest()

    def _deep_copy_without_checksum(self, obj: Any) -> Any:
        """Deep copy object, removing checksum field from provenance."""
        if isinstance(obj, dict):
            result = {}
            for key, value in obj.items():
                if key == "provenance":
                    result[key] = {
                        pkey: self._deep_copy_without_checksum(pvalue)
                        for pkey, pvalue in value.items()
                        if pkey != "checksum"
                    }
                else:
                    result[key] = self._deep_copy_without_checksum(value)
            return result
        if isinstance(obj, list):
            return [self._deep_copy_without_checksum(item) for item in obj]
        return obj

    def _to_deterministic_json_bytes(self, obj: Any) -> bytes:
        """Convert object to deterministic JSON bytes."""
        json_str = json.dumps(
            obj,
            ensure_ascii=False,
            sort_keys=True,
            separators=(",", ":"),
            indent=None,
        )
        return json_str.encode("utf-8", errors="replace")

    def to_json_string(self, payload: Dict[str, Any]) -> str:
        """Convert payload to pretty-printed JSON string."""
        return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2)

    def create_success_envelope(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create success envelope around payload."""
        return {"ok": True, "data": payload}

    def create_error_envelope(
        self, error_code: str, error_message: str, details: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Create error envelope."""
        logger.debug("Creating error envelope", extra={"code": error_code})
        error_data: Dict[str, Any] = {
            "code": error_code,
            "message": error_message,
        }
        if details:
            error_data["details"] = details

        return {"ok": False, "error": error_data}
