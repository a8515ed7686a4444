"""Service layer for the gitpatch API."""

import logging
from typing import Any, Dict

from ...config import ParseConfig
from ...errors import GitPatchError
from ...parser import parse_git_patch
from ...serialize import PatchSerializer

logger = logging.getLogger(__name__)


class ParseService:
    """Parses posted patch text and wraps the result in an envelope."""

    def process_parse_request(self, patch: str) -> Dict[str, Any]:
        """Process a parse request and return the complete JSON response."""
        logger.info("Processing parse request", extra={"chars": len(patch)})

        try:
            config = ParseConfig()
            result = parse_git_patch(patch)

            serializer = PatchSerializer(config)
            payload = serializer.serialize_output(result, source="request")

            logger.info(
                "Parse request succeeded",
                extra={
                    "patches": payload["patch_count"],
                    "parsed": payload["parsed_count"],
                },
            )
            return serializer.create_success_envelope(payload)

        except GitPatchError as exc:
            logger.warning("Known gitpatch error", extra={"code": exc.code})
            return PatchSerializer().create_error_envelope(exc.code, exc.message, exc.details)
