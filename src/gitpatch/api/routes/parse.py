"""Parse routes for the gitpatch API."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from ..models import ParseRequest
from ..services import ParseService

router = APIRouter(tags=["parse"])

logger = logging.getLogger(__name__)

parse_service = ParseService()


@router.post("/parse")
def parse_patch(request: ParseRequest) -> Dict[str, Any]:
    """Parse git format-patch text into structured patches."""
    logger.info("Received parse request", extra={"chars": len(request.patch)})

    try:
        return parse_service.process_parse_request(request.patch)

    except Exception as exc:
        logger.exception("Parse request failed")
        raise HTTPException(
            status_code=500,
            detail={
                "ok": False,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": f"Failed to parse patch: {str(exc)}",
                    "details": {"exception_type": type(exc).__name__},
                },
            },
        ) from exc
