"""Meta endpoints for the gitpatch API."""

import logging
import subprocess
from typing import Optional

from fastapi import APIRouter

from .. import __version__
from ..models import HealthResponse, VersionResponse

router = APIRouter(tags=["meta"])

logger = logging.getLogger(__name__)


def _get_git_version() -> Optional[str]:
    """Return the installed git version if available."""
    try:
        result = subprocess.run(
            ["git", "--version"],
            capture_output=True,
            text=True,
            timeout=5,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.debug("git --version check failed", exc_info=exc)
        return None
    if result.returncode == 0 and result.stdout.strip():
        return result.stdout.strip().split()[-1]
    return None


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    logger.debug("Health check invoked")
    return HealthResponse(status="healthy", version=__version__)


@router.get("/version", response_model=VersionResponse)
def version_info() -> VersionResponse:
    """Version information endpoint."""
    git_version = _get_git_version()
    logger.info("Version endpoint invoked", extra={"git_version": git_version})
    return VersionResponse(
        version=__version__,
        api_version="v1",
        git_version=git_version,
    )


@router.get("/", include_in_schema=False)
def root() -> dict:
    """Root endpoint providing basic API metadata."""
    return {
        "name": "gitpatch API",
        "version": __version__,
        "description": "Parse git format-patch output into structured JSON",
        "endpoints": {
            "parse": "POST /parse - Parse patch text",
            "health": "GET /health - Health check",
            "version": "GET /version - Version information",
            "docs": "GET /docs - API documentation",
        },
    }
