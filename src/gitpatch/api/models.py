"""Pydantic models for gitpatch API requests and responses."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..settings import get_max_input_bytes

_EXAMPLE_PATCH = (
    "From 0f6f88c98fff3afa0289f46bf4eab469f45eebc6 Mon Sep 17 00:00:00 2001\n"
    "From: Jane Doe <jane@example.com>\n"
    "Date: Sat, 25 Jan 2020 19:21:35 +0200\n"
    "Subject: [PATCH] Fix greeting\n"
    "\n"
    "---\n"
    "diff --git a/hello.txt b/hello.txt\n"
    "index 1e8f2a0..c0d0fb4 100644\n"
    "--- a/hello.txt\n"
    "+++ b/hello.txt\n"
    "@@ -1,1 +1,1 @@\n"
    "-helo\n"
    "+hello\n"
)


class ParseRequest(BaseModel):
    """Request model for the parse endpoint."""

    patch: str = Field(
        ...,
        description="Raw git format-patch text, one or more patches",
        examples=[_EXAMPLE_PATCH],
    )

    @field_validator("patch")
    @classmethod
    def patch_must_fit_limit(cls, v):
        """Reject patches above the configured size limit."""
        limit = get_max_input_bytes()
        if len(v.encode("utf-8", errors="replace")) > limit:
            raise ValueError(f"patch exceeds {limit} bytes")
        return v


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["1.0.0"])


class VersionResponse(BaseModel):
    """Response model for version endpoint."""

    version: str = Field(..., examples=["1.0.0"])
    api_version: str = Field(..., examples=["v1"])
    git_version: Optional[str] = Field(None, examples=["2.34.1"])
    supported_features: list = Field(
        default_factory=lambda: [
            "multi_patch_split",
            "header_metadata",
            "line_numbering",
            "rename_detection",
            "added_deleted_files",
        ]
    )
