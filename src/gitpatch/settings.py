"""Application-wide settings and environment loading."""

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()
logger.debug("Environment variables loaded from .env if present")

DEFAULT_MAX_INPUT_BYTES = 8_000_000  # 8 MB


@lru_cache(maxsize=1)
def get_max_input_bytes() -> int:
    """Return the patch size limit from GITPATCH_MAX_INPUT_BYTES."""
    raw = os.getenv("GITPATCH_MAX_INPUT_BYTES")
    if not raw:
        return DEFAULT_MAX_INPUT_BYTES

    try:
        value = int(raw)
    except ValueError:
        logger.warning(
            "Ignoring invalid GITPATCH_MAX_INPUT_BYTES",
            extra={"value": raw},
        )
        return DEFAULT_MAX_INPUT_BYTES

    if value <= 0:
        logger.warning(
            "Ignoring non-positive GITPATCH_MAX_INPUT_BYTES",
            extra={"value": raw},
        )
        return DEFAULT_MAX_INPUT_BYTES

    logger.debug("Input size limit configured", extra={"limit_bytes": value})
    return value
