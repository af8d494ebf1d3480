"""Application-wide settings and environment loading."""

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()
logger.debug("Environment variables loaded from .env if present")


@lru_cache(maxsize=1)
def get_repo_path() -> str:
    """Return the repository served by the API, defaulting to the cwd."""
    repo_path = os.getenv("PICKDIFF_REPO_PATH")
    if repo_path:
        logger.debug("Repository path configured", extra={"repo_path": repo_path})
        return os.path.abspath(repo_path)

    logger.debug("Repository path not configured, using working directory")
    return os.getcwd()


@lru_cache(maxsize=1)
def get_max_workers() -> int:
    """Return the number of threads used to collect per-file diffs."""
    raw = os.getenv("PICKDIFF_MAX_WORKERS", "1")
    try:
        workers = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid PICKDIFF_MAX_WORKERS", extra={"value": raw})
        return 1
    return max(workers, 1)
