import os
import json
import logging
from typing import Any, Dict


logger = logging.getLogger("slug_updater")


def setup_logging() -> None:
    """Configure the root logger from LOG_LEVEL. Call after .env is loaded."""
    level = os.getenv("LOG_LEVEL", "INFO").upper().strip() or "INFO"
    logging.basicConfig(level=level, format="%(message)s")
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)


def log_event(event: str, payload: Dict[str, Any]) -> None:
    rec = {"event": event, **payload}
    try:
        logger.info(json.dumps(rec, ensure_ascii=False))
    except (TypeError, ValueError):
        # payload holds something json can't encode (e.g. ObjectId)
        logger.info(f"{event}: {payload}")


def log_error(event: str, payload: Dict[str, Any]) -> None:
    rec = {"event": event, **payload}
    try:
        logger.error(json.dumps(rec, ensure_ascii=False))
    except (TypeError, ValueError):
        logger.error(f"{event}: {payload}")
