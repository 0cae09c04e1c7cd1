"""Logging setup for the command-line entry points.

The library itself only creates module loggers; :func:`setup_logging` is
called by ``pinecone-rest`` and the bundled scripts.  The level comes from
``LOG_LEVEL`` (default ``"INFO"``), and the HTTP stack is kept at WARNING.
"""

import logging
import sys

from pinecone_rest.config import get_settings


def setup_logging() -> None:
    """Configure the root logger to write to ``stderr``.

    Repeated calls are harmless because ``basicConfig`` does nothing once
    handlers exist.
    """
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
