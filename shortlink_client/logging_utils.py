from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric_level)

    # urllib3 logs every connection at DEBUG, which drowns the request log lines.
    logging.getLogger("urllib3").setLevel(max(numeric_level, logging.WARNING))
