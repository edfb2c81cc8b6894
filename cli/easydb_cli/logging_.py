from __future__ import annotations

import logging

# loggers owned by this project; easydb_client.transport logs every request at DEBUG
PROJECT_LOGGERS = ("easydb_client", "easydb_cli")


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    for name in PROJECT_LOGGERS:
        logging.getLogger(name).setLevel(level)

    # httpx repeats each request at INFO, the transport debug line already covers it
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
