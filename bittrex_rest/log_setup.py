import logging
import os
from typing import Optional

LOGGER_NAME = "bittrex_rest"
FORMAT = "%(asctime)s %(levelname)s %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Attach handlers to the ``bittrex_rest`` logger (idempotent).

    The library itself never configures logging; applications and the CLI
    call this to see request/response lines.
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)
    formatter = logging.Formatter(FORMAT)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        has_file = any(
            isinstance(h, logging.FileHandler)
            and getattr(h, "baseFilename", "") == os.path.abspath(log_file)
            for h in log.handlers
        )
        if not has_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            log.addHandler(file_handler)

    if not any(type(h) is logging.StreamHandler for h in log.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        log.addHandler(stream_handler)

    return log
