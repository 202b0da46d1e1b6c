"""Logging setup for scripts and services built on sqlassist.

Every statement the executors run is logged at INFO on the `sqlassist.*`
loggers, and driver errors and row-count mismatches at ERROR. The
library itself never configures handlers; applications call
`setup_logging()` once at startup to see those records on the console
and keep a rotating query log on disk.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

QUERY_LOGGER = "sqlassist"
QUERY_LOG_FILE = "sqlassist.log"
QUERY_LOG_MAX_BYTES = 5 * 1024 * 1024
QUERY_LOG_BACKUPS = 3


def _formatter():
    return logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)


def setup_logging(level=None, log_dir=None):
    """Send query logs to the console and to `<log_dir>/sqlassist.log`.

    `level` falls back to SQLASSIST_LOG_LEVEL, then INFO. `log_dir` falls
    back to SQLASSIST_LOG_DIR, then "logs". A process whose root logger
    already has handlers is left alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    if level is None:
        level = os.environ.get("SQLASSIST_LOG_LEVEL", "INFO").upper()
    if log_dir is None:
        log_dir = os.environ.get("SQLASSIST_LOG_DIR", "logs")

    root.setLevel(level)
    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(_formatter())
    root.addHandler(console)

    os.makedirs(log_dir, exist_ok=True)
    query_log = RotatingFileHandler(
        os.path.join(log_dir, QUERY_LOG_FILE),
        maxBytes=QUERY_LOG_MAX_BYTES,
        backupCount=QUERY_LOG_BACKUPS,
    )
    query_log.setLevel(level)
    query_log.setFormatter(_formatter())
    logging.getLogger(QUERY_LOGGER).addHandler(query_log)
