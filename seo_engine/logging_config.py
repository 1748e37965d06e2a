import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"


def configure_logging(level="WARNING", stream=None):
    """
    Installs a single stream handler on the root logger.

    Calling it again replaces the handler instead of stacking a second one.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    log_level = getattr(logging, level.upper(), logging.WARNING) if isinstance(level, str) else level
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # urllib3 logs every retry at DEBUG
    logging.getLogger("urllib3").setLevel(max(log_level, logging.INFO))
    return root_logger
