import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(module)s.%(funcName)s:%(lineno)d] - %(message)s"


def setup_logging(logger_name: str = "mwapi", log_level: int = logging.INFO) -> logging.Logger:
    """
    Configures and returns a console logger.

    Args:
        logger_name: The name for the logger ("mwapi" covers every module in the package).
        log_level: The minimum log level to capture.

    Returns:
        A configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Prevent multiple handlers if called more than once
    if logger.handlers:
        logger.setLevel(log_level)
        return logger

    logger.setLevel(log_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
