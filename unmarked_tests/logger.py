import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler

from colorlog import ColoredFormatter

from unmarked_tests.constants import LOG_FILE_BACKUP_COUNT, LOG_FILE_MAX_BYTES, PACKAGE_LOGGER_NAME

LOGGER = logging.getLogger(__name__)


class DuplicateFilter(logging.Filter):
    last_log = None
    repeated_number = 0

    def filter(self, record):
        current_log = (record.module, record.levelno, record.msg)
        if current_log != self.last_log:
            repeated_number, self.repeated_number = self.repeated_number, 0
            if repeated_number:
                LOGGER.warning(f"Last log repeated {repeated_number} times.")

            self.last_log = current_log
            return True

        self.repeated_number += 1
        return False


class ScanLogFormatter(ColoredFormatter):
    def formatTime(self, record, datefmt=None):  # noqa: N802
        return datetime.fromtimestamp(record.created).isoformat()


def setup_logging(log_level, log_file=None):
    """
    Setup the package logger.

    Records go to stderr, so the report printed on stdout stays machine readable,
    and optionally to a rotating log file.

    Args:
        log_level (int): log level
        log_file (str): logging output file, no file logging if None

    Returns:
        logging.Logger: the configured package logger
    """
    log_formatter = ScanLogFormatter(
        fmt="%(asctime)s %(name)s %(log_color)s%(levelname)s%(reset)s %(message)s",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
        secondary_log_colors={},
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level=log_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(hdlr=handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(fmt=log_formatter)
    console_handler.addFilter(filter=DuplicateFilter())
    package_logger.addHandler(hdlr=console_handler)

    if log_file:
        log_file_handler = RotatingFileHandler(
            filename=log_file, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUP_COUNT
        )
        log_file_handler.setFormatter(fmt=logging.Formatter(fmt="%(asctime)s %(name)s %(levelname)s %(message)s"))
        package_logger.addHandler(hdlr=log_file_handler)

    package_logger.propagate = False
    return package_logger
