import logging
import sys

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "speaker_transcriber"


def _json_handlers(target: logging.Logger) -> list[logging.Handler]:
    return [
        handler
        for handler in target.handlers
        if isinstance(handler.formatter, jsonlogger.JsonFormatter)
    ]


def setup_logging():
    """
    Configures and sets up structured JSON logging for the transcriber.

    This function attaches a JSON formatter that includes timestamp, level,
    logger name and message to the package logger, and caps the HTTP client
    loggers at WARNING. Calling it again reuses the JSON handler installed by
    the first call; handlers added by anything else are left alone.

    Returns:
        logging.Logger: The configured package logger instance.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    if _json_handlers(package_logger):
        return package_logger

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    package_logger.setLevel(logging.INFO)
    package_logger.addHandler(stream_handler)
    package_logger.propagate = False

    for logger_name in ["httpx", "httpcore"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return package_logger
