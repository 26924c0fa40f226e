import sys
from loguru import logger

from adblend.config import LOG_FILE_PATH, LOG_LEVEL, LOG_TO_FILE

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


class JsonLogger:
    def __init__(self):
        self.logger = logger
        self._configure_logger()

    def _configure_logger(self):
        self.logger.remove()  # Remove default handler

        self.logger.add(
            sys.stdout,
            level=LOG_LEVEL,
            format=LOG_FORMAT,
            serialize=False,
            enqueue=True  # Use a queue for non-blocking logging
        )
        if LOG_TO_FILE:
            self.logger.add(
                LOG_FILE_PATH,
                level=LOG_LEVEL,
                format=LOG_FORMAT,
                serialize=False,
                rotation="10 MB",
                compression="zip",
                enqueue=True
            )
            self.logger.debug(f"Logging to file {LOG_FILE_PATH} is enabled.")

    def bind_context(self, **kwargs):
        """Bind context variables to the logger."""
        return self.logger.bind(**kwargs)


# Initialize the logger
json_logger = JsonLogger().logger
