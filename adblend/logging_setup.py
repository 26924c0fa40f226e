import logging

from adblend.config import LOG_LEVEL
from adblend.logger import json_logger as logger


class InterceptHandler(logging.Handler):
    """Forwards stdlib log records (uvicorn, google-genai, httpx) to the loguru sinks."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back to the frame that issued the call so loguru reports the real caller.
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str | None = None) -> None:
    """Route stdlib logging through loguru once.

    - Honors LOG_LEVEL (DEBUG, INFO, WARNING, ERROR); ``level`` overrides it.
    - Installs a single InterceptHandler on the root logger; calling again is a no-op
      apart from the level.
    - Uvicorn loggers drop their own handlers and propagate to the root.
    """
    log_level = (level or LOG_LEVEL).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    root = logging.getLogger()
    if not any(isinstance(h, InterceptHandler) for h in root.handlers):
        root.addHandler(InterceptHandler())
    root.setLevel(numeric_level)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.handlers = []
        lg.propagate = True
        lg.setLevel(numeric_level)
