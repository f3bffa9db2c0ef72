import logging
import sys
from typing import TextIO


class Log:
    """Centralized logging with structured format.

    Records go to stderr by default; stdout is reserved for command output.
    """

    _logger: logging.Logger = logging.getLogger("cvscoring")
    _handler: "logging.StreamHandler[TextIO] | None" = None

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Configure the logger with the specified level and a stream handler."""
        cls._logger.setLevel(log_level.upper())
        target = stream if stream is not None else sys.stderr
        if cls._handler is None or cls._handler not in cls._logger.handlers:
            cls._handler = logging.StreamHandler(target)
            cls._handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(cls._handler)
        else:
            cls._handler.setStream(target)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log an error message with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)
