# src/fasthenry_builder/log_config.py
import logging
import sys
from typing import Optional, TextIO, Union

# Third-party loggers held at WARNING or above.
_QUIET_LIBRARIES = ("pint",)


def setup_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None):
    """
    Configures logging to stdout (or `stream`). `level` is a logging level or
    its name, e.g. "DEBUG".
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level name: {level}")

    log_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"
    )
    root_logger = logging.getLogger()

    # Replace any handlers left over from a previous configuration
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.debug("Logging configured at level %s.", logging.getLevelName(level))
