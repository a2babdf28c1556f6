import logging
import sys
from typing import Optional

FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_console_handler: Optional[logging.Handler] = None


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a console handler to the package logger and set its level."""
    global _console_handler

    logger = logging.getLogger("sigfield")
    logger.setLevel(level)

    # a previous run may have left a handler on a stream that is now closed
    if _console_handler is not None:
        logger.removeHandler(_console_handler)
        _console_handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATE_FORMAT)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    _console_handler = console_handler

    # pyhanko is chatty about recoverable quirks in input files
    library_level = logging.DEBUG if level == "DEBUG" else logging.ERROR
    logging.getLogger("pyhanko").setLevel(library_level)

    return logger
