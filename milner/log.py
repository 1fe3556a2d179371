from logging import FileHandler, Formatter, getLogger, getLevelName
from os import environ
from pathlib import Path
from typing import Optional, Union

LOG_FILE_ENV_VAR = "MILNER_LOG_FILE"
LOG_LEVEL_ENV_VAR = "MILNER_LOG_LEVEL"

DEFAULT_LOG_FILE = Path(environ.get(LOG_FILE_ENV_VAR, "milner.log"))
LOGGER_LEVEL = environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()

_formatter = Formatter(fmt="[%(levelname)s] %(message)s")


def _make_handler(log_file: Path) -> FileHandler:
    handler = FileHandler(log_file, delay=True, mode="w")
    # NOTE: `delay=True` means the file only gets created once there is
    #  actually something to write to it.
    handler.setFormatter(_formatter)
    return handler


_handler = _make_handler(DEFAULT_LOG_FILE)

logger = getLogger("milner")
logger.addHandler(_handler)
logger.setLevel(LOGGER_LEVEL)


def configure(
    log_file: Optional[Union[str, Path]] = None, level: Optional[str] = None
) -> None:
    """
    Change where the log goes and how much detail gets written to it.

    Parameters
    ----------
    log_file: Optional[Union[str, Path]] = None
        The new log file. If it's `None`, the current file is kept.
    level: Optional[str] = None
        The name of the new logging level (e.g. `"DEBUG"`). If it's
        `None`, the current level is kept.
    """
    global _handler  # pylint: disable=W0603

    if log_file is not None:
        logger.removeHandler(_handler)
        _handler.close()
        _handler = _make_handler(Path(log_file))
        logger.addHandler(_handler)
    if level is not None:
        logger.setLevel(level.upper())
    logger.debug(
        "Logging to %s at level %s",
        _handler.baseFilename,
        getLevelName(logger.level),
    )
