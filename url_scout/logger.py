"""Logging for **UrlScout**.

All modules log under the ``UrlScout`` logger: the package root is
:data:`logger`, modules take a child via :func:`get_logger`::

    from url_scout.logger import get_logger
    log = get_logger(__name__)          # -> "UrlScout.extractor"
    log.debug("Skip %r: not a URL", value)

Only the root carries handlers.  Output goes to stderr (stdout is reserved
for extracted URLs), optionally mirrored to a rotating file.  The CLI calls
:func:`init_logging` once per invocation.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "UrlScout"
_PACKAGE: Final[str] = "url_scout"

_LevelT = Union[int, str]


def _stderr_handler(fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Child of the project logger for module *name*.

    ``"url_scout.extractor"`` and ``"extractor"`` both map to
    ``"UrlScout.extractor"``; the package name itself maps to the root.
    """
    if name == _PACKAGE:
        return logging.getLogger(_LOGGER_NAME)
    if name.startswith(_PACKAGE + "."):
        name = name[len(_PACKAGE) + 1:]
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def configure(
    *,
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the project root logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``); children inherit it.
    log_file
        Path to a logfile. *None* → stderr only.
    log_format
        Format string for :class:`logging.Formatter`.
    replace_handlers
        *True* – close and remove existing handlers; *False* – append.
    """
    root = logging.getLogger(_LOGGER_NAME)
    root.setLevel(level)

    if replace_handlers:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

    root.addHandler(_stderr_handler(log_format))

    if log_file is not None:
        root.addHandler(_file_handler(log_file, log_format))

    # keep extraction logs out of the host application's root logger
    root.propagate = False
    return root


def init_logging(
    level: _LevelT = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """Shortcut used by the CLI: replace all handlers and apply *level*."""
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


logger: logging.Logger = init_logging()

__all__ = ["logger", "get_logger", "configure", "init_logging"]
