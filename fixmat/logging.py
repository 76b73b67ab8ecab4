# fixmat/logging.py
import logging
import os
import sys

_ROOT_LOGGER = "fixmat"
_DEFAULT_LEVEL = "WARNING"
# Singleton record to track which loggers are already configured
_LOGGER_INITIALIZED = {}


def _resolve_level(level=None):
    """Coerce a level name or number, falling back to ``FIXMAT_LOG_LEVEL``."""
    if level is None:
        level = os.environ.get("FIXMAT_LOG_LEVEL", _DEFAULT_LEVEL)
    if isinstance(level, int):
        return level

    candidate = logging.getLevelName(str(level).strip().upper())
    if isinstance(candidate, int):
        return candidate
    raise ValueError(f"Unknown logging level: {level!r}")


def get_logger(
    name=_ROOT_LOGGER,
    level=None,
    console=True,
    fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    propagate=False,
):
    """
    Get or create a logger with optional configuration.
    - name: Logger name (default 'fixmat')
    - level: Logging level (default: FIXMAT_LOG_LEVEL or WARNING)
    - console: If True, logs go to stderr
    - fmt, datefmt: Formatting for log messages
    - propagate: Whether to propagate to root logger (default False)
    """
    logger = logging.getLogger(name)
    if not _LOGGER_INITIALIZED.get(name, False):
        logger.setLevel(_resolve_level(level))
        logger.propagate = propagate

        if console:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
            logger.addHandler(handler)

        _LOGGER_INITIALIZED[name] = True

    return logger


def reset_logger(name=None):
    """Reset configured loggers so they can be reconfigured.

    Parameters
    ----------
    name : str, optional
        Name of the logger to reset. If omitted, all loggers tracked by
        :func:`get_logger` are reset.
    """
    if name is None:
        names = list(_LOGGER_INITIALIZED.keys())
    else:
        names = [name]

    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            if isinstance(handler, logging.NullHandler):
                continue
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True

    if name is None:
        _LOGGER_INITIALIZED.clear()
    else:
        _LOGGER_INITIALIZED.pop(name, None)


def get_configured_level(name=_ROOT_LOGGER):
    """Return the configured logging level name for ``name``."""
    level = logging.getLogger(name).getEffectiveLevel()
    return logging.getLevelName(level)
