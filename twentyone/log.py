"""
Logger factory for the twentyone package.

All modules obtain their logger through `get_logger` so the package shares one
handler configuration. Setting ``TWENTYONE_DISABLE_LOGGING`` to ``1``, ``true``
or ``yes`` raises every package logger to ERROR, which keeps long simulations
quiet.
"""

import logging
import os

LOGGER_ROOT = "twentyone"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def logging_disabled() -> bool:
    """Return True when the environment asks for silent operation."""
    return os.environ.get("TWENTYONE_DISABLE_LOGGING", "").lower() in (
        "1",
        "true",
        "yes",
    )


def get_logger(name: str, level: int = logging.WARNING) -> logging.Logger:
    """
    Get a logger living under the package root.

    The first call installs a stream handler on the ``twentyone`` root logger;
    later calls only hand out children.

    :param name: Dotted suffix, e.g. ``"shoe"`` gives ``twentyone.shoe``
    :param level: Level for the root logger when it is first configured
    :return: The configured logger
    """
    root = logging.getLogger(LOGGER_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.ERROR if logging_disabled() else level)

    if not name or name == LOGGER_ROOT:
        return root
    if name.startswith(LOGGER_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_ROOT}.{name}")


def set_level(level: int) -> None:
    """Change the level of every package logger at once."""
    logging.getLogger(LOGGER_ROOT).setLevel(level)
