"""Shared helpers for the Chess System package."""

# Chess System
# Copyright (C) 2025  Chess System developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os

from chesssystem.constants import LOG_FORMAT, LOG_LEVEL_ENV_VAR, ROOT_LOGGER_NAME

_configured = False


def _configure_root_logger() -> None:
    """Attach one stream handler to the package root logger."""
    global _configured
    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    root.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` under the package root logger.

    Args:
        name: Usually the calling module's ``__name__``

    Returns:
        Configured logger instance
    """
    _configure_root_logger()
    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Change the level of every chesssystem logger at once."""
    _configure_root_logger()
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
