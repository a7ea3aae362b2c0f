"""Warning sink used while normalizing operations."""

from __future__ import annotations

import logging

logger = logging.getLogger("opgen")


class Logger:
    """Forwards messages to the ``opgen`` logger unless silenced."""

    def __init__(self, silent: bool = False) -> None:
        self.silent = silent

    def warn(self, message: str) -> None:
        if not self.silent:
            logger.warning(message)
