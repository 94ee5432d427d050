"""
Missing-tool notices — tell the user once per tool, not once per call.

A wrapper whose tool is missing may be called many times in a session;
the warning (with its install hint) is logged only the first time.
"""

from __future__ import annotations

import logging
import os
import threading

from profilekit.core.models.command import CommandAvailabilityRecord

logger = logging.getLogger(__name__)

SUPPRESS_ENV = "PK_SUPPRESS_MISSING_TOOL_WARNINGS"


def _env_suppressed() -> bool:
    return os.environ.get(SUPPRESS_ENV, "").strip().lower() in ("1", "true", "yes", "on")


class MissingToolNotices:
    """Warn-once tracker for unavailable commands."""

    def __init__(self, suppress: bool | None = None):
        self._suppress = _env_suppressed() if suppress is None else suppress
        self._emitted: set[str] = set()
        self._lock = threading.Lock()

    @property
    def suppressed(self) -> bool:
        return self._suppress

    @property
    def emitted(self) -> set[str]:
        with self._lock:
            return set(self._emitted)

    def notify(self, record: CommandAvailabilityRecord, context: str = "") -> bool:
        """Log a warning for ``record`` unless already done this session.

        Returns:
            True if a warning was emitted.
        """
        if record.available or self._suppress:
            return False

        with self._lock:
            if record.name in self._emitted:
                return False
            self._emitted.add(record.name)

        where = f" (needed by {context})" if context else ""
        if record.install_hint:
            logger.warning(
                "%s is not installed%s. Install with: %s",
                record.name, where, record.install_hint,
            )
        else:
            logger.warning("%s is not installed%s.", record.name, where)
        return True

    def reset(self) -> None:
        with self._lock:
            self._emitted.clear()
