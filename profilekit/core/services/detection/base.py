"""
Probe base — the contract between the availability cache and the host.

A probe answers one question: where is executable X, if anywhere?
Probes READ system state and never write it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class CommandProbe(ABC):
    """Abstract base class for availability probes.

    ``find`` returns the resolved path, or None when the command cannot
    be located. It may raise on unexpected host errors; the cache folds
    those into "unavailable".
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The probe identifier (e.g., 'path', 'static')."""

    @abstractmethod
    def find(self, command: str) -> str | None:
        """Resolve ``command`` to a runnable path, or None."""

    def case_insensitive(self) -> bool:
        """Whether command names compare case-insensitively on this host."""
        return False

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
