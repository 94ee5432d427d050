"""
Static probe — in-memory test double for availability probes.

Used in tests (and ``--assume``-style dry runs) to simulate tools being
present or absent without touching the real filesystem or PATH.
Records every lookup so tests can count real probes.
"""

from __future__ import annotations

from profilekit.core.services.detection.base import CommandProbe


class StaticProbe(CommandProbe):
    """Probe backed by a fixed name → path table.

    Names missing from the table are reported absent.
    """

    def __init__(self, paths: dict[str, str | None] | None = None):
        self._paths: dict[str, str | None] = dict(paths or {})
        self._errors: dict[str, Exception] = {}
        self._call_log: list[str] = []

    @property
    def name(self) -> str:
        return "static"

    @property
    def call_log(self) -> list[str]:
        """Every command name this probe was asked about, in order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def calls_for(self, command: str) -> int:
        return self._call_log.count(command)

    def set_present(self, command: str, path: str | None = None) -> None:
        """Report ``command`` present at ``path`` (default /usr/bin/<command>)."""
        self._errors.pop(command, None)
        self._paths[command] = path or f"/usr/bin/{command}"

    def set_absent(self, command: str) -> None:
        self._errors.pop(command, None)
        self._paths[command] = None

    def set_error(self, command: str, error: Exception) -> None:
        """Make lookups of ``command`` raise ``error``."""
        self._errors[command] = error

    def find(self, command: str) -> str | None:
        self._call_log.append(command)
        if command in self._errors:
            raise self._errors[command]
        return self._paths.get(command)

    def reset(self) -> None:
        """Clear the call log (the table is kept)."""
        self._call_log.clear()
