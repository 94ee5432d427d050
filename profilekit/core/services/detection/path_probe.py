"""
PATH probe — locate an executable the way the host shell would.

Reads PATH (and PATHEXT) from an environment mapping, so tests can hand
in their own:

    POSIX    → ``shutil.which`` over the PATH entries (execute bit required)
    Windows  → per directory, candidate names tried in PATHEXT order,
               case-insensitive, current directory never searched

Directories that cannot be read are skipped, never fatal.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Mapping

from profilekit.core.services.detection.base import CommandProbe

logger = logging.getLogger(__name__)

_DEFAULT_PATHEXT = ".COM;.EXE;.BAT;.CMD"


class PathProbe(CommandProbe):
    """Resolve commands against a PATH environment variable.

    Args:
        env: Environment mapping to read PATH/PATHEXT from. Defaults to
            ``os.environ``, read at every probe so PATH edits are seen
            after an invalidation.
        platform: ``sys.platform``-style string. Defaults to the host.
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        platform: str | None = None,
    ):
        self._env = env
        self._platform = platform or sys.platform

    @property
    def name(self) -> str:
        return "path"

    @property
    def is_windows(self) -> bool:
        return self._platform.startswith("win")

    def case_insensitive(self) -> bool:
        return self.is_windows

    # ── Environment view ────────────────────────────────────────

    def _environ(self) -> Mapping[str, str]:
        return os.environ if self._env is None else self._env

    def _get_var(self, key: str) -> str:
        env = self._environ()
        if key in env:
            return env[key]
        if self.is_windows:
            # Windows env var names are case-insensitive ("Path" vs "PATH")
            for k, v in env.items():
                if k.upper() == key:
                    return v
        return ""

    def search_dirs(self) -> list[str]:
        """PATH entries in search order, empty entries dropped."""
        sep = ";" if self.is_windows else ":"
        dirs = []
        for entry in self._get_var("PATH").split(sep):
            entry = entry.strip().strip('"')
            if entry:
                dirs.append(entry)
        return dirs

    def executable_extensions(self) -> list[str]:
        """PATHEXT entries (Windows only), lower-cased."""
        if not self.is_windows:
            return []
        raw = self._get_var("PATHEXT") or _DEFAULT_PATHEXT
        return [e.strip().lower() for e in raw.split(";") if e.strip()]

    def candidate_names(self, command: str) -> list[str]:
        """File names that would satisfy ``command`` on this platform."""
        if not self.is_windows:
            return [command]
        exts = self.executable_extensions()
        _root, ext = os.path.splitext(command)
        if ext and ext.lower() in exts:
            return [command]
        return [command + e for e in exts]

    # ── Probe ───────────────────────────────────────────────────

    def find(self, command: str) -> str | None:
        command = command.strip()
        if not command:
            return None

        try:
            if self.is_windows:
                match = self._find_windows(command)
            else:
                match = shutil.which(command, path=os.pathsep.join(self.search_dirs()))
        except OSError as e:
            logger.debug("Lookup of %s failed: %s", command, e)
            return None

        if match:
            logger.debug("Resolved %s → %s", command, match)
        return match

    def _find_windows(self, command: str) -> str | None:
        """PATHEXT search: directories in PATH order, extensions in PATHEXT order."""
        candidates = self.candidate_names(command)

        # Explicit paths bypass the PATH search
        if os.sep in command or (os.altsep and os.altsep in command):
            return next((c for c in candidates if os.path.isfile(c)), None)

        for directory in self.search_dirs():
            try:
                with os.scandir(directory) as entries:
                    listing = {e.name.lower(): e for e in entries}
            except OSError as e:
                logger.debug("Skipping PATH entry %s: %s", directory, e)
                continue
            for candidate in candidates:
                entry = listing.get(candidate.lower())
                if entry is not None and entry.is_file():
                    return entry.path
        return None
