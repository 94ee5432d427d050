"""
Cache snapshot persistence — atomic read/write of availability records.

Lets a new session start warm: records probed in an earlier session
are saved to ``.state/command_cache.json`` and seeded back into the
cache (subject to its TTL). Writes are atomic (write to temp file,
then rename) so a crash never leaves half a snapshot behind.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, Field

from profilekit.core.models.command import CommandAvailabilityRecord

logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_FILE = ".state/command_cache.json"


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


class CacheSnapshot(BaseModel):
    """On-disk form of the availability cache."""

    version: int = 1
    saved_at: str = Field(default_factory=_now_iso)
    records: list[CommandAvailabilityRecord] = Field(default_factory=list)

    def get(self, name: str) -> CommandAvailabilityRecord | None:
        for record in self.records:
            if record.name == name:
                return record
        return None


def default_snapshot_path(profile_root: Path) -> Path:
    """Default snapshot location for a profile."""
    return profile_root / DEFAULT_SNAPSHOT_FILE


def load_snapshot(path: Path) -> CacheSnapshot:
    """Load a snapshot. Missing or corrupt files yield an empty snapshot."""
    if not path.is_file():
        logger.debug("No cache snapshot at %s", path)
        return CacheSnapshot()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        snapshot = CacheSnapshot.model_validate(data)
        logger.debug("Loaded %d record(s) from %s", len(snapshot.records), path)
        return snapshot
    except json.JSONDecodeError as e:
        logger.warning("Corrupt cache snapshot %s: %s — ignoring", path, e)
        return CacheSnapshot()
    except Exception as e:
        logger.warning("Cannot load cache snapshot %s: %s — ignoring", path, e)
        return CacheSnapshot()


def save_snapshot(records: Iterable[CommandAvailabilityRecord], path: Path) -> CacheSnapshot:
    """Write probe-sourced records to ``path`` (atomic).

    Overrides and error records are session-only and never written.

    Returns:
        The snapshot that was written.
    """
    snapshot = CacheSnapshot(
        records=[r for r in records if r.source in ("probe", "snapshot")],
    )

    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(snapshot.model_dump(mode="json"), indent=2, ensure_ascii=False) + "\n"

    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".cache_", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except Exception:
        logger.error("Failed to write cache snapshot %s", path)
        Path(tmp_path).unlink(missing_ok=True)
        raise

    logger.debug("Saved %d record(s) to %s", len(snapshot.records), path)
    return snapshot


def clear_snapshot(path: Path) -> bool:
    """Delete the snapshot file. Returns whether one existed."""
    if path.is_file():
        path.unlink()
        logger.debug("Removed cache snapshot %s", path)
        return True
    return False
