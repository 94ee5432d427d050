"""
Command availability cache — "is executable X runnable right now?", asked once.

Every fragment consults this before registering a wrapper, and every
wrapper consults it before shelling out. The answer is memoized per
name until it is explicitly invalidated (or, when a TTL is configured,
until it expires).

Lookup order:

    1. Override table   (test seam, never probes)
    2. Cached record    (fresh → hit)
    3. Probe            (miss → one probe per name, stored)

Per entry the state is either Unknown (no record) or Known
(record cached). ``invalidate`` returns an entry to Unknown.

Thread safety:
    ``_guard`` protects the maps. A per-name lock makes the first lookup
    single-flight: concurrent callers wait for one probe and share its
    result. Each name carries an invalidation epoch; a probe that
    finishes after its name was invalidated is not stored.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import Counter
from collections.abc import Callable, Iterable
from typing import Any

from profilekit.core.models.command import CommandAvailabilityRecord
from profilekit.core.services.detection.base import CommandProbe
from profilekit.core.services.detection.path_probe import PathProbe

logger = logging.getLogger(__name__)

HintLookup = Callable[[str], str | None]


class CommandAvailabilityCache:
    """Memoized command availability lookups.

    Args:
        probe: How to look commands up on the host (default: PathProbe).
        hints: Callable returning an install hint for a command name.
        ttl: Seconds a probed record stays fresh. None → until invalidated.
        clock: Wall-clock source, injectable for tests.
    """

    def __init__(
        self,
        probe: CommandProbe | None = None,
        hints: HintLookup | None = None,
        ttl: float | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._probe = probe or PathProbe()
        self._hints = hints
        self._ttl = ttl
        self._clock = clock

        self._records: dict[str, CommandAvailabilityRecord] = {}
        self._overrides: dict[str, bool] = {}
        self._epochs: dict[str, int] = {}
        self._global_epoch = 0

        self._guard = threading.Lock()
        self._key_locks: dict[str, threading.Lock] = {}

        self._hits = 0
        self._misses = 0
        self._probes: Counter[str] = Counter()

    @property
    def probe(self) -> CommandProbe:
        return self._probe

    @property
    def ttl(self) -> float | None:
        return self._ttl

    # ── Public surface ──────────────────────────────────────────

    def is_available(self, name: str) -> bool:
        """Whether ``name`` can be run. Absence is an answer, not an error."""
        return self.lookup(name).available

    def lookup(self, name: str) -> CommandAvailabilityRecord:
        """Full availability record for ``name`` (probing on a miss)."""
        key = self._key(name)
        if not key:
            return CommandAvailabilityRecord(
                name=name, available=False, resolved_at=self._clock(),
            )

        record = self._cached(key)
        if record is not None:
            return record

        with self._key_lock(key):
            # Another thread may have probed while we waited
            record = self._cached(key)
            if record is not None:
                return record

            with self._guard:
                self._misses += 1
                epoch = self._epoch(key)

            record = self._resolve(key)

            with self._guard:
                if self._epoch(key) == epoch and key not in self._overrides:
                    self._records[key] = record
                else:
                    logger.debug("Discarding probe for %s (invalidated mid-probe)", key)
            return record.model_copy()

    def set_override(self, name: str, available: bool) -> None:
        """Force ``name`` to ``available`` without probing."""
        key = self._key(name)
        if not key:
            return
        with self._guard:
            self._overrides[key] = bool(available)
            self._records.pop(key, None)
        logger.debug("Override: %s → %s", key, "available" if available else "unavailable")

    def clear_override(self, name: str) -> None:
        """Drop the override for ``name``; the next lookup probes."""
        key = self._key(name)
        with self._guard:
            self._overrides.pop(key, None)

    def invalidate(self, name: str) -> None:
        """Return ``name`` to Unknown, forgetting its record and override."""
        key = self._key(name)
        with self._guard:
            self._records.pop(key, None)
            self._overrides.pop(key, None)
            lock = self._key_locks.get(key)
            if lock is not None and lock.locked():
                # A probe is in flight; bump the epoch so its result is dropped
                self._epochs[key] = self._epochs.get(key, 0) + 1
            else:
                self._key_locks.pop(key, None)
                self._epochs.pop(key, None)
        logger.debug("Invalidated %s", key)

    def invalidate_all(self) -> None:
        """Return every entry to Unknown."""
        with self._guard:
            count = len(self._records) + len(self._overrides)
            self._records.clear()
            self._overrides.clear()
            self._epochs.clear()
            self._global_epoch += 1
            self._key_locks = {k: lock for k, lock in self._key_locks.items() if lock.locked()}
        logger.debug("Invalidated all entries (%d dropped)", count)

    # ── Snapshot support ────────────────────────────────────────

    def records(self) -> list[CommandAvailabilityRecord]:
        """Copies of the cached records (overrides excluded)."""
        with self._guard:
            return [r.model_copy() for r in self._records.values()]

    def overrides(self) -> dict[str, bool]:
        with self._guard:
            return dict(self._overrides)

    def seed(self, records: Iterable[CommandAvailabilityRecord]) -> int:
        """Pre-populate the cache from previously saved records.

        Expired records are skipped; overrides and existing records win.

        Returns:
            Number of records seeded.
        """
        now = self._clock()
        seeded = 0
        with self._guard:
            for record in records:
                key = self._key(record.name)
                if not key or key in self._overrides or key in self._records:
                    continue
                if record.is_expired(self._ttl, now):
                    continue
                self._records[key] = record.model_copy(update={"source": "snapshot"})
                seeded += 1
        logger.debug("Seeded %d record(s)", seeded)
        return seeded

    def stats(self) -> dict[str, Any]:
        """Counters for health reporting and tests."""
        with self._guard:
            return {
                "entries": len(self._records),
                "available": sum(1 for r in self._records.values() if r.available),
                "overrides": len(self._overrides),
                "hits": self._hits,
                "misses": self._misses,
                "probes": sum(self._probes.values()),
                "probes_by_name": dict(self._probes),
                "ttl": self._ttl,
                "probe": self._probe.name,
            }

    def probe_count(self, name: str | None = None) -> int:
        """Real probes performed, in total or for one name."""
        with self._guard:
            if name is None:
                return sum(self._probes.values())
            return self._probes[self._key(name)]

    # ── Internals ───────────────────────────────────────────────

    def _key(self, name: str) -> str:
        key = (name or "").strip()
        if self._probe.case_insensitive():
            key = key.lower()
        return key

    def _epoch(self, key: str) -> tuple[int, int]:
        return (self._global_epoch, self._epochs.get(key, 0))

    def _key_lock(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock

    def _cached(self, key: str) -> CommandAvailabilityRecord | None:
        """Override or fresh record for ``key``; counts a hit when found."""
        with self._guard:
            if key in self._overrides:
                self._hits += 1
                available = self._overrides[key]
                return CommandAvailabilityRecord(
                    name=key,
                    available=available,
                    install_hint=None if available else self._hint(key),
                    resolved_at=self._clock(),
                    source="override",
                )

            record = self._records.get(key)
            if record is None:
                return None
            if record.is_expired(self._ttl, self._clock()):
                logger.debug("Record for %s expired (ttl=%ss)", key, self._ttl)
                del self._records[key]
                return None

            self._hits += 1
            return record.model_copy()

    def _resolve(self, key: str) -> CommandAvailabilityRecord:
        """Run the real probe. Never raises."""
        with self._guard:
            self._probes[key] += 1

        try:
            path = self._probe.find(key)
        except Exception as e:
            logger.warning("Availability probe for %s failed: %s", key, e)
            return CommandAvailabilityRecord(
                name=key,
                available=False,
                install_hint=self._hint(key),
                resolved_at=self._clock(),
                source="error",
            )

        available = path is not None
        logger.debug("Probed %s: %s", key, path or "not found")
        return CommandAvailabilityRecord(
            name=key,
            available=available,
            install_hint=None if available else self._hint(key),
            resolved_at=self._clock(),
            path=path,
            source="probe",
        )

    def _hint(self, key: str) -> str | None:
        if self._hints is None:
            return None
        try:
            return self._hints(key)
        except Exception as e:
            logger.debug("Install hint lookup for %s failed: %s", key, e)
            return None


def find_stale(
    records: Iterable[CommandAvailabilityRecord],
    probe: CommandProbe,
) -> list[dict[str, Any]]:
    """Re-probe saved records and report the ones that no longer hold.

    Returns:
        ``[{"name", "cached", "actual", "path"}]`` for every drifted record.
    """
    drift = []
    for record in records:
        try:
            path = probe.find(record.name)
        except Exception as e:
            logger.warning("Verification probe for %s failed: %s", record.name, e)
            path = None
        actual = path is not None
        if actual != record.available:
            drift.append({
                "name": record.name,
                "cached": record.available,
                "actual": actual,
                "path": path,
            })
    return drift
