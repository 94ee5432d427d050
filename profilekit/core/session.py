"""
Profile session — the composition root.

Owns every stateful component for one profile load: the availability
cache, missing-tool notices and the fragment registry. Nothing here is
module-level; each entry point (CLI command, test) builds its own
session and passes it down.

    settings = load_settings(config_path)
    session = build_session(settings, root=profile_root(config_path))
    session.registry.invoke("gs")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from profilekit.adapters.base import Adapter
from profilekit.core.data import builtin_fragments
from profilekit.core.models.fragment import Fragment
from profilekit.core.models.settings import ProfileSettings
from profilekit.core.persistence.cache_file import load_snapshot, save_snapshot
from profilekit.core.services.command_cache import CommandAvailabilityCache
from profilekit.core.services.detection.base import CommandProbe
from profilekit.core.services.fragments import FragmentRegistry
from profilekit.core.services.install_hints import InstallHintResolver
from profilekit.core.services.missing_tools import MissingToolNotices

logger = logging.getLogger(__name__)


@dataclass
class ProfileSession:
    """Everything a loaded profile needs, wired together."""

    settings: ProfileSettings
    root: Path
    cache: CommandAvailabilityCache
    notices: MissingToolNotices
    registry: FragmentRegistry

    @property
    def snapshot_path(self) -> Path:
        return self.root / self.settings.cache.snapshot_file

    def fragments(self) -> list[Fragment]:
        """Fragments this profile declares (built-in first, then custom)."""
        return session_fragments(self.settings)

    def save_cache(self) -> int:
        """Persist the cache snapshot. Returns the number of records written."""
        snapshot = save_snapshot(self.cache.records(), self.snapshot_path)
        return len(snapshot.records)


def session_fragments(settings: ProfileSettings) -> list[Fragment]:
    fragments = builtin_fragments() if settings.fragments.builtin else []
    return fragments + list(settings.fragments.custom)


def build_session(
    settings: ProfileSettings | None = None,
    root: Path | None = None,
    probe: CommandProbe | None = None,
    adapter: Adapter | None = None,
    assume: dict[str, bool] | None = None,
    load_fragments: bool = True,
) -> ProfileSession:
    """Wire a session from settings.

    Args:
        settings: Loaded settings (default: all defaults).
        root: Profile root directory, for the snapshot (default: cwd).
        probe: Availability probe (default: PathProbe on os.environ).
        adapter: Wrapper adapter (default: ShellCommandAdapter).
        assume: Extra overrides on top of ``settings.overrides``.
        load_fragments: Load built-in and custom fragments right away.
    """
    settings = settings or ProfileSettings()
    root = root or Path.cwd()

    hints = InstallHintResolver(
        managers=settings.hints.managers,
        extra=settings.hints.extra,
    )
    cache = CommandAvailabilityCache(
        probe=probe,
        hints=hints,
        ttl=settings.cache.ttl_seconds,
    )

    for name, available in {**settings.overrides, **(assume or {})}.items():
        cache.set_override(name, available)

    if settings.cache.persist:
        snapshot = load_snapshot(root / settings.cache.snapshot_file)
        cache.seed(snapshot.records)

    notices = MissingToolNotices(
        suppress=True if settings.warnings.suppress_missing_tools else None,
    )
    registry = FragmentRegistry(
        cache=cache,
        adapter=adapter,
        notices=notices,
        default_mode=settings.fragments.default_mode,
        disabled=settings.fragments.disabled,
    )

    session = ProfileSession(
        settings=settings,
        root=root,
        cache=cache,
        notices=notices,
        registry=registry,
    )

    if load_fragments:
        results = registry.load_all(session.fragments())
        logger.info(
            "Profile '%s': %d/%d fragment(s) loaded",
            settings.name, sum(1 for r in results if r.loaded), len(results),
        )
        if settings.cache.persist:
            try:
                session.save_cache()
            except OSError as e:
                logger.warning("Could not save cache snapshot: %s", e)

    return session
