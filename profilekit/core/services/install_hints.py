"""
Install hints — turn a missing command into an install suggestion.

Looks the command up in ``INSTALL_HINTS`` and picks the first package
manager in the platform's preferred order, falling back to ``_default``.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence

from profilekit.core.data.install_hints import INSTALL_HINTS

# Preferred package managers per platform family, most preferred first.
PLATFORM_MANAGERS: dict[str, tuple[str, ...]] = {
    "windows": ("scoop", "winget", "choco"),
    "darwin": ("brew", "port"),
    "linux": ("apt", "dnf", "pacman", "brew"),
}


def platform_family(platform: str | None = None) -> str:
    """Map a ``sys.platform`` value to windows / darwin / linux."""
    plat = platform or sys.platform
    if plat.startswith("win") or plat == "cygwin":
        return "windows"
    if plat == "darwin":
        return "darwin"
    return "linux"


def resolve_install_hint(
    command: str,
    platform: str | None = None,
    managers: Sequence[str] | None = None,
    extra: Mapping[str, str] | None = None,
) -> str | None:
    """Best install hint for ``command``, or None if the tool is unknown.

    Args:
        command: Command name as looked up by the cache.
        platform: ``sys.platform``-style string (default: host).
        managers: Explicit manager preference order; overrides the
            platform default.
        extra: User-supplied hints (command → hint), checked first.
    """
    if extra and command in extra:
        return extra[command]

    recipe = INSTALL_HINTS.get(command)
    if recipe is None:
        recipe = INSTALL_HINTS.get(command.lower())
    if not recipe:
        return None

    order = list(managers) if managers else list(PLATFORM_MANAGERS[platform_family(platform)])
    for manager in order:
        if manager in recipe:
            return recipe[manager]
    return recipe.get("_default")


class InstallHintResolver:
    """Bound resolver: platform and preferences fixed at construction."""

    def __init__(
        self,
        platform: str | None = None,
        managers: Sequence[str] | None = None,
        extra: Mapping[str, str] | None = None,
    ):
        self.platform = platform or sys.platform
        self.managers = list(managers or [])
        self.extra = dict(extra or {})

    def __call__(self, command: str) -> str | None:
        return resolve_install_hint(
            command,
            platform=self.platform,
            managers=self.managers or None,
            extra=self.extra,
        )
