"""
Health checker — how well does this profile fit this machine?

Reports the availability cache, the fragment load results and the
overall status. Used by the CLI ``health`` command.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from profilekit.core.services.command_cache import CommandAvailabilityCache
from profilekit.core.services.fragments import FragmentRegistry

logger = logging.getLogger(__name__)


@dataclass
class ComponentHealth:
    """Health of a single component."""

    name: str
    status: str = "unknown"  # healthy, degraded, unhealthy, unknown
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "message": self.message,
            "details": self.details,
        }


@dataclass
class SystemHealth:
    """Aggregate health of the profile."""

    status: str = "healthy"
    timestamp: str = ""
    components: list[ComponentHealth] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.timestamp:
            self.timestamp = datetime.now(UTC).isoformat()

    def add(self, component: ComponentHealth) -> None:
        self.components.append(component)
        self._recalculate()

    def _recalculate(self) -> None:
        """Recalculate overall status from components."""
        statuses = [c.status for c in self.components]
        if any(s == "unhealthy" for s in statuses):
            self.status = "unhealthy"
        elif any(s == "degraded" for s in statuses):
            self.status = "degraded"
        elif all(s == "healthy" for s in statuses):
            self.status = "healthy"
        else:
            self.status = "unknown"

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "timestamp": self.timestamp,
            "components": [c.to_dict() for c in self.components],
        }


def check_command_cache(cache: CommandAvailabilityCache) -> ComponentHealth:
    """Summarise what the availability cache knows."""
    stats = cache.stats()
    records = cache.records()
    errors = [r.name for r in records if r.source == "error"]
    missing = sorted(r.name for r in records if not r.available)

    details = {
        "entries": stats["entries"],
        "available": stats["available"],
        "overrides": stats["overrides"],
        "probes": stats["probes"],
        "hits": stats["hits"],
        "ttl": stats["ttl"],
        "missing": missing,
    }

    if errors:
        details["probe_errors"] = errors
        return ComponentHealth(
            name="command_cache",
            status="degraded",
            message=f"{len(errors)} probe(s) failed: {', '.join(errors)}",
            details=details,
        )

    return ComponentHealth(
        name="command_cache",
        status="healthy",
        message=(
            f"{stats['available']}/{stats['entries']} command(s) available, "
            f"{stats['overrides']} override(s)"
        ),
        details=details,
    )


def check_fragments(registry: FragmentRegistry) -> ComponentHealth:
    """Check which fragments could not register because of missing tools."""
    results = registry.results()
    if not results:
        return ComponentHealth(
            name="fragments",
            status="healthy",
            message="No fragments loaded",
        )

    loaded = [r for r in results if r.loaded]
    disabled = [r.fragment for r in results if r.disabled]
    skipped = {r.fragment: r.missing for r in results if not r.loaded and not r.disabled}
    degraded = {r.fragment: r.missing for r in loaded if r.missing}

    details = {
        "loaded": len(loaded),
        "total": len(results),
        "disabled": disabled,
        "skipped": skipped,
        "registered_without_tools": degraded,
        "wrappers": len(registry.list_wrappers()),
    }

    if not loaded and skipped:
        status = "unhealthy"
        message = "No fragment could be loaded"
    elif skipped or degraded:
        status = "degraded"
        message = (
            f"{len(loaded)}/{len(results)} loaded, "
            f"{len(skipped)} skipped for missing tools"
        )
    else:
        status = "healthy"
        message = f"{len(loaded)}/{len(results)} loaded"

    return ComponentHealth(name="fragments", status=status, message=message, details=details)


def check_system_health(
    cache: CommandAvailabilityCache,
    registry: FragmentRegistry,
) -> SystemHealth:
    """Run all checks."""
    health = SystemHealth()
    health.add(check_command_cache(cache))
    health.add(check_fragments(registry))
    logger.debug("Health: %s", health.status)
    return health
