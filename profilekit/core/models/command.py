"""
Command availability record — the answer to "can I run X here?".

One record per executable name, owned by the availability cache.
Callers only ever see copies; the cache is the single writer.
"""

from __future__ import annotations

import time
from typing import Literal

from pydantic import BaseModel, Field

RecordSource = Literal["probe", "override", "error", "snapshot"]


class CommandAvailabilityRecord(BaseModel):
    """Cached result of an availability probe for one executable."""

    name: str                           # lookup name, e.g. "docker"
    available: bool = False
    install_hint: str | None = None     # shown to the user when unavailable
    resolved_at: float = Field(default_factory=time.time)
    path: str | None = None             # resolved executable, when found
    source: RecordSource = "probe"

    def age(self, now: float | None = None) -> float:
        """Seconds since this record was resolved."""
        current = time.time() if now is None else now
        return max(0.0, current - self.resolved_at)

    def is_expired(self, ttl: float | None, now: float | None = None) -> bool:
        """Whether the record is older than ``ttl`` seconds.

        ``ttl=None`` means the record lives as long as its cache.
        """
        if ttl is None:
            return False
        return self.age(now) >= ttl

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
