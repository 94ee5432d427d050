"""
Detection — availability probes.

These probes READ system state but never WRITE.
"""

from profilekit.core.services.detection.base import CommandProbe  # noqa: F401
from profilekit.core.services.detection.path_probe import PathProbe  # noqa: F401
from profilekit.core.services.detection.static_probe import StaticProbe  # noqa: F401
