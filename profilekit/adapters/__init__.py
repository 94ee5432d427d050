"""Adapters — how wrapper invocations reach the host.

Public re-exports for convenient access.
"""

from profilekit.adapters.base import Adapter, WrapperInvocation
from profilekit.adapters.mock import MockAdapter
from profilekit.adapters.shell.command import ShellCommandAdapter

__all__ = [
    "Adapter",
    "MockAdapter",
    "ShellCommandAdapter",
    "WrapperInvocation",
]
