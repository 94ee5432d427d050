"""
Adapter base — the protocol contract between wrappers and the host.

The fragment registry only talks to the outside world through this
protocol: it builds a WrapperInvocation, an adapter runs it and hands
back a Receipt.
"""

from __future__ import annotations

import shlex
from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from profilekit.core.models.receipt import Receipt


class WrapperInvocation(BaseModel):
    """Everything an adapter needs to run one wrapper call."""

    wrapper: str
    command: str                    # executable name as declared
    argv: list[str] = Field(default_factory=list)  # full argv, argv[0] is the program
    cwd: str | None = None
    timeout: float | None = 300
    capture: bool = True            # False → inherit the terminal

    @property
    def command_line(self) -> str:
        """Shell-quoted rendering of argv for logs and dry runs."""
        return shlex.join(self.argv)


class Adapter(ABC):
    """Abstract base class for all adapters.

    Adapters perform external side effects and return receipts.
    They NEVER raise exceptions — failures are captured in the Receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this adapter can run anything at all. Never raises."""

    @abstractmethod
    def validate(self, invocation: WrapperInvocation) -> tuple[bool, str]:
        """Validate that the invocation can be executed.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, invocation: WrapperInvocation) -> Receipt:
        """Run the invocation and return a receipt. MUST never raise."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
