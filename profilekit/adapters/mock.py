"""
Mock adapter — runs nothing, remembers everything.

Every invocation lands in ``call_log``. Unless a wrapper has a canned
receipt, the call succeeds and echoes the command line it would have run.
"""

from __future__ import annotations

from profilekit.adapters.base import Adapter, WrapperInvocation
from profilekit.core.models.receipt import Receipt


class MockAdapter(Adapter):
    """Recording adapter for registry and CLI tests."""

    def __init__(
        self,
        adapter_name: str = "mock",
        available: bool = True,
        default_output: str = "[mock] executed",
    ):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._canned: dict[str, Receipt] = {}
        self._invocations: list[WrapperInvocation] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[WrapperInvocation]:
        return self._invocations

    @property
    def call_count(self) -> int:
        return len(self._invocations)

    def argv_for(self, wrapper: str) -> list[list[str]]:
        """Argument vectors passed for ``wrapper``, oldest first."""
        return [inv.argv for inv in self._invocations if inv.wrapper == wrapper]

    def is_available(self) -> bool:
        return self._available

    def set_response(self, wrapper: str, receipt: Receipt) -> None:
        self._canned[wrapper] = receipt

    def set_failure(self, wrapper: str, error: str = "Mock failure", return_code: int = 1) -> None:
        """Make ``wrapper`` fail with ``error`` and ``return_code``."""
        self.set_response(
            wrapper,
            Receipt.failure(adapter=self._name, wrapper=wrapper, error=error, return_code=return_code),
        )

    def validate(self, invocation: WrapperInvocation) -> tuple[bool, str]:
        if not invocation.argv:
            return False, "Empty argv"
        return True, ""

    def execute(self, invocation: WrapperInvocation) -> Receipt:
        self._invocations.append(invocation)

        canned = self._canned.get(invocation.wrapper)
        if canned is not None:
            return canned

        return Receipt.success(
            adapter=self._name,
            wrapper=invocation.wrapper,
            output=self._default_output,
            return_code=0,
            metadata={"mock": True, "argv": list(invocation.argv), "command": invocation.command_line},
        )

    def reset(self) -> None:
        self._invocations.clear()
        self._canned.clear()
