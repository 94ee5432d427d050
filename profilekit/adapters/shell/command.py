"""
Shell command adapter — run the wrapped executable.

Runs argv directly (no shell), either capturing output for the receipt
or passing the terminal through for interactive tools.
"""

from __future__ import annotations

import logging
import subprocess
import time
from pathlib import Path

from profilekit.adapters.base import Adapter, WrapperInvocation
from profilekit.core.models.receipt import Receipt

logger = logging.getLogger(__name__)


class ShellCommandAdapter(Adapter):
    """Execute wrapper invocations as subprocesses."""

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self) -> bool:
        return True

    def validate(self, invocation: WrapperInvocation) -> tuple[bool, str]:
        if not invocation.argv:
            return False, "Empty command line"

        if invocation.cwd and not Path(invocation.cwd).is_dir():
            return False, f"Working directory does not exist: {invocation.cwd}"

        return True, ""

    def execute(self, invocation: WrapperInvocation) -> Receipt:
        valid, error = self.validate(invocation)
        if not valid:
            return Receipt.failure(
                adapter=self.name,
                wrapper=invocation.wrapper,
                error=f"Validation failed: {error}",
            )

        logger.debug("Executing: %s (cwd=%s)", invocation.command_line, invocation.cwd)
        start = time.monotonic()

        try:
            if invocation.capture:
                result = subprocess.run(
                    invocation.argv,
                    cwd=invocation.cwd,
                    capture_output=True,
                    text=True,
                    timeout=invocation.timeout,
                )
                output = (result.stdout or "").strip()
                stderr = (result.stderr or "").strip()
            else:
                result = subprocess.run(
                    invocation.argv,
                    cwd=invocation.cwd,
                    timeout=invocation.timeout,
                )
                output, stderr = "", ""

            elapsed_ms = int((time.monotonic() - start) * 1000)
            metadata = {"command": invocation.command_line, "stderr": stderr}

            if result.returncode == 0:
                return Receipt.success(
                    adapter=self.name,
                    wrapper=invocation.wrapper,
                    output=output,
                    return_code=0,
                    duration_ms=elapsed_ms,
                    metadata=metadata,
                )
            return Receipt.failure(
                adapter=self.name,
                wrapper=invocation.wrapper,
                error=stderr or f"Command exited with code {result.returncode}",
                output=output,
                return_code=result.returncode,
                duration_ms=elapsed_ms,
                metadata=metadata,
            )

        except subprocess.TimeoutExpired:
            return Receipt.failure(
                adapter=self.name,
                wrapper=invocation.wrapper,
                error=f"Command timed out after {invocation.timeout}s",
                metadata={"command": invocation.command_line, "timeout": invocation.timeout},
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                wrapper=invocation.wrapper,
                error=f"Command execution error: {e}",
                metadata={"command": invocation.command_line},
            )
