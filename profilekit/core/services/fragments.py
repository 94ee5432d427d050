"""
Fragment registry — registration and dispatch for tool wrappers.

The registry is the single point of wrapper management. It decides,
per fragment, whether wrappers get registered (by consulting the
availability cache), resolves aliases, and runs wrappers through an
adapter. Callers never shell out directly.

Registration modes:
    conditional → register only when every required command is available
    always      → register regardless; availability is checked per call
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from profilekit.adapters.base import Adapter, WrapperInvocation
from profilekit.adapters.shell.command import ShellCommandAdapter
from profilekit.core.models.fragment import Fragment, RegistrationMode, WrapperSpec
from profilekit.core.models.receipt import Receipt
from profilekit.core.services.command_cache import CommandAvailabilityCache
from profilekit.core.services.missing_tools import MissingToolNotices

logger = logging.getLogger(__name__)


@dataclass
class RegisteredWrapper:
    """A wrapper as registered by a fragment."""

    spec: WrapperSpec
    fragment: str
    mode: RegistrationMode

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def command(self) -> str:
        return self.spec.command


@dataclass
class FragmentLoadResult:
    """What happened when a fragment was loaded."""

    fragment: str
    mode: RegistrationMode
    loaded: bool = False
    disabled: bool = False
    registered: list[str] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def skipped(self) -> bool:
        """Nothing registered because of missing commands or disabling."""
        return not self.registered

    def to_dict(self) -> dict[str, Any]:
        return {
            "fragment": self.fragment,
            "mode": self.mode.value,
            "loaded": self.loaded,
            "disabled": self.disabled,
            "registered": self.registered,
            "aliases": self.aliases,
            "missing": self.missing,
        }


class FragmentRegistry:
    """Central registry and dispatcher for wrappers.

    Features:
        - Load/unload fragments (idempotent)
        - Conditional or always-on registration per fragment
        - Alias resolution
        - Invoke wrappers through an adapter, never raising
    """

    def __init__(
        self,
        cache: CommandAvailabilityCache,
        adapter: Adapter | None = None,
        notices: MissingToolNotices | None = None,
        default_mode: RegistrationMode = RegistrationMode.CONDITIONAL,
        disabled: Iterable[str] = (),
    ):
        self._cache = cache
        self._adapter = adapter or ShellCommandAdapter()
        self._notices = notices or MissingToolNotices()
        self._default_mode = RegistrationMode(default_mode)
        self._disabled = {d.strip() for d in disabled if d.strip()}

        self._fragments: dict[str, Fragment] = {}
        self._results: dict[str, FragmentLoadResult] = {}
        self._wrappers: dict[str, RegisteredWrapper] = {}
        self._aliases: dict[str, str] = {}

    @property
    def cache(self) -> CommandAvailabilityCache:
        return self._cache

    @property
    def adapter(self) -> Adapter:
        return self._adapter

    @property
    def notices(self) -> MissingToolNotices:
        return self._notices

    # ── Loading ─────────────────────────────────────────────────

    def load(self, fragment: Fragment) -> FragmentLoadResult:
        """Load a fragment, replacing any previous load of the same name."""
        mode = RegistrationMode(fragment.registration or self._default_mode)
        result = FragmentLoadResult(fragment=fragment.name, mode=mode)

        if fragment.name in self._fragments:
            logger.debug("Reloading fragment: %s", fragment.name)
            self.unload(fragment.name)

        self._fragments[fragment.name] = fragment
        self._results[fragment.name] = result

        if fragment.name in self._disabled:
            result.disabled = True
            logger.debug("Fragment disabled: %s", fragment.name)
            return result

        result.missing = [
            cmd for cmd in fragment.required_commands()
            if not self._cache.is_available(cmd)
        ]

        if result.missing and mode == RegistrationMode.CONDITIONAL:
            logger.info(
                "Skipping fragment %s — missing: %s",
                fragment.name, ", ".join(result.missing),
            )
            return result

        for spec in fragment.wrappers:
            self._register(RegisteredWrapper(spec=spec, fragment=fragment.name, mode=mode))
            result.registered.append(spec.name)
            result.aliases.extend(spec.aliases)

        result.loaded = True
        logger.debug(
            "Loaded fragment %s: %d wrapper(s), %d alias(es)",
            fragment.name, len(result.registered), len(result.aliases),
        )
        return result

    def load_all(self, fragments: Iterable[Fragment]) -> list[FragmentLoadResult]:
        return [self.load(f) for f in fragments]

    def unload(self, name: str) -> None:
        """Remove a fragment and every wrapper/alias it registered."""
        self._fragments.pop(name, None)
        self._results.pop(name, None)

        owned = [w for w, rw in self._wrappers.items() if rw.fragment == name]
        for wrapper_name in owned:
            del self._wrappers[wrapper_name]
        for alias in [a for a, target in self._aliases.items() if target in owned]:
            del self._aliases[alias]

    def reload(self, name: str) -> FragmentLoadResult | None:
        """Reload a fragment, re-checking availability from the cache."""
        fragment = self._fragments.get(name)
        if fragment is None:
            return None
        return self.load(fragment)

    def _register(self, wrapper: RegisteredWrapper) -> None:
        existing = self._wrappers.get(wrapper.name)
        if existing and existing.fragment != wrapper.fragment:
            logger.warning(
                "Wrapper %s from %s overrides the one from %s",
                wrapper.name, wrapper.fragment, existing.fragment,
            )
        self._wrappers[wrapper.name] = wrapper

        for alias in wrapper.spec.aliases:
            target = self._aliases.get(alias)
            if target and target != wrapper.name:
                logger.warning("Alias %s now points to %s (was %s)", alias, wrapper.name, target)
            self._aliases[alias] = wrapper.name

    # ── Lookup ──────────────────────────────────────────────────

    def get(self, name: str) -> RegisteredWrapper | None:
        """Look up a wrapper by name or alias."""
        if name in self._wrappers:
            return self._wrappers[name]
        target = self._aliases.get(name)
        return self._wrappers.get(target) if target else None

    def get_fragment(self, name: str) -> Fragment | None:
        return self._fragments.get(name)

    def list_fragments(self) -> list[str]:
        return list(self._fragments.keys())

    def list_wrappers(self) -> list[RegisteredWrapper]:
        return list(self._wrappers.values())

    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def results(self) -> list[FragmentLoadResult]:
        return list(self._results.values())

    def required_commands(self) -> list[str]:
        """Every command any loaded fragment needs, deduplicated."""
        commands: dict[str, None] = {}
        for fragment in self._fragments.values():
            for cmd in fragment.required_commands():
                commands[cmd] = None
            for spec in fragment.wrappers:
                commands[spec.command] = None
        return list(commands)

    def status(self) -> dict[str, dict[str, Any]]:
        """Per-fragment load status."""
        return {name: result.to_dict() for name, result in self._results.items()}

    # ── Dispatch ────────────────────────────────────────────────

    def invoke(
        self,
        name: str,
        args: Sequence[str] = (),
        cwd: str | None = None,
        dry_run: bool = False,
        capture: bool = True,
        timeout: float | None = 300,
    ) -> Receipt:
        """Run a wrapper with extra arguments. Never raises.

        Args:
            name: Wrapper name or alias.
            args: Arguments forwarded after the wrapper's fixed args.
            cwd: Working directory (default: inherit).
            dry_run: Resolve and check, but don't execute.
            capture: Capture output into the receipt instead of the terminal.
            timeout: Seconds before the command is killed (None → no limit).
        """
        start_time = time.monotonic()
        adapter_name = self._adapter.name

        wrapper = self.get(name)
        if wrapper is None:
            return Receipt.failure(
                adapter=adapter_name,
                wrapper=name,
                error=f"No wrapper registered for '{name}'",
            )

        record = self._cache.lookup(wrapper.command)
        if not record.available:
            self._notices.notify(record, context=wrapper.name)
            message = f"{wrapper.command} is not installed"
            if record.install_hint:
                message += f" (install with: {record.install_hint})"
            return Receipt.failure(
                adapter=adapter_name,
                wrapper=wrapper.name,
                error=message,
                metadata={
                    "command": wrapper.command,
                    "install_hint": record.install_hint,
                },
            )

        argv = wrapper.spec.argv(list(args))
        if record.path:
            argv[0] = record.path

        invocation = WrapperInvocation(
            wrapper=wrapper.name,
            command=wrapper.command,
            argv=argv,
            cwd=cwd,
            timeout=timeout,
            capture=capture,
        )

        if dry_run:
            return Receipt.skip(
                adapter=adapter_name,
                wrapper=wrapper.name,
                reason=f"[dry-run] {invocation.command_line}",
                metadata={"dry_run": True, "argv": argv},
            )

        try:
            receipt = self._adapter.execute(invocation)
        except Exception as e:
            # Adapters should never raise
            logger.error("Adapter %s raised while running %s: %s", adapter_name, wrapper.name, e)
            receipt = Receipt.failure(
                adapter=adapter_name,
                wrapper=wrapper.name,
                error=f"Unexpected error: {e}",
            )

        if not receipt.duration_ms:
            receipt.duration_ms = int((time.monotonic() - start_time) * 1000)
        return receipt
