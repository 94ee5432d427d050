"""
Shared CLI plumbing — settings + session resolution for every command.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from profilekit.core.session import ProfileSession

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def parse_assume(values: tuple[str, ...]) -> dict[str, bool]:
    """Parse ``--assume NAME=yes|no`` values into an override table."""
    overrides: dict[str, bool] = {}
    for raw in values:
        name, sep, value = raw.partition("=")
        name = name.strip()
        flag = value.strip().lower()
        if not sep or not name or flag not in _TRUE | _FALSE:
            raise click.BadParameter(
                f"expected NAME=yes|no, got {raw!r}", param_hint="--assume",
            )
        overrides[name] = flag in _TRUE
    return overrides


def get_session(ctx: click.Context, load_fragments: bool = True) -> ProfileSession:
    """Load settings and build the session for this invocation.

    Exits with status 1 on configuration errors.
    """
    from profilekit.core.config.loader import ConfigError, find_profile_file, load_settings, profile_root
    from profilekit.core.session import build_session

    obj = ctx.find_root().obj
    key = "session" if load_fragments else "session_bare"
    if obj.get(key) is not None:
        return obj[key]

    config_path: Path | None = obj.get("config_path") or find_profile_file()
    try:
        settings = load_settings(config_path, search=False)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    session = build_session(
        settings,
        root=profile_root(config_path),
        assume=obj.get("assume"),
        load_fragments=load_fragments,
    )
    obj[key] = session
    return session
