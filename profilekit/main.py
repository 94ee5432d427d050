"""
profilekit — CLI entrypoint.

Usage:
    python -m profilekit.main --help
    profilekit check docker git
    profilekit run gs
    profilekit fragments list
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from profilekit import __version__
from profilekit.core.observability.logging_config import resolve_level, setup_logging
from profilekit.ui.cli.common import get_session, parse_assume


@click.group()
@click.version_option(version=__version__, prog_name="profilekit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to profile.yml (default: auto-detect).",
)
@click.option(
    "--assume",
    "assume",
    multiple=True,
    metavar="NAME=yes|no",
    help="Treat a command as installed or missing, without probing.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    assume: tuple[str, ...],
) -> None:
    """profilekit — availability-aware wrappers for developer CLI tools."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None
    ctx.obj["assume"] = parse_assume(assume)

    setup_logging(level=resolve_level(verbose=verbose, quiet=quiet, debug=debug))


@cli.command()
@click.argument("names", nargs=-1, required=True)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--strict", is_flag=True, help="Exit with status 1 if any command is missing.")
@click.pass_context
def check(ctx: click.Context, names: tuple[str, ...], as_json: bool, strict: bool) -> None:
    """Check whether commands are available on this machine."""
    session = get_session(ctx, load_fragments=False)
    records = [session.cache.lookup(name) for name in names]
    missing = [r for r in records if not r.available]

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in records], indent=2))
    else:
        for record in records:
            if record.available:
                where = record.path or f"({record.source})"
                click.secho(f"   ✅ {record.name} ", fg="green", nl=False)
                click.echo(f"→ {where}")
            else:
                click.secho(f"   ❌ {record.name}", fg="red")
                if record.install_hint:
                    click.echo(f"      Install: {record.install_hint}")

    if strict and missing:
        sys.exit(1)


@cli.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("wrapper")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--dry-run", is_flag=True, help="Show the command line without running it.")
@click.option("--capture", is_flag=True, help="Capture output instead of using the terminal.")
@click.option("--timeout", type=float, default=None, help="Kill the command after N seconds.")
@click.pass_context
def run(
    ctx: click.Context,
    wrapper: str,
    args: tuple[str, ...],
    dry_run: bool,
    capture: bool,
    timeout: float | None,
) -> None:
    """Run a wrapper (or alias), forwarding ARGS to the tool.

    Examples:

        profilekit run gs

        profilekit run docker-ps -a

        profilekit run --dry-run tfp -out plan.bin
    """
    session = get_session(ctx)
    receipt = session.registry.invoke(
        wrapper,
        args,
        dry_run=dry_run,
        capture=capture,
        timeout=timeout,
    )

    if receipt.status == "skipped":
        click.echo(receipt.output)
        return

    if receipt.failed:
        if receipt.output:
            click.echo(receipt.output)
        click.secho(f"❌ {receipt.error}", fg="red", err=True)
        sys.exit(receipt.return_code or 1)

    if receipt.output:
        click.echo(receipt.output)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def health(ctx: click.Context, as_json: bool) -> None:
    "Show profile health — command cache and fragment coverage."
    from profilekit.core.observability.health import check_system_health

    session = get_session(ctx)
    system_health = check_system_health(session.cache, session.registry)

    if as_json:
        click.echo(json.dumps(system_health.to_dict(), indent=2))
        if system_health.status == "unhealthy":
            sys.exit(1)
        return

    status_icons = {
        "healthy": ("💚", "green"),
        "degraded": ("🟡", "yellow"),
        "unhealthy": ("🔴", "red"),
        "unknown": ("❔", "white"),
    }
    icon, color = status_icons.get(system_health.status, ("❔", "white"))

    click.echo()
    click.secho(f"{icon} Profile Health: {system_health.status.upper()}", fg=color, bold=True)
    click.echo(f"   {session.settings.name} @ {session.root}")
    click.echo()

    for component in system_health.components:
        c_icon, c_color = status_icons.get(component.status, ("❔", "white"))
        click.secho(f"   {c_icon} {component.name}", fg=c_color, bold=True)
        click.echo(f"      {component.message}")

        if ctx.obj.get("verbose") and component.details:
            for key, val in component.details.items():
                click.echo(f"      {key}: {val}")

    click.echo()
    if system_health.status == "unhealthy":
        sys.exit(1)


# ── Register sub-command groups from profilekit/ui/cli/ ─────────

from profilekit.ui.cli.cache import cache  # noqa: E402
from profilekit.ui.cli.fragments import fragments  # noqa: E402

cli.add_command(cache)
cli.add_command(fragments)


if __name__ == "__main__":
    cli()
