"""
CLI commands for the availability cache snapshot.

    warm    probe every command the fragments need, save the snapshot
    show    print the saved snapshot
    clear   delete the snapshot
    verify  re-probe saved records and report drift
"""

from __future__ import annotations

import json
import sys

import click

from profilekit.ui.cli.common import get_session


@click.group()
def cache() -> None:
    """Cache — warm, show, clear, verify the command snapshot."""


@cache.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def warm(ctx: click.Context, as_json: bool) -> None:
    """Probe every command the fragments use and save the snapshot."""
    session = get_session(ctx)
    commands = session.registry.required_commands()
    records = [session.cache.lookup(cmd) for cmd in commands]

    try:
        written = session.save_cache()
    except OSError as e:
        click.secho(f"❌ Cannot write {session.snapshot_path}: {e}", fg="red")
        sys.exit(1)

    available = sum(1 for r in records if r.available)
    if as_json:
        click.echo(json.dumps({
            "path": str(session.snapshot_path),
            "probed": len(records),
            "available": available,
            "written": written,
        }, indent=2))
        return

    click.secho(f"🔥 Cache warmed: {available}/{len(records)} available", fg="green")
    click.echo(f"   💾 {written} record(s) → {session.snapshot_path}")


@cache.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """Print the saved snapshot."""
    from profilekit.core.persistence.cache_file import load_snapshot

    session = get_session(ctx, load_fragments=False)
    snapshot = load_snapshot(session.snapshot_path)

    if as_json:
        click.echo(json.dumps(snapshot.model_dump(mode="json"), indent=2))
        return

    if not snapshot.records:
        click.secho(f"⚠️  No snapshot at {session.snapshot_path}", fg="yellow")
        return

    click.secho(f"💾 {session.snapshot_path}", fg="cyan", bold=True)
    click.echo(f"   Saved: {snapshot.saved_at}")
    for record in sorted(snapshot.records, key=lambda r: r.name):
        if record.available:
            click.secho(f"   ✅ {record.name} ", fg="green", nl=False)
            click.echo(f"→ {record.path}")
        else:
            click.secho(f"   ❌ {record.name}", fg="red")


@cache.command()
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Delete the snapshot so the next session probes from scratch."""
    from profilekit.core.persistence.cache_file import clear_snapshot

    session = get_session(ctx, load_fragments=False)
    if clear_snapshot(session.snapshot_path):
        click.secho(f"🗑️  Removed {session.snapshot_path}", fg="green")
    else:
        click.echo(f"   Nothing to clear at {session.snapshot_path}")


@cache.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def verify(ctx: click.Context, as_json: bool) -> None:
    """Re-probe the snapshot and report entries that drifted."""
    from profilekit.core.persistence.cache_file import load_snapshot
    from profilekit.core.services.command_cache import find_stale

    session = get_session(ctx, load_fragments=False)
    snapshot = load_snapshot(session.snapshot_path)
    drift = find_stale(snapshot.records, session.cache.probe)

    if as_json:
        click.echo(json.dumps({
            "path": str(session.snapshot_path),
            "checked": len(snapshot.records),
            "drift": drift,
        }, indent=2))
        sys.exit(1 if drift else 0)

    if not snapshot.records:
        click.secho(f"⚠️  No snapshot at {session.snapshot_path}", fg="yellow")
        return

    if not drift:
        click.secho(f"✅ Snapshot matches this machine ({len(snapshot.records)} record(s))", fg="green")
        return

    click.secho(f"❌ {len(drift)} stale record(s):", fg="red", bold=True)
    for item in drift:
        was = "available" if item["cached"] else "missing"
        now = "available" if item["actual"] else "missing"
        click.echo(f"   • {item['name']}: {was} → {now}")
    click.echo("   Run 'profilekit cache warm' to refresh.")
    sys.exit(1)
