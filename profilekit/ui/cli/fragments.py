"""
CLI commands for fragments and their wrappers.

Thin wrappers over ``profilekit.core.services.fragments``.
"""

from __future__ import annotations

import json
import sys

import click

from profilekit.ui.cli.common import get_session


@click.group()
def fragments() -> None:
    """Fragments — list, show, wrappers."""


@fragments.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_fragments(ctx: click.Context, as_json: bool) -> None:
    """Show every fragment and whether it registered."""
    session = get_session(ctx)
    results = session.registry.results()

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
        return

    loaded = sum(1 for r in results if r.loaded)
    click.secho(f"\n🧩 Fragments: {loaded}/{len(results)} loaded", fg="cyan", bold=True)
    for result in results:
        if result.disabled:
            click.secho(f"   ⊘ {result.fragment} ", fg="yellow", nl=False)
            click.echo("(disabled)")
        elif result.loaded:
            click.secho(f"   ✓ {result.fragment} ", fg="green", nl=False)
            note = f" — missing: {', '.join(result.missing)}" if result.missing else ""
            click.echo(f"[{result.mode.value}] {len(result.registered)} wrapper(s){note}")
        else:
            click.secho(f"   ✗ {result.fragment} ", fg="red", nl=False)
            click.echo(f"(missing: {', '.join(result.missing)})")
    click.echo()


@fragments.command("show")
@click.argument("name")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show_fragment(ctx: click.Context, name: str, as_json: bool) -> None:
    """Show the wrappers a fragment declares."""
    session = get_session(ctx)
    fragment = session.registry.get_fragment(name)
    if fragment is None:
        click.secho(f"❌ Unknown fragment: {name}", fg="red")
        sys.exit(1)

    rows = []
    for spec in fragment.wrappers:
        record = session.cache.lookup(spec.command)
        rows.append({
            "name": spec.name,
            "command": " ".join(spec.argv()),
            "aliases": spec.aliases,
            "registered": session.registry.get(spec.name) is not None,
            "available": record.available,
            "install_hint": record.install_hint,
        })

    if as_json:
        click.echo(json.dumps({"fragment": fragment.name, "wrappers": rows}, indent=2))
        return

    click.secho(f"\n🧩 {fragment.name}", fg="cyan", bold=True)
    if fragment.description:
        click.echo(f"   {fragment.description}")
    click.echo()
    for row in rows:
        icon, color = ("✓", "green") if row["registered"] else ("✗", "red")
        click.secho(f"   {icon} {row['name']} ", fg=color, nl=False)
        alias_label = f" ({', '.join(row['aliases'])})" if row["aliases"] else ""
        click.echo(f"→ {row['command']}{alias_label}")
        if not row["available"] and row["install_hint"]:
            click.echo(f"      Install: {row['install_hint']}")
    click.echo()


@fragments.command("wrappers")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_wrappers(ctx: click.Context, as_json: bool) -> None:
    """List registered wrappers and their aliases."""
    session = get_session(ctx)
    wrappers = sorted(session.registry.list_wrappers(), key=lambda w: w.name)

    if as_json:
        click.echo(json.dumps([
            {
                "name": w.name,
                "fragment": w.fragment,
                "argv": w.spec.argv(),
                "aliases": w.spec.aliases,
                "mode": w.mode.value,
            }
            for w in wrappers
        ], indent=2))
        return

    if not wrappers:
        click.secho("⚠️  No wrappers registered", fg="yellow")
        return

    for w in wrappers:
        alias_label = f" [{', '.join(w.spec.aliases)}]" if w.spec.aliases else ""
        click.echo(f"   {w.name}{alias_label} → {' '.join(w.spec.argv())}")
