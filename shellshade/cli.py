"""
shellshade/cli.py

Command-line interface for shellshade.

Usage:
    shellshade seed
    shellshade themes
    shellshade show dracula
    shellshade install alacritty dracula
    shellshade set-default dracula
    shellshade serve < requests.jsonl
"""

import sys
import json
import logging
from pathlib import Path

import click
import yaml

from .api import ShellShadeAPI
from .config import get_settings_manager
from .installer import INSTALLERS, InstallResult
from .ipc import IpcRouter, register_install_handlers, serve
from .theme.engine import ANSI_NAMES


def get_api(ctx: click.Context) -> ShellShadeAPI:
    """API instance shared by the commands of one invocation."""
    if ctx.obj.get("api") is None:
        ctx.obj["api"] = ShellShadeAPI(settings=ctx.obj["settings"])
    return ctx.obj["api"]


def format_table(rows: list, columns: list[tuple[str, int]]) -> str:
    """
    Format rows as a simple table.

    Args:
        rows: List of tuples, one value per column
        columns: List of (header, width) tuples
    """
    if not rows:
        return "No results."

    header = ""
    separator = ""
    for name, width in columns:
        header += f"{name:<{width}} "
        separator += "-" * width + " "

    lines = [header.rstrip(), separator.rstrip()]

    for row in rows:
        line = ""
        for value, (name, width) in zip(row, columns):
            val_str = str(value if value is not None else "")[:width - 1]
            line += f"{val_str:<{width}} "
        lines.append(line.rstrip())

    return "\n".join(lines)


def report(ctx: click.Context, result: InstallResult) -> None:
    """Print an install result and exit non-zero on failure."""
    if ctx.obj["json"]:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif result.success:
        click.echo(result.instructions)
        if result.path:
            click.echo(f"Path: {result.path}")
    else:
        click.echo(f"Error: {result.error}", err=True)

    if not result.success:
        sys.exit(1)


@click.group()
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Settings file (default ~/.shellshade/config.json)")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
@click.pass_context
def cli(ctx, output_json, config_path, verbose):
    """shellshade: install color themes into terminal emulators."""
    ctx.ensure_object(dict)
    settings = get_settings_manager(config_path).settings

    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    ctx.obj["json"] = output_json
    ctx.obj["settings"] = settings


@cli.command("themes")
@click.pass_context
def list_themes(ctx):
    """List stored themes."""
    api = get_api(ctx)
    themes = api.themes()

    if ctx.obj["json"]:
        click.echo(json.dumps([{"id": i, "name": n} for i, n in themes], indent=2))
    else:
        click.echo(format_table(themes, [("ID", 25), ("NAME", 30)]))
        click.echo(f"\n{len(themes)} theme(s)")


@cli.command("show")
@click.argument("theme_id")
@click.pass_context
def show_theme(ctx, theme_id):
    """Show the resolved colors of a theme."""
    api = get_api(ctx)
    found = api.theme(theme_id)

    if not found:
        click.echo(f"Theme '{theme_id}' not found.", err=True)
        sys.exit(1)

    name, colors = found
    values = {
        "background": colors.background,
        "foreground": colors.foreground,
        "cursor": colors.cursor,
        "cursorText": colors.cursor_text,
        "selection": colors.selection,
        "selectionText": colors.selection_text,
    }
    values.update({f"ansi_{n}": c for n, c in zip(ANSI_NAMES, colors.ansi.by_index())})

    if ctx.obj["json"]:
        click.echo(json.dumps({"id": theme_id, "name": name, "colors": values}, indent=2))
    else:
        click.echo(f"Name: {name}")
        for key, value in values.items():
            click.echo(f"  {key:<20} {value}")


@cli.command("import")
@click.argument("paths", nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def import_themes(ctx, paths):
    """Import YAML theme files."""
    api = get_api(ctx)
    imported = []
    for path in paths:
        try:
            imported.append(api.import_theme(path))
        except (OSError, ValueError, yaml.YAMLError) as e:
            click.echo(f"Failed to import {path}: {e}", err=True)
            sys.exit(1)

    if ctx.obj["json"]:
        click.echo(json.dumps(imported))
    else:
        for theme_id in imported:
            click.echo(f"Imported {theme_id}")


@cli.command("remove")
@click.argument("theme_id")
@click.pass_context
def remove_theme(ctx, theme_id):
    """Delete a stored theme."""
    if not get_api(ctx).store.delete_theme(theme_id):
        click.echo(f"Theme '{theme_id}' not found.", err=True)
        sys.exit(1)
    click.echo(f"Removed {theme_id}")


@cli.command("seed")
@click.pass_context
def seed_themes(ctx):
    """Load the themes bundled with shellshade."""
    api = get_api(ctx)
    ids = api.seed()

    if ctx.obj["json"]:
        click.echo(json.dumps(ids))
    else:
        click.echo(f"Loaded {len(ids)} bundled theme(s): {', '.join(ids)}")


@cli.command("install")
@click.argument("target", type=click.Choice(sorted(INSTALLERS)))
@click.argument("theme_id")
@click.pass_context
def install_theme(ctx, target, theme_id):
    """Install a theme into a terminal emulator."""
    report(ctx, get_api(ctx).install(target, theme_id))


@cli.command("set-default")
@click.argument("theme_id")
@click.pass_context
def set_default(ctx, theme_id):
    """Make a theme Terminal.app's default profile."""
    report(ctx, get_api(ctx).set_terminal_default(theme_id))


@cli.command("platform")
@click.pass_context
def show_platform(ctx):
    """Show the detected platform."""
    platform = get_api(ctx).platform()
    click.echo(json.dumps(platform) if ctx.obj["json"] else platform)


@cli.command("detect")
@click.pass_context
def detect_themes(ctx):
    """List themes already installed in terminal configs."""
    found = get_api(ctx).detect_installed()

    if ctx.obj["json"]:
        click.echo(json.dumps(found))
    elif not found:
        click.echo("No installed themes detected.")


@cli.command("serve")
@click.pass_context
def serve_requests(ctx):
    """Answer JSON-lines requests on stdin until EOF."""
    router = IpcRouter()
    register_install_handlers(router, get_api(ctx))
    serve(router, sys.stdin, sys.stdout)


def main():
    """Entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
