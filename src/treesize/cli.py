"""CLI interface for treesize."""

from __future__ import annotations

import logging

import click

from treesize.core.builder import build_tree
from treesize.core.errors import ScanError
from treesize.models.options import ScanOptions
from treesize.render import print_tree
from treesize.settings import Settings


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.pass_context
def main(ctx: click.Context, verbose: int) -> None:
    """Tree Size — visualize disk usage in a folder tree.

    Recursively shows the largest files and folders in a tree structure
    with size summaries.
    """
    _setup_logging(verbose)
    ctx.default_map = {"scan": Settings().scan_defaults()}


# ── scan ─────────────────────────────────────────────────────────────────

@main.command()
@click.option("--path", "-p", default=".", show_default=True, help="Path to scan")
@click.option(
    "--max-depth", "-d",
    type=click.IntRange(min=-1), default=-1, show_default=True,
    help="Max depth to scan (-1 = unlimited)",
)
@click.option(
    "--top", "-t",
    type=click.IntRange(min=0), default=0, show_default=True,
    help="Top N largest items per folder (0 = all)",
)
@click.option(
    "--min-size",
    type=click.IntRange(min=0), default=0, show_default=True,
    help="Minimum size (in bytes) to include in the tree",
)
@click.option(
    "--threads",
    type=click.IntRange(min=1), default=4, show_default=True,
    help="Number of concurrent filesystem operations",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
def scan(path: str, max_depth: int, top: int, min_size: int, threads: int, no_color: bool) -> None:
    """Scan a directory and display its largest files and folders."""
    options = ScanOptions(max_depth=max_depth, top=top, min_size=min_size, threads=threads)

    click.echo(f"Scanning {path}...")
    try:
        root = build_tree(path, options)
    except ScanError as e:
        click.echo(f"Error: {e}")
        return

    click.echo(f"📁 Tree for {path}\n")
    if root is None:
        click.echo(f"Nothing at or above {min_size} bytes under {path}")
        return
    print_tree(root, color=False if no_color else None)
