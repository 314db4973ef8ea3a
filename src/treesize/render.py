"""Connector-drawn text rendering of a scan result tree."""

from __future__ import annotations

from collections.abc import Iterator

import click

from treesize.models.node import FileNode
from treesize.utils import bytes_to_human

LARGE_SIZE = 1 << 30

_BRANCH = "├──"
_LAST = "└──"
_PIPE = "│   "
_SPACE = "    "


def format_line(node: FileNode, prefix: str, is_last: bool, color: bool = True) -> str:
    """Format the single output line for *node*."""
    connector = _LAST if is_last else _BRANCH
    name = node.name
    size = bytes_to_human(node.size)
    if color:
        if node.is_dir:
            name = click.style(name, fg="blue", bold=True)
        else:
            name = click.style(name, fg="white")
        size = click.style(size, fg="red" if node.size >= LARGE_SIZE else "yellow")
    return f"{prefix}{connector} {name} ({size})"


def render_tree(node: FileNode, color: bool = True) -> Iterator[str]:
    """Yield the lines of the tree rooted at *node*.

    Children are emitted in the order they are stored; no sorting happens here.
    """
    stack: list[tuple[FileNode, str, bool]] = [(node, "", True)]
    while stack:
        current, prefix, is_last = stack.pop()
        yield format_line(current, prefix, is_last, color)
        child_prefix = prefix + (_SPACE if is_last else _PIPE)
        last_index = len(current.children) - 1
        for i in range(last_index, -1, -1):
            stack.append((current.children[i], child_prefix, i == last_index))


def print_tree(node: FileNode, color: bool | None = None) -> None:
    """Echo the tree to stdout.

    With ``color=None`` click decides whether to keep ANSI styling based on
    the output stream.
    """
    for line in render_tree(node, color=color is not False):
        click.echo(line, color=color)
