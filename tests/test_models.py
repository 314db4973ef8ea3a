"""Tests for data models."""

from __future__ import annotations

import dataclasses

import pytest

from treesize.models import FileNode, ScanOptions


class TestScanOptions:
    def test_defaults(self):
        options = ScanOptions()
        assert options.max_depth == -1
        assert options.top == 0
        assert options.min_size == 0
        assert options.threads == 4
        assert options.unlimited_depth

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_depth": -2}, {"top": -1}, {"min_size": -1}, {"threads": 0}],
    )
    def test_rejects_invalid(self, kwargs):
        with pytest.raises(ValueError):
            ScanOptions(**kwargs)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ScanOptions().top = 3


class TestFileNode:
    def test_walk_is_preorder(self):
        tree = FileNode("r", "r", 3, True, [
            FileNode("x", "r/x", 2, True, [FileNode("y", "r/x/y", 2)]),
            FileNode("z", "r/z", 1),
        ])
        assert [n.name for n in tree.walk()] == ["r", "x", "y", "z"]
