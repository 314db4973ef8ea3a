"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_tree(tmp_path):
    """root/{a: 100 B, b: 50 B, sub/c: 10 B}"""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a").write_bytes(b"a" * 100)
    (root / "b").write_bytes(b"b" * 50)
    sub = root / "sub"
    sub.mkdir()
    (sub / "c").write_bytes(b"c" * 10)
    return root


@pytest.fixture
def wide_tree(tmp_path):
    """Three levels of directories with files of varied sizes."""
    root = tmp_path / "wide"
    root.mkdir()
    for i in range(4):
        level1 = root / f"dir{i}"
        level1.mkdir()
        (level1 / "data.bin").write_bytes(b"x" * (i * 37 + 5))
        for j in range(3):
            level2 = level1 / f"nested{j}"
            level2.mkdir()
            (level2 / "blob").write_bytes(b"y" * (j * 11 + i + 1))
            (level2 / "empty").write_bytes(b"")
    for k in range(6):
        (root / f"file{k}.txt").write_bytes(b"z" * (k * 13))
    return root


@pytest.fixture
def failing_path(monkeypatch):
    """Make ``os.lstat`` / ``os.listdir`` fail for chosen paths.

    Permission bits are useless for this when tests run as root.
    """
    import os

    real_lstat = os.lstat
    real_listdir = os.listdir
    broken_stat: set[str] = set()
    broken_list: set[str] = set()

    def fake_lstat(path, *args, **kwargs):
        if str(path) in broken_stat:
            raise PermissionError(13, "Permission denied", str(path))
        return real_lstat(path, *args, **kwargs)

    def fake_listdir(path="."):
        if str(path) in broken_list:
            raise PermissionError(13, "Permission denied", str(path))
        return real_listdir(path)

    monkeypatch.setattr(os, "lstat", fake_lstat)
    monkeypatch.setattr(os, "listdir", fake_listdir)

    class Breaker:
        def stat(self, path) -> None:
            broken_stat.add(str(path))

        def listing(self, path) -> None:
            broken_list.add(str(path))

    return Breaker()
