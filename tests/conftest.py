#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
pytest 共通設定

共有 fixture とテスト用ユーティリティを提供する。
"""

import threading
import time
import zipfile
from pathlib import Path
from typing import Dict, List

import pytest

from filecoll import fs


# ==================== テスト用の列挙関数 ====================

class CountingLister:
    """
    呼び出し回数を記録するディレクトリ列挙関数

    結果は名前順にソートして返すため、走査順をテストで固定できる。
    """

    def __init__(self, delay: float = 0.0):
        self.calls: List[str] = []
        self.delay = delay
        self._lock = threading.Lock()

    def __call__(self, path: str) -> List[str]:
        with self._lock:
            self.calls.append(path)
        if self.delay:
            time.sleep(self.delay)
        return sorted(fs.list_children(path))

    @property
    def count(self) -> int:
        return len(self.calls)


def sorted_lister(path: str) -> List[str]:
    """名前順に並べた列挙関数"""
    return sorted(fs.list_children(path))


# ==================== 基本 Fixtures ====================

def _write_files(root: Path, files: Dict[str, bytes]) -> None:
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)


@pytest.fixture
def sample_tree(tmp_path) -> tuple:
    """
    root/{a.txt, sub/b.txt} のディレクトリツリー

    Returns:
        (ルートディレクトリ, ファイル内容の辞書)
    """
    root = tmp_path / "root"
    root.mkdir()
    files = {
        "a.txt": b"alpha",
        "sub/b.txt": b"bravo\x00\x01",
    }
    _write_files(root, files)
    return root, files


@pytest.fixture
def deep_tree(tmp_path) -> tuple:
    """
    複数階層のディレクトリツリー

    Returns:
        (ルートディレクトリ, ファイル内容の辞書)
    """
    root = tmp_path / "deep"
    root.mkdir()
    files = {
        "top.txt": b"top",
        "one/one.txt": b"1",
        "one/two/two.txt": b"2",
        "one/two/three/three.txt": b"3",
        "other/two.txt": b"other 2",
    }
    _write_files(root, files)
    (root / "one" / "two" / "empty").mkdir()
    return root, files


@pytest.fixture
def sample_zip(tmp_path) -> tuple:
    """
    ZIPアーカイブ

    sub/ は明示的なディレクトリメンバーを持たず、empty/ だけが持つ。

    Returns:
        (アーカイブのパス, ファイル内容の辞書)
    """
    archive = tmp_path / "sample.zip"
    files = {
        "a.txt": b"alpha",
        "sub/b.txt": b"bravo",
        "sub/deeper/c.txt": b"charlie" * 100,
    }
    with zipfile.ZipFile(archive, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, content in files.items():
            zf.writestr(name, content)
        zf.writestr("empty/", b"")
    return archive, files
