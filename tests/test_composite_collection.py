#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
CompositeCollection テスト
"""

import pytest

from filecoll import (
    CompositeCollection,
    DirectoryCollection,
    InvalidStateError,
    MatchPath,
    ZipCollection,
)

from conftest import sorted_lister


@pytest.fixture
def composite(sample_tree, sample_zip):
    """ディレクトリとZIPをまとめた複合コレクション"""
    root, _ = sample_tree
    archive, _ = sample_zip

    collection = CompositeCollection()
    assert collection.add_collection(DirectoryCollection(str(root), list_children=sorted_lister))
    assert collection.add_collection(ZipCollection(str(archive)))
    return collection


class TestCompositeCollection:
    """複数コレクションの統合"""

    def test_default_is_valid_and_empty(self):
        collection = CompositeCollection()
        assert collection.is_valid()
        assert collection.size() == 0
        assert collection.entries() == []
        assert collection.get_entry("a.txt") is None
        assert collection.get_input_stream("a.txt") is None

    def test_entries_are_concatenated(self, composite):
        assert [entry.name for entry in composite.entries()] == [
            "", "a.txt", "sub", "sub/b.txt",
            "a.txt", "sub", "sub/b.txt", "sub/deeper", "sub/deeper/c.txt", "empty",
        ]
        assert composite.size() == 10
        assert len(composite.entries()) == composite.size()

    def test_first_collection_wins(self, composite, sample_tree):
        root, _ = sample_tree
        entry = composite.get_entry("a.txt")
        assert entry.path == str(root / "a.txt")

        with composite.get_input_stream("a.txt") as stream:
            assert stream.read() == b"alpha"
        with composite.get_input_stream("sub/b.txt") as stream:
            assert stream.read() == b"bravo\x00\x01"

    def test_lookup_in_later_collection(self, composite, sample_zip):
        _, files = sample_zip

        assert composite.get_entry("c.txt", MatchPath.IGNORE).name == "sub/deeper/c.txt"
        with composite.get_input_stream("sub/deeper/c.txt") as stream:
            assert stream.read() == files["sub/deeper/c.txt"]

    def test_directory_stream_is_none(self, composite):
        assert composite.get_input_stream("empty") is None
        assert composite.get_input_stream("sub") is None

    def test_cannot_add_self_or_invalid(self, tmp_path):
        collection = CompositeCollection()

        assert not collection.add_collection(collection)
        assert not collection.add_collection(DirectoryCollection(str(tmp_path / "missing")))
        assert collection.size() == 0

    def test_children_are_cloned(self, sample_tree):
        root, _ = sample_tree
        directory = DirectoryCollection(str(root))

        collection = CompositeCollection()
        collection.add_collection(directory)
        directory.close()

        assert collection.size() == 4

    def test_close_does_not_affect_added_originals(self, composite, sample_tree):
        root, _ = sample_tree
        directory = DirectoryCollection(str(root))
        composite.add_collection(directory)

        composite.close()

        assert not composite.is_valid()
        assert directory.size() == 4
        with pytest.raises(InvalidStateError):
            composite.size()
        with pytest.raises(InvalidStateError):
            composite.add_collection(directory)

    def test_clone(self, composite):
        other = composite.clone()
        composite.close()

        assert other.size() == 10
        assert len(other.collections()) == 2

    def test_nested_composite(self, composite):
        outer = CompositeCollection()
        assert outer.add_collection(composite)
        assert outer.size() == composite.size()
