"""
filecoll エントリコレクションモジュール

ディレクトリとアーカイブを同じインターフェースで扱うためのコレクションを提供
"""

# 基本型
from .entry import EntryType, EntryInfo, MatchPath
from .exceptions import CollectionError, InvalidStateError, TraversalError

# コレクション
from .collection import (
    FileCollection, DirectoryCollection, ArchiveCollection,
    ZipCollection, RarCollection, CompositeCollection
)

# インターフェース関数
from .interface import open_collection, register_collection, set_archive_extensions

__version__ = "0.1.0"

__all__ = [
    'EntryInfo', 'EntryType', 'MatchPath',
    'CollectionError', 'InvalidStateError', 'TraversalError',
    'FileCollection', 'DirectoryCollection', 'ArchiveCollection',
    'ZipCollection', 'RarCollection', 'CompositeCollection',
    'open_collection', 'register_collection', 'set_archive_extensions'
]
