"""
コレクション実装

ディレクトリ、アーカイブ、複合コレクションを提供する
"""

from .base import FileCollection
from .directory import DirectoryCollection
from .archive import ArchiveCollection
from .zip_collection import ZipCollection
from .rar_collection import RarCollection
from .composite import CompositeCollection

__all__ = [
    'FileCollection', 'DirectoryCollection', 'ArchiveCollection',
    'ZipCollection', 'RarCollection', 'CompositeCollection'
]
