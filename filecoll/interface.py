"""
コレクション作成インターフェース

パスの種類に応じて適切なコレクションを作成する
"""

from typing import List, Optional, Type

from .collection.archive import ArchiveCollection
from .collection.base import FileCollection
from .collection.directory import DirectoryCollection
from .collection.rar_collection import RarCollection
from .collection.zip_collection import ZipCollection
from .path_utils import is_directory
from logutils import log_print, DEBUG, INFO

# 登録済みのアーカイブコレクションクラス（先に登録したものが優先）
_archive_classes: List[Type[ArchiveCollection]] = []


def register_collection(cls: Type[ArchiveCollection]) -> None:
    """
    アーカイブコレクションクラスを登録する

    Args:
        cls: 登録するクラス（ArchiveCollection のサブクラス）
    """
    if cls in _archive_classes:
        return
    log_print(DEBUG, f"{cls.__name__} 登録中...", name="filecoll.interface")
    _archive_classes.append(cls)


def registered_collections() -> List[Type[ArchiveCollection]]:
    """登録済みのアーカイブコレクションクラスのリスト"""
    return list(_archive_classes)


def set_archive_extensions(cls: Type[ArchiveCollection], extensions: List[str]) -> None:
    """
    アーカイブコレクションクラスが扱う拡張子を設定する

    Args:
        cls: 対象のクラス
        extensions: 拡張子のリスト（ドットを含む）
    """
    cls.supported_extensions = [ext.lower() for ext in extensions]


def register_standard_collections() -> None:
    """標準のアーカイブコレクションを登録する"""
    register_collection(ZipCollection)
    register_collection(RarCollection)


def reset_registry() -> None:
    """登録をすべて解除し、標準のコレクションだけを登録し直す（主にテスト用）"""
    _archive_classes.clear()
    register_standard_collections()


def open_collection(path: str, recursive: bool = True) -> Optional[FileCollection]:
    """
    パスに応じたコレクションを作成する

    ディレクトリなら DirectoryCollection、そうでなければ拡張子で扱える
    アーカイブコレクションを作成する。

    Args:
        path: ディレクトリまたはアーカイブファイルのパス
        recursive: ディレクトリの場合にサブディレクトリ配下も読み込むかどうか

    Returns:
        作成したコレクション。扱えるコレクションがない場合はNone
    """
    if is_directory(path):
        return DirectoryCollection(path, recursive)

    for cls in _archive_classes:
        if cls.can_handle(path):
            log_print(INFO, f"{cls.__name__} で開きます: {path}", name="filecoll.interface")
            return cls(path)

    log_print(INFO, f"扱えるコレクションがありません: {path}", name="filecoll.interface")
    return None


register_standard_collections()
