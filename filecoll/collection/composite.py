"""
複合コレクション

複数のコレクションを1つのコレクションとして扱う
"""
from typing import BinaryIO, List, Optional

from ..entry import EntryInfo, MatchPath
from .base import FileCollection


class CompositeCollection(FileCollection):
    """
    複数のコレクションをまとめたコレクション

    子コレクションは追加した順に検索され、同じ名前のエントリが
    複数の子にある場合は先に追加した方が優先される。
    追加時には子の複製を保持するため、元のコレクションを close しても
    影響を受けない。
    """

    def __init__(self):
        """空の複合コレクションを初期化する（最初から有効）"""
        super().__init__("-")
        self._collections: List[FileCollection] = []
        self._valid = True

    def add_collection(self, collection: FileCollection) -> bool:
        """
        子コレクションを追加する

        Args:
            collection: 追加するコレクション

        Returns:
            追加できた場合はTrue。自分自身や無効なコレクションの場合はFalse

        Raises:
            InvalidStateError: この複合コレクションが無効な場合
        """
        self.must_be_valid()

        if collection is self or not collection.is_valid():
            self.debug_warning(f"コレクションを追加できません: {collection!r}")
            return False

        self._collections.append(collection.clone())
        return True

    def collections(self) -> List[FileCollection]:
        """子コレクションのリスト（コピー）"""
        self.must_be_valid()
        return list(self._collections)

    def close(self) -> None:
        """子コレクションをすべて閉じ、自身も無効にする"""
        for collection in self._collections:
            collection.close()
        self._collections = []
        super().close()

    def entries(self) -> List[EntryInfo]:
        self.must_be_valid()
        result: List[EntryInfo] = []
        for collection in self._collections:
            result.extend(collection.entries())
        return result

    def get_entry(self, name: str, match: MatchPath = MatchPath.MATCH) -> Optional[EntryInfo]:
        self.must_be_valid()
        for collection in self._collections:
            entry = collection.get_entry(name, match)
            if entry is not None:
                return entry
        return None

    def get_input_stream(self, name: str, match: MatchPath = MatchPath.MATCH) -> Optional[BinaryIO]:
        """
        最初にエントリを持っている子コレクションからストリームを取得する

        Args:
            name: 検索するエントリ名
            match: 照合方法

        Returns:
            ストリーム。エントリがない、またはディレクトリの場合はNone
        """
        self.must_be_valid()
        for collection in self._collections:
            if collection.get_entry(name, match) is not None:
                return collection.get_input_stream(name, match)
        return None

    def size(self) -> int:
        self.must_be_valid()
        return sum(collection.size() for collection in self._collections)

    def clone(self) -> "CompositeCollection":
        other = CompositeCollection()
        other._collections = [collection.clone() for collection in self._collections]
        other._valid = self._valid
        return other
