"""
エントリコレクション基底クラス

ディレクトリやアーカイブを「エントリの集合」として扱うための
抽象基底クラスを定義
"""
from typing import Any, BinaryIO, List, Optional

from ..entry import EntryInfo, MatchPath
from ..exceptions import InvalidStateError
from logutils import log_print, log_trace, DEBUG, INFO, WARNING, ERROR


class FileCollection:
    """
    エントリコレクションの抽象基底クラス

    すべてのコレクションはこのクラスを継承し、entries()、get_input_stream()、
    clone() をオーバーライドする必要があります。get_entry() と size() は
    entries() を使った既定実装を持ちます。

    コレクションは with 文で使用でき、ブロックを抜けると close() されます。
    """

    def __init__(self, name: str = "-"):
        """
        コレクションを初期化する

        Args:
            name: コレクションの元になったパスなどの名前
        """
        self._name = name
        self._valid = False

    def debug_print(self, message: Any, *args, level: int = INFO, trace: bool = False, **kwargs):
        """
        デバッグ出力のラッパーメソッド

        Args:
            message: 出力するメッセージ
            *args: メッセージのフォーマット用引数
            level: ログレベル（デフォルトはINFO）
            trace: Trueならスタックトレース情報も出力する（デフォルトはFalse）
            **kwargs: 追加のキーワード引数
        """
        # クラス名をログの名前空間として使用
        name = f"filecoll.collection.{self.__class__.__name__}"

        if trace:
            log_trace(None, level, message, *args, name=name, **kwargs)
        else:
            log_print(level, message, *args, name=name, **kwargs)

    def debug_debug(self, message: Any, *args, trace: bool = False, **kwargs):
        """DEBUGレベルのログ出力"""
        self.debug_print(message, *args, level=DEBUG, trace=trace, **kwargs)

    def debug_info(self, message: Any, *args, trace: bool = False, **kwargs):
        """INFOレベルのログ出力"""
        self.debug_print(message, *args, level=INFO, trace=trace, **kwargs)

    def debug_warning(self, message: Any, *args, trace: bool = False, **kwargs):
        """WARNINGレベルのログ出力"""
        self.debug_print(message, *args, level=WARNING, trace=trace, **kwargs)

    def debug_error(self, message: Any, *args, trace: bool = False, **kwargs):
        """ERRORレベルのログ出力"""
        self.debug_print(message, *args, level=ERROR, trace=trace, **kwargs)

    @property
    def name(self) -> str:
        """コレクションの名前（close() 後は "-"）"""
        return self._name

    def is_valid(self) -> bool:
        """コレクションが使用可能かどうか"""
        return self._valid

    def must_be_valid(self) -> None:
        """
        コレクションが有効であることを確認する

        Raises:
            InvalidStateError: コレクションが無効な場合
        """
        if not self._valid:
            raise InvalidStateError(name=self._name)

    def close(self) -> None:
        """コレクションを閉じて無効にする"""
        self._valid = False
        self._name = "-"

    def entries(self) -> List[EntryInfo]:
        """
        コレクション内の全エントリを取得する

        Returns:
            エントリのリスト（呼び出しごとに新しいリスト）

        Raises:
            InvalidStateError: コレクションが無効な場合
        """
        # サブクラスで実装
        raise NotImplementedError

    def get_entry(self, name: str, match: MatchPath = MatchPath.MATCH) -> Optional[EntryInfo]:
        """
        名前を指定してエントリを取得する

        Args:
            name: 検索するエントリ名
            match: MATCHならパス全体、IGNOREなら末尾の名前だけで照合する

        Returns:
            最初に一致したエントリ。見つからなければNone

        Raises:
            InvalidStateError: コレクションが無効な場合
        """
        for entry in self.entries():
            if entry.matches(name, match):
                return entry
        return None

    def get_input_stream(self, name: str, match: MatchPath = MatchPath.MATCH) -> Optional[BinaryIO]:
        """
        エントリの内容を読み出すバイナリストリームを取得する

        返されたストリームは呼び出し元が close する必要がある。

        Args:
            name: 検索するエントリ名
            match: 照合方法

        Returns:
            ストリーム。エントリがない、またはディレクトリの場合はNone
        """
        # サブクラスで実装
        raise NotImplementedError

    def size(self) -> int:
        """
        エントリ数を取得する

        Raises:
            InvalidStateError: コレクションが無効な場合
        """
        return len(self.entries())

    def clone(self) -> "FileCollection":
        """同じ内容を指す独立したコレクションを作成する"""
        # サブクラスで実装
        raise NotImplementedError

    def __enter__(self) -> "FileCollection":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "valid" if self._valid else "invalid"
        return f"<{self.__class__.__name__} {self._name!r} {state}>"
