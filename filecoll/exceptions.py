"""
filecoll 例外定義

すべての例外は CollectionError を継承するため、まとめて捕捉できる。
"""


class CollectionError(Exception):
    """filecoll の基底例外"""
    pass


class InvalidStateError(CollectionError):
    """
    無効なコレクションに対する操作

    ディレクトリ以外を指して作成されたコレクションや、
    close() 済みのコレクションに問い合わせた場合に送出される。
    """
    def __init__(self, message: str = None, name: str = None):
        self.name = name
        if message is None:
            message = "コレクションが無効です"
            if name:
                message = f"{message}: {name}"
        super().__init__(message)


class TraversalError(CollectionError):
    """
    ディレクトリ走査の失敗

    走査中にディレクトリの列挙やエントリ情報の取得に失敗した場合に送出される。
    元の OSError は __cause__ に保持される。
    """
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"ディレクトリ走査に失敗しました: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
