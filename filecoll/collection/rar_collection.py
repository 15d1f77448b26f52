"""
rarfileパッケージを利用したRARアーカイブコレクション

圧縮されたメンバーの展開には rarfile と同様に外部の unrar
（または unar、bsdtar）コマンドが必要
"""
from typing import List

import rarfile

from .archive import ArchiveCollection, MemberInfo


def _configure_rarfile() -> None:
    """rarfileパッケージの設定を行う"""
    # アーカイブ内のパス区切りを '/' に統一
    rarfile.PATH_SEP = '/'


_configure_rarfile()


class RarCollection(ArchiveCollection):
    """
    rarfileパッケージを使用したRARアーカイブコレクション
    """

    supported_extensions = ['.rar', '.cbr']

    read_errors = ArchiveCollection.read_errors + (rarfile.Error,)

    def _is_archive(self, path: str) -> bool:
        return rarfile.is_rarfile(path)

    def _read_members(self, path: str) -> List[MemberInfo]:
        with rarfile.RarFile(path) as rf:
            return [(info.filename, info.is_dir(), info.file_size, info.date_time)
                    for info in rf.infolist()]

    def _read_member(self, path: str, member_name: str) -> bytes:
        with rarfile.RarFile(path) as rf:
            return rf.read(member_name)
