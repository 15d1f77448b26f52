"""
ZIPアーカイブコレクション

ZIPアーカイブファイルの内容をエントリの集合として提供するコレクション
"""
import zipfile
from typing import List

from .archive import ArchiveCollection, MemberInfo


class ZipCollection(ArchiveCollection):
    """
    ZIPアーカイブコレクション

    標準ライブラリの zipfile で目次を読み、メンバーの内容は
    要求されるたびにアーカイブを開き直して展開する。
    """

    supported_extensions = ['.zip', '.cbz', '.epub', '.jar']

    read_errors = ArchiveCollection.read_errors + (zipfile.BadZipFile, zipfile.LargeZipFile)

    def _is_archive(self, path: str) -> bool:
        return zipfile.is_zipfile(path)

    def _read_members(self, path: str) -> List[MemberInfo]:
        with zipfile.ZipFile(path, 'r') as zf:
            return [(info.filename, info.is_dir(), info.file_size, info.date_time)
                    for info in zf.infolist()]

    def _read_member(self, path: str, member_name: str) -> bytes:
        with zipfile.ZipFile(path, 'r') as zf:
            return zf.read(member_name)
