#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
パスユーティリティとロギングのテスト
"""

import logging

import pytest

import logutils
from logutils import log as log_module
from filecoll.path_utils import basename, join_path, normalize_path, parent_path


class TestPathUtils:
    """path_utils"""

    @pytest.mark.parametrize("path, expected", [
        ("a\\b\\c", "a/b/c"),
        ("a//b///c", "a/b/c"),
        ("/C:/dir", "C:/dir"),
        (None, ""),
    ])
    def test_normalize_path(self, path, expected):
        assert normalize_path(path) == expected

    def test_join_path(self):
        assert join_path("", "a.txt") == "a.txt"
        assert join_path("sub", "b.txt") == "sub/b.txt"
        assert join_path("sub/", "/b.txt") == "sub/b.txt"
        assert join_path("", "") == ""

    def test_basename_and_parent(self):
        assert basename("sub/b.txt") == "b.txt"
        assert basename("sub/dir/") == "dir"
        assert basename("a.txt") == "a.txt"
        assert basename("") == ""
        assert parent_path("sub/dir/b.txt") == "sub/dir"
        assert parent_path("b.txt") == ""


@pytest.fixture
def restore_logging():
    """ロギング設定をテスト後に戻す"""
    level = log_module._log_level
    log_file = log_module._log_file
    yield
    log_module._log_level = level
    log_module._log_file = log_file


class TestLogutils:
    """logutils"""

    @pytest.mark.parametrize("value, expected", [
        ("debug", logutils.DEBUG),
        ("WARNING", logutils.WARNING),
        ("15", 15),
        (30, 30),
        ("bogus", logutils.ERROR),
        (None, logutils.ERROR),
    ])
    def test_parse_level(self, value, expected):
        assert logutils.parse_level(value) == expected

    def test_level_from_environment(self, monkeypatch, restore_logging):
        monkeypatch.setenv(logutils.LOG_LEVEL_ENV, "INFO")
        log_module._log_level = None
        assert logutils.get_level() == logutils.INFO

    def test_setup_logging_updates_loggers(self, restore_logging):
        logger = logutils.get_logger("filecoll.test")
        logutils.setup_logging(logutils.DEBUG)
        assert logger.level == logutils.DEBUG
        logutils.setup_logging("ERROR")
        assert logger.level == logutils.ERROR

    def test_no_duplicate_handlers(self, restore_logging):
        logger = logutils.get_logger("filecoll.test.handlers")
        before = len(logger.handlers)
        logutils.setup_logging(logutils.ERROR)
        logutils.setup_logging(logutils.ERROR)
        assert len(logger.handlers) == before

    def test_log_file(self, tmp_path, restore_logging):
        logfile = tmp_path / "logs" / "filecoll.log"
        logutils.setup_logging(logutils.INFO, str(logfile))

        logutils.log_print(logutils.INFO, "hello %s", "world", name="filecoll.test.file")
        for handler in logutils.get_logger("filecoll.test.file").handlers:
            handler.flush()

        assert "hello world" in logfile.read_text(encoding="utf-8")

        for logger in log_module._loggers.values():
            for handler in list(logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    logger.removeHandler(handler)
                    handler.close()

    def test_below_level_is_dropped(self, restore_logging, capsys):
        logutils.setup_logging(logutils.ERROR)
        logutils.log_print(logutils.INFO, "quiet", name="filecoll.test.quiet")
        assert "quiet" not in capsys.readouterr().err
