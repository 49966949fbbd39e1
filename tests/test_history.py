"""
Tests for history persistence.

The file holds a JSON object: {"entry": ["line", ...]}
"""

import json

import pytest

from ccsh.errors import HistoryError
from ccsh.history import History, load_history, save_history


class TestLoad:

    def test_missing_file_is_empty(self, history_file):
        history = load_history(str(history_file))
        assert len(history) == 0
        assert not history_file.exists()

    @pytest.mark.parametrize("content", ["", "\n", "  \n\n"])
    def test_empty_file_is_empty(self, history_file, content):
        history_file.write_text(content)
        assert load_history(str(history_file)).entries == []

    @pytest.mark.parametrize("content", ['{}', '{"entry": null}', '{"entry": []}'])
    def test_no_entries(self, history_file, content):
        history_file.write_text(content)
        assert load_history(str(history_file)).entries == []

    def test_entries_in_order(self, history_file):
        history_file.write_text('{"entry": ["ls", "pwd", "echo a | cat"]}\n')
        assert load_history(str(history_file)).entries == ["ls", "pwd", "echo a | cat"]

    @pytest.mark.parametrize("content", [
        "not json",
        '["ls"]',
        '{"entry": "ls"}',
        '{"entry": [1, 2]}',
    ])
    def test_bad_content(self, history_file, content):
        history_file.write_text(content)
        with pytest.raises(HistoryError):
            load_history(str(history_file))

    def test_unreadable_path(self, tmp_path):
        with pytest.raises(HistoryError):
            load_history(str(tmp_path))


class TestSave:

    def test_file_format(self, history_file):
        save_history(History(["ls", "pwd"]), str(history_file))
        assert json.loads(history_file.read_text()) == {"entry": ["ls", "pwd"]}

    def test_overwrites_previous_content(self, history_file):
        history_file.write_text('{"entry": ["a", "b", "c", "d"]}')
        save_history(History(["x"]), str(history_file))
        assert load_history(str(history_file)).entries == ["x"]

    def test_write_failure(self, tmp_path):
        with pytest.raises(HistoryError):
            save_history(History(["ls"]), str(tmp_path))

    def test_load_append_save_reload(self, history_file):
        """N loaded entries plus M appended ones come back as N+M, in order."""
        save_history(History(["one", "two", "three"]), str(history_file))

        history = load_history(str(history_file))
        for line in ["four", "five"]:
            history.append(line)
        save_history(history, str(history_file))

        assert load_history(str(history_file)).entries == [
            "one", "two", "three", "four", "five",
        ]
