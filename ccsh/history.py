import json
import os
from ccsh.errors import HistoryError


class History:
    """Raw input lines in the order they were entered."""

    def __init__(self, entries=None):
        self.entries = list(entries or [])

    def append(self, line):
        self.entries.append(line)

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def to_dict(self):
        return {"entry": list(self.entries)}

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise HistoryError("history file must hold a JSON object")
        entries = data.get("entry") or []
        if not isinstance(entries, list) or not all(isinstance(e, str) for e in entries):
            raise HistoryError("'entry' must be a list of strings")
        return cls(entries)


def load_history(path):
    """
    Load history from file.
    Missing or empty file -> empty history.
    """
    if not os.path.exists(path):
        return History()

    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise HistoryError(f"could not read {path}: {e}") from e

    if not text.strip():
        return History()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise HistoryError(f"could not parse {path}: {e}") from e

    return History.from_dict(data)


def save_history(history, path):
    """Write history to file, replacing its content"""
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(history.to_dict(), f)
            f.write("\n")
    except OSError as e:
        raise HistoryError(f"could not write {path}: {e}") from e


def show_history(history):
    for line in history:
        print(line)
