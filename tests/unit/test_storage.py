"""
Unit tests for the JSON progress store.
"""
import json
import random

from cryptogram import ProgressStore, Puzzle, Quote


class TestProgressStore:
    """Test saving and reloading progress."""

    def test_new_store_is_empty(self, tmp_path) -> None:
        store = ProgressStore(tmp_path / "progress.json")
        assert store.current == 0
        assert store.load_puzzle(0, Quote("AB BA")) is None
        assert 0 not in store

    def test_save_and_reload(self, tmp_path, ab_puzzle: Puzzle) -> None:
        path = tmp_path / "nested" / "progress.json"
        puzzle, _ = ab_puzzle.apply_letter("B", "A")

        store = ProgressStore(path)
        store.save_puzzle(3, puzzle)
        store.current = 3
        store.save()

        reopened = ProgressStore(path)
        assert reopened.current == 3
        assert 3 in reopened
        assert reopened.load_puzzle(3, ab_puzzle.quote) == puzzle

    def test_file_layout(self, tmp_path, ab_puzzle: Puzzle) -> None:
        path = tmp_path / "progress.json"
        store = ProgressStore(path)
        store.save_puzzle(0, ab_puzzle)
        store.save()

        data = json.loads(path.read_text())
        assert data["current"] == 0
        assert data["puzzles"]["0"]["finished"] is False

    def test_record_for_changed_quote_is_discarded(self, tmp_path) -> None:
        store = ProgressStore(tmp_path / "progress.json")
        store.save_puzzle(0, Puzzle.build(Quote("AB BA"), random.Random(5)))
        assert store.load_puzzle(0, Quote("Something else entirely")) is None
        assert 0 not in store

    def test_forget(self, tmp_path, ab_puzzle: Puzzle) -> None:
        store = ProgressStore(tmp_path / "progress.json")
        store.save_puzzle("daily", ab_puzzle)
        store.forget("daily")
        assert "daily" not in store
