"""
JSON file store for cryptogram progress.

Keeps one saved record per puzzle id plus the index of the puzzle the
player was last working on. The puzzle engine itself never touches
storage; front-ends load and save through this store.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .puzzle import InvalidRecord, Puzzle
from .quotes import Quote


logger = logging.getLogger(__name__)


class ProgressStore:
    """
    Saved puzzle records keyed by puzzle id.

    File layout:
        {"current": 0, "puzzles": {"0": {...record...}, ...}}
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Open a store, reading existing progress if the file exists.

        Args:
            path: JSON file to read from and write to.
        """
        self.path = Path(path)
        self._current = 0
        self._puzzles: Dict[str, Dict[str, Any]] = {}
        if self.path.exists():
            self._load()

    def _load(self) -> None:
        with open(self.path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path}: expected a JSON object")
        self._current = int(data.get("current", 0))
        self._puzzles = dict(data.get("puzzles", {}))

    def save(self) -> None:
        """Write progress to disk."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(
                {"current": self._current, "puzzles": self._puzzles}, f, indent=2
            )

    @property
    def current(self) -> int:
        """Index of the puzzle last selected."""
        return self._current

    @current.setter
    def current(self, index: int) -> None:
        self._current = index

    def load_puzzle(self, puzzle_id: Union[int, str], quote: Quote) -> Optional[Puzzle]:
        """
        Load the saved puzzle for an id.

        Returns:
            The rehydrated puzzle, or None if nothing usable is saved. A
            record that no longer fits the quote is discarded.
        """
        record = self._puzzles.get(str(puzzle_id))
        if record is None:
            return None
        try:
            return Puzzle.from_record(quote, record)
        except InvalidRecord as exc:
            logger.warning("Discarding saved puzzle %s: %s", puzzle_id, exc)
            del self._puzzles[str(puzzle_id)]
            return None

    def save_puzzle(self, puzzle_id: Union[int, str], puzzle: Puzzle) -> None:
        """Store a puzzle's record; call `save` to write it out."""
        self._puzzles[str(puzzle_id)] = puzzle.to_record()

    def forget(self, puzzle_id: Union[int, str]) -> None:
        """Drop the saved record for an id, if any."""
        self._puzzles.pop(str(puzzle_id), None)

    def __contains__(self, puzzle_id: object) -> bool:
        return str(puzzle_id) in self._puzzles
