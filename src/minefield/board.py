"""
Board module for the minefield engine.

Implements mine placement, cell revealing with flood fill, flagging
and win/lose detection. Boards are immutable values: every action
returns a new board and leaves the original untouched.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class InvalidConfiguration(ValueError):
    """Raised when board dimensions or mine count are out of range."""


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a minefield board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 10
    height: int = 5
    num_mines: int = 5

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height


# Preset difficulty levels
EASY = BoardConfig(10, 10, 10)
MEDIUM = BoardConfig(20, 15, 60)
HARD = BoardConfig(30, 20, 180)

PRESETS: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Minefield game board.

    Holds the grid of cells in row-major order (index = row * width + col)
    and the current game state.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    cells: Tuple[Cell, ...] = ()
    status: GameState = GameState.PLAYING

    def __post_init__(self) -> None:
        """Fill in an empty grid and check its size."""
        if not self.cells:
            object.__setattr__(
                self, "cells", tuple(Cell() for _ in range(self.config.total_cells))
            )
        if len(self.cells) != self.config.total_cells:
            raise InvalidConfiguration(
                f"Expected {self.config.total_cells} cells, got {len(self.cells)}"
            )

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def generate(
        cls, config: BoardConfig, rng: Optional[random.Random] = None
    ) -> "Board":
        """
        Create a new board with mines placed at random.

        Keeps drawing a uniformly random index and mining it unless it
        already holds a mine, until the configured count is reached.

        Args:
            config: Board dimensions and mine count.
            rng: Random source; the module-level generator if omitted.

        Returns:
            A fresh board in the playing state.
        """
        rng = rng or random.Random()
        mines: Set[int] = set()
        while len(mines) < config.num_mines:
            mines.add(rng.randrange(config.total_cells))
        logger.debug(
            "Generated %dx%d board with %d mines",
            config.width, config.height, config.num_mines,
        )
        return cls.from_mines(config, mines)

    @classmethod
    def from_mines(cls, config: BoardConfig, mines: Iterable[int]) -> "Board":
        """
        Create a board with mines at the given indices.

        Raises:
            InvalidConfiguration: If the indices do not match the config.
        """
        mine_set = set(mines)
        if len(mine_set) != config.num_mines:
            raise InvalidConfiguration(
                f"Expected {config.num_mines} mines, got {len(mine_set)}"
            )
        if any(not 0 <= index < config.total_cells for index in mine_set):
            raise InvalidConfiguration("Mine index outside the board")
        cells = tuple(
            Cell(has_mine=index in mine_set) for index in range(config.total_cells)
        )
        return cls(config=config, cells=cells)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def index_of(self, row: int, col: int) -> int:
        """Convert a (row, col) position to a flat cell index."""
        return row * self.config.width + col

    def position_of(self, index: int) -> Tuple[int, int]:
        """Convert a flat cell index to a (row, col) position."""
        return divmod(index, self.config.width)

    def _is_valid_index(self, index: int) -> bool:
        return 0 <= index < self.config.total_cells

    def neighbors(self, index: int) -> List[int]:
        """
        Get the indices of the up-to-8 cells around a cell.

        Neighbours are clamped at the board edges; there is no wraparound.
        """
        row, col = self.position_of(index)
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if 0 <= new_row < self.config.height and 0 <= new_col < self.config.width:
                    result.append(self.index_of(new_row, new_col))
        return result

    def count_adjacent_mines(self, index: int) -> int:
        """Count mined neighbours, whether or not they have been revealed."""
        return sum(1 for n in self.neighbors(index) if self.cells[n].has_mine)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, index: int) -> "Board":
        """
        Reveal the cell at the given index.

        A mine loses the game. A safe cell records its neighbour count and,
        when that count is zero, opens the surrounding cells in turn until
        the region is bordered by numbered cells. Flagged cells are never
        opened.

        Args:
            index: Flat index of the cell to open.

        Returns:
            The updated board, or this board if the reveal is not allowed.
        """
        if not self._can_reveal(index):
            return self

        cells = list(self.cells)
        if cells[index].has_mine:
            cells[index] = cells[index].opened()
            logger.debug("Mine hit at %s, game lost", self.position_of(index))
            return replace(self, cells=tuple(cells), status=GameState.LOST)

        pending = deque([index])
        while pending:
            current = pending.popleft()
            cell = cells[current]
            if cell.revealed or cell.flagged:
                continue
            count = self.count_adjacent_mines(current)
            cells[current] = cell.opened(count)
            if count == 0:
                pending.extend(
                    n for n in self.neighbors(current)
                    if not cells[n].revealed and not cells[n].flagged
                )

        status = self.status
        hidden = sum(1 for cell in cells if not cell.revealed)
        if hidden <= self.config.num_mines:
            status = GameState.WON
            logger.debug("All free cells open, game won")
        return replace(self, cells=tuple(cells), status=status)

    def _can_reveal(self, index: int) -> bool:
        """Check if a cell can be revealed."""
        if self.status != GameState.PLAYING:
            return False
        if not self._is_valid_index(index):
            return False
        cell = self.cells[index]
        return not cell.revealed and not cell.flagged

    def toggle_flag(self, index: int) -> "Board":
        """
        Toggle the flag on a hidden cell.

        Returns:
            The updated board, or this board if the game is over, the
            index is invalid or the cell is already revealed.
        """
        if self.status != GameState.PLAYING:
            return self
        if not self._is_valid_index(index):
            return self
        if self.cells[index].revealed:
            return self
        cells = list(self.cells)
        cells[index] = cells[index].flag_toggled()
        return replace(self, cells=tuple(cells))

    def reveal_at(self, row: int, col: int) -> "Board":
        """Reveal by (row, col); out-of-bounds positions are ignored."""
        if not (0 <= row < self.config.height and 0 <= col < self.config.width):
            return self
        return self.reveal(self.index_of(row, col))

    def toggle_flag_at(self, row: int, col: int) -> "Board":
        """Toggle a flag by (row, col); out-of-bounds positions are ignored."""
        if not (0 <= row < self.config.height and 0 <= col < self.config.width):
            return self
        return self.toggle_flag(self.index_of(row, col))

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.status == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        return self.status == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self.status == GameState.LOST

    @property
    def hidden_count(self) -> int:
        """Number of cells not yet revealed, flagged ones included."""
        return sum(1 for cell in self.cells if not cell.revealed)

    @property
    def mine_count(self) -> int:
        return sum(1 for cell in self.cells if cell.has_mine)

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self.cells if cell.flagged)

    @property
    def mines_remaining(self) -> int:
        """Mines left to find, assuming every flag is correct."""
        return self.config.num_mines - self.flag_count

    def get_cell(self, index: int) -> Optional[Cell]:
        """Get cell at index, or None if invalid."""
        if not self._is_valid_index(index):
            return None
        return self.cells[index]

    def display_value(self, index: int) -> str:
        """Text for a cell, masked unless it is revealed or flagged."""
        return self.cells[index].display_value()

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [cell.to_observation() for cell in self.cells]
        return np.array(values, dtype=np.int8).reshape(
            self.config.height, self.config.width
        )

    def get_valid_actions(self) -> List[int]:
        """Indices of cells that can still be revealed."""
        if not self.is_playing:
            return []
        return [
            index for index, cell in enumerate(self.cells)
            if not cell.revealed and not cell.flagged
        ]


def generate(
    width: int, height: int, num_mines: int, rng: Optional[random.Random] = None
) -> Board:
    """
    Generate a new board.

    Raises:
        InvalidConfiguration: If the dimensions or mine count are invalid.
    """
    return Board.generate(BoardConfig(width, height, num_mines), rng)
