"""
Cell module for the minefield engine.

Represents one square of the grid: whether it holds a mine, whether the
player has opened or flagged it, and its neighbour count once opened.
"""
from dataclasses import dataclass, replace
from typing import Optional


# ============================================================================
# Observation Codes
# ============================================================================

HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9

FLAG_SYMBOL = "!"
MINE_SYMBOL = "X"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    A single cell in the minefield grid.

    Cells are immutable; the board swaps in updated copies.

    Attributes:
        has_mine: Whether this cell contains a mine.
        revealed: Whether the player has opened this cell.
        flagged: Whether the player has marked this cell as a suspected mine.
        adjacent_count: Mines among the neighbours, set when a safe cell
            is revealed and None before that.
    """

    has_mine: bool = False
    revealed: bool = False
    flagged: bool = False
    adjacent_count: Optional[int] = None

    def opened(self, adjacent_count: Optional[int] = None) -> "Cell":
        """Return a revealed copy, recording the neighbour count for safe cells."""
        count = None if self.has_mine else adjacent_count
        return replace(self, revealed=True, flagged=False, adjacent_count=count)

    def flag_toggled(self) -> "Cell":
        """Return a copy with the flag flipped (revealed cells are unchanged)."""
        if self.revealed:
            return self
        return replace(self, flagged=not self.flagged)

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return not self.revealed and not self.flagged

    @property
    def is_revealed(self) -> bool:
        return self.revealed

    @property
    def is_flagged(self) -> bool:
        return self.flagged

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (lost game)
        """
        if self.flagged:
            return FLAGGED_CODE
        if not self.revealed:
            return HIDDEN_CODE
        if self.has_mine:
            return MINE_CODE
        return self.adjacent_count or 0

    def display_value(self) -> str:
        """
        Text shown for this cell, masked unless opened or flagged.

        Zero-count cells display as blank, like hidden ones; callers tell
        them apart through `is_revealed`.
        """
        if self.flagged:
            return FLAG_SYMBOL
        if not self.revealed:
            return ""
        if self.has_mine:
            return MINE_SYMBOL
        return str(self.adjacent_count) if self.adjacent_count else ""
