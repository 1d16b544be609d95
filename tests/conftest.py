"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports, and the repo root for the CLI module
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from minefield import Board, BoardConfig, Cell
from cryptogram import ALPHABET, Puzzle, Quote, invert, letters_in


# ============================================================================
# Randomness Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for deterministic tests."""
    return random.Random(1234)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_board() -> Board:
    """5x5 board with a single mine in the bottom-right corner (index 24)."""
    return Board.from_mines(BoardConfig(5, 5, 1), [24])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.from_mines(BoardConfig(5, 5, 0), [])


@pytest.fixture
def strip_board() -> Board:
    """3x1 strip with a mine in the middle."""
    return Board.from_mines(BoardConfig(3, 1, 1), [1])


@pytest.fixture
def default_board() -> Board:
    """Create a default 10x5 board with 5 mines."""
    return Board.generate(BoardConfig(), random.Random(7))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)


# ============================================================================
# Cryptogram Fixtures
# ============================================================================

@pytest.fixture
def shift_cipher() -> dict:
    """Cipher shifting every letter one place (A->B, ..., Z->A)."""
    return {plain: ALPHABET[(i + 1) % 26] for i, plain in enumerate(ALPHABET)}


@pytest.fixture
def ab_quote() -> Quote:
    return Quote("AB BA", "Nobody")


@pytest.fixture
def ab_puzzle(ab_quote: Quote, shift_cipher: dict) -> Puzzle:
    """Puzzle for "AB BA" encoded as "BC CB"."""
    goal = invert(shift_cipher, letters_in(ab_quote.text))
    return Puzzle(quote=ab_quote, cipher=shift_cipher, goal=goal)


@pytest.fixture
def long_puzzle(shift_cipher: dict) -> Puzzle:
    """Puzzle with a longer quote for hint testing."""
    quote = Quote("The quick brown fox jumps over the lazy dog.", "Typist")
    goal = invert(shift_cipher, letters_in(quote.text))
    return Puzzle(quote=quote, cipher=shift_cipher, goal=goal)
