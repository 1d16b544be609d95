"""
Cryptogram game module.

Provides the substitution cipher, puzzle state and progress storage.
"""
from .cipher import (
    ALPHABET,
    check_solved,
    generate_cipher,
    invert,
    letters_in,
    sattolo_cycle,
)
from .quotes import Quote, QUOTES, load_quotes
from .puzzle import InvalidRecord, LetterResult, Puzzle, PuzzleState
from .storage import ProgressStore

__all__ = [
    "ALPHABET",
    "check_solved",
    "generate_cipher",
    "invert",
    "letters_in",
    "sattolo_cycle",
    "Quote",
    "QUOTES",
    "load_quotes",
    "InvalidRecord",
    "LetterResult",
    "Puzzle",
    "PuzzleState",
    "ProgressStore",
]
