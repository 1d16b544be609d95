"""
Cryptogram puzzle state.

Tracks the player's attempt at decoding a quote: which plain letter they
have entered for each substituted letter, which letters were given away
as hints, and whether the puzzle is solved. Puzzles are immutable values;
every action returns a new puzzle.
"""
import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any, Dict, FrozenSet, List, NamedTuple, Optional

from .cipher import (
    ALPHABET,
    Cipher,
    Goal,
    check_solved,
    generate_cipher,
    invert,
    is_letter,
    letters_in,
)
from .quotes import Quote


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class PuzzleState(Enum):
    """Possible states of a puzzle."""

    IN_PROGRESS = auto()
    SOLVED = auto()


class InvalidRecord(ValueError):
    """Raised when a saved record cannot be loaded for a quote."""


class LetterResult(NamedTuple):
    """
    Outcome of entering a letter.

    Attributes:
        puzzle: Puzzle after the entry.
        next_focus: Quote position of the next empty input, or None when
            the puzzle is solved or every input is filled.
    """

    puzzle: "Puzzle"
    next_focus: Optional[int]


# ============================================================================
# Puzzle Class
# ============================================================================

@dataclass(frozen=True)
class Puzzle:
    """
    A cryptogram built from one quote.

    Attributes:
        quote: Source phrase and author.
        cipher: Plain letter -> substituted letter, for all of A-Z.
        goal: Substituted letter -> plain letter, for letters in the quote.
        solve_attempt: Substituted letter -> letter entered by the player.
        hints: Substituted letters revealed as hints; these are locked.
        status: Whether the puzzle has been solved.
    """

    quote: Quote
    cipher: Cipher
    goal: Goal
    solve_attempt: Dict[str, str] = field(default_factory=dict)
    hints: FrozenSet[str] = frozenset()
    status: PuzzleState = PuzzleState.IN_PROGRESS

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def build(cls, quote: Quote, rng: Optional[random.Random] = None) -> "Puzzle":
        """Create a fresh puzzle for a quote with a newly generated cipher."""
        cipher, goal = generate_cipher(letters_in(quote.text), rng)
        logger.debug("Built puzzle with %d letters for %r", len(goal), quote.author)
        # A quote without letters has nothing to decode
        status = PuzzleState.SOLVED if not goal else PuzzleState.IN_PROGRESS
        return cls(quote=quote, cipher=cipher, goal=goal, status=status)

    @classmethod
    def from_record(cls, quote: Quote, record: Dict[str, Any]) -> "Puzzle":
        """
        Rehydrate a saved puzzle for the same quote.

        Args:
            quote: Quote the record was saved for.
            record: Mapping with cipher, goal, solve_attempt, hints and
                finished keys, as produced by `to_record`.

        Raises:
            InvalidRecord: If the record is malformed or does not fit the quote.
        """
        try:
            cipher = {str(k).upper(): str(v).upper() for k, v in record["cipher"].items()}
            goal = {str(k).upper(): str(v).upper() for k, v in record["goal"].items()}
            attempt = {
                str(k).upper(): str(v).upper()
                for k, v in record.get("solve_attempt", {}).items()
                if v
            }
            hints = frozenset(str(h).upper() for h in record.get("hints", []))
            finished = bool(record.get("finished", False))
        except (KeyError, AttributeError, TypeError) as exc:
            raise InvalidRecord(f"Malformed puzzle record: {exc}") from exc

        if set(cipher) != set(ALPHABET) or set(cipher.values()) != set(ALPHABET):
            raise InvalidRecord("Cipher is not a permutation of the alphabet")
        if any(cipher[letter] == letter for letter in letters_in(quote.text)):
            raise InvalidRecord("Cipher maps a letter of the quote to itself")
        if goal != invert(cipher, letters_in(quote.text)):
            raise InvalidRecord("Goal does not match the cipher for this quote")
        if not hints <= set(goal):
            raise InvalidRecord("Hints include letters not in the puzzle")
        if any(not is_letter(v) for v in attempt.values()):
            raise InvalidRecord("Solve attempt holds non-letter entries")

        solved = finished or check_solved(goal, attempt)
        return cls(
            quote=quote,
            cipher=cipher,
            goal=goal,
            solve_attempt=attempt,
            hints=hints,
            status=PuzzleState.SOLVED if solved else PuzzleState.IN_PROGRESS,
        )

    def to_record(self) -> Dict[str, Any]:
        """Emit a JSON-safe record that `from_record` can load."""
        return {
            "cipher": dict(self.cipher),
            "goal": dict(self.goal),
            "solve_attempt": dict(self.solve_attempt),
            "hints": sorted(self.hints),
            "finished": self.is_solved,
        }

    # ========================================================================
    # Text Positions (Low-level)
    # ========================================================================

    def substituted_at(self, position: int) -> Optional[str]:
        """Substituted letter shown at a quote position, or None for non-letters."""
        character = self.quote.text[position]
        if not is_letter(character):
            return None
        return self.cipher[character.upper()]

    def first_position_of(self, substituted: str) -> Optional[int]:
        """First quote position showing the given substituted letter."""
        for position in range(len(self.quote.text)):
            if self.substituted_at(position) == substituted:
                return position
        return None

    def next_empty_position(self, position: int) -> Optional[int]:
        """
        Find the next quote position whose input is still empty.

        Scans forward from just after `position`, wrapping to the start and
        skipping non-letters. The starting position itself is not a candidate.
        """
        length = len(self.quote.text)
        for step in range(1, length):
            index = (position + step) % length
            substituted = self.substituted_at(index)
            if substituted is not None and not self.solve_attempt.get(substituted):
                return index
        return None

    # ========================================================================
    # Player Actions (Mid-level)
    # ========================================================================

    def apply_letter(
        self, substituted: str, entered: str, position: Optional[int] = None
    ) -> LetterResult:
        """
        Enter a guess for a substituted letter.

        Args:
            substituted: Cipher letter the player is filling in.
            entered: Guessed plain letter, or "" to clear the entry.
            position: Quote position that was edited; defaults to the first
                position showing `substituted`.

        Returns:
            The updated puzzle and the position to focus next. The puzzle is
            unchanged if it is solved, the letter is not in the puzzle or is
            locked by a hint, or `entered` is not a letter.
        """
        substituted = substituted.upper()
        if self.is_solved or substituted not in self.goal or substituted in self.hints:
            return LetterResult(self, None)
        if entered and not is_letter(entered):
            return LetterResult(self, None)

        attempt = dict(self.solve_attempt)
        if entered:
            attempt[substituted] = entered.upper()
        else:
            attempt.pop(substituted, None)

        if check_solved(self.goal, attempt):
            logger.debug("Puzzle solved")
            return LetterResult(
                replace(self, solve_attempt=attempt, status=PuzzleState.SOLVED), None
            )

        updated = replace(self, solve_attempt=attempt)
        if position is None:
            position = self.first_position_of(substituted)
        return LetterResult(updated, updated.next_empty_position(position))

    def get_hint(self, rng: Optional[random.Random] = None) -> "Puzzle":
        """
        Reveal the correct letter for one substituted letter.

        Wrong entries are corrected before empty ones are filled. The chosen
        letter becomes locked.

        Returns:
            The updated puzzle, or this puzzle if it is solved or every
            letter has already been hinted.
        """
        if self.is_solved:
            return self
        unhinted = [sub for sub in sorted(self.goal) if sub not in self.hints]
        if not unhinted:
            return self

        incorrect = [sub for sub in self.incorrect_letters() if sub not in self.hints]
        empty = [sub for sub in unhinted if not self.solve_attempt.get(sub)]
        candidates = incorrect or empty
        if not candidates:
            return self

        rng = rng or random.Random()
        choice = rng.choice(candidates)
        attempt = dict(self.solve_attempt)
        attempt[choice] = self.goal[choice]
        status = PuzzleState.SOLVED if check_solved(self.goal, attempt) else self.status
        logger.debug("Hint revealed %s -> %s", choice, self.goal[choice])
        return replace(
            self,
            solve_attempt=attempt,
            hints=self.hints | {choice},
            status=status,
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def is_solved(self) -> bool:
        return self.status == PuzzleState.SOLVED

    @property
    def letters_in_use(self) -> FrozenSet[str]:
        """Substituted letters that appear in the encoded quote."""
        return frozenset(self.goal)

    @property
    def encoded_text(self) -> str:
        """The quote with every letter replaced by its substitute."""
        return "".join(
            self.cipher[ch.upper()] if is_letter(ch) else ch for ch in self.quote.text
        )

    @property
    def remaining(self) -> int:
        """Number of letters in use with no entry yet."""
        return sum(1 for sub in self.goal if not self.solve_attempt.get(sub))

    def is_locked(self, substituted: str) -> bool:
        """Check if input for a substituted letter no longer accepts edits."""
        return self.is_solved or substituted.upper() in self.hints

    def display_value(self, substituted: str) -> str:
        """Entry shown for a substituted letter, blank until filled or hinted."""
        return self.solve_attempt.get(substituted.upper(), "")

    def incorrect_letters(self) -> List[str]:
        """Substituted letters whose entry does not match the goal."""
        return [
            sub for sub in sorted(self.goal)
            if self.solve_attempt.get(sub) and self.solve_attempt[sub] != self.goal[sub]
        ]
