"""
Substitution cipher generation and solve checking.

A cipher maps every plain letter A-Z to a substituted letter. It is built
with Sattolo's algorithm, which always yields a single cycle through the
whole alphabet, so no letter is ever substituted by itself.
"""
import random
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar


T = TypeVar("T")

ALPHABET: Tuple[str, ...] = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

Cipher = Dict[str, str]
Goal = Dict[str, str]


def is_letter(character: str) -> bool:
    """Check if a character is one of A-Z, in either case."""
    return len(character) == 1 and character.upper() in ALPHABET


def letters_in(text: str) -> frozenset:
    """Upper-cased A-Z letters that occur in a text."""
    return frozenset(ch.upper() for ch in text if is_letter(ch))


def sattolo_cycle(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Shuffle items into a single cycle.

    For i from n-1 down to 1, swaps position i with a position j drawn
    from [0, i). Excluding j == i is what rules out fixed points.

    Args:
        items: Elements to shuffle; left untouched.
        rng: Random source.

    Returns:
        A new list where no element is at its original position.

    Raises:
        ValueError: If fewer than two items are given.
    """
    if len(items) < 2:
        raise ValueError("Need at least two items to build a cycle")
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def generate_cipher(
    letters_in_use: Iterable[str], rng: Optional[random.Random] = None
) -> Tuple[Cipher, Goal]:
    """
    Build a cipher for the alphabet and the goal the player must recover.

    Args:
        letters_in_use: Plain letters appearing in the puzzle text.
        rng: Random source.

    Returns:
        (cipher, goal): cipher maps every plain letter to its substitute;
        goal maps substitutes back to plain letters, for letters in use only.

    Raises:
        ValueError: If a letter in use is not in A-Z.
    """
    in_use = {letter.upper() for letter in letters_in_use}
    unknown = in_use.difference(ALPHABET)
    if unknown:
        raise ValueError(f"Not alphabet letters: {sorted(unknown)}")

    substitutes = sattolo_cycle(ALPHABET, rng)
    cipher = dict(zip(ALPHABET, substitutes))
    return cipher, invert(cipher, in_use)


def invert(cipher: Mapping[str, str], letters_in_use: Iterable[str]) -> Goal:
    """Inverse of a cipher restricted to the given plain letters."""
    return {cipher[plain]: plain for plain in sorted(set(letters_in_use))}


def check_solved(goal: Mapping[str, str], solve_attempt: Mapping[str, str]) -> bool:
    """
    Check whether a solve attempt matches the goal.

    Entries in the attempt for letters outside the goal are ignored.
    """
    return all(solve_attempt.get(sub) == plain for sub, plain in goal.items())
