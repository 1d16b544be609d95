"""
Quote records used as cryptogram source phrases.
"""
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union


@dataclass(frozen=True)
class Quote:
    """
    A phrase to encode and the person it is attributed to.

    Attributes:
        text: Phrase the player decodes.
        author: Attribution shown under the puzzle.
    """

    text: str
    author: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quote":
        """
        Build a quote from a record.

        Accepts both the {"Quote", "Author"} layout of the quote list
        files and lower-case {"text", "author"} keys.

        Raises:
            ValueError: If the record has no phrase.
        """
        text = data.get("Quote", data.get("text"))
        if not text:
            raise ValueError("Quote record has no text")
        author = data.get("Author", data.get("author", ""))
        return cls(text=str(text), author=str(author or ""))


QUOTES: Tuple[Quote, ...] = (
    Quote("The only thing we have to fear is fear itself.", "Franklin D. Roosevelt"),
    Quote("Not all those who wander are lost.", "J. R. R. Tolkien"),
    Quote("Simplicity is prerequisite for reliability.", "Edsger W. Dijkstra"),
    Quote("I think, therefore I am.", "Rene Descartes"),
    Quote("Well begun is half done.", "Aristotle"),
    Quote("Brevity is the soul of wit.", "William Shakespeare"),
    Quote("The unexamined life is not worth living.", "Socrates"),
    Quote("Fortune favors the bold.", "Virgil"),
)


def load_quotes(path: Union[str, Path]) -> List[Quote]:
    """
    Load quotes from a JSON file holding a list of quote records.

    Raises:
        ValueError: If the file does not contain a list of records.
    """
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of quote records")
    return [Quote.from_dict(item) for item in data]
