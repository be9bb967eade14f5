"""Tokenization and stemming helpers shared by the matchers.

Each matching call builds its own ``TextAnalyzer`` so concurrent calls
never share tokenizer or stemmer state.
"""

from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

# Word characters only: punctuation is a boundary, never part of a token
WORD_PATTERN = r"\w+"


class TextAnalyzer:
    """Lowercasing word tokenizer paired with a Porter stemmer."""

    def __init__(self) -> None:
        self._tokenizer = RegexpTokenizer(WORD_PATTERN)
        self._stemmer = PorterStemmer()

    def tokenize(self, text: str) -> list[str]:
        return self._tokenizer.tokenize(text.lower())

    def stem(self, word: str) -> str:
        return self._stemmer.stem(word)

    def normalize_skill(self, skill: str) -> str:
        """Lowercase, trim and stem a skill name ("Programming " -> "program")."""
        return self.stem(skill.lower().strip())


def percentage(part: int, whole: int) -> int:
    """Return part/whole as a 0-100 integer, rounding halves up.

    Integer arithmetic keeps 12.5 -> 13 exact (``round`` would give 12).
    """
    if whole <= 0:
        return 0
    return (part * 200 + whole) // (2 * whole)
