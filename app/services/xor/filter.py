"""
Dictionary filter producing candidate keys.

Only dictionary words are tried as keys. The dictionary is cut down to words
of the key length and uppercased, then matched against the position
constraints.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from app.services.xor.constraints import PositionConstraint

logger = logging.getLogger(__name__)


@dataclass
class FilterResult:
    """Result of filtering a word list down to candidate keys."""

    candidates: list[str]
    dictionary: list[str]
    dictionary_size: int

    @property
    def length_matches(self) -> int:
        return len(self.dictionary)


class CandidateFilter:
    """Selects dictionary words that satisfy every position constraint."""

    def restrict(self, words: Iterable[str], length: int = 4) -> list[str]:
        """
        Keep words of exactly ``length`` characters, uppercased, in order.

        The length check runs on the raw entry, before case conversion.
        """
        return [word.upper() for word in words if len(word) == length]

    def filter(
        self,
        dictionary: Iterable[str],
        constraints: Sequence[PositionConstraint],
    ) -> list[str]:
        """
        Return the words usable as keys.

        Args:
            dictionary: Word list, raw or already restricted
            constraints: One constraint per key position

        Returns:
            Candidate keys in dictionary order
        """
        return self.filter_full(dictionary, constraints).candidates

    def filter_full(
        self,
        dictionary: Iterable[str],
        constraints: Sequence[PositionConstraint],
    ) -> FilterResult:
        """Like ``filter`` but also report the stage counts."""
        words = list(dictionary)
        length = len(constraints)
        restricted = self.restrict(words, length)

        candidates = [word for word in restricted if self._matches(word, constraints)]

        logger.debug(
            "%d words, %d of length %d, %d candidate keys",
            len(words),
            len(restricted),
            length,
            len(candidates),
        )
        return FilterResult(
            candidates=candidates,
            dictionary=restricted,
            dictionary_size=len(words),
        )

    def _matches(self, word: str, constraints: Sequence[PositionConstraint]) -> bool:
        # uppercasing can change the length (e.g. "ß" -> "SS")
        if len(word) != len(constraints):
            return False
        return all(char in constraint for char, constraint in zip(word, constraints))
