"""
Per-position key constraints derived from the XOR table.

A letter can only be the key character at position ``i`` if, for every
intercepted ciphertext, some secret letter XORs with it to the observed byte
at ``i``. This is a necessary condition, never a sufficient one, so the true
key always survives it.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from app.services.xor.table import XorTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PositionConstraint:
    """Letters still possible at one key position."""

    position: int
    letters: frozenset[str]

    def __contains__(self, letter: str) -> bool:
        return letter in self.letters

    def __len__(self) -> int:
        return len(self.letters)

    @property
    def is_empty(self) -> bool:
        return not self.letters

    @property
    def char_class(self) -> str:
        """Regex character class with the letters in alphabet order."""
        return "[" + "".join(sorted(self.letters)) + "]"


def constraints_pattern(constraints: Iterable[PositionConstraint]) -> str:
    """Anchored regular expression a key has to match, e.g. ``^[AB][C]...$``."""
    return "^" + "".join(c.char_class for c in constraints) + "$"


class ConstraintDeriver:
    """Derives the possible key letters for every key position."""

    def derive(
        self,
        xor_table: XorTable,
        ciphertexts: Sequence[Sequence[int]],
        key_length: int = 4,
    ) -> list[PositionConstraint]:
        """
        Compute one constraint per key position.

        Args:
            xor_table: Prebuilt XOR relation table
            ciphertexts: Observed ciphertexts, each ``key_length`` bytes wide
            key_length: Number of key positions

        Returns:
            List of PositionConstraint, possibly with empty letter sets
        """
        constraints = []

        for position in range(key_length):
            observed = [ciphertext[position] for ciphertext in ciphertexts]
            letters = frozenset(
                key
                for key in xor_table.ALPHABET
                if self._satisfied_count(xor_table, key, observed) >= len(observed)
            )
            if not letters:
                logger.info("No key letter fits position %d", position)
            constraints.append(PositionConstraint(position=position, letters=letters))

        logger.debug("Key pattern: %s", constraints_pattern(constraints))
        return constraints

    def _satisfied_count(
        self,
        xor_table: XorTable,
        key: str,
        observed: list[int],
    ) -> int:
        """Number of observed bytes some secret letter produces with ``key``."""
        column = xor_table.column(key)
        return sum(1 for byte in observed if byte in column)
