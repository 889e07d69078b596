"""
Decode-and-verify pass over the candidate keys.

Each candidate key decodes every ciphertext; the key is accepted when the
decodes are dictionary words. Two acceptance rules are supported:

- tally (default): every dictionary occurrence of a decode counts, and the
  total must equal the number of ciphertexts. Duplicate dictionary entries
  therefore count twice.
- strict: every ciphertext must decode to exactly one dictionary entry.
"""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence

from app.services.xor.cipher import decode
from app.services.xor.table import XorTable
from app.services.xor.types import Candidate

logger = logging.getLogger(__name__)


class KeyVerifier:
    """Confirms or rejects candidate keys against the dictionary."""

    def verify(
        self,
        candidates: Sequence[str],
        ciphertexts: Sequence[Sequence[int]],
        xor_table: XorTable,
        dictionary: Iterable[str],
        strict: bool = False,
        max_workers: int = 1,
    ) -> list[Candidate]:
        """
        Verify every candidate key.

        Args:
            candidates: Candidate keys in evaluation order
            ciphertexts: Intercepted ciphertexts in fixed order
            xor_table: XOR relation table, used to sanity check key letters
            dictionary: Uppercased word list used as the word oracle
            strict: Require exactly one dictionary match per ciphertext
            max_workers: Evaluate candidates on a thread pool when above 1

        Returns:
            Accepted candidates, in candidate order
        """
        word_counts = Counter(dictionary)
        rows = [tuple(ciphertext) for ciphertext in ciphertexts]

        def evaluate(key: str) -> Candidate | None:
            return self._evaluate(key, rows, xor_table, word_counts, strict)

        if max_workers > 1 and len(candidates) > 1:
            # map() yields in submission order, so results stay sequential
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                results = list(executor.map(evaluate, candidates))
        else:
            results = [evaluate(key) for key in candidates]

        accepted = [result for result in results if result is not None]
        logger.debug("%d of %d candidate keys verified", len(accepted), len(candidates))
        return accepted

    def _evaluate(
        self,
        key: str,
        ciphertexts: list[tuple[int, ...]],
        xor_table: XorTable,
        word_counts: Counter[str],
        strict: bool,
    ) -> Candidate | None:
        if not all(char in xor_table.ALPHABET for char in key):
            return None

        plaintexts: list[str] = []

        for ciphertext in ciphertexts:
            plaintext = decode(ciphertext, key)

            if len(plaintext) != len(ciphertext):
                logger.debug("  %s is not an ASCII word (key %s)", plaintext, key)
                if strict:
                    return None
                continue

            matches = word_counts.get(plaintext, 0)
            if strict and matches != 1:
                return None
            plaintexts.extend([plaintext] * matches)

        if len(plaintexts) != len(ciphertexts):
            return None

        return Candidate(secret=key, plaintexts=tuple(plaintexts))
