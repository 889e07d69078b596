"""
Attack orchestrator - runs the full key recovery pipeline.

1. Build the XOR relation table
2. Derive the possible letters for each key position
3. Filter the dictionary down to candidate keys
4. Decode every ciphertext with every candidate and verify the words
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from app.services.xor.constraints import ConstraintDeriver, PositionConstraint, constraints_pattern
from app.services.xor.filter import CandidateFilter
from app.services.xor.table import XorTable
from app.services.xor.types import Candidate, CiphertextSet
from app.services.xor.verifier import KeyVerifier

logger = logging.getLogger(__name__)


@dataclass
class AttackResult:
    """Result of one key recovery run."""

    constraints: list[PositionConstraint]
    pattern: str

    # Stage counts
    dictionary_size: int
    length_matches: int
    candidate_keys: list[str] = field(default_factory=list)

    # Accepted keys with their decoded words
    solutions: list[Candidate] = field(default_factory=list)


class AttackOrchestrator:
    """Chains XorTable, ConstraintDeriver, CandidateFilter and KeyVerifier."""

    def __init__(self, xor_table: XorTable | None = None):
        self.xor_table = xor_table or XorTable.build()
        self.deriver = ConstraintDeriver()
        self.filter = CandidateFilter()
        self.verifier = KeyVerifier()

    def run(
        self,
        ciphertexts: CiphertextSet,
        words: Iterable[str],
        options: dict[str, Any] | None = None,
    ) -> AttackResult:
        """
        Recover candidate keys for a ciphertext set.

        Args:
            ciphertexts: Intercepted ciphertexts
            words: Raw dictionary words
            options: ``strict`` (bool) and ``max_workers`` (int)

        Returns:
            AttackResult; no solutions is a normal outcome
        """
        options = options or {}
        key_length = ciphertexts.key_length

        constraints = self.deriver.derive(self.xor_table, ciphertexts.rows, key_length)
        pattern = constraints_pattern(constraints)
        logger.info("The key will have to match this regular expression: %s", pattern)

        filtered = self.filter.filter_full(words, constraints)
        logger.info(
            "%d words in the dictionary, %d contain %d characters",
            filtered.dictionary_size,
            filtered.length_matches,
            key_length,
        )
        logger.info(
            "%d words are plain text/secret key candidates: %s",
            len(filtered.candidates),
            filtered.candidates,
        )

        solutions = self.verifier.verify(
            filtered.candidates,
            ciphertexts.rows,
            self.xor_table,
            filtered.dictionary,
            strict=bool(options.get("strict", False)),
            max_workers=int(options.get("max_workers", 1)),
        )

        logger.info("Found %d solutions", len(solutions))
        for candidate in solutions:
            logger.info("found candidate: %s -> %s", candidate.secret, list(candidate.plaintexts))

        return AttackResult(
            constraints=constraints,
            pattern=pattern,
            dictionary_size=filtered.dictionary_size,
            length_matches=filtered.length_matches,
            candidate_keys=filtered.candidates,
            solutions=solutions,
        )
