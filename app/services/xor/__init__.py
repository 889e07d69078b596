"""
XOR key recovery engine.

Known-ciphertext-only attack on a repeating four-letter XOR key, combining
constraints from the XOR table with a dictionary used as a word oracle.
"""

from app.services.xor.constraints import ConstraintDeriver, PositionConstraint
from app.services.xor.filter import CandidateFilter
from app.services.xor.orchestrator import AttackOrchestrator, AttackResult
from app.services.xor.table import XorTable
from app.services.xor.types import Candidate, CiphertextSet
from app.services.xor.verifier import KeyVerifier

__all__ = [
    "XorTable",
    "ConstraintDeriver",
    "PositionConstraint",
    "CandidateFilter",
    "KeyVerifier",
    "AttackOrchestrator",
    "AttackResult",
    "Candidate",
    "CiphertextSet",
]
