"""
XOR relation table over the uppercase alphabet.

XORing two ASCII capitals only ever touches the low five bits, so every
value lies in 0..31. Each letter reaches 26 of those 32 values; the six it
cannot reach are what makes per-position key constraints possible.
"""

import string
from types import MappingProxyType
from typing import ClassVar, Mapping


class XorTable:
    """Symmetric table of ``ord(a) ^ ord(b)`` for all uppercase letter pairs."""

    ALPHABET: ClassVar[str] = string.ascii_uppercase

    def __init__(self, values: Mapping[str, Mapping[str, int]]):
        self._values = MappingProxyType(
            {row: MappingProxyType(dict(cols)) for row, cols in values.items()}
        )
        self._columns = MappingProxyType(
            {key: frozenset(cols.values()) for key, cols in self._values.items()}
        )

    @classmethod
    def build(cls) -> "XorTable":
        """
        Compute the table for the fixed alphabet.

        Returns:
            A fresh, read-only XorTable
        """
        values: dict[str, dict[str, int]] = {letter: {} for letter in cls.ALPHABET}

        for i, secret in enumerate(cls.ALPHABET):
            for key in cls.ALPHABET[: i + 1]:
                value = ord(secret) ^ ord(key)
                # symmetric, fill both directions at once
                values[secret][key] = value
                values[key][secret] = value

        return cls(values)

    def __getitem__(self, letter: str) -> Mapping[str, int]:
        return self._values[letter]

    def value(self, secret: str, key: str) -> int:
        return self._values[secret][key]

    def column(self, key: str) -> frozenset[int]:
        """All byte values some secret letter produces with ``key``."""
        return self._columns[key]

    def as_matrix(self) -> list[list[int]]:
        """Rows and columns in alphabet order."""
        return [
            [self._values[secret][key] for key in self.ALPHABET]
            for secret in self.ALPHABET
        ]

    def render(self) -> str:
        """
        Render the table as a text grid.

        Letters label the columns above and below and the rows on both sides.
        """
        head = "   " + "".join(f" {key} " for key in self.ALPHABET)
        lines = [head]
        for secret in self.ALPHABET:
            cells = "".join(
                f" {self._values[secret][key]:>2}" for key in self.ALPHABET
            )
            lines.append(f" {secret}{cells} {secret}")
        lines.append(head)
        return "\n".join(lines)
