from dataclasses import dataclass
from typing import Iterable, Iterator

from app.core.exceptions import InvalidCiphertextError


@dataclass(frozen=True)
class Candidate:
    """A verified key together with the words it decodes the ciphertexts to."""

    secret: str
    plaintexts: tuple[str, ...]


@dataclass(frozen=True)
class CiphertextSet:
    """
    Immutable set of intercepted ciphertexts.

    Every row holds exactly ``key_length`` observed byte values.
    """

    rows: tuple[tuple[int, ...], ...]
    key_length: int = 4

    @classmethod
    def from_lists(
        cls,
        rows: Iterable[Iterable[int]],
        key_length: int = 4,
    ) -> "CiphertextSet":
        """
        Build a ciphertext set from plain lists, validating each row.

        Args:
            rows: Ciphertext rows of byte values
            key_length: Required width of every row

        Returns:
            CiphertextSet with tuple rows

        Raises:
            InvalidCiphertextError: If a row has the wrong width or a value
                outside 0..255
        """
        frozen = []
        for index, row in enumerate(rows):
            values = tuple(row)
            if len(values) != key_length:
                raise InvalidCiphertextError(
                    index, f"expected {key_length} bytes, got {len(values)}"
                )
            for value in values:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise InvalidCiphertextError(index, f"{value!r} is not an integer")
                if not 0 <= value <= 255:
                    raise InvalidCiphertextError(index, f"{value} is not a byte value")
            frozen.append(values)
        return cls(rows=tuple(frozen), key_length=key_length)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def column(self, position: int) -> list[int]:
        """Byte values observed at one key position across all ciphertexts."""
        return [row[position] for row in self.rows]
