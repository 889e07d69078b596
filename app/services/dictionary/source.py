import logging
import re
import threading
from pathlib import Path
from typing import Iterable, Iterator, Protocol

from app.core.exceptions import DictionaryLoadError

logger = logging.getLogger(__name__)


class WordSource(Protocol):
    """Anything that yields dictionary words in a stable order."""

    def words(self) -> Iterator[str]:
        ...


class InMemoryWordSource:
    """Word source backed by an in-memory sequence."""

    def __init__(self, words: Iterable[str]):
        self._words = tuple(words)

    def words(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)


class FileWordSource:
    """
    Newline-delimited word list on disk, e.g. ``/usr/share/dict/ngerman``.

    Lines are split on runs of CR/LF, so blank lines never become entries.
    The file is read once, on first use, even under concurrent callers.
    """

    LINE_SPLIT = re.compile(r"[\r\n]+")

    def __init__(self, path: str | Path, encoding: str = "latin-1"):
        self.path = Path(path)
        self.encoding = encoding
        self._words: tuple[str, ...] | None = None
        self._lock = threading.Lock()

    def words(self) -> Iterator[str]:
        with self._lock:
            if self._words is None:
                self._words = self._load()
        return iter(self._words)

    def _load(self) -> tuple[str, ...]:
        try:
            text = self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(str(self.path), str(e)) from e

        words = tuple(word for word in self.LINE_SPLIT.split(text) if word)
        logger.info("%d words in the complete dictionary %s", len(words), self.path)
        return words
