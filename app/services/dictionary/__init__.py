"""Word sources feeding the dictionary oracle."""

from app.services.dictionary.source import FileWordSource, InMemoryWordSource, WordSource

__all__ = [
    "WordSource",
    "InMemoryWordSource",
    "FileWordSource",
]
