import os
import tempfile

import pytest

# Must be set before app.core.config caches its settings
_db_dir = tempfile.mkdtemp(prefix="xorbreak-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_db_dir}/test.db")

from app.services.xor.cipher import encrypt_word  # noqa: E402


@pytest.fixture
def encrypt_set():
    """Build ciphertext rows by XORing each word with the key."""

    def _encrypt(words, key):
        return [list(encrypt_word(word, key)) for word in words]

    return _encrypt
