from typing import Any


class CryptanalysisError(Exception):
    """Base exception for all cryptanalysis errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CryptanalysisError):
    """Raised when input validation fails."""

    pass


class InvalidCiphertextError(ValidationError):
    """Raised when a ciphertext row has the wrong width or byte values."""

    def __init__(self, index: int, reason: str):
        super().__init__(
            f"Ciphertext {index} is invalid: {reason}",
            {"index": index, "reason": reason},
        )


class TooManyCiphertextsError(ValidationError):
    """Raised when the ciphertext set exceeds the configured maximum."""

    def __init__(self, count: int, max_count: int):
        super().__init__(
            f"{count} ciphertexts exceed maximum {max_count}",
            {"count": count, "max_count": max_count},
        )


class InvalidKeyError(ValidationError):
    """Raised when a key is not made of uppercase letters of the key length."""

    def __init__(self, key: str, key_length: int):
        super().__init__(
            f"Key '{key}' must be {key_length} letters A-Z",
            {"key": key, "key_length": key_length},
        )


class DictionaryLoadError(CryptanalysisError):
    """Raised when the word list cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Cannot load dictionary '{path}': {reason}",
            {"path": path, "reason": reason},
        )
