from app.core.exceptions import InvalidKeyError

UPPER_A = ord("A")
UPPER_Z = ord("Z")


def is_letter_code(code: int) -> bool:
    return UPPER_A <= code <= UPPER_Z


def validate_word(word: str, key_length: int = 4) -> str:
    """
    Uppercase ``word`` and check it is exactly ``key_length`` letters A-Z.

    Raises:
        InvalidKeyError: If the word does not qualify
    """
    upper = word.upper()
    if len(upper) != key_length or not all(is_letter_code(ord(c)) for c in upper):
        raise InvalidKeyError(word, key_length)
    return upper


def encrypt_word(word: str, key: str) -> tuple[int, ...]:
    """XOR a word with the key letter by letter."""
    return tuple(ord(w) ^ ord(k) for w, k in zip(word, key))


def decode(ciphertext: tuple[int, ...] | list[int], key: str) -> str:
    """
    XOR-decode a ciphertext with ``key``.

    Decoded bytes outside A-Z are dropped rather than replaced, so a bad
    decode comes back shorter than the ciphertext.
    """
    plaintext = []
    for key_char, byte in zip(key, ciphertext):
        code = ord(key_char) ^ byte
        if is_letter_code(code):
            plaintext.append(chr(code))
    return "".join(plaintext)
