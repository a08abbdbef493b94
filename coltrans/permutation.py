from typing import Sequence
from .errors import CipherError, ErrorKind
from .keys import as_key
from .newlines import strip_newlines, reinsert_newlines
from .shuffle import to_matrix, from_matrix, shuffle_columns, unshuffle_columns

# -----------------------------
# Columnar Transposition
# -----------------------------
def _check_text(text, what: str):
    if text is None or text == "":
        raise CipherError(ErrorKind.EMPTY_INPUT, f"{what} cannot be null or empty")
    if not isinstance(text, str):
        raise CipherError(ErrorKind.INVALID_ARGUMENT, f"{what} must be a string, got {type(text).__name__}")

def encrypt(text: str, key: Sequence[int]) -> str:
    """Encrypt ``text`` by reading each row of the key-width matrix in key order.

    Line breaks are taken out before the matrix is built and put back at
    the same offsets afterwards. The result is not trimmed, so trailing
    padding spaces stay in the ciphertext.
    """
    key = as_key(key)
    _check_text(text, "Text")
    flat, newline_positions = strip_newlines(text)
    matrix = to_matrix(flat, len(key))
    out = from_matrix(shuffle_columns(matrix, key))
    return reinsert_newlines(out, newline_positions)

def decrypt(encrypted_text: str, key: Sequence[int]) -> str:
    """Inverse of :func:`encrypt` for the same key.

    Trailing whitespace is stripped from the result, which removes the
    encryption padding but also any whitespace the plaintext ended with.
    """
    key = as_key(key)
    _check_text(encrypted_text, "Encrypted text")
    flat, newline_positions = strip_newlines(encrypted_text)
    matrix = to_matrix(flat, len(key))
    out = from_matrix(unshuffle_columns(matrix, key))
    return reinsert_newlines(out, newline_positions).rstrip()
