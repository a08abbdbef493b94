import os
import re
from typing import Optional, Sequence
from .errors import CipherError, ErrorKind
from .keys import Key, as_key

_BRACKETS_RE = re.compile(r"[\[\]]")
_SEPARATOR_RE = re.compile(r"\s*,\s*")

# -----------------------------
# Key Text Helpers
# -----------------------------
def format_key(key: Sequence[int]) -> str:
    return "[" + ", ".join(str(int(v)) for v in key) + "]"

def parse_key(key_string: str) -> Key:
    if key_string is None or not key_string.strip():
        raise CipherError(ErrorKind.EMPTY_KEY, "Key string cannot be null or empty.")
    clean = _BRACKETS_RE.sub("", key_string).strip()
    try:
        parts = _SEPARATOR_RE.split(clean)
        # a trailing comma leaves empty tokens at the end, which are ignored
        while len(parts) > 1 and parts[-1] == "":
            parts.pop()
        key = [int(part.strip()) for part in parts]
    except ValueError as e:
        raise CipherError(ErrorKind.KEY_PARSE_ERROR, f"Invalid key format: {e}") from e
    return as_key(key)

def format_key_file(key: Sequence[int]) -> str:
    return f"{len(key)}\n{format_key(key)}"

def parse_key_file(content: str, expected_size: Optional[int] = None) -> Key:
    """Parse the two-line key file: key size, then the bracketed key."""
    content = (content or "").strip()
    if "\n" not in content:
        raise CipherError(ErrorKind.INVALID_KEY_FILE,
                          "Key file is not in the correct format. Expected key size and key data.")
    size_line, key_line = content.split("\n", 1)
    try:
        key_size = int(size_line.strip())
    except ValueError as e:
        raise CipherError(ErrorKind.INVALID_KEY_FILE, "Key size in key file is not a valid number.") from e
    if expected_size is not None and expected_size != key_size:
        raise CipherError(ErrorKind.KEY_SIZE_MISMATCH,
                          f"File was encrypted with key size {key_size} but trying to decrypt with size {expected_size}.\n"
                          f"Please select key size {key_size} and try again.")
    key = parse_key(key_line)
    if len(key) != key_size:
        raise CipherError(ErrorKind.INVALID_KEY_FILE,
                          f"Key file declares size {key_size} but holds a key of length {len(key)}.")
    return key

# -----------------------------
# File Helpers
# -----------------------------
def read_text_file(path: str) -> str:
    if not path or not os.path.isfile(path):
        raise CipherError(ErrorKind.FILE_ACCESS, "File error: invalid file or file path.")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CipherError(ErrorKind.FILE_ACCESS, f"Error reading file: {e}") from e

def save_to_file(content: str, path: str):
    if content is None:
        raise CipherError(ErrorKind.INVALID_ARGUMENT, "Content cannot be null.")
    if not path:
        raise CipherError(ErrorKind.INVALID_ARGUMENT, "File path cannot be null or empty.")
    parent = os.path.dirname(path)
    try:
        if parent:
            os.makedirs(parent, exist_ok=True)
        # text mode writes os.linesep for every "\n"
        with open(path, "w", encoding="utf-8") as f:
            f.write(content.replace("\r\n", "\n"))
    except OSError as e:
        raise CipherError(ErrorKind.FILE_ACCESS, f"Error writing file: {e}") from e
