from enum import Enum
from typing import Optional

class ErrorKind(Enum):
    INVALID_ARGUMENT = "invalid_argument"
    EMPTY_KEY = "empty_key"
    OUT_OF_RANGE = "out_of_range"
    DUPLICATE_VALUE = "duplicate_value"
    EMPTY_INPUT = "empty_input"
    KEY_PARSE_ERROR = "key_parse_error"
    FILE_ACCESS = "file_access"
    KEY_FILE_MISSING = "key_file_missing"
    INVALID_KEY_FILE = "invalid_key_file"
    KEY_SIZE_MISMATCH = "key_size_mismatch"
    KEYSTORE = "keystore"

TITLES = {
    ErrorKind.INVALID_ARGUMENT: "Invalid Argument",
    ErrorKind.EMPTY_KEY: "Invalid Key",
    ErrorKind.OUT_OF_RANGE: "Invalid Key",
    ErrorKind.DUPLICATE_VALUE: "Invalid Key",
    ErrorKind.EMPTY_INPUT: "Empty Input",
    ErrorKind.KEY_PARSE_ERROR: "Invalid Key Format",
    ErrorKind.FILE_ACCESS: "File Access Error",
    ErrorKind.KEY_FILE_MISSING: "Key File Missing",
    ErrorKind.INVALID_KEY_FILE: "Invalid Key File",
    ErrorKind.KEY_SIZE_MISMATCH: "Key Size Mismatch",
    ErrorKind.KEYSTORE: "Keystore Error",
}

KEY_ERROR_KINDS = (ErrorKind.EMPTY_KEY, ErrorKind.OUT_OF_RANGE, ErrorKind.DUPLICATE_VALUE)

class CipherError(ValueError):
    """Every failure the cipher reports.

    One class for all of them: ``kind`` says which condition was violated,
    ``title`` is the short label a front end shows as a heading and the
    exception text is the detail message.
    """

    def __init__(self, kind: ErrorKind, message: str, title: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.title = title or TITLES[kind]

    @property
    def is_key_error(self) -> bool:
        return self.kind in KEY_ERROR_KINDS

    def __repr__(self):
        return f"CipherError({self.kind.name}, {self.message!r})"
