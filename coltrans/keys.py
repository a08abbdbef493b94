import secrets
from typing import Sequence, Tuple
import numpy as np
from .errors import CipherError, ErrorKind

Key = Tuple[int, ...]

# -----------------------------
# Key Generation
# -----------------------------
def generate_key(num_columns: int, rng=None) -> Key:
    """Random permutation of 0..num_columns-1 (Fisher-Yates).

    ``rng`` only needs a ``randrange`` method; pass ``random.Random(seed)``
    for a reproducible key. Defaults to the OS entropy source.
    """
    if isinstance(num_columns, bool) or not isinstance(num_columns, (int, np.integer)) or num_columns <= 0:
        raise CipherError(ErrorKind.INVALID_ARGUMENT, "Number of columns must be greater than zero.")
    rng = rng or secrets.SystemRandom()
    key = list(range(num_columns))
    for i in range(num_columns - 1, 0, -1):
        j = rng.randrange(i + 1)
        key[i], key[j] = key[j], key[i]
    return tuple(key)

# -----------------------------
# Key Validation
# -----------------------------
def _is_int(v) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, (bool, np.bool_))

def validate_key(key: Sequence[int]) -> None:
    if key is None or len(key) == 0:
        raise CipherError(ErrorKind.EMPTY_KEY, "Invalid key: key cannot be null or empty.")
    n = len(key)
    seen = set()
    for v in key:
        if not _is_int(v) or not 0 <= v < n:
            raise CipherError(ErrorKind.OUT_OF_RANGE, f"Invalid key: values must be between 0 and {n - 1}")
        if v in seen:
            raise CipherError(ErrorKind.DUPLICATE_VALUE, "Invalid key: key contains duplicate values.")
        seen.add(v)

def as_key(key: Sequence[int]) -> Key:
    validate_key(key)
    return tuple(int(v) for v in key)

def inverse_key(key: Key) -> np.ndarray:
    idx = np.asarray(key, dtype=np.int64)
    inv = np.empty_like(idx)
    inv[idx] = np.arange(len(idx))
    return inv
