import numpy as np
from .keys import Key, inverse_key
from .params import PAD_CHAR

CHAR_DTYPE = "<U1"

# -----------------------------
# Character Matrix
# -----------------------------
def to_matrix(flat: str, n: int) -> np.ndarray:
    """Row-major ``rows x n`` grid of ``flat``, space padded to fill the last row."""
    rows = -(-len(flat) // n)
    padded = flat.ljust(rows * n, PAD_CHAR)
    return np.array(list(padded), dtype=CHAR_DTYPE).reshape(rows, n)

def from_matrix(matrix: np.ndarray) -> str:
    return "".join(matrix.ravel().tolist())

# -----------------------------
# Column Shuffle
# -----------------------------
def shuffle_columns(matrix: np.ndarray, key: Key) -> np.ndarray:
    # output column i is input column key[i]
    assert matrix.shape[1] == len(key), f"Shuffle shape mismatch: matrix {matrix.shape}, key length {len(key)}"
    return matrix[:, np.asarray(key, dtype=np.int64)]

def unshuffle_columns(matrix: np.ndarray, key: Key) -> np.ndarray:
    assert matrix.shape[1] == len(key), f"Unshuffle shape mismatch: matrix {matrix.shape}, key length {len(key)}"
    return matrix[:, inverse_key(key)]
