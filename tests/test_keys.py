import random
import numpy as np
from coltrans import ErrorKind, generate_key, validate_key, as_key, inverse_key
from harness import expect_error, run_tests

def test_generated_key_is_permutation():
    for n in range(1, 12):
        key = generate_key(n)
        assert len(key) == n
        assert sorted(key) == list(range(n))
        validate_key(key)

def test_generated_key_is_tuple():
    assert isinstance(generate_key(5), tuple)

def test_generate_key_rejects_non_positive_size():
    for n in (0, -1, -10):
        e = expect_error(ErrorKind.INVALID_ARGUMENT, generate_key, n)
        assert str(e) == "Number of columns must be greater than zero."
        assert e.title == "Invalid Argument"

def test_generate_key_seeded_source_is_deterministic():
    assert generate_key(8, random.Random(42)) == generate_key(8, random.Random(42))

def test_generate_key_uses_injected_source():
    class Fixed:
        # j = 0 every step rotates the identity left by one
        def randrange(self, stop):
            return 0
    assert generate_key(4, Fixed()) == (1, 2, 3, 0)

def test_generated_keys_vary():
    rng = random.Random(7)
    keys = {generate_key(6, rng) for _ in range(50)}
    assert len(keys) > 1

def test_validate_empty_key():
    e = expect_error(ErrorKind.EMPTY_KEY, validate_key, [])
    assert str(e) == "Invalid key: key cannot be null or empty."
    expect_error(ErrorKind.EMPTY_KEY, validate_key, None)

def test_validate_out_of_range():
    e = expect_error(ErrorKind.OUT_OF_RANGE, validate_key, [0, 1, 3])
    assert str(e) == "Invalid key: values must be between 0 and 2"
    expect_error(ErrorKind.OUT_OF_RANGE, validate_key, [3, 1, 2])
    expect_error(ErrorKind.OUT_OF_RANGE, validate_key, [-1, 0])

def test_validate_rejects_non_integers():
    expect_error(ErrorKind.OUT_OF_RANGE, validate_key, [0.0, 1.0])
    expect_error(ErrorKind.OUT_OF_RANGE, validate_key, [True, False])
    expect_error(ErrorKind.OUT_OF_RANGE, validate_key, ["0", "1"])

def test_validate_duplicates():
    e = expect_error(ErrorKind.DUPLICATE_VALUE, validate_key, [0, 0, 1])
    assert str(e) == "Invalid key: key contains duplicate values."
    expect_error(ErrorKind.DUPLICATE_VALUE, validate_key, [1, 1, 2])

def test_key_errors_share_a_title():
    for kind, key in ((ErrorKind.EMPTY_KEY, []), (ErrorKind.OUT_OF_RANGE, [5]), (ErrorKind.DUPLICATE_VALUE, [1, 1])):
        e = expect_error(kind, validate_key, key)
        assert e.is_key_error
        assert e.title == "Invalid Key"

def test_validation_does_not_mutate():
    key = [2, 0, 1]
    for _ in range(3):
        validate_key(key)
    assert key == [2, 0, 1]

def test_as_key_accepts_numpy_and_lists():
    assert as_key(np.array([1, 0, 2])) == (1, 0, 2)
    assert as_key([0]) == (0,)
    assert all(type(v) is int for v in as_key(np.array([1, 0])))

def test_inverse_key():
    inv = inverse_key((2, 0, 1))
    assert inv.tolist() == [1, 2, 0]
    for i, k in enumerate((2, 0, 1)):
        assert inv[k] == i

if __name__ == "__main__":
    run_tests(globals())
