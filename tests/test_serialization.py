import os
import tempfile
from coltrans import (
    ErrorKind, generate_key, format_key, parse_key, format_key_file, parse_key_file,
    read_text_file, save_to_file,
)
from harness import expect_error, run_tests

def test_format_key():
    assert format_key((2, 0, 1)) == "[2, 0, 1]"
    assert format_key([0]) == "[0]"

def test_parse_key():
    assert parse_key("[2, 0, 1]") == (2, 0, 1)
    assert parse_key("  [ 2 ,0,   1 ]  ") == (2, 0, 1)
    assert parse_key("1,0") == (1, 0)

def test_parse_key_ignores_trailing_comma():
    assert parse_key("[2, 0, 1,]") == (2, 0, 1)
    assert parse_key("1, 0, ,") == (1, 0)
    expect_error(ErrorKind.KEY_PARSE_ERROR, parse_key, "[2, , 1]")

def test_generated_key_text_round_trip():
    for n in range(1, 10):
        key = generate_key(n)
        text = format_key(key)
        assert text == str(list(key))
        assert parse_key(text) == key

def test_parse_key_rejects_bad_tokens():
    e = expect_error(ErrorKind.KEY_PARSE_ERROR, parse_key, "[2, a, 1]")
    assert "Invalid key format" in str(e)
    expect_error(ErrorKind.KEY_PARSE_ERROR, parse_key, "[]")
    expect_error(ErrorKind.KEY_PARSE_ERROR, parse_key, "[1.5, 0]")

def test_parse_key_rejects_empty_string():
    for text in (None, "", "   "):
        e = expect_error(ErrorKind.EMPTY_KEY, parse_key, text)
        assert str(e) == "Key string cannot be null or empty."

def test_parse_key_validates():
    expect_error(ErrorKind.DUPLICATE_VALUE, parse_key, "[0, 0]")
    expect_error(ErrorKind.OUT_OF_RANGE, parse_key, "[0, 2]")

def test_key_file_round_trip():
    assert format_key_file((2, 0, 1)) == "3\n[2, 0, 1]"
    assert parse_key_file("3\n[2, 0, 1]\n") == (2, 0, 1)
    assert parse_key_file("3\n[2, 0, 1]", expected_size=3) == (2, 0, 1)

def test_key_file_errors():
    e = expect_error(ErrorKind.INVALID_KEY_FILE, parse_key_file, "[2, 0, 1]")
    assert e.title == "Invalid Key File"
    e = expect_error(ErrorKind.INVALID_KEY_FILE, parse_key_file, "three\n[2, 0, 1]")
    assert str(e) == "Key size in key file is not a valid number."
    expect_error(ErrorKind.INVALID_KEY_FILE, parse_key_file, "4\n[2, 0, 1]")
    expect_error(ErrorKind.KEY_PARSE_ERROR, parse_key_file, "3\n[2, x, 1]")

def test_key_file_size_mismatch():
    e = expect_error(ErrorKind.KEY_SIZE_MISMATCH, parse_key_file, "3\n[2, 0, 1]", expected_size=5)
    assert "key size 3" in str(e)
    assert e.title == "Key Size Mismatch"

def test_save_and_read_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "nested", "dir", "out.txt")
        save_to_file("first line\nsecond line", path)
        assert os.path.isfile(path)
        assert read_text_file(path) == "first line\nsecond line"

def test_save_normalizes_crlf():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "crlf.txt")
        save_to_file("a\r\nb", path)
        assert read_text_file(path) == "a\nb"

def test_read_missing_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        e = expect_error(ErrorKind.FILE_ACCESS, read_text_file, os.path.join(tmpdir, "nope.txt"))
        assert str(e) == "File error: invalid file or file path."
        expect_error(ErrorKind.FILE_ACCESS, read_text_file, tmpdir)
    expect_error(ErrorKind.FILE_ACCESS, read_text_file, None)

def test_save_rejects_bad_arguments():
    expect_error(ErrorKind.INVALID_ARGUMENT, save_to_file, None, "x.txt")
    expect_error(ErrorKind.INVALID_ARGUMENT, save_to_file, "content", "")

if __name__ == "__main__":
    run_tests(globals())
