# coltrans/__init__.py
from .params import PAD_CHAR, DEFAULT_KEY_SIZE, KEY_SIZES, CipherParams, bcolors
from .errors import ErrorKind, CipherError
from .keys import Key, generate_key, validate_key, as_key, inverse_key
from .newlines import strip_newlines, reinsert_newlines
from .shuffle import to_matrix, from_matrix, shuffle_columns, unshuffle_columns
from .permutation import encrypt, decrypt
from .serialization import (
    format_key, parse_key, format_key_file, parse_key_file,
    read_text_file, save_to_file,
)
from .keystore import create_keystore, load_keystore, store_key_in_keystore, retrieve_key_from_keystore
from .public_api import EncryptResult, encrypt_file, decrypt_file, load_key_for
