import json
import secrets
from base64 import b64encode, b64decode
from typing import Sequence
from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives import hashes
from .errors import CipherError, ErrorKind
from .keys import Key, as_key
from .serialization import format_key, parse_key

KDF_ITERATIONS = 100000

# -----------------------------
# Key Management
# -----------------------------
def _fernet_from_passphrase(passphrase: str, salt: bytes) -> Fernet:
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=KDF_ITERATIONS,
    )
    return Fernet(b64encode(kdf.derive(passphrase.encode())))

def _write_keystore(keystore: dict, keystore_file: str):
    try:
        with open(keystore_file, "w") as kf:
            json.dump(keystore, kf)
    except OSError as e:
        raise CipherError(ErrorKind.KEYSTORE, f"Cannot write keystore {keystore_file}: {e}") from e

def create_keystore(passphrase: str, keystore_file: str):
    salt = secrets.token_bytes(16)
    _write_keystore({"salt": b64encode(salt).decode(), "keys": {}}, keystore_file)
    print(f"Keystore created at {keystore_file}")

def load_keystore(passphrase: str, keystore_file: str):
    try:
        with open(keystore_file, "r") as kf:
            keystore = json.load(kf)
        salt = b64decode(keystore["salt"])
    except (OSError, ValueError, KeyError) as e:
        raise CipherError(ErrorKind.KEYSTORE, f"Cannot open keystore {keystore_file}: {e}") from e
    return keystore, _fernet_from_passphrase(passphrase, salt)

def store_key_in_keystore(passphrase: str, key_name: str, key: Sequence[int], keystore_file: str):
    key = as_key(key)
    keystore, fernet = load_keystore(passphrase, keystore_file)
    keystore["keys"][key_name] = fernet.encrypt(format_key(key).encode()).decode()
    _write_keystore(keystore, keystore_file)

def retrieve_key_from_keystore(passphrase: str, key_name: str, keystore_file: str) -> Key:
    keystore, fernet = load_keystore(passphrase, keystore_file)
    if key_name not in keystore["keys"]:
        raise CipherError(ErrorKind.KEYSTORE, f"Key {key_name} not found in keystore")
    try:
        decrypted_key = fernet.decrypt(keystore["keys"][key_name].encode())
    except InvalidToken as e:
        raise CipherError(ErrorKind.KEYSTORE, "Failed to decrypt key. Wrong passphrase?") from e
    return parse_key(decrypted_key.decode())
