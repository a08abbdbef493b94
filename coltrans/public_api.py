# coltrans/public_api.py
import os
from dataclasses import dataclass
from typing import Optional
from .errors import CipherError, ErrorKind
from .keys import Key, generate_key
from .keystore import store_key_in_keystore, retrieve_key_from_keystore
from .params import CipherParams
from .permutation import encrypt, decrypt
from .serialization import format_key, format_key_file, parse_key_file, read_text_file, save_to_file

@dataclass
class EncryptResult:
    key: Key
    encrypted_path: str
    key_path: str

def _sibling(in_path: str, name: str) -> str:
    return os.path.join(os.path.dirname(os.path.abspath(in_path)), name)

def encrypt_file(in_path: str, key_size: Optional[int] = None, params: CipherParams = CipherParams(), rng=None,
                 keystore: Optional[str] = None, passphrase: Optional[str] = None, key_name: Optional[str] = None) -> EncryptResult:
    key_size = params.key_size if key_size is None else key_size
    content = read_text_file(in_path)
    key = generate_key(key_size, rng)
    encrypted_text = encrypt(content, key)
    encrypted_path = _sibling(in_path, params.encrypted_prefix + os.path.basename(in_path))
    key_path = _sibling(in_path, params.key_file)
    save_to_file(encrypted_text, encrypted_path)
    save_to_file(format_key_file(key), key_path)
    if keystore and passphrase and key_name:
        store_key_in_keystore(passphrase, key_name, key, keystore)
        print(f"Encryption key stored in keystore {keystore} as {key_name}")
    print(f"Key size used: {key_size}")
    print(f"Encryption key: {format_key(key)}")
    print(f"Encryption key saved to: {key_path}")
    print(f"Encrypted text saved to: {encrypted_path}")
    return EncryptResult(key=key, encrypted_path=encrypted_path, key_path=key_path)

def load_key_for(in_path: str, key_size: Optional[int] = None, params: CipherParams = CipherParams(),
                 keystore: Optional[str] = None, passphrase: Optional[str] = None, key_name: Optional[str] = None) -> Key:
    """Key for decrypting ``in_path``: from the keystore when one is named, else the key file beside it."""
    if keystore and passphrase and key_name:
        key = retrieve_key_from_keystore(passphrase, key_name, keystore)
        if key_size is not None and key_size != len(key):
            raise CipherError(ErrorKind.KEY_SIZE_MISMATCH,
                              f"Key {key_name} has size {len(key)} but trying to decrypt with size {key_size}.")
        return key
    key_path = _sibling(in_path, params.key_file)
    if not os.path.exists(key_path):
        raise CipherError(ErrorKind.KEY_FILE_MISSING,
                          f"Key file not found at: {key_path}\n"
                          "Please ensure the key file is in the same directory as the encrypted file.")
    if not os.access(key_path, os.R_OK):
        raise CipherError(ErrorKind.FILE_ACCESS, "Cannot read the key file. Please check file permissions.",
                          title="Key File Access Error")
    return parse_key_file(read_text_file(key_path), expected_size=key_size)

def decrypt_file(in_path: str, key_size: Optional[int] = None, params: CipherParams = CipherParams(),
                 keystore: Optional[str] = None, passphrase: Optional[str] = None, key_name: Optional[str] = None) -> str:
    encrypted_content = read_text_file(in_path)
    key = load_key_for(in_path, key_size, params, keystore, passphrase, key_name)
    decrypted_text = decrypt(encrypted_content, key)
    decrypted_path = _sibling(in_path, params.decrypted_prefix + os.path.basename(in_path))
    save_to_file(decrypted_text, decrypted_path)
    print(f"Decrypted text saved as: {decrypted_path}")
    return decrypted_path
