from dataclasses import dataclass, field

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'

PAD_CHAR = " "  # fills the last matrix row
DEFAULT_KEY_SIZE = 3
KEY_SIZES = (3, 4, 5, 6, 7, 8)

@dataclass
class CipherParams:
    key_size: int = DEFAULT_KEY_SIZE
    key_sizes: tuple = field(default=KEY_SIZES)
    key_file: str = "encryption_key.txt"
    encrypted_prefix: str = "encrypted_"
    decrypted_prefix: str = "decrypted_"
