import os
import sys
import argparse
from .errors import CipherError
from .params import CipherParams, bcolors
from .keys import generate_key
from .keystore import create_keystore
from .permutation import encrypt, decrypt
from .serialization import format_key, parse_key
from .public_api import encrypt_file, decrypt_file
from .benchmark import run_benchmarks, DEFAULT_SIZES

# -----------------------------
# CLI Main with Interactive Menu
# -----------------------------
def print_error(e: Exception):
    if isinstance(e, CipherError):
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC} {e.title}: {e.message}")
    else:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)

def ask_key_size(params: CipherParams) -> int:
    sizes = ", ".join(str(s) for s in params.key_sizes)
    raw = input(f"Number of columns ({sizes}) [default {params.key_size}]: ").strip()
    return int(raw) if raw else params.key_size

def ask_keystore():
    use_keystore = input("Use keystore for the key? (y/n) [n]: ").strip().lower() == "y"
    if not use_keystore:
        return None, None, None
    keystore = input("Keystore filename (default keystore.json): ").strip() or "keystore.json"
    passphrase = input("Keystore passphrase: ")
    key_name = input("Key name in keystore: ").strip()
    return keystore, passphrase, key_name

def menu_generate_key(params: CipherParams):
    key = generate_key(ask_key_size(params))
    print(f"Generated key: {format_key(key)}")

def menu_encrypt_text(params: CipherParams):
    message = input("Text to encrypt: ")
    key_text = input("Key (blank to generate one): ").strip()
    key = parse_key(key_text) if key_text else generate_key(ask_key_size(params))
    print(f"Key: {format_key(key)}")
    print(f"Encrypted text: {encrypt(message, key)!r}")

def menu_decrypt_text(params: CipherParams):
    message = input("Text to decrypt: ")
    key = parse_key(input("Key: "))
    print(f"Decrypted text: {decrypt(message, key)!r}")

def menu_encrypt_file(params: CipherParams):
    in_path = input("Please enter the file path: ").strip()
    key_size = ask_key_size(params)
    keystore, passphrase, key_name = ask_keystore()
    encrypt_file(in_path, key_size, params, keystore=keystore, passphrase=passphrase, key_name=key_name)

def menu_decrypt_file(params: CipherParams):
    in_path = input("Please enter the file path: ").strip()
    key_size = ask_key_size(params)
    keystore, passphrase, key_name = ask_keystore()
    decrypt_file(in_path, key_size, params, keystore=keystore, passphrase=passphrase, key_name=key_name)

def menu_create_keystore(params: CipherParams):
    passphrase = input("Enter keystore passphrase: ")
    keystore_file = input("Keystore filename (default keystore.json): ").strip() or "keystore.json"
    create_keystore(passphrase, keystore_file)

def menu_benchmark(params: CipherParams):
    run_benchmarks(key=generate_key(ask_key_size(params)))

MENU = {
    "1": ("Generate a key", menu_generate_key),
    "2": ("Encrypt text", menu_encrypt_text),
    "3": ("Decrypt text", menu_decrypt_text),
    "4": ("Encrypt a file", menu_encrypt_file),
    "5": ("Decrypt a file", menu_decrypt_file),
    "6": ("Create encrypted keystore", menu_create_keystore),
    "7": ("Benchmark", menu_benchmark),
}

def interactive(params: CipherParams):
    _=os.system("cls" if os.name == "nt" else "clear")
    while True:
        print(f"{bcolors.OKCYAN}coltrans: columnar transposition cipher{bcolors.ENDC}")
        print(f"{bcolors.GREY}Reversible encoding, not secure encryption.{bcolors.ENDC}")
        print("")
        for choice, (label, _) in MENU.items():
            print(f"{bcolors.BOLD}{choice}){bcolors.ENDC} {label}")
        print(f"{bcolors.BOLD}0){bcolors.ENDC} Exit")
        choice = input(f"{bcolors.BOLD}Choice: {bcolors.ENDC}").strip()

        if choice == "0":
            print("Exiting program.")
            break
        if choice not in MENU:
            print("Invalid choice")
            continue
        try:
            MENU[choice][1](params)
        except Exception as e:
            print_error(e)
        _=input(f"{bcolors.OKGREEN}Any Key to Continue{bcolors.ENDC}")
        _=os.system("cls" if os.name == "nt" else "clear")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Columnar transposition cipher")
    subparsers = parser.add_subparsers(dest="command")

    generate_parser = subparsers.add_parser("generate_key", help="Generate a random permutation key")
    generate_parser.add_argument("--size", type=int, default=CipherParams.key_size, help="Number of columns")

    encrypt_parser = subparsers.add_parser("encrypt", help="Encrypt text")
    encrypt_parser.add_argument("--text", required=True, help="Text to encrypt")
    encrypt_parser.add_argument("--key", help="Key such as \"[2, 0, 1]\" (generated when omitted)")
    encrypt_parser.add_argument("--size", type=int, default=CipherParams.key_size, help="Size of the generated key")

    decrypt_parser = subparsers.add_parser("decrypt", help="Decrypt text")
    decrypt_parser.add_argument("--text", required=True, help="Text to decrypt")
    decrypt_parser.add_argument("--key", required=True, help="Key such as \"[2, 0, 1]\"")

    for name, help_text in (("encrypt_file", "Encrypt a file, writing encrypted_<name> and the key file beside it"),
                            ("decrypt_file", "Decrypt a file using the key file beside it or a keystore")):
        file_parser = subparsers.add_parser(name, help=help_text)
        file_parser.add_argument("--in_path", required=True, help="Input file path")
        file_parser.add_argument("--size", type=int, help="Key size (number of columns)")
        file_parser.add_argument("--keystore", help="Keystore filename")
        file_parser.add_argument("--passphrase", help="Keystore passphrase")
        file_parser.add_argument("--key_name", help="Key name in keystore")

    create_keystore_parser = subparsers.add_parser("create_keystore", help="Create encrypted keystore")
    create_keystore_parser.add_argument("--passphrase", required=True, help="Keystore passphrase")
    create_keystore_parser.add_argument("--keystore_file", default="keystore.json", help="Keystore filename")

    benchmark_parser = subparsers.add_parser("benchmark", help="Time encrypt/decrypt on growing texts")
    benchmark_parser.add_argument("--size", type=int, default=CipherParams.key_size, help="Key size")
    benchmark_parser.add_argument("--repeat", type=int, default=3, help="Repeats per text size")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    params = CipherParams()

    try:
        match args.command:
            case None:
                interactive(params)
            case "generate_key":
                print(format_key(generate_key(args.size)))
            case "encrypt":
                key = parse_key(args.key) if args.key else generate_key(args.size)
                if not args.key:
                    print(f"Key: {format_key(key)}")
                print(encrypt(args.text, key))
            case "decrypt":
                print(decrypt(args.text, parse_key(args.key)))
            case "encrypt_file":
                encrypt_file(args.in_path, args.size, params,
                             keystore=args.keystore, passphrase=args.passphrase, key_name=args.key_name)
            case "decrypt_file":
                decrypt_file(args.in_path, args.size, params,
                             keystore=args.keystore, passphrase=args.passphrase, key_name=args.key_name)
            case "create_keystore":
                create_keystore(args.passphrase, args.keystore_file)
            case "benchmark":
                run_benchmarks(DEFAULT_SIZES, generate_key(args.size), args.repeat)
    except Exception as e:
        print_error(e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
