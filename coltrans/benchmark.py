import time
from .params import bcolors
from .permutation import encrypt, decrypt

BASE_LINE = "This is a test file with some content. "
DEFAULT_SIZES = (1024, 10240, 102400, 1048576)

def make_text(size: int) -> str:
    lines = []
    total = 0
    i = 0
    while total < size:
        line = f"{BASE_LINE}{i}\n"
        lines.append(line)
        total += len(line)
        i += 1
    return "".join(lines)[:size].rstrip()

def format_size(size: int) -> str:
    if size >= 1048576:
        return f"{size / 1048576:.0f} MB"
    if size >= 1024:
        return f"{size / 1024:.0f} KB"
    return f"{size} B"

def benchmark_text(text: str, key=(2, 0, 1), repeat: int = 3):
    total_time_encrypt = 0.0
    total_time_decrypt = 0.0
    success = True

    for _ in range(repeat):
        start = time.perf_counter()
        encrypted = encrypt(text, key)
        total_time_encrypt += time.perf_counter() - start

        start = time.perf_counter()
        decrypted = decrypt(encrypted, key)
        total_time_decrypt += time.perf_counter() - start

        if decrypted != text:
            success = False

    return total_time_encrypt / repeat, total_time_decrypt / repeat, success

def run_benchmarks(sizes=DEFAULT_SIZES, key=(2, 0, 1), repeat: int = 3):
    print(f"{bcolors.OKBLUE}Benchmarking key {list(key)}, {repeat} repeats{bcolors.ENDC}")
    print(f"{'Text Size':<15}{'Encrypt (ms)':<15}{'Decrypt (ms)':<15}Recovered")
    print("-" * 60)
    results = []
    for size in sizes:
        text = make_text(size)
        enc_t, dec_t, ok = benchmark_text(text, key, repeat)
        colour = bcolors.OKGREEN if ok else bcolors.FAIL
        print(f"{format_size(size):<15}{enc_t * 1000:<15.2f}{dec_t * 1000:<15.2f}{colour}{ok}{bcolors.ENDC}")
        results.append((size, enc_t, dec_t, ok))
    return results

if __name__ == "__main__":
    run_benchmarks()
