import re
from typing import List, Tuple

# Any line break sequence, CRLF first so it counts once.
NEWLINE_RE = re.compile(r"\r\n|[\n\r\x0b\x0c\x85\u2028\u2029]")

def strip_newlines(text: str) -> Tuple[str, List[int]]:
    """Remove line breaks, returning the flat text and where each break was.

    Each break is recorded once, at the offset where it starts in ``text``.
    A two-character ``\\r\\n`` still gets a single entry.
    """
    positions = [m.start() for m in NEWLINE_RE.finditer(text)]
    return NEWLINE_RE.sub("", text), positions

def reinsert_newlines(flat: str, positions: List[int]) -> str:
    """Insert ``\\n`` at each offset in ascending order into the growing text.

    An offset at or past the current length is dropped, and so is every
    offset after it.
    """
    out = []
    consumed = 0
    for k, pos in enumerate(positions):
        if pos >= len(flat) + k:
            break
        take = pos - (consumed + k)
        out.append(flat[consumed:consumed + take])
        consumed += take
        out.append("\n")
    out.append(flat[consumed:])
    return "".join(out)
