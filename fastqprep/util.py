"""String, path and logging helpers shared across the package."""

from __future__ import annotations

import os
import re
import sys
import threading
import time

_COMPLEMENTS = {
    "A": "T", "a": "T",
    "T": "A", "t": "A",
    "C": "G", "c": "G",
    "G": "C", "g": "C",
}

_FILENAME_RE = re.compile(r"[A-Za-z0-9_.\-]+")
_LOG_LOCK = threading.Lock()


class FastpError(Exception):
    """Raised when input, options or files are not usable."""


def complement(base: str) -> str:
    """Return the complementary base in upper case, or 'N' for anything else."""
    return _COMPLEMENTS.get(base, "N")


def trim(text: str) -> str:
    """Strip leading and trailing spaces (only the space character)."""
    return text.strip(" ")


def split(text: str, sep: str = ",") -> list[str]:
    """Split ``text`` by ``sep`` after skipping leading separator characters.

    Empty fields between or after separators are kept.
    """
    if not sep:
        raise ValueError("separator must not be empty")
    start = next((i for i, c in enumerate(text) if c not in sep), None)
    if start is None:
        return []
    return text[start:].split(sep)


def replace(text: str, src: str, dest: str) -> str:
    """Replace occurrences of ``src`` with ``dest``.

    After each match the scan resumes one character later, so for
    multi-character patterns the tail of a match is kept.
    """
    if not src:
        raise ValueError("pattern must not be empty")
    pieces = []
    begin = 0
    pos = text.find(src)
    while pos != -1:
        pieces.append(text[begin:pos])
        pieces.append(dest)
        begin = pos + 1
        pos = text.find(src, begin)
    pieces.append(text[begin:])
    return "".join(pieces)


def basename(filename: str) -> str:
    """Return the part after the last '/', or '' if the name ends with '/'."""
    pos = filename.rfind("/")
    if pos == -1:
        return filename
    return filename[pos + 1:]


def dirname(filename: str) -> str:
    """Return the directory part including the trailing '/', or './'."""
    pos = filename.rfind("/")
    if pos == -1:
        return "./"
    return filename[:pos + 1]


def joinpath(dirname: str, basename: str) -> str:
    """Join a directory and a file name with exactly one '/' between them."""
    if dirname.endswith("/"):
        return dirname + basename
    return dirname + "/" + basename


def file_exists(path: str) -> bool:
    """Return True if ``path`` names an existing file or directory."""
    return bool(path) and os.path.exists(path)


def is_directory(path: str) -> bool:
    """Return True if ``path`` is a directory."""
    return os.path.isdir(path)


def check_file_valid(path: str) -> None:
    """Raise FastpError unless ``path`` is an existing regular file."""
    if not file_exists(path):
        raise FastpError(f"file '{path}' doesn't exist, quit now")
    if is_directory(path):
        raise FastpError(f"'{path}' is a folder, not a file, quit now")


def check_filename_valid(name: str) -> bool:
    """Return True if ``name`` is a short name of letters, digits, '_', '.', '-'."""
    trimmed = trim(name)
    return 0 < len(trimmed) <= 255 and _FILENAME_RE.fullmatch(name) is not None


def check_file_writable(path: str) -> None:
    """Raise FastpError if the directory of ``path`` is missing or ``path`` is a folder."""
    folder = dirname(path)
    if not file_exists(folder):
        raise FastpError(
            f"'{folder} doesn't exist. Create this folder and run this command again."
        )
    if is_directory(path):
        raise FastpError(f"'{path}' is not a writable file, quit now")


def _is_ascii_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def str_keep_alpha(text: str) -> str:
    """Return ``text`` with every non-alphabetic character removed."""
    return "".join(c for c in text if _is_ascii_alpha(c))


def str_keep_valid_sequence(text: str, force_upper_case: bool = False) -> str:
    """Keep letters, '-' and '*'; optionally upper-case ASCII letters."""
    kept = []
    for c in text:
        if force_upper_case and "a" <= c <= "z":
            c = c.upper()
        if _is_ascii_alpha(c) or c in "-*":
            kept.append(c)
    return "".join(kept)


def find_with_right_pos(text: str, pattern: str, start: int = 0) -> int:
    """Return the index just past the first match of ``pattern``, or -1."""
    pos = text.find(pattern, start)
    if pos < 0:
        return -1
    return pos + len(pattern)


def num2qual(num: int) -> str:
    """Convert a phred score to its phred33 character, clamped to 0..94."""
    num = max(0, min(num, 127 - 33))
    return chr(num + 33)


def loginfo(message: str) -> None:
    """Write a time-stamped message to standard error."""
    with _LOG_LOCK:
        stamp = time.strftime("%H:%M:%S", time.localtime())
        sys.stderr.write(f"[{stamp}] {message} \n")
        sys.stderr.flush()