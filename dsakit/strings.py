"""Substring search (naive, KMP, Boyer-Moore) and palindrome detection."""

from __future__ import annotations

import argparse
import string
from collections.abc import Iterable, Sequence

BASE = 257
MOD = 1_000_000_007

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def find_pattern(text: str, pattern: str) -> list[int]:
    """Return every index where ``pattern`` occurs in ``text``, by direct comparison."""
    size = len(pattern)
    return [i for i in range(len(text) - size + 1) if text[i : i + size] == pattern]


def compute_lps(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table for ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return the start of every case-insensitive match of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    text = text.translate(_ASCII_LOWER)
    pattern = pattern.translate(_ASCII_LOWER)
    lps = compute_lps(pattern)
    n, m = len(text), len(pattern)
    matches: list[int] = []
    i = j = 0
    while i < n:
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            matches.append(i - j)
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j:
                j = lps[j - 1]
            else:
                i += 1
    return matches


def build_bad_char_table(pattern: str) -> dict[str, int]:
    """Map each character of ``pattern`` to the index of its last occurrence."""
    return {char: index for index, char in enumerate(pattern)}


def boyer_moore_search(text: str, pattern: str) -> list[int]:
    """Return every index where ``pattern`` occurs, using the bad-character rule."""
    table = build_bad_char_table(pattern)
    n, m = len(text), len(pattern)
    matches: list[int] = []
    i = 0
    while i <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[i + j]:
            j -= 1
        if j < 0:
            matches.append(i)
            i += m - table.get(text[i + m], -1) if i + m < n else 1
        else:
            i += max(1, j - table.get(text[i + j], -1))
    return matches


def search_patterns(text: str, patterns: Iterable[str]) -> list[tuple[str, int]]:
    """Search ``text`` for each pattern in turn; return (pattern, index) pairs."""
    return [
        (pattern, index)
        for pattern in patterns
        for index in boyer_moore_search(text, pattern)
    ]


def _hash(chars: Iterable[str]) -> int:
    value = 0
    for char in chars:
        value = (value * BASE + ord(char)) % MOD
    return value


def polynomial_hash(s: str) -> int:
    """Polynomial rolling hash of ``s`` read left to right."""
    return _hash(s)


def reverse_hash(s: str) -> int:
    """Polynomial rolling hash of ``s`` read right to left."""
    return _hash(reversed(s))


def find_palindromes(s: str) -> list[str]:
    """Return every palindromic substring of length two or more, shortest first."""
    found: list[str] = []
    for length in range(2, len(s) + 1):
        for start in range(len(s) - length + 1):
            candidate = s[start : start + length]
            if polynomial_hash(candidate) == reverse_hash(candidate) and candidate == candidate[::-1]:
                found.append(candidate)
    return found


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit-strings", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    find = commands.add_parser("find", help="naive pattern search")
    find.add_argument("text", nargs="?", default="ABABABA")
    find.add_argument("pattern", nargs="?", default="ABA")

    kmp = commands.add_parser("kmp", help="case-insensitive KMP search")
    kmp.add_argument("text", nargs="?", default="Data Structures")
    kmp.add_argument("pattern", nargs="?", default="data")

    bm = commands.add_parser("bm", help="Boyer-Moore search for several patterns")
    bm.add_argument("text", nargs="?", default="ABCDEFG")
    bm.add_argument("patterns", nargs="*", default=["ABC", "EFG"])

    pal = commands.add_parser("palindromes", help="list palindromic substrings")
    pal.add_argument("text", nargs="?", default="ABCBAB")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "find":
        matches = find_pattern(args.text, args.pattern)
        if matches:
            print("Pattern found at indices: " + " ".join(map(str, matches)))
        else:
            print("Pattern not found in the text.")
    elif args.command == "kmp":
        for index in kmp_search(args.text, args.pattern):
            print(f"Pattern found at index {index}")
    elif args.command == "bm":
        for pattern, index in search_patterns(args.text, args.patterns):
            print(f'Pattern "{pattern}" found at index {index}')
    else:
        for palindrome in find_palindromes(args.text):
            print(f"Palindrome: {palindrome}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())