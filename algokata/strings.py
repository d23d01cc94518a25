"""String manipulation, parsing and matching problems."""

from __future__ import annotations

import math
from collections import Counter, deque
from itertools import groupby, zip_longest

_VOWELS = frozenset("aeiouAEIOU")
_DIGITS = "0123456789"
_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def reverse_words(s: str) -> str:
    """Reverse the order of space-separated words, collapsing extra spaces."""
    words = [word for word in s.split(" ") if word]
    return " ".join(reversed(words))


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other characters put."""
    chars = list(s)
    positions = [i for i, char in enumerate(chars) if char in _VOWELS]
    vowels = [chars[i] for i in positions]
    for position, vowel in zip(positions, reversed(vowels)):
        chars[position] = vowel
    return "".join(chars)


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` can be had from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, which may nest, into repeated text."""
    stack: list[tuple[str, int]] = []
    current = ""
    repeat = 0
    for char in s:
        if char in _DIGITS:
            repeat = repeat * 10 + int(char)
        elif char == "[":
            stack.append((current, repeat))
            current = ""
            repeat = 0
        elif char == "]":
            if not stack:
                raise ValueError("unbalanced ']' in encoded string")
            prefix, count = stack.pop()
            current = prefix + current * count
        else:
            current += char
    return current


def compress(chars: list[str]) -> int:
    """Run-length encode ``chars`` in place and return the encoded length.

    Each run becomes its character followed by its length when longer than one.
    Elements past the returned length are left as they were.
    """
    encoded: list[str] = []
    for char, run in groupby(chars):
        length = sum(1 for _ in run)
        encoded.append(char)
        if length > 1:
            encoded.extend(str(length))
    chars[: len(encoded)] = encoded
    return len(encoded)


def predict_party_victory(senate: str) -> str:
    """Return "Radiant" or "Dire", whichever party wins the senate's rounds."""
    size = len(senate)
    radiant = deque(i for i, member in enumerate(senate) if member == "R")
    dire = deque(i for i, member in enumerate(senate) if member != "R")
    while radiant and dire:
        r, d = radiant.popleft(), dire.popleft()
        if r < d:
            radiant.append(r + size)
        else:
            dire.append(d + size)
    return "Dire" if not radiant else "Radiant"


def gcd_of_strings(str1: str, str2: str) -> str:
    """Return the longest string that divides both, or "" if none does."""
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: math.gcd(len(str1), len(str2))]


def close_strings(word1: str, word2: str) -> bool:
    """Tell whether both words have equal length and the same multiset of
    character frequencies."""
    if len(word1) != len(word2):
        return False
    return sorted(Counter(word1).values()) == sorted(Counter(word2).values())


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the characters of both words, appending the leftover tail."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def remove_stars(s: str) -> str:
    """Let each ``*`` erase the nearest kept character to its left."""
    kept: list[str] = []
    for char in s:
        if char == "*":
            if kept:
                kept.pop()
        else:
            kept.append(char)
    return "".join(kept)


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring.

    Among several of the greatest length (two or more) the rightmost wins;
    when no two characters form one, the first character is returned.
    """
    n = len(s)
    if n == 0:
        return ""
    best_length, best_start = 1, 0
    for center in range(2 * n - 1):
        lo = center // 2
        hi = lo + center % 2
        while lo >= 0 and hi < n and s[lo] == s[hi]:
            lo -= 1
            hi += 1
        length = hi - lo - 1
        start = lo + 1
        if length > best_length or (
            length == best_length and length > 1 and start > best_start
        ):
            best_length, best_start = length, start
    return s[best_start : best_start + best_length]


def convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if num_rows == 1:
        return s
    cycle = 2 * num_rows - 2
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for i, char in enumerate(s):
        position = i % cycle
        row = position if position < num_rows else cycle - position
        rows[row].append(char)
    return "".join("".join(row) for row in rows)


def is_match(s: str, p: str) -> bool:
    """Match ``s`` wholly against a pattern using ``.`` and ``*``."""
    if p.startswith("*"):
        raise ValueError("pattern must not start with '*'")
    m, n = len(s), len(p)
    dp = [[False] * (n + 1) for _ in range(m + 1)]
    dp[0][0] = True
    for j in range(2, n + 1):
        if p[j - 1] == "*":
            dp[0][j] = dp[0][j - 2]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            token = p[j - 1]
            if token == s[i - 1] or token == ".":
                dp[i][j] = dp[i - 1][j - 1]
            elif token == "*":
                repeated = p[j - 2]
                dp[i][j] = dp[i][j - 2] or (
                    dp[i - 1][j] and (s[i - 1] == repeated or repeated == ".")
                )
    return dp[m][n]


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown characters count as 0."""
    total = 0
    previous = 0
    for char in s:
        value = _ROMAN_VALUES.get(char, 0)
        if value > previous:
            total += value - 2 * previous
        else:
            total += value
        previous = value
    return total