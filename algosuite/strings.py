"""String puzzles: sliding windows, stacks and centre expansion."""

from __future__ import annotations

from collections import Counter


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring with no repeated character."""
    seen: set[str] = set()
    start = 0
    best = 0
    for end, ch in enumerate(s):
        while ch in seen:
            seen.discard(s[start])
            start += 1
        seen.add(ch)
        best = max(best, end - start + 1)
    return best


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed parentheses substring."""
    if len(s) < 2:
        return 0
    unmatched: list[tuple[int, str]] = []
    for index, ch in enumerate(s):
        if unmatched and unmatched[-1][1] == "(" and ch == ")":
            unmatched.pop()
        else:
            unmatched.append((index, ch))
    bounds = [-1, *(index for index, _ in unmatched), len(s)]
    return max(right - left - 1 for left, right in zip(bounds, bounds[1:]))


def possible_string_count(word: str) -> int:
    """Number of strings the typist may have meant, with at most one long press."""
    return 1 + sum(a == b for a, b in zip(word, word[1:]))


def _expand(s: str, left: int, right: int) -> str:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return s[left + 1 : right]


def longest_palindrome(s: str) -> str:
    """The first longest palindromic substring of ``s``."""
    best = ""
    for centre in range(len(s)):
        for candidate in (_expand(s, centre, centre), _expand(s, centre, centre + 1)):
            if len(candidate) > len(best):
                best = candidate
    return best


def character_replacement(s: str, k: int) -> int:
    """Longest run of one letter reachable by replacing at most ``k`` characters."""
    freq: Counter[str] = Counter()
    best = 0
    left = 0
    top = 0
    for right, ch in enumerate(s):
        freq[ch] += 1
        top = max(top, freq[ch])
        if top + k <= right - left:
            best = max(best, right - left)
            freq[s[left]] -= 1
            left += 1
    if top + k <= len(s) - left:
        best = max(best, len(s) - left)
    return len(s) if left == 0 else best


def check_inclusion(s1: str, s2: str) -> bool:
    """Whether some permutation of ``s1`` is a substring of ``s2``."""
    need = Counter(s1)
    for start in range(len(s2)):
        remaining = need.copy()
        missing = len(s1)
        for ch in s2[start:]:
            if remaining[ch] <= 0:
                break
            remaining[ch] -= 1
            missing -= 1
        if missing == 0:
            return True
    return False


def longest_subsequence(s: str, k: int) -> int:
    """Longest subsequence of the binary string whose value is at most ``k``."""
    last_one = s.rfind("1")
    if last_one == -1:
        return len(s)
    trailing = len(s) - last_one - 1
    if trailing > 30:
        return trailing
    zeros = s.count("0")
    length = zeros + 1
    value = 1 << trailing
    if value > k:
        return zeros
    for index in reversed(range(last_one)):
        place = len(s) - index - 1
        is_one = s[index] == "1"
        if (place > 30 and is_one) or value > k:
            return length
        if is_one:
            value += 1 << place
            if value <= k:
                length += 1
    return length