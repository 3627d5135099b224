"""Exercises over strings and lists of words."""

from __future__ import annotations

import string
from collections import Counter

_ITEM_FIELDS = {"type": 0, "color": 1, "name": 2}
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def permutation_difference(s: str, t: str) -> int:
    """Sum, over the characters of ``s``, the distance between their positions in ``s`` and ``t``.

    A character missing from ``t`` counts as being at position zero.
    Raises ValueError when ``t`` is shorter than ``s``.
    """
    if len(t) < len(s):
        raise ValueError("t must be at least as long as s")
    in_s = {char: index for index, char in enumerate(s)}
    in_t = {char: index for index, char in enumerate(t[: len(s)])}
    return sum(abs(in_s[char] - in_t.get(char, 0)) for char in s)


def a_before_b(s: str) -> bool:
    """Return True if every 'a' in ``s`` comes before every 'b'."""
    last_a = s.rfind("a")
    first_b = s.find("b")
    if first_b == -1:
        first_b = len(s) + 1
    return last_a < first_b


def count_common_words(words1: list[str], words2: list[str]) -> int:
    """Count words that appear exactly once in each list."""
    first = Counter(words1)
    second = Counter(words2)
    return sum(1 for word, count in first.items() if count == 1 and second[word] == 1)


def words_containing(words: list[str], char: str) -> list[int]:
    """Return the indices of the words that contain ``char``."""
    return [index for index, word in enumerate(words) if char in word]


def count_matching_items(items: list[list[str]], rule_key: str, rule_value: str) -> int:
    """Count items whose ``rule_key`` field ("type", "color" or "name") equals ``rule_value``.

    An unknown key matches nothing.
    """
    field = _ITEM_FIELDS.get(rule_key)
    if field is None:
        return 0
    return sum(1 for item in items if item[field] == rule_value)


def defang_ip(address: str) -> str:
    """Replace every '.' in ``address`` with '[.]'."""
    return address.replace(".", "[.]")


def equal_occurrences(s: str) -> bool:
    """Return True if every character of ``s`` occurs the same number of times."""
    return len(set(Counter(s).values())) <= 1


def array_strings_equal(words1: list[str], words2: list[str]) -> bool:
    """Return True if both lists join to the same string."""
    return "".join(words1) == "".join(words2)


def final_value(operations: list[str]) -> int:
    """Apply increments ("++X", "X++") and decrements (anything else) starting from zero."""
    return sum(1 if op in ("++X", "X++") else -1 for op in operations)


def find_difference(s: str, t: str) -> str:
    """Return the character of ``t`` that is not accounted for by ``s``.

    Raises ValueError when ``t`` holds no such character.
    """
    remaining = Counter(s)
    extra = None
    for char in t:
        if remaining[char] == 0:
            extra = char
        remaining[char] -= 1
    if extra is None:
        raise ValueError("t holds no character beyond those of s")
    return extra


def is_acronym(words: list[str], s: str) -> bool:
    """Return True if ``s`` is formed by the first characters of ``words``."""
    if len(words) != len(s):
        return False
    return all(word.startswith(char) for word, char in zip(words, s))


def is_subsequence(s: str, t: str) -> bool:
    """Return True if ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def count_jewels(jewels: str, stones: str) -> int:
    """Count the stones that are also jewels."""
    kinds = set(jewels)
    return sum(1 for stone in stones if stone in kinds)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word of ``s``."""
    return len(s.strip(" ").split(" ")[-1])


def letter_percentage(s: str, letter: str) -> int:
    """Return the percentage of ``s`` made up of ``letter``, rounded down."""
    count = s.count(letter)
    if count == 0:
        return 0
    return int(count / len(s) * 100)


def most_words(sentences: list[str]) -> int:
    """Return the largest number of space-separated words in any sentence."""
    return max((len(sentence.split(" ")) for sentence in sentences), default=0)


def is_pangram(s: str) -> bool:
    """Return True if ``s`` holds exactly 26 distinct characters."""
    return len(s) >= 26 and len(set(s)) == 26


def to_lower(s: str) -> str:
    """Lower-case the ASCII capital letters of ``s``, leaving everything else alone."""
    return s.translate(_ASCII_LOWER)


def truncate_sentence(s: str, k: int) -> str:
    """Keep the first ``k`` space-separated words of ``s``.

    Raises ValueError when ``k`` is negative or larger than the number of words.
    """
    words = s.split(" ")
    if not 0 <= k <= len(words):
        raise ValueError("k must be between 0 and the number of words")
    return " ".join(words[:k])


def uncommon_words(s: str, t: str) -> list[str]:
    """Return the words occurring exactly once across both sentences, in first-seen order."""
    counts = Counter(s.split(" "))
    counts.update(t.split(" "))
    return [word for word, count in counts.items() if count == 1]


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)