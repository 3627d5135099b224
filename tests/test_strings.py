import pytest

from katas.strings import (
    a_before_b,
    array_strings_equal,
    count_common_words,
    count_jewels,
    count_matching_items,
    defang_ip,
    equal_occurrences,
    final_value,
    find_difference,
    is_acronym,
    is_anagram,
    is_pangram,
    is_subsequence,
    length_of_last_word,
    letter_percentage,
    most_words,
    permutation_difference,
    to_lower,
    truncate_sentence,
    uncommon_words,
    words_containing,
)


@pytest.mark.parametrize(
    ("s", "t", "expected"),
    [("abc", "bac", 2), ("abcde", "edbac", 12), ("abc", "abc", 0)],
)
def test_permutation_difference(s, t, expected):
    assert permutation_difference(s, t) == expected


def test_permutation_difference_short_t():
    with pytest.raises(ValueError):
        permutation_difference("abc", "ab")


@pytest.mark.parametrize(
    ("s", "expected"),
    [("aaabbb", True), ("bbbaaa", False), ("", True), ("bbb", True), ("aba", False)],
)
def test_a_before_b(s, expected):
    assert a_before_b(s) is expected


@pytest.mark.parametrize(
    ("words1", "words2", "expected"),
    [
        (["coffee", "is", "awesome"], ["coffee", "is", "cool"], 2),
        (["aaa", "a", "b"], ["aaa", "bbb", "zzz"], 1),
        (["x", "x"], ["x"], 0),
    ],
)
def test_count_common_words(words1, words2, expected):
    assert count_common_words(words1, words2) == expected


@pytest.mark.parametrize(
    ("words", "char", "expected"),
    [
        (["orange", "google"], "o", [0, 1]),
        (["abc", "def"], "z", []),
    ],
)
def test_words_containing(words, char, expected):
    assert words_containing(words, char) == expected


ITEMS = [
    ["phone", "blue", "pixel"],
    ["computer", "silver", "lenovo"],
    ["phone", "gold", "iphone"],
]


@pytest.mark.parametrize(
    ("key", "value", "expected"),
    [
        ("color", "silver", 1),
        ("type", "phone", 2),
        ("name", "iphone", 1),
        ("weight", "phone", 0),
    ],
)
def test_count_matching_items(key, value, expected):
    assert count_matching_items(ITEMS, key, value) == expected


def test_defang_ip():
    assert defang_ip("1.1.1.1") == "1[.]1[.]1[.]1"


@pytest.mark.parametrize(
    ("s", "expected"),
    [("abacbc", True), ("abbccabbccc", False), ("", True)],
)
def test_equal_occurrences(s, expected):
    assert equal_occurrences(s) is expected


@pytest.mark.parametrize(
    ("words1", "words2", "expected"),
    [
        (["ab", "c", "def"], ["abc", "def"], True),
        (["abc", "def"], ["gh", "zy"], False),
    ],
)
def test_array_strings_equal(words1, words2, expected):
    assert array_strings_equal(words1, words2) is expected


@pytest.mark.parametrize(
    ("operations", "expected"),
    [(["--X", "X++", "X++"], 1), (["++X", "++X", "X++"], 3), ([], 0)],
)
def test_final_value(operations, expected):
    assert final_value(operations) == expected


def test_find_difference():
    assert find_difference("apple", "apples") == "s"


def test_find_difference_extra_repeated_letter():
    assert find_difference("abc", "abcb") == "b"


def test_find_difference_none():
    with pytest.raises(ValueError):
        find_difference("abc", "cab")


@pytest.mark.parametrize(
    ("words", "s", "expected"),
    [
        (["green", "is", "cool"], "gic", True),
        (["this", "is", "incorrect"], "abc", False),
        (["one", "two"], "o", False),
    ],
)
def test_is_acronym(words, s, expected):
    assert is_acronym(words, s) is expected


@pytest.mark.parametrize(
    ("s", "t", "expected"),
    [("car", "abcardef", True), ("abc", "def", False), ("", "xyz", True), ("ba", "ab", False)],
)
def test_is_subsequence(s, t, expected):
    assert is_subsequence(s, t) is expected


@pytest.mark.parametrize(
    ("jewels", "stones", "expected"),
    [
        ("aAzZ", "hwuelzauoAZ", 4),
        ("", "kdjfkaj", 0),
        ("ZDH", "kjaehfZeiufDkwhH", 3),
    ],
)
def test_count_jewels(jewels, stones, expected):
    assert count_jewels(jewels, stones) == expected


@pytest.mark.parametrize(
    ("s", "expected"),
    [
        ("   Hello World   ", 5),
        ("This is another string   ", 6),
        ("This   is a string  with no spaces at the end", 3),
        ("", 0),
    ],
)
def test_length_of_last_word(s, expected):
    assert length_of_last_word(s) == expected


@pytest.mark.parametrize(
    ("s", "letter", "expected"),
    [("letter", "t", 33), ("zzzzz", "k", 0), ("aaaa", "a", 100)],
)
def test_letter_percentage(s, letter, expected):
    assert letter_percentage(s, letter) == expected


@pytest.mark.parametrize(
    ("sentences", "expected"),
    [
        (["coffee is cool", "puzzles are interesting", "tea is alright"], 3),
        (["this is another sentence", "did anyone else go to reinvent last year"], 8),
        ([], 0),
    ],
)
def test_most_words(sentences, expected):
    assert most_words(sentences) == expected


@pytest.mark.parametrize(
    ("s", "expected"),
    [
        ("thequickbrownfoxjumpsoverthelazydog", True),
        ("banana", False),
        ("thequickbrowkfoxjumpedoverthelazycat", False),
    ],
)
def test_is_pangram(s, expected):
    assert is_pangram(s) is expected


@pytest.mark.parametrize(
    ("s", "expected"),
    [("HeLLo", "hello"), ("WORLD", "world"), ("awesome", "awesome"), ("ÄB1", "Äb1")],
)
def test_to_lower(s, expected):
    assert to_lower(s) == expected


@pytest.mark.parametrize(
    ("s", "k", "expected"),
    [
        ("the quick brown fox jumped over the lazy dog", 4, "the quick brown fox"),
        ("one piece is awesome", 2, "one piece"),
    ],
)
def test_truncate_sentence(s, k, expected):
    assert truncate_sentence(s, k) == expected


def test_truncate_sentence_too_many_words():
    with pytest.raises(ValueError):
        truncate_sentence("one two", 3)


@pytest.mark.parametrize(
    ("s", "t", "expected"),
    [
        ("hello world", "the world is round", ["hello", "the", "is", "round"]),
        ("hello world", "hello world", []),
    ],
)
def test_uncommon_words(s, t, expected):
    assert uncommon_words(s, t) == expected


@pytest.mark.parametrize(
    ("s", "t", "expected"),
    [
        ("car", "rac", True),
        ("rabbit", "tree", False),
        ("rabbit", "apples", False),
        ("aab", "abb", False),
    ],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected