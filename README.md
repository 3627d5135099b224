# katas

A collection of small, self-contained solutions to classic programming
exercises over numbers, lists and strings. Each function is plain Python
using only the standard library, and every one is covered by tests.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Modules

### `katas.numbers`

Arithmetic exercises:

- `add_two_ints(x, y)` – the sum of two integers.
- `smallest_even_multiple(n)` – the smallest positive multiple of 2 and `n`.
- `max_achievable(num, t)` – `num + 2 * t`.
- `sum_difference(n, m)` – the sum of 1..n not divisible by `m` minus the
  sum of those that are.
- `sum_of_multiples(n)` – the sum of the numbers in 0..n divisible by 3, 5 or 7.
- `steps_to_zero(n)` – halve-if-even, decrement-if-odd steps down to zero.
- `tournament_matches(n)` – matches played in a knockout of `n` teams.
- `convert_temperature(celsius)` – a `(kelvin, fahrenheit)` tuple.
- `fizz_buzz(n)` – the FizzBuzz sequence for 1..n as strings.
- `sum_zero(n)` – `n` distinct integers that add up to zero.

```python
from katas.numbers import fizz_buzz, tournament_matches

fizz_buzz(5)            # ['1', '2', 'Fizz', '4', 'Buzz']
tournament_matches(7)   # 6
```

### `katas.arrays`

List exercises: `height_checker`, `lucky_integer`, `good_pairs`,
`highest_altitude`, `find_peaks`, `min_average`, `stable_mountains`,
`concatenate`, `binary_search`, `contains_duplicate`, `intersection`,
`max_consecutive_ones`, `max_product`, `build_permutation`, `running_sum`,
`shuffle` and `sneaky_numbers`.

```python
from katas.arrays import running_sum, shuffle

running_sum([1, 2, 3, 4])          # [1, 3, 6, 10]
shuffle([2, 5, 1, 3, 4, 7], 3)     # [2, 3, 5, 4, 1, 7]
```

A few behaviours worth knowing:

- `binary_search` sorts a copy of its input and returns the index of the
  target in that sorted copy, or `-1`.
- `lucky_integer` returns `-1` when no value occurs exactly as often as
  itself.
- `min_average` returns `math.inf` when given fewer than two numbers.
- `intersection` keeps the order in which values first appear in the
  first list.

### `katas.strings`

Text exercises: `permutation_difference`, `a_before_b`,
`count_common_words`, `words_containing`, `count_matching_items`,
`defang_ip`, `equal_occurrences`, `array_strings_equal`, `final_value`,
`find_difference`, `is_acronym`, `is_subsequence`, `count_jewels`,
`length_of_last_word`, `letter_percentage`, `most_words`, `is_pangram`,
`to_lower`, `truncate_sentence`, `uncommon_words` and `is_anagram`.

```python
from katas.strings import defang_ip, is_anagram

defang_ip("1.1.1.1")         # '1[.]1[.]1[.]1'
is_anagram("car", "rac")     # True
```

Words are separated by single spaces throughout; `to_lower` changes only
the ASCII capitals `A`–`Z`, and `uncommon_words` returns words in the order
they are first seen.

## Errors

Inputs a function cannot work with raise ordinary Python exceptions:

- `ValueError`: `steps_to_zero` with a negative number, `max_product` with
  fewer than two numbers, `running_sum` with an empty list, `shuffle` when
  the list does not hold exactly `2 * n` values, `sneaky_numbers` with more
  than two repeated values, `permutation_difference` when `t` is shorter
  than `s`, `find_difference` when `t` holds no extra character, and
  `truncate_sentence` when `k` is negative or exceeds the word count.
- `IndexError`: `build_permutation` when a value is not a valid index.
- `ZeroDivisionError`: `sum_difference` with `m == 0`.

## What this package does not do

It is a library of functions only: there is no command-line program, and
nothing reads input from files or the terminal.