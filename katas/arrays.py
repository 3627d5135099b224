"""Exercises over lists of integers."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from itertools import accumulate


def height_checker(heights: list[int]) -> int:
    """Count positions where ``heights`` differs from its sorted order."""
    return sum(a != b for a, b in zip(heights, sorted(heights)))


def lucky_integer(arr: list[int]) -> int:
    """Return the largest value whose frequency equals itself, or -1."""
    counts = Counter(arr)
    return max((value for value, count in counts.items() if value == count), default=-1)


def good_pairs(nums: list[int]) -> int:
    """Count index pairs ``i < j`` with equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def highest_altitude(gains: list[int]) -> int:
    """Return the highest altitude reached, starting from zero."""
    return max(0, max(accumulate(gains), default=0))


def find_peaks(mountain: list[int]) -> list[int]:
    """Return indices strictly greater than both neighbours."""
    return [
        i
        for i, (before, here, after) in enumerate(
            zip(mountain, mountain[1:], mountain[2:]), start=1
        )
        if here > before and here > after
    ]


def min_average(nums: list[int]) -> float:
    """Return the smallest average of repeatedly paired minimum and maximum.

    Returns infinity when fewer than two numbers are given.
    """
    ordered = sorted(nums)
    pairs = zip(ordered[: len(ordered) // 2], reversed(ordered))
    return min(((low + high) / 2.0 for low, high in pairs), default=math.inf)


def stable_mountains(height: list[int], threshold: int) -> list[int]:
    """Return indices whose preceding mountain is higher than ``threshold``."""
    return [i for i, previous in enumerate(height[:-1], start=1) if previous > threshold]


def concatenate(nums: list[int]) -> list[int]:
    """Return ``nums`` followed by itself."""
    return nums + nums


def binary_search(nums: list[int], target: int) -> int:
    """Return the index of ``target`` in the sorted numbers, or -1."""
    ordered = sorted(nums)
    low, high = 0, len(ordered) - 1
    while low <= high:
        mid = (low + high) // 2
        if ordered[mid] == target:
            return mid
        if target > ordered[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def contains_duplicate(nums: list[int]) -> bool:
    """Return True if any value appears more than once."""
    return len(set(nums)) != len(nums)


def intersection(nums1: list[int], nums2: list[int]) -> list[int]:
    """Return distinct values of ``nums1`` also in ``nums2``, in first-seen order."""
    present = set(nums2)
    return list(dict.fromkeys(v for v in nums1 if v in present))


def max_consecutive_ones(nums: list[int]) -> int:
    """Return the longest run of ones; only zeros break a run."""
    best = 0
    current = 0
    for value in nums:
        if value == 1:
            current += 1
        elif value == 0:
            best = max(best, current)
            current = 0
    return max(best, current)


def max_product(nums: list[int]) -> int:
    """Return ``(a - 1) * (b - 1)`` for the two largest values."""
    if len(nums) < 2:
        raise ValueError("at least two numbers are required")
    first, second = heapq.nlargest(2, nums)
    return (first - 1) * (second - 1)


def build_permutation(nums: list[int]) -> list[int]:
    """Return ``[nums[nums[i]] for each i]``."""
    size = len(nums)
    if any(not 0 <= value < size for value in nums):
        raise IndexError("every value must be a valid index into nums")
    return [nums[value] for value in nums]


def running_sum(nums: list[int]) -> list[int]:
    """Return the prefix sums of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    return list(accumulate(nums))


def shuffle(nums: list[int], n: int) -> list[int]:
    """Interleave ``[x1..xn, y1..yn]`` into ``[x1, y1, x2, y2, ...]``."""
    if n < 0 or len(nums) != 2 * n:
        raise ValueError("nums must hold exactly 2 * n values")
    return [value for pair in zip(nums[:n], nums[n:]) for value in pair]


def sneaky_numbers(nums: list[int]) -> list[int]:
    """Return the two repeated values in ascending order, padded with zeros."""
    repeated = [
        value
        for value, count in sorted(Counter(nums).items())
        for _ in range(count // 2)
    ]
    if len(repeated) > 2:
        raise ValueError("more than two repeated values")
    return repeated + [0] * (2 - len(repeated))