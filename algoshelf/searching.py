"""Searching and comparing sorted or rotated integer sequences."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections import Counter
from collections.abc import Sequence
from itertools import pairwise


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted sequences."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    n1, n2 = len(nums1), len(nums2)
    total = n1 + n2
    if total == 0:
        raise ValueError("find_median_sorted_arrays() needs at least one number")
    half = (total + 1) // 2
    low, high = 0, n1
    while low <= high:
        mid1 = (low + high) // 2
        mid2 = half - mid1
        left1 = nums1[mid1 - 1] if mid1 > 0 else -math.inf
        left2 = nums2[mid2 - 1] if mid2 > 0 else -math.inf
        right1 = nums1[mid1] if mid1 < n1 else math.inf
        right2 = nums2[mid2] if mid2 < n2 else math.inf
        if left1 <= right2 and left2 <= right1:
            if total % 2 == 1:
                return float(max(left1, left2))
            return (max(left1, left2) + min(right1, right2)) / 2.0
        if left1 > right2:
            high = mid1 - 1
        else:
            low = mid1 + 1
    raise ValueError("inputs must be sorted in ascending order")


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a sorted sequence, or where it would be inserted."""
    return bisect_left(nums, target)


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in a rotated sorted sequence that may hold repeats."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
        elif nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers among ``nums``."""
    if not nums:
        return 0
    longest = count = 1
    for previous, current in pairwise(sorted(set(nums))):
        if current == previous + 1:
            count += 1
        else:
            longest = max(longest, count)
            count = 1
    return max(longest, count)


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Sorted multiset intersection: each value as often as it occurs in both."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())


def max_distance(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Largest ``j - i`` with ``nums1[i] <= nums2[j]``, both sequences non-increasing."""
    best = 0
    i = j = 0
    while i < len(nums1) and j < len(nums2):
        if nums1[i] <= nums2[j]:
            best = max(best, j - i)
            j += 1
        else:
            i += 1
    return best


def sneaky_numbers(nums: Sequence[int]) -> list[int]:
    """Values that repeat, in ascending order, once for each extra occurrence."""
    return [current for previous, current in pairwise(sorted(nums)) if current == previous]