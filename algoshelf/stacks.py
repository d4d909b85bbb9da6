"""Monotonic stack and deque algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Maximum of every window of ``k`` consecutive items."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and len(nums)")
    window: deque[int] = deque()
    result = []
    for i, value in enumerate(nums):
        if window and window[0] <= i - k:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each item of ``nums1``, the next larger value after it in ``nums2``.

    -1 marks an item with no larger value; an item absent from ``nums2`` gives 0.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in nums2:
        while stack and value > stack[-1]:
            greater[stack.pop()] = value
        stack.append(value)
    greater.update((value, -1) for value in stack)
    return [greater.get(value, 0) for value in nums1]


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """Next larger value for each item, searching circularly; -1 if none."""
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for i in reversed(range(2 * n)):
        value = nums[i % n]
        while stack and nums[stack[-1]] <= value:
            stack.pop()
        result[i % n] = nums[stack[-1]] if stack else -1
        stack.append(i % n)
    return result


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Days to wait after each day for a warmer one; 0 if it never comes."""
    result = [0] * len(temperatures)
    stack: list[int] = []
    for i, temperature in enumerate(temperatures):
        while stack and temperature > temperatures[stack[-1]]:
            earlier = stack.pop()
            result[earlier] = i - earlier
        stack.append(i)
    return result