"""Algorithms over integer sequences."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterator, Sequence
from itertools import accumulate, combinations, pairwise


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of every pair summing to ``target``, flattened in scan order."""
    indices: list[int] = []
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            indices.extend((i, j))
    return indices


def _pairs_with_sum(values: list[int], start: int, goal: int) -> Iterator[tuple[int, int]]:
    """Distinct pairs from sorted ``values[start:]`` summing to ``goal``."""
    lo, hi = start, len(values) - 1
    while lo < hi:
        total = values[lo] + values[hi]
        if total < goal:
            lo += 1
        elif total > goal:
            hi -= 1
        else:
            yield values[lo], values[hi]
            lo += 1
            hi -= 1
            while lo < hi and values[lo] == values[lo - 1]:
                lo += 1
            while lo < hi and values[hi] == values[hi + 1]:
                hi -= 1


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sorted triplets whose sum is zero."""
    values = sorted(nums)
    result = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        result.extend([first, b, c] for b, c in _pairs_with_sum(values, i + 1, -first))
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """All distinct sorted quadruplets whose sum is ``target``."""
    values = sorted(nums)
    result = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        for j in range(i + 1, len(values)):
            second = values[j]
            if j > i + 1 and second == values[j - 1]:
                continue
            goal = target - first - second
            result.extend(
                [first, second, c, d] for c, d in _pairs_with_sum(values, j + 1, goal)
            )
    return result


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first k items are unique; return k."""
    if not nums:
        return 0
    write = 0
    for value in nums:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def remove_element(nums: list[int], val: int) -> int:
    """Move every item not equal to ``val`` to the front in order; return their count."""
    kept = 0
    for value in nums:
        if value != val:
            nums[kept] = value
            kept += 1
    return kept


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation."""
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None
    )
    if pivot is None:
        nums.reverse()
        return
    swap_at = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap_at] = nums[swap_at], nums[pivot]
    nums[pivot + 1:] = reversed(nums[pivot + 1:])


def trap(heights: Sequence[int]) -> int:
    """Units of water held between bars of the given heights."""
    if not heights:
        return 0
    left_max = accumulate(heights, max)
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_max, right_max, heights)
    )


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("max_subarray() needs at least one number")
    best = None
    running = 0
    for value in nums:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    return best


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index can be reached, each item being a maximum jump."""
    reach = 0
    for i, step in enumerate(nums):
        if i > reach:
            return False
        reach = max(reach, i + step)
        if reach > len(nums):
            break
    return True


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching [start, end] intervals."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals):
        if not merged or start > merged[-1][1]:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0, 1 and 2 in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """All subsets, each decision excluding an item before including it."""
    result: list[list[int]] = [[]]
    for value in reversed(nums):
        result += [[value, *subset] for subset in result]
    return result


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one sell."""
    if not prices:
        return 0
    profit = 0
    lowest = prices[0]
    for price in prices[1:]:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return profit


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit with any number of non-overlapping trades."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def single_number(nums: Sequence[int]) -> int:
    """The value seen once where every other value is seen three times."""
    ones = twos = 0
    for value in nums:
        ones = (ones ^ value) & ~twos
        twos = (twos ^ value) & ~ones
    return ones


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous run."""
    if not nums:
        raise ValueError("max_product() needs at least one number")
    best = None
    prefix = suffix = 1
    for front, back in zip(nums, reversed(nums)):
        prefix = (prefix or 1) * front
        suffix = (suffix or 1) * back
        candidate = max(prefix, suffix)
        best = candidate if best is None else max(best, candidate)
    return best


def rob(houses: Sequence[int]) -> int:
    """Largest total taken from houses with no two adjacent ones robbed."""
    if not houses:
        return 0
    before, best = 0, houses[0]
    for value in houses[1:]:
        before, best = best, max(value + before, best)
    return best


def sum_divisible_by_k(nums: Sequence[int], k: int) -> int:
    """Sum of every item whose frequency is a multiple of ``k``."""
    return sum(value * count for value, count in Counter(nums).items() if count % k == 0)


def max_alternating_sum(nums: Sequence[int]) -> int:
    """Largest value of a0**2 - a1**2 + a2**2 - ... over rearrangements of |nums|."""
    pool = deque(sorted(abs(value) for value in nums))
    score = 0
    sign = 1
    while pool:
        value = pool.pop() if sign > 0 else pool.popleft()
        score += sign * value * value
        sign = -sign
    return score