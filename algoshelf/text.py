"""Algorithms over strings."""

from __future__ import annotations


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word of ``s``."""
    return len(s.rstrip(" ").rpartition(" ")[2])


def remove_k_digits(num: str, k: int) -> str:
    """Smallest number left after removing ``k`` digits from ``num``."""
    stack: list[str] = []
    for digit in num:
        while stack and k > 0 and stack[-1] > digit:
            stack.pop()
            k -= 1
        stack.append(digit)
    if k > 0:
        del stack[max(len(stack) - k, 0):]
    return "".join(stack).lstrip("0") or "0"


def max_sum_of_squares(num: int, total: int) -> str:
    """Largest ``num``-digit string whose digits sum to ``total``; "" if none exists."""
    if total > 9 * num or total < 0:
        return ""
    digits = []
    for _ in range(num):
        digit = min(9, total)
        digits.append(str(digit))
        total -= digit
    return "".join(digits)