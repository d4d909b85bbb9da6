"""Small algorithms over single integers."""

from __future__ import annotations

_INT32_LIMIT = 2**31 - 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of a 32-bit integer; 0 if the result overflows."""
    sign = -1 if x < 0 else 1
    remaining = abs(x)
    reversed_value = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        if reversed_value > _INT32_LIMIT // 10:
            return 0
        reversed_value = reversed_value * 10 + digit
    return sign * reversed_value


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n <= 2:
        return n
    a, b = 1, 2
    for _ in range(3, n + 1):
        a, b = b, a + b
    return b


def min_moves(target: int, max_doubles: int) -> int:
    """Fewest increments and doublings that take 1 to ``target``."""
    moves = 0
    while target > 1:
        if max_doubles <= 0:
            return moves + target - 1
        if target % 2 == 0:
            target //= 2
            max_doubles -= 1
        else:
            target -= 1
        moves += 1
    return moves


def number_of_steps(num: int) -> int:
    """Steps to reach zero, halving even numbers and decrementing odd ones."""
    if num < 0:
        raise ValueError("num must not be negative")
    steps = 0
    while num:
        num = num // 2 if num % 2 == 0 else num - 1
        steps += 1
    return steps


def num_water_bottles(num_bottles: int, num_exchange: int) -> int:
    """Bottles drunk when every ``num_exchange`` empties buy one full bottle."""
    if num_exchange < 2:
        raise ValueError("num_exchange must be at least 2")
    drunk = 0
    empty = 0
    while num_bottles > 0:
        drunk += num_bottles
        empty += num_bottles
        num_bottles, empty = divmod(empty, num_exchange)
    return drunk


def total_money(n: int) -> int:
    """Money saved after ``n`` days, adding one more each day and each new week."""
    if n < 0:
        raise ValueError("n must not be negative")
    weeks, days = divmod(n, 7)
    full_weeks = weeks * 28 + (weeks * (weeks - 1) // 2) * 7
    start = weeks + 1
    return full_weeks + days * (2 * start + (days - 1)) // 2


def count_operations(num1: int, num2: int) -> int:
    """Subtractions of the smaller from the larger until either becomes zero."""
    count = 0
    while num1 > 0 and num2 > 0:
        if num1 >= num2:
            count += num1 // num2
            num1 %= num2
        else:
            count += num2 // num1
            num2 %= num1
    return count


def smallest_all_set_bits(n: int) -> int:
    """Smallest number of the form 2**m - 1 (m >= 1) that is at least ``n``."""
    if n <= 1:
        return 1
    return (1 << n.bit_length()) - 1


def remove_zeros(n: int) -> int:
    """``n`` with every zero digit dropped from its decimal form."""
    digits = str(n).replace("0", "")
    return int(digits) if digits else 0