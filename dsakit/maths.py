"""Number-theory helpers: GCD, Armstrong numbers, primality and divisors."""

from __future__ import annotations


def gcd_ascending(a: int, b: int) -> int:
    """GCD by testing every candidate from 1 up to ``min(a, b)``."""
    result = 1
    for i in range(1, min(a, b) + 1):
        if a % i == 0 and b % i == 0:
            result = i
    return result


def gcd_descending(a: int, b: int) -> int:
    """GCD by testing candidates from ``min(a, b)`` down, stopping at the first hit."""
    for i in range(min(a, b), 0, -1):
        if a % i == 0 and b % i == 0:
            return i
    return 1


def gcd(a: int, b: int) -> int:
    """GCD by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def is_armstrong(n: int) -> bool:
    """Return whether ``n`` equals the sum of its digits each raised to the digit count."""
    sign = -1 if n < 0 else 1
    digits = [int(ch) for ch in str(abs(n))] if n != 0 else []
    power = len(digits)
    total = sum((sign * d) ** power for d in digits)
    return total == n


def check_prime(n: int) -> bool:
    """Primality by counting divisor pairs up to the square root.

    The count is checked before each divisor test, so the answer is ``False``
    only once more than two divisors have been seen before the loop ends.
    """
    count = 0
    i = 1
    while i * i <= n:
        if count > 2:
            return False
        if n % i == 0:
            count += 1
            if i != n // i:
                count += 1
        i += 1
    return True


def is_prime(n: int) -> bool:
    """Primality by trial division with the 6k +/- 1 pattern."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def divisors(n: int) -> list[int]:
    """All divisors of ``n`` in ascending order."""
    return [i for i in range(1, n + 1) if n % i == 0]


def paired_divisors(n: int) -> list[int]:
    """Divisors of ``n`` found in pairs ``i, n // i`` while ``i * i <= n``."""
    result: list[int] = []
    i = 1
    while i * i <= n:
        if n % i == 0:
            result.append(i)
            if i != n // i:
                result.append(n // i)
        i += 1
    return result