"""Number-theory helpers: modular powers, primes, factorisation and sequences."""

from __future__ import annotations

from collections.abc import Sequence
from math import lcm

MOD = 10**9 + 7


def pow_mod(base: int, exponent: int, modulus: int = MOD) -> int:
    """Compute ``base ** exponent % modulus`` by binary exponentiation.

    The result is never negative. An exponent of zero gives 1.
    """
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def is_prime(n: int) -> bool:
    """Primality test by trial division over numbers of the form 6k +/- 1."""
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


def chinese_remainder(nums: Sequence[int], rems: Sequence[int]) -> int:
    """Smallest positive x with ``x % nums[i] == rems[i]`` for every i.

    Raises ValueError if the inputs are inconsistent or no such x exists.
    """
    if len(nums) != len(rems):
        raise ValueError("nums and rems must have the same length")
    if any(n <= 0 for n in nums):
        raise ValueError("moduli must be positive")
    period = lcm(*nums) if nums else 1
    for x in range(1, period + 1):
        if all(x % n == r for n, r in zip(nums, rems)):
            return x
    raise ValueError("the system of congruences has no solution")


def fibonacci(n: int) -> list[int]:
    """The first n Fibonacci numbers, starting 1, 1, 2, ..."""
    terms = []
    a, b = 1, 0
    for _ in range(n):
        a, b = b, a + b
        terms.append(b)
    return terms


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while a != 0:
        a, b = b % a, a
    return b


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_palindrome_number(n: int) -> bool:
    """True if the decimal digits of n read the same both ways.

    Numbers that are zero or negative have no digits to compare and count
    as palindromes.
    """
    digits = []
    while n > 0:
        n, digit = divmod(n, 10)
        digits.append(digit)
    return digits == digits[::-1]


def sieve(limit: int) -> list[int]:
    """All primes strictly below limit, by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    marks = bytearray([1]) * limit
    marks[0] = marks[1] = 0
    i = 2
    while i * i < limit:
        if marks[i]:
            marks[i * i : limit : i] = bytes(len(range(i * i, limit, i)))
        i += 1
    return [number for number, prime in enumerate(marks) if prime]


def smallest_prime_factors(limit: int) -> list[int]:
    """Table whose entry x is the smallest prime factor of x, for x < limit.

    Entry 0 is 0 and entry 1 is 1.
    """
    spf = list(range(max(limit, 0)))
    for i in range(4, limit, 2):
        spf[i] = 2
    i = 3
    while i * i < limit:
        if spf[i] == i:
            for j in range(i * i, limit, i):
                if spf[j] == j:
                    spf[j] = i
        i += 1
    return spf


def prime_factors(x: int, spf: Sequence[int]) -> list[int]:
    """Prime factors of x in non-decreasing order, using a smallest-factor table."""
    if x < 1 or x >= len(spf):
        raise ValueError(f"{x} is outside the factor table")
    factors = []
    while x != 1:
        factors.append(spf[x])
        x //= spf[x]
    return factors


def nth_ugly_number(n: int) -> int:
    """The n-th number (1-based) whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError("n must be at least 1")
    ugly = [1]
    i2 = i3 = i5 = 0
    while len(ugly) < n:
        next2, next3, next5 = ugly[i2] * 2, ugly[i3] * 3, ugly[i5] * 5
        value = min(next2, next3, next5)
        ugly.append(value)
        if value == next2:
            i2 += 1
        if value == next3:
            i3 += 1
        if value == next5:
            i5 += 1
    return ugly[n - 1]


def collatz(n: int) -> list[int]:
    """The Collatz sequence from n down to 1, both included."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence