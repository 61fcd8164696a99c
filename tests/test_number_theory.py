import calendar
import math
from functools import reduce

import pytest

from algobox.number_theory import (
    MOD,
    chinese_remainder,
    collatz,
    fibonacci,
    gcd,
    is_leap_year,
    is_palindrome_number,
    is_prime,
    nth_ugly_number,
    pow_mod,
    prime_factors,
    sieve,
    smallest_prime_factors,
)


@pytest.mark.parametrize(
    "base, exponent, modulus",
    [(2, 10, MOD), (3, 200, MOD), (-7, 13, MOD), (123456, 789, 1000), (5, 1, 7)],
)
def test_pow_mod_matches_builtin(base, exponent, modulus):
    assert pow_mod(base, exponent, modulus) == pow(base, exponent, modulus)


def test_pow_mod_default_modulus():
    assert pow_mod(10, 18) == pow(10, 18, MOD)


def test_pow_mod_rejects_negative_exponent():
    with pytest.raises(ValueError):
        pow_mod(2, -1, 7)


def test_pow_mod_rejects_bad_modulus():
    with pytest.raises(ValueError):
        pow_mod(2, 3, 0)


def test_is_prime_agrees_with_sieve():
    primes = set(sieve(500))
    assert [n for n in range(-5, 500) if is_prime(n)] == sorted(primes)


def test_sieve_values_are_prime_and_below_limit():
    primes = sieve(200)
    assert all(is_prime(p) and p < 200 for p in primes)
    assert primes == sorted(set(primes))


@pytest.mark.parametrize("limit", [-3, 0, 1, 2])
def test_sieve_small_limits_have_no_primes(limit):
    assert sieve(limit) == []


def test_chinese_remainder_source_example():
    nums, rems = [3, 4, 5], [2, 3, 1]
    x = chinese_remainder(nums, rems)
    assert all(x % n == r for n, r in zip(nums, rems))
    assert not any(
        all(y % n == r for n, r in zip(nums, rems)) for y in range(1, x)
    )


def test_chinese_remainder_without_solution():
    with pytest.raises(ValueError):
        chinese_remainder([4, 6], [1, 2])


def test_chinese_remainder_length_mismatch():
    with pytest.raises(ValueError):
        chinese_remainder([3, 5], [1])


def test_fibonacci_recurrence():
    terms = fibonacci(20)
    assert len(terms) == 20
    assert all(terms[i] == terms[i - 1] + terms[i - 2] for i in range(2, 20))


def test_fibonacci_start():
    assert fibonacci(2) == [1, 1]
    assert fibonacci(0) == []


@pytest.mark.parametrize("a, b", [(12, 18), (0, 9), (17, 5), (100, 75), (9, 0)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("year", list(range(1890, 2110)))
def test_leap_year_matches_calendar(year):
    assert is_leap_year(year) == calendar.isleap(year)


@pytest.mark.parametrize("digits", ["1", "12", "907", "4501"])
def test_palindrome_numbers(digits):
    assert is_palindrome_number(int(digits + digits[::-1]))
    assert not is_palindrome_number(int("1" + digits + "2"))


def test_non_positive_numbers_count_as_palindromes():
    assert is_palindrome_number(0)
    assert is_palindrome_number(-12)


def test_smallest_prime_factors_rebuild_numbers():
    spf = smallest_prime_factors(1000)
    for x in range(2, 1000):
        factors = prime_factors(x, spf)
        assert reduce(lambda p, q: p * q, factors, 1) == x
        assert all(is_prime(f) for f in factors)
        assert factors == sorted(factors)
        assert factors[0] == spf[x]


def test_prime_factors_out_of_table():
    spf = smallest_prime_factors(50)
    with pytest.raises(ValueError):
        prime_factors(50, spf)
    with pytest.raises(ValueError):
        prime_factors(0, spf)


def test_ugly_numbers_from_problem_statement():
    expected = [1, 2, 3, 4, 5, 6, 8, 9, 10, 12, 15]
    assert [nth_ugly_number(i) for i in range(1, len(expected) + 1)] == expected


def test_ugly_numbers_only_have_small_factors():
    spf = smallest_prime_factors(100000)
    values = [nth_ugly_number(i) for i in range(1, 150)]
    assert values == sorted(set(values))
    assert all(set(prime_factors(v, spf)) <= {2, 3, 5} for v in values)


def test_nth_ugly_number_rejects_zero():
    with pytest.raises(ValueError):
        nth_ugly_number(0)


@pytest.mark.parametrize("start", [1, 3, 6, 27, 97])
def test_collatz_steps(start):
    sequence = collatz(start)
    assert sequence[0] == start
    assert sequence[-1] == 1
    for current, following in zip(sequence, sequence[1:]):
        if current % 2 == 0:
            assert following == current // 2
        else:
            assert following == 3 * current + 1


def test_collatz_rejects_non_positive():
    with pytest.raises(ValueError):
        collatz(0)