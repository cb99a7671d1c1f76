"""Radix conversion, binomial coefficients, modular powers and primes."""

from __future__ import annotations

import math

_DIGITS = "0123456789"


def change_radix(s: str, a: int, b: int) -> str:
    """Convert the base-``a`` digit string ``s`` into a base-``b`` digit string."""
    value = 0
    for c in s:
        digit = _DIGITS.find(c)
        if digit < 0:
            raise ValueError(f"invalid digit {c!r}")
        value = value * a + digit
    if value == 0:
        return "0"
    if b < 2:
        raise ValueError("target radix must be at least 2")
    digits = []
    while value != 0:
        value, rem = divmod(value, b)
        if rem >= len(_DIGITS):
            raise ValueError(f"digit {rem} cannot be written in decimal digits")
        digits.append(_DIGITS[rem])
    return "".join(reversed(digits))


def ncr_small(n: int, r: int) -> int:
    """Binomial coefficient by the multiplicative formula."""
    result = 1
    for i in range(1, r + 1):
        result = result * (n - i + 1) // i
    return result


def ncr_mod_table(p: int) -> list[list[int]]:
    """Table ``t`` with ``t[i][j] == C(i, j) mod p`` for ``0 <= j <= i < p``."""
    comb = [[0] * p for _ in range(p)]
    comb[0][0] = 1
    for i in range(1, p):
        comb[i][0] = 1
        for j in range(1, i + 1):
            comb[i][j] = (comb[i - 1][j - 1] + comb[i - 1][j]) % p
    return comb


def ncr_lucas(n: int, r: int, p: int) -> int:
    """``C(n, r) mod p`` for a prime ``p`` by Lucas' theorem."""
    comb = ncr_mod_table(p)
    result = 1
    while n > 0:
        result = result * comb[n % p][r % p] % p
        n //= p
        r //= p
    return result


def modpow(x: int, p: int, mod: int) -> int:
    """``x ** p % mod`` by repeated squaring; 1 for a non-positive exponent."""
    if p <= 0:
        return 1
    return pow(x, p, mod)


def modinv(x: int, mod: int) -> int:
    """Inverse of ``x`` modulo the prime ``mod`` via Fermat's little theorem."""
    return modpow(x, mod - 2, mod)


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n <= 1:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def prime_factorization(n: int) -> list[int]:
    """Prime factors of ``n`` in ascending order, with multiplicity."""
    if is_prime(n):
        return [n]
    factors = []
    for i in range(2, math.isqrt(n) + 1):
        while n % i == 0:
            n //= i
            factors.append(i)
    if n != 1:
        factors.append(n)
    return factors


def sieve_of_eratosthenes(n: int) -> list[int]:
    """All primes not greater than ``n``."""
    if n <= 1:
        return []
    sieve = [True] * (n + 1)
    sieve[0] = sieve[1] = False
    primes = []
    for i in range(2, n + 1):
        if sieve[i]:
            primes.append(i)
            for j in range(2 * i, n + 1, i):
                sieve[j] = False
    return primes


def sieve_range(n: int, l: int, r: int) -> list[int]:
    """Primes in ``[l, r]``, sieving with divisors up to ``sqrt(n)``."""
    if n <= 1:
        return []
    flags = [True] * (r - l + 1)
    if l == 1:
        flags[0] = False
    for i in range(2, math.isqrt(n) + 1):
        start = (l + i - 1) // i * i
        for j in range(start, r + 1, i):
            if j != i:
                flags[j - l] = False
    return [l + k for k, flag in enumerate(flags) if flag]