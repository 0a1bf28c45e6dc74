"""Divisibility, modular arithmetic, binomials and primality."""

from __future__ import annotations

import math
import random
from itertools import accumulate

DEFAULT_MOD = 1_000_000_007
DEFAULT_LIMIT = 200_005

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor."""
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple; both zero raises ZeroDivisionError."""
    return a // gcd(a, b) * b


def mod_pow(base: int, exp: int, mod: int) -> int:
    """``base ** exp % mod`` by repeated squaring."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exp, mod)


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    x0, y0, x1, y1 = 1, 0, 0, 1
    while b:
        q = a // b
        a, b = b, a - q * b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Inverse of ``a`` modulo ``m``; ValueError when none exists."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    g, x, _ = ext_gcd(a % m, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


class Binomial:
    """Factorial tables for ``nCr`` modulo a prime, for ``n < limit``."""

    def __init__(self, limit: int = DEFAULT_LIMIT, mod: int = DEFAULT_MOD) -> None:
        if limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit
        self.mod = mod
        self._fac = list(accumulate(range(1, limit), lambda acc, i: acc * i % mod, initial=1))
        inv = [1] * limit
        inv[-1] = pow(self._fac[-1], mod - 2, mod)
        for i in range(limit - 1, 0, -1):
            inv[i - 1] = inv[i] * i % mod
        self._inv = inv

    def ncr(self, n: int, r: int) -> int:
        """Binomial coefficient ``C(n, r)`` modulo ``mod``; 0 when r is out of range."""
        if r < 0 or r > n:
            return 0
        if n >= self.limit:
            raise ValueError(f"n={n} exceeds table limit {self.limit}")
        return self._fac[n] * self._inv[r] % self.mod * self._inv[n - r] % self.mod


def sieve(n: int) -> list[bool]:
    """Primality flags for ``0..n`` by the sieve of Eratosthenes."""
    if n < 0:
        raise ValueError("n must be non-negative")
    flags = [True] * (n + 1)
    flags[0] = False
    if n >= 1:
        flags[1] = False
    for i in range(2, math.isqrt(n) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return flags


def is_prime(n: int) -> bool:
    """Primality by trial division."""
    if n < 2:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def miller_rabin(n: int) -> bool:
    """Miller-Rabin test with the fixed witnesses 2..23."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        if a >= n:
            break
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def pollard_rho(n: int, rng: random.Random | None = None) -> int:
    """A non-trivial divisor of the composite number ``n``."""
    if n < 2 or miller_rabin(n):
        raise ValueError(f"{n} is not composite")
    if n % 2 == 0:
        return 2
    if rng is None:
        rng = random.Random()
    while True:
        x = rng.randrange(2, n)
        c = rng.randrange(1, n)
        y = x
        d = 1
        while d == 1:
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            d = gcd(abs(x - y), n)
        if d != n:
            return d