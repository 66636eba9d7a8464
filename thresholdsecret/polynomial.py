import logging
import random
from collections import Counter

from gmpy2 import mpq, mpz

from thresholdsecret.exceptions import (
    DuplicateAbscissa,
    InsufficientShares,
    NonIntegralSecret,
)

logger = logging.getLogger(__name__)


def interpolate_at(shares, x_recomb=0):
    """Evaluate at ``x_recomb`` the unique polynomial through ``shares``.

    shares are in the form (x, y=f(x)). Every Lagrange term keeps its
    numerator and denominator as separate products and is divided exactly
    once, so the result carries no rounding. With ``x_recomb=0`` this is the
    constant term, i.e. the secret.
    """
    if len(shares) == 0:
        raise InsufficientShares("interpolation needs at least one point")

    xs = [mpz(x) for x, _ in shares]
    ys = [mpz(y) for _, y in shares]
    dupes = sorted(int(x) for x, count in Counter(xs).items() if count > 1)
    if dupes:
        raise DuplicateAbscissa(f"points share x values {dupes}")

    x_recomb = mpz(x_recomb)
    total = mpq(0)
    for i, x_i in enumerate(xs):
        num = mpz(1)
        den = mpz(1)
        for j, x_j in enumerate(xs):
            if i != j:
                num *= x_recomb - x_j
                den *= x_i - x_j
        term = mpq(ys[i] * num, den)
        if term.denominator != 1:
            logger.debug(f"lagrange term for x={x_i} is not integral: {term}")
        total += term

    if total.denominator != 1:
        raise NonIntegralSecret(
            f"interpolated value {total} at x={x_recomb} is not an integer"
        )
    return int(total.numerator)


class Polynomial(object):
    """Polynomial with integer coefficients, lowest degree first."""

    def __init__(self, coeffs):
        self.coeffs = [mpz(c) for c in coeffs]
        while self.coeffs and self.coeffs[-1] == 0:
            self.coeffs.pop()

    def is_zero(self):
        return self.coeffs == []

    @property
    def degree(self):
        return len(self.coeffs) - 1

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coeffs == other.coeffs

    def __call__(self, x):
        # Horner
        y = mpz(0)
        for coeff in reversed(self.coeffs):
            y = y * x + coeff
        return int(y)

    def points(self, xs):
        return [(x, self(x)) for x in xs]

    @classmethod
    def random(cls, degree, y0=None, bound=2 ** 256, rng=random):
        coeffs = [rng.randint(-bound, bound) for _ in range(degree + 1)]
        if y0 is not None:
            coeffs[0] = y0
        return cls(coeffs)
