"""Conversion between digit strings in radix 2..36 and big integers."""
from string import ascii_lowercase, digits as decimal_digits

from gmpy2 import mpz

from thresholdsecret.exceptions import InvalidEncoding

MIN_BASE = 2
MAX_BASE = 36

DIGITS = decimal_digits + ascii_lowercase


def _check_base(base):
    if type(base) is not int or not MIN_BASE <= base <= MAX_BASE:
        raise InvalidEncoding(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base!r}")


def parse_base(text):
    """Convert the textual ``base`` field of a share into a radix."""
    token = text.strip()
    if not token.isdecimal():
        raise InvalidEncoding(f"base {text!r} is not a decimal integer")
    base = int(token)
    _check_base(base)
    return base


def decode(base, digits):
    """Decode ``digits`` written in ``base`` into an ``mpz``.

    Letters beyond '9' are case-insensitive and a single leading sign is
    allowed.
    """
    _check_base(base)

    body = digits
    if body[:1] in ("+", "-"):
        body = body[1:]
    if not body:
        raise InvalidEncoding(f"no digits in {digits!r}")
    if not body.isascii():
        raise InvalidEncoding(f"non-ASCII digits in {digits!r}")

    valid = DIGITS[:base]
    for c in body.lower():
        if c not in valid:
            raise InvalidEncoding(f"digit {c!r} is not valid in base {base}: {digits!r}")

    value = mpz(body, base)
    return -value if digits[0] == "-" else value


def encode(value, base):
    """Render ``value`` as lowercase digits in ``base``."""
    _check_base(base)
    return mpz(value).digits(base)
