"""Decoder for the share document format.

Only the subset needed to carry shares is understood: nested objects whose
values are quoted strings or numeric literals. Parsing yields a tree of
plain Python values::

    object  -> dict (insertion ordered)
    string  -> str
    integer -> int
    float   -> float

Commas, colons and braces inside quoted strings are opaque, and a quote
preceded by a backslash does not open or close a string.
"""
import re

from thresholdsecret.exceptions import MalformedDocument

_INTEGER = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(\d+\.\d*|\.\d+)([eE][+-]?\d+)?")

# objects nested deeper than this are rejected
MAX_DEPTH = 64


class Kind(object):
    OBJECT = "object"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"


def kind_of(value):
    if isinstance(value, dict):
        return Kind.OBJECT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, bool):
        raise TypeError(f"{value!r} is not a document value")
    if isinstance(value, int):
        return Kind.INTEGER
    if isinstance(value, float):
        return Kind.FLOAT
    raise TypeError(f"{value!r} is not a document value")


def parse(text):
    """Parse ``text`` into a tree. The text must hold exactly one object."""
    text = text.strip()
    if not (text.startswith("{") and text.endswith("}")):
        raise MalformedDocument("document must be a single {...} object")
    return _parse_object(text[1:-1], 1)


def _split_top_level(text, separator):
    """Split ``text`` at every ``separator`` outside quotes and nested braces."""
    parts = []
    start = 0
    depth = 0
    in_quotes = False

    for i, c in enumerate(text):
        if c == '"' and (i == 0 or text[i - 1] != "\\"):
            in_quotes = not in_quotes
        if in_quotes:
            continue

        if c == "{":
            depth += 1
        elif c == "}":
            depth -= 1
            if depth < 0:
                raise MalformedDocument(f"unbalanced '}}' in {text!r}")
        elif c == separator and depth == 0:
            parts.append(text[start:i])
            start = i + 1

    if in_quotes:
        raise MalformedDocument(f"unterminated string in {text!r}")
    if depth != 0:
        raise MalformedDocument(f"unbalanced '{{' in {text!r}")

    parts.append(text[start:])
    return parts


def _unquote(token):
    if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
        return token[1:-1]
    return token


def _parse_object(body, depth):
    if depth > MAX_DEPTH:
        raise MalformedDocument(f"objects nested deeper than {MAX_DEPTH} levels")

    tree = {}
    if not body.strip():
        return tree

    for pair in _split_top_level(body, ","):
        key_value = _split_top_level(pair, ":")
        if len(key_value) != 2:
            raise MalformedDocument(f"expected one 'key: value' separator in {pair!r}")

        key = _unquote(key_value[0].strip())
        tree[key] = _parse_value(key_value[1].strip(), depth)

    return tree


def _parse_value(token, depth):
    if token.startswith("{") and token.endswith("}"):
        return _parse_object(token[1:-1], depth + 1)
    if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
        return token[1:-1]
    if _INTEGER.fullmatch(token):
        return int(token)
    if _FLOAT.fullmatch(token):
        return float(token)
    return token


def _dump_float(value):
    text = repr(value)
    if "." not in text and "e" in text:
        mantissa, exponent = text.split("e")
        text = f"{mantissa}.0e{exponent}"
    return text


def _dump_value(value):
    kind = kind_of(value)
    if kind == Kind.OBJECT:
        return dumps(value)
    if kind == Kind.STRING:
        return f'"{value}"'
    if kind == Kind.FLOAT:
        return _dump_float(value)
    return str(value)


def dumps(tree):
    """Canonical text form of a tree; ``parse(dumps(tree)) == tree``."""
    pairs = [f'"{key}": {_dump_value(value)}' for key, value in tree.items()]
    return "{" + ", ".join(pairs) + "}"
