"""Selection of the first k usable shares from a decoded document.

Indices 1..n are scanned in ascending order and the scan stops as soon as
k points have been collected; later indices are never looked at. Only the
entries actually present are visited, so the cost follows the document size
rather than n. Missing or malformed point entries are not fatal: they are
recorded as :class:`SkippedShare` diagnostics and the scan moves on. The scan
also ends, with :class:`InsufficientShares`, once the remaining entries can no
longer make up k points.
"""
import logging
from collections import namedtuple

from thresholdsecret.encoding import decode, parse_base
from thresholdsecret.exceptions import InsufficientShares, SchemaError

logger = logging.getLogger(__name__)

SharePoint = namedtuple("SharePoint", ("index", "x", "y"))
# index..last is the skipped range; they are equal unless a run of keys is missing
SkippedShare = namedtuple("SkippedShare", ("index", "last", "reason", "detail"))


class SkipReason(object):
    MISSING = "missing"
    NOT_AN_OBJECT = "not-an-object"
    INVALID_FIELDS = "invalid-fields"


class ShareSet(object):
    def __init__(self, n, k, points, skipped=()):
        self.n = n
        self.k = k
        self.points = tuple(points)
        self.skipped = tuple(skipped)

    def __repr__(self):
        return (
            f"ShareSet(n={self.n}, k={self.k}, "
            f"points={[p.index for p in self.points]}, "
            f"skipped={[s.index for s in self.skipped]})"
        )

    def __eq__(self, other):
        if not isinstance(other, ShareSet):
            return NotImplemented
        return (self.n, self.k, self.points, self.skipped) == (
            other.n,
            other.k,
            other.points,
            other.skipped,
        )

    def xy(self):
        return [(p.x, p.y) for p in self.points]


def _threshold_param(keys, name):
    if name not in keys:
        raise SchemaError(f"'keys' has no '{name}'")
    value = keys[name]
    # bool is an int subclass but never a valid threshold
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if type(value) is not int:
        raise SchemaError(f"'{name}' should be an integer, found {value!r}")
    return value


def _read_params(tree):
    keys = tree.get("keys")
    if not isinstance(keys, dict):
        raise SchemaError("'keys' should be an object")

    n = _threshold_param(keys, "n")
    k = _threshold_param(keys, "k")
    if n < 1:
        raise SchemaError(f"'n' must be at least 1, got {n}")
    if not 1 <= k <= n:
        raise SchemaError(f"'k' must be in [1, n={n}], got {k}")
    return n, k


def _candidate_indices(tree, n):
    """Indices in 1..n that have an entry keyed by their decimal form, ascending."""
    width = len(str(n))
    indices = []
    for key in tree:
        if not (isinstance(key, str) and key.isdecimal() and len(key) <= width):
            continue
        index = int(key)
        if str(index) == key and 1 <= index <= n:
            indices.append(index)
    return sorted(indices)


def _skip(skipped, index, last, reason, detail):
    logger.debug(f"skipping share {index}: {detail}")
    skipped.append(SkippedShare(index, last, reason, detail))


def _skip_missing(skipped, first, last):
    if first == last:
        detail = f"missing key: {first}"
    else:
        detail = f"missing keys: {first}..{last}"
    _skip(skipped, first, last, SkipReason.MISSING, detail)


def select(tree):
    """Extract the :class:`ShareSet` carried by a decoded document."""
    n, k = _read_params(tree)
    candidates = _candidate_indices(tree, n)

    points = []
    skipped = []
    expected = 1
    for position, index in enumerate(candidates):
        if len(points) == k:
            break
        if len(points) + len(candidates) - position < k:
            # the remaining entries cannot make up k points
            break

        if index > expected:
            _skip_missing(skipped, expected, index - 1)
        expected = index + 1

        entry = tree[str(index)]
        if not isinstance(entry, dict):
            _skip(
                skipped,
                index,
                index,
                SkipReason.NOT_AN_OBJECT,
                f"expected an object for key {index}, found {type(entry).__name__}",
            )
            continue

        base = entry.get("base")
        value = entry.get("value")
        if not (isinstance(base, str) and isinstance(value, str)):
            _skip(
                skipped,
                index,
                index,
                SkipReason.INVALID_FIELDS,
                f"invalid 'base' or 'value' for key: {index}",
            )
            continue

        points.append(SharePoint(index, index, decode(parse_base(base), value)))

    if len(points) < k:
        raise InsufficientShares(
            f"found {len(points)} usable shares but k={k} are needed"
        )

    return ShareSet(n, k, points, skipped)
