import logging
from collections import namedtuple

from thresholdsecret.document import parse
from thresholdsecret.polynomial import interpolate_at
from thresholdsecret.selector import select

logger = logging.getLogger(__name__)

Reconstruction = namedtuple("Reconstruction", ("secret", "shares"))


def find_secret(tree, eval_at=0):
    """Select the shares held in ``tree`` and interpolate them at ``eval_at``."""
    shares = select(tree)
    logger.debug(f"interpolating {shares} at x={eval_at}")
    return Reconstruction(interpolate_at(shares.xy(), eval_at), shares)


def reconstruct(text, eval_at=0):
    return find_secret(parse(text), eval_at)


def reconstruct_file(path, eval_at=0):
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    logger.debug(f"read {len(text)} characters from {path}")
    return reconstruct(text, eval_at)
