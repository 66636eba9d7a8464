import logging
import sys

from thresholdsecret.config import load_config
from thresholdsecret.exceptions import ConfigurationError, ThresholdSecretError
from thresholdsecret.reconstruct import reconstruct_file

logger = logging.getLogger("thresholdsecret")


def run(paths, config, out=None):
    """Reconstruct every document in ``paths``; returns the number of failures."""
    out = out or sys.stdout
    failures = 0
    for path in paths:
        try:
            secret, shares = reconstruct_file(path, config.eval_at)
        except (OSError, ThresholdSecretError) as e:
            failures += 1
            logger.error(f"{path}: {type(e).__name__}: {e}")
            if not config.keep_going:
                break
            continue

        if config.report_skipped:
            for skipped in shares.skipped:
                logger.warning(f"{path}: {skipped.detail}")
        print(f"The secret (constant term c) for {path} is: {secret}", file=out)
    return failures


def main(argv=None):
    try:
        paths, config = load_config(argv)
    except ConfigurationError as e:
        logger.error(str(e))
        return 2
    return 1 if run(paths, config) else 0


if __name__ == "__main__":
    sys.exit(main())
