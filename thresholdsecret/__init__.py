"""thresholdsecret: recover the secret behind a set of (k, n) threshold shares."""

import logging.config
from pathlib import Path

import yaml


CURRENT_DIR = Path(__file__).resolve().parent

with open(CURRENT_DIR / "logging.yaml", "r") as f:
    logging_config = yaml.safe_load(f.read())
    logging.config.dictConfig(logging_config)
