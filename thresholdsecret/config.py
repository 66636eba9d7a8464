"""
Module for ``thresholdsecret``'s configuration.

This module can be used to:

* define default configuration settings
* load a configuration from a JSON file
* combine it with command line arguments

Sample config::

    {"eval_at": 0, "keep_going": true, "report_skipped": true}
"""

from argparse import ArgumentParser
import json

from thresholdsecret.exceptions import ConfigurationError


class ReconstructionConfig(object):
    def __init__(self, eval_at, keep_going, report_skipped):
        self.eval_at = eval_at
        self.keep_going = keep_going
        self.report_skipped = report_skipped

    @classmethod
    def default(cls):
        return cls(eval_at=0, keep_going=False, report_skipped=True)

    @classmethod
    def from_json(cls, json_config):
        if not isinstance(json_config, dict):
            raise ConfigurationError("configuration must be a JSON object")

        res = cls.default()
        unknown = set(json_config) - {"eval_at", "keep_going", "report_skipped"}
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {sorted(unknown)}")

        if "eval_at" in json_config:
            eval_at = json_config["eval_at"]
            if type(eval_at) is not int:
                raise ConfigurationError(f"eval_at must be an integer, got {eval_at!r}")
            res.eval_at = eval_at

        for flag in ("keep_going", "report_skipped"):
            if flag in json_config:
                if type(json_config[flag]) is not bool:
                    raise ConfigurationError(f"{flag} must be a boolean")
                setattr(res, flag, json_config[flag])

        return res

    @classmethod
    def from_file(cls, path):
        try:
            with open(path, "r") as f:
                json_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"could not read config file {path}: {e}")
        return cls.from_json(json_config)


def build_parser():
    parser = ArgumentParser(
        prog="thresholdsecret",
        description="Recovers the secret (constant term) of threshold share documents.",
    )

    parser.add_argument(
        "documents", nargs="+", help="Paths of the share documents to reconstruct."
    )
    parser.add_argument(
        "-f",
        "--config-file",
        type=str,
        dest="config_file_path",
        help="Path from where to load a JSON config file.",
    )
    parser.add_argument(
        "--eval-at",
        type=int,
        dest="eval_at",
        default=None,
        help="Evaluate the interpolated polynomial at this x instead of 0.",
    )
    parser.add_argument(
        "-k",
        "--keep-going",
        dest="keep_going",
        action="store_true",
        default=None,
        help="Continue with the remaining documents after a failure.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        dest="report_skipped",
        action="store_false",
        default=None,
        help="Do not report skipped share indices.",
    )
    return parser


def load_config(argv=None):
    """Returns ``(documents, config)``; command line flags override the file."""
    args = build_parser().parse_args(argv)

    if args.config_file_path is not None:
        config = ReconstructionConfig.from_file(args.config_file_path)
    else:
        config = ReconstructionConfig.default()

    for name in ("eval_at", "keep_going", "report_skipped"):
        value = getattr(args, name)
        if value is not None:
            setattr(config, name, value)

    return args.documents, config
