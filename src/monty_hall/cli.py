from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Optional

from .config import ConfigurationError, RunConfiguration
from .run import run_session


HELP_FLAGS = ("-h", "--help")
VALUE_FLAGS = ("-s", "--seed", "-n")

# One line per flag; this is the whole help output.
HELP_TEXT = "\n".join(
    [
        "-h,--help         show help",
        "-s,--seed SEED    set seed",
        "-n NUM_ITER       set num iterations",
    ]
)

logger = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _unsigned(label: str):
    def parse(text: str) -> int:
        if not _UNSIGNED.fullmatch(text):
            raise argparse.ArgumentTypeError(f"invalid {label}: {text!r}")
        return int(text)
    return parse


def build_parser() -> argparse.ArgumentParser:
    # -h is handled before parsing so it wins over any malformed value.
    parser = argparse.ArgumentParser(
        prog="monty-hall",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-s", "--seed", type=_unsigned("seed"), default=None)
    parser.add_argument("-n", dest="trial_count", type=_unsigned("num iteration"), default=1)
    return parser


def select_flags(argv: list[str]) -> list[str]:
    """
    Keep only exact -s/--seed/-n tokens, each joined to the token after it
    as "flag=value" so argparse never reads the value as an option.

    Anything else (attached forms like -n5 or --seed=9, "--", stray words)
    is dropped. A flag with nothing after it is kept bare so argparse
    reports the missing value.
    """
    selected = []
    ignored = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in VALUE_FLAGS:
            if i + 1 < len(argv):
                selected.append(f"{arg}={argv[i + 1]}")
                i += 2
                continue
            selected.append(arg)
        else:
            ignored.append(arg)
        i += 1

    if ignored:
        logger.debug("ignoring arguments: %s", ignored)
    return selected


def parse_config(argv: list[str]) -> RunConfiguration:
    """
    Turn argv into a RunConfiguration. Unknown tokens are ignored.
    Bad values exit with status 2 via parser.error().
    """
    parser = build_parser()
    args = parser.parse_args(select_flags(argv))
    try:
        return RunConfiguration(seed=args.seed, trial_count=args.trial_count)
    except ConfigurationError as e:
        parser.error(f"argument -s/--seed: {e}")


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if any(arg in HELP_FLAGS for arg in argv):
        print(HELP_TEXT)
        return 0

    config = parse_config(argv)
    session = run_session(config)
    print(session.render_report())
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
