import argparse
import logging
import sys

import macresforks.version
from _macresforks.filtering import filter_resource_forks
from _macresforks.tokenizer.errors import ResourceExhaustionError

logger = logging.getLogger(__name__)

PROG = "macresforks"

DESCRIPTION = """
Filters a null delimited list of paths on stdin down to those that look like
mac resource fork files ("._name") AND have a corresponding regular file
("name") in the same directory. The result is written to stdout, null
delimited, so it can be piped to xargs -0.
"""


def make_argument_parser():
    ap = argparse.ArgumentParser(
        prog=PROG,
        usage="find . -name '._*' -print0 | %(prog)s | xargs -r -0 rm",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    ap.add_argument("--help", action="help", help="display help text")
    ap.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {macresforks.version.version}",
        help="display version details",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log accepted and rejected paths to stderr",
    )
    return ap


def main(argv=None):
    """
    Entry point of the macresforks command. Reads paths from stdin and
    writes the verified resource forks to stdout.

    :returns: The exit code.
    """
    args = make_argument_parser().parse_args(argv)

    logging.basicConfig(stream=sys.stderr, format=f"{PROG}: %(message)s")
    logging.getLogger("_macresforks").setLevel(
        logging.DEBUG if args.verbose else logging.WARNING
    )

    try:
        filter_resource_forks(sys.stdin.buffer, sys.stdout.buffer)
    except ResourceExhaustionError as err:
        logger.debug("%s", err)
        print(f"{PROG}: out of memory", file=sys.stderr)
        return 1
    return 0
