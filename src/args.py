"""Argument parsing functionality for sbt-plugin-releases."""

import argparse
from constants import Constants

def build_parser():
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="sbt-plugin-releases",
        description=(
            "List published releases of sbt plugins and Scala artifacts"
        ),
        add_help=True,
    )

    parser.add_argument("-p", "--package",
                        dest="PACKAGES",
                        help="Package in groupId:artifactId[_scalaVersion] form (repeatable)",
                        action="append", type=str,
                        required=True)
    parser.add_argument("-r", "--registry",
                        dest="REGISTRY",
                        help="Registry base URL (repeatable; defaults to the sbt plugin repo and Maven Central)",
                        action="append", type=str)
    parser.add_argument("-s", "--strategy",
                        dest="STRATEGY",
                        help="How to combine registries: first, hunt or merge (default: merge)",
                        action="store", type=str.lower,
                        choices=Constants.STRATEGIES)
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help="HTTP request timeout in seconds",
                        action="store", type=float)
    parser.add_argument("--latest",
                        dest="LATEST",
                        help="Only report the newest version of each package",
                        action="store_true")

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to JSON output file (default: stdout)",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output to console.",
                        action="store_true")
    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
