"""Command-line interface for pomid."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pomid.config import load_config
from pomid.errors import PomidError
from pomid.pipeline import run_id
from pomid.store.pom_xml import PomXmlStore

logger = logging.getLogger(__name__)


def _build_parser(default_file: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pomid",
        description="Query and edit the identity of a Maven project.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    id_parser = subparsers.add_parser(
        "id",
        help="Show or set the project ID",
        description="Show or set the project ID.",
    )
    id_parser.add_argument(
        "id",
        nargs="?",
        default=None,
        metavar="groupId:artifactId[:version]",
        help="Project ID to set; print the current one when omitted",
    )
    id_parser.add_argument(
        "--as",
        dest="packaging",
        default=None,
        help="Packaging to set (jar, pom, war, ...)",
    )
    id_parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=Path(default_file),
        help=f"POM file to read or write (default: {default_file})",
    )
    id_parser.add_argument(
        "-s",
        "--standalone",
        action="store_true",
        help="Don't search for a parent POM",
    )
    id_parser.add_argument(
        "-m",
        "--add-module",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Ensure the project is listed as a module of its parent",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    config = load_config(Path.cwd())
    args = _build_parser(config.file).parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("pomid").setLevel(logging.DEBUG)

    try:
        return run_id(
            args.file,
            args.id,
            packaging=args.packaging,
            standalone=args.standalone,
            add_module=args.add_module,
            store=PomXmlStore(config),
        )
    except PomidError as e:
        logger.error("%s", e)
        return 1
