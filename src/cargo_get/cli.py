"""CLI entrypoint for cargo-get."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Sequence

from cargo_get.config import QueryConfig, default_config
from cargo_get.data.manifest import INHERITABLE_FIELDS, load_manifest
from cargo_get.delimiter import DELIMITER_ALIASES, resolve_delimiter
from cargo_get.errors import CargoGetError
from cargo_get.logging_utils import configure_logging
from cargo_get.paths import locate_manifest, resolve_entry_point
from cargo_get.resolver import (
    SECTION_PACKAGE,
    SECTION_WORKSPACE,
    SECTION_WORKSPACE_PACKAGE,
    query_field,
)
from cargo_get.version import VersionPart

logger = logging.getLogger(__name__)

# (field, short option) for the legacy `--<field>` flags.
FIELD_FLAGS: tuple[tuple[str, str], ...] = (
    ("authors", "-a"),
    ("edition", "-e"),
    ("name", "-n"),
    ("homepage", "-o"),
    ("keywords", "-k"),
    ("license", "-l"),
    ("links", "-i"),
    ("description", "-d"),
    ("categories", "-c"),
)

_VERSION_PART_HELP: dict[VersionPart, str] = {
    VersionPart.FULL: "get full version",
    VersionPart.PRETTY: "get pretty version eg. v1.2.3",
    VersionPart.MAJOR: "get major part",
    VersionPart.MINOR: "get minor part",
    VersionPart.PATCH: "get patch part",
    VersionPart.BUILD: "get build part",
    VersionPart.PRE: "get pre-release part",
}

_DELIMITER_CHOICES = ", ".join(DELIMITER_ALIASES)


def _add_delimiter_argument(parser: argparse.ArgumentParser, default: object) -> None:
    parser.add_argument(
        "--delimiter",
        default=default,
        metavar="DELIMITER",
        help=(
            f"Delimiter for multi-valued fields: one of {_DELIMITER_CHOICES} "
            "or a literal string (default: newline)."
        ),
    )


def _add_version_parts(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    for part, help_text in _VERSION_PART_HELP.items():
        group.add_argument(
            f"--{part.value}",
            dest="version_part",
            action="store_const",
            const=part,
            help=help_text,
        )


def _add_query_parser(
    subparsers: Any,
    section: str,
    key: str,
    help_text: str,
    aliases: Sequence[str] = (),
) -> argparse.ArgumentParser:
    query_parser = subparsers.add_parser(f"{section}.{key}", aliases=list(aliases), help=help_text)
    # Subcommand copies must not overwrite a top-level --delimiter.
    _add_delimiter_argument(query_parser, argparse.SUPPRESS)
    if key == "version":
        _add_version_parts(query_parser)
    query_parser.set_defaults(section=section, field=key)
    return query_parser


def build_parser(config: QueryConfig | None = None) -> argparse.ArgumentParser:
    cfg = config or default_config()
    parser = argparse.ArgumentParser(
        prog="cargo-get",
        description="Query package info from Cargo.toml in a script-friendly way.",
    )
    parser.add_argument(
        "--root",
        default=None,
        metavar="PATH",
        help="Optional entry point (default: current directory).",
    )
    _add_delimiter_argument(parser, None)
    parser.add_argument(
        "--log-level",
        default=cfg.log_level,
        help=f"Python logging level (default: {cfg.log_level}).",
    )

    flags = parser.add_mutually_exclusive_group()
    for key, short in FIELD_FLAGS:
        flags.add_argument(
            short,
            f"--{key}",
            dest="flag_field",
            action="store_const",
            const=key,
            help=f"get package.{key}",
        )
    parser.set_defaults(flag_field=None, section=None, field=None, version_part=None)

    subparsers = parser.add_subparsers(dest="command", metavar="FIELD")
    for key in sorted(("name", *INHERITABLE_FIELDS)):
        _add_query_parser(
            subparsers,
            SECTION_PACKAGE,
            key,
            f"get package {key}",
            aliases=("version",) if key == "version" else (),
        )
    _add_query_parser(subparsers, SECTION_WORKSPACE, "members", "get workspace members")
    for key in sorted(INHERITABLE_FIELDS):
        _add_query_parser(
            subparsers,
            SECTION_WORKSPACE_PACKAGE,
            key,
            f"get workspace template {key}",
        )

    return parser


def _strip_cargo_subcommand(argv: Sequence[str]) -> list[str]:
    # `cargo get ...` invokes the binary as `cargo-get get ...`.
    args = list(argv)
    if args and args[0] == "get":
        args.pop(0)
    return args


def main(argv: Sequence[str] | None = None) -> int:
    config = default_config()
    parser = build_parser(config)
    args = parser.parse_args(_strip_cargo_subcommand(sys.argv[1:] if argv is None else argv))
    configure_logging(args.log_level)

    if args.flag_field is not None and args.section is not None:
        parser.error("a field flag cannot be combined with a field subcommand")

    if args.flag_field is not None:
        section, key = SECTION_PACKAGE, args.flag_field
    elif args.section is not None:
        section, key = args.section, args.field
    else:
        parser.print_help(sys.stderr)
        return 2

    delimiter = (
        config.default_delimiter if args.delimiter is None else resolve_delimiter(args.delimiter)
    )

    try:
        entry_point = resolve_entry_point(args.root)
        manifest_path = locate_manifest(entry_point, config.manifest_filename)
        logger.debug("Using manifest %s", manifest_path)
        manifest = load_manifest(manifest_path)
        output = query_field(
            manifest,
            section,
            key,
            delimiter=delimiter,
            version_part=args.version_part,
        )
    except CargoGetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
