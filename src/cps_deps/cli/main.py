# Copyright 2026 cps-deps Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the cps-deps command-line interface."""

import argparse
import sys
from pathlib import Path

from cps_deps.config.loader import CONFIG_FILE_NAME, ConfigError, GeneratorConfig, load_config
from cps_deps.converter.artifact import CPS_SUFFIX, CpsDocumentError, read_package
from cps_deps.converter.generate import CONVERSION_ERRORS, find_pc_files, generate_all, generate_from_pkg_config
from cps_deps.model.cps import CpsValidationError
from cps_deps.resolver.toolchain import host_target_triple, multiarch_directories
from cps_deps.validation.checks import validate
from cps_deps.views.summary import build_summary, render_summary

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the cps-deps CLI."""
    parser = argparse.ArgumentParser(
        prog="cps-deps",
        description="cps-deps - generate Common Package Specification files from pkg-config metadata",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate CPS files from the pkg-config files found on this system",
        description="Search the configured roots for .pc files and convert each of them into OUTDIR.",
    )
    generate_parser.add_argument("outdir", metavar="OUTDIR", help="Directory the .cps files are written to")
    generate_parser.add_argument(
        "--search-root",
        dest="search_roots",
        action="append",
        metavar="DIR",
        help="Directory searched recursively for .pc files (repeatable; overrides the configuration)",
    )
    _add_config_argument(generate_parser)

    # convert subcommand
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a single pkg-config file",
        description="Convert one .pc file into a CPS file.",
    )
    convert_parser.add_argument("pc_file", metavar="PC_FILE", help="The .pc file to convert")
    convert_parser.add_argument(
        "-o",
        "--output",
        metavar="CPS_FILE",
        help="Output path (default: PC_FILE with the .pc extension replaced by .cps)",
    )
    _add_config_argument(convert_parser)

    # parse-cps subcommand
    parse_cps_parser = subparsers.add_parser(
        "parse-cps",
        help="Parse a CPS file and display the result",
        description="Validate a CPS file and print a summary of its components.",
    )
    parse_cps_parser.add_argument("cps_file", metavar="FILE", help="The .cps file to parse")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        metavar="FILE",
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "convert":
        return _cmd_convert(args)
    if args.command == "parse-cps":
        return _cmd_parse_cps(args)
    return 0


def _load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Load the configuration named on the command line, else the one in the working directory."""
    if args.config is not None:
        return load_config(Path(args.config))
    default_path = Path.cwd() / CONFIG_FILE_NAME
    if default_path.exists():
        return load_config(default_path)
    return GeneratorConfig()


def _multiarch_dirs(config: GeneratorConfig) -> list[Path]:
    if not config.multiarch:
        return []
    return multiarch_directories(host_target_triple(config.compiler))


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    try:
        config = _load_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    roots = [Path(root) for root in args.search_roots] if args.search_roots else config.pc_search_roots
    outdir = Path(args.outdir)

    pc_files = find_pc_files(roots)
    if not pc_files:
        print("No .pc files found.")
        return 0

    print(f"Converting {len(pc_files)} pkg-config file(s)...")
    try:
        result = generate_all(
            pc_files,
            outdir,
            extra_search_paths=config.library_search_paths,
            multiarch_dirs=_multiarch_dirs(config),
        )
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for failure in result.failures:
        print(f"Error: {failure.source}: {failure.message}", file=sys.stderr)

    print(f"Wrote {len(result.written)} CPS file(s) to '{outdir}', skipped {len(result.failures)}.")
    return 0


def _cmd_convert(args: argparse.Namespace) -> int:
    """Handle the convert subcommand."""
    try:
        config = _load_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    pc_file = Path(args.pc_file)
    cps_file = Path(args.output) if args.output else pc_file.with_suffix(CPS_SUFFIX)

    if not pc_file.is_file():
        print(f"Error: file '{pc_file}' does not exist.", file=sys.stderr)
        return 1

    try:
        generate_from_pkg_config(
            pc_file,
            cps_file,
            extra_search_paths=config.library_search_paths,
            multiarch_dirs=_multiarch_dirs(config),
        )
    except (*CONVERSION_ERRORS, OSError) as exc:
        print(f"Error: {pc_file}: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote '{cps_file}'.")
    return 0


def _cmd_parse_cps(args: argparse.Namespace) -> int:
    """Handle the parse-cps subcommand."""
    cps_file = Path(args.cps_file)
    print(f"Reading CPS file '{cps_file}'...")
    try:
        package = read_package(cps_file)
    except (CpsDocumentError, CpsValidationError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(render_summary(build_summary(package)))

    result = validate(package)
    for warning in result.warnings:
        print(f"Warning: {warning.message}")
    for error in result.errors:
        print(f"Error: {error.message}", file=sys.stderr)

    return 1 if result.has_errors else 0
