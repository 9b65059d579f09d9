#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction and exit codes for the md2vimdoc CLI.

Option help text is taken from the ``help`` metadata of the matching
:class:`~md2vimdoc.options.vimdoc.VimdocOptions` fields so the command line
and the API document the same settings.
"""

from __future__ import annotations

import argparse
from dataclasses import fields

from md2vimdoc import __version__
from md2vimdoc.cli.custom_actions import (
    TrackingPositiveIntAction,
    TrackingStoreAction,
    TrackingStoreTrueAction,
)
from md2vimdoc.constants import DEFAULT_COLUMNS, DEFAULT_TAB_WIDTH
from md2vimdoc.exceptions import (
    FileError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2vimdoc.options.vimdoc import VimdocOptions

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def _option_help(field_name: str) -> str:
    for field in fields(VimdocOptions):
        if field.name == field_name:
            return str(field.metadata.get("help", ""))
    raise KeyError(field_name)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for ``md2vimdoc INPUT OUTPUT``.

    Options that map to rendering settings use tracking actions so that
    values from a configuration file only fill in what the command line and
    ``MD2VIMDOC_*`` environment variables left unset.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="md2vimdoc",
        description="Convert a Markdown file into a Vim help file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  md2vimdoc README.md doc/myplugin.txt
  md2vimdoc --cols 78 --desc "My plugin" --generate-tags README.md doc/myplugin.txt
  md2vimdoc --notoc --norules --pascal NOTES.md doc/notes.txt

Settings can also come from .md2vimdoc.toml/.yaml/.json, the [tool.md2vimdoc]
table in pyproject.toml, or MD2VIMDOC_<OPTION> environment variables.
        """,
    )

    parser.add_argument("input", help="Markdown file to convert")
    parser.add_argument("output", help="Vim help file to write")

    render_group = parser.add_argument_group("Rendering options")
    render_group.add_argument(
        "--cols",
        action=TrackingPositiveIntAction,
        default=DEFAULT_COLUMNS,
        metavar="N",
        help=f"{_option_help('columns')} (default: {DEFAULT_COLUMNS})",
    )
    render_group.add_argument(
        "--tabs",
        action=TrackingPositiveIntAction,
        default=DEFAULT_TAB_WIDTH,
        metavar="N",
        help=f"{_option_help('tab_width')} (default: {DEFAULT_TAB_WIDTH})",
    )
    render_group.add_argument("--notoc", action=TrackingStoreTrueAction, help="Do not generate a table of contents")
    render_group.add_argument("--norules", action=TrackingStoreTrueAction, help="Do not draw rules above headings")
    render_group.add_argument("--pascal", action=TrackingStoreTrueAction, help=_option_help("pascal_case"))
    render_group.add_argument("--desc", action=TrackingStoreAction, metavar="TEXT", help=_option_help("description"))
    render_group.add_argument("--prefix", action=TrackingStoreAction, metavar="TAG", help=_option_help("tag_prefix"))
    render_group.add_argument(
        "--no-modeline", dest="no_modeline", action=TrackingStoreTrueAction, help="Do not append a vim modeline"
    )
    render_group.add_argument(
        "--generate-tags",
        dest="generate_tags",
        action=TrackingStoreTrueAction,
        help="Write a tags file next to the output file",
    )

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Load settings from this file (.toml, .yaml, .json or pyproject.toml)",
    )
    config_group.add_argument(
        "--no-config",
        dest="no_config",
        action="store_true",
        help="Ignore configuration files and MD2VIMDOC_CONFIG",
    )

    # Logging and verbosity options
    log_group = parser.add_argument_group("Logging")
    log_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
    )
    log_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    log_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and logger names in log output",
    )

    parser.add_argument("--version", "-V", action="version", version=f"md2vimdoc {__version__}")

    return parser


def build_options_from_args(parsed_args: argparse.Namespace) -> VimdocOptions:
    """Map parsed command-line arguments onto rendering options.

    Raises
    ------
    ValidationError
        If the resulting options are out of range

    """
    try:
        return VimdocOptions(
            columns=parsed_args.cols,
            tab_width=parsed_args.tabs,
            include_toc=not parsed_args.notoc,
            include_rules=not parsed_args.norules,
            pascal_case=parsed_args.pascal,
            description=parsed_args.desc or None,
            tag_prefix=parsed_args.prefix,
            modeline=not parsed_args.no_modeline,
        )
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
