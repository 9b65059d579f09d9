#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for md2vimdoc.

This module provides the ``md2vimdoc`` command, which converts one Markdown
file into a Vim help file and optionally writes the matching ``tags`` index.

Usage:
    md2vimdoc [options] input.md output.txt

"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from md2vimdoc.api import convert
from md2vimdoc.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    build_options_from_args,
    create_parser,
    get_exit_code_for_exception,
)
from md2vimdoc.cli.config import apply_config_defaults, load_config_with_priority
from md2vimdoc.exceptions import Md2VimdocError, ValidationError
from md2vimdoc.logging_utils import configure_logging
from md2vimdoc.options.vimdoc import VimdocOptions

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def setup_and_validate_options(parsed_args: argparse.Namespace) -> VimdocOptions:
    """Merge configuration file values into the arguments and build options.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded
    ValidationError
        If the merged settings are out of range

    """
    if not parsed_args.no_config:
        config = load_config_with_priority(parsed_args.config, os.environ.get("MD2VIMDOC_CONFIG"))
        if config:
            logger.debug("Applying configuration values: %s", config)
            apply_config_defaults(parsed_args, config)

    return build_options_from_args(parsed_args)


def main(args: list[str] | None = None) -> int:
    """Execute the md2vimdoc command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = setup_and_validate_options(parsed_args)
    except (argparse.ArgumentTypeError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        result = convert(
            parsed_args.input,
            parsed_args.output,
            options,
            generate_tags=parsed_args.generate_tags,
        )
    except Md2VimdocError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure converting %s", parsed_args.input, exc_info=True)
        print(f"Error: Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.info("Converted %s (%d tags)", parsed_args.input, len(result.tags))
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
