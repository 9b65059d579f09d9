#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/api.py
"""High-level conversion API.

Two entry points cover the common cases:

- :func:`markdown_to_vimdoc` converts Markdown text (or a stream, bytes or a
  ``Path``) and returns the rendered help text together with its tags.
- :func:`convert` converts a Markdown file into a help file on disk and can
  write the sidecar ``tags`` index next to it.

Examples
--------
    >>> result = markdown_to_vimdoc("# Setup\\n\\nRun :Setup.", columns=40)
    >>> "*setup*" in result.text
    True

"""

import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Optional, Union

from md2vimdoc.ast.nodes import Document
from md2vimdoc.exceptions import ValidationError
from md2vimdoc.options.markdown import MarkdownParserOptions
from md2vimdoc.options.vimdoc import VimdocOptions
from md2vimdoc.parsers.markdown import MarkdownToAstConverter
from md2vimdoc.renderers.vimdoc import RenderResult, VimdocRenderer
from md2vimdoc.tags import write_tags_file
from md2vimdoc.utils.io_utils import read_text_file, write_content

logger = logging.getLogger(__name__)


def _create_options_from_kwargs(base: Optional[VimdocOptions], **kwargs: Any) -> VimdocOptions:
    """Build renderer options from an optional base and keyword overrides.

    Parameters
    ----------
    base : VimdocOptions or None
        Starting options; defaults are used when None
    **kwargs
        Field overrides. ``None`` values are ignored.

    Returns
    -------
    VimdocOptions
        Validated options

    Raises
    ------
    ValidationError
        If a keyword is not an option name or a value is out of range

    """
    options = base or VimdocOptions()
    option_names = {field.name for field in fields(VimdocOptions)}

    unknown = sorted(key for key in kwargs if key not in option_names)
    if unknown:
        raise ValidationError(
            f"Unknown rendering options: {', '.join(unknown)}", parameter_name=unknown[0], parameter_value=kwargs[unknown[0]]
        )

    overrides = {key: value for key, value in kwargs.items() if value is not None}
    if not overrides:
        return options

    try:
        return options.create_updated(**overrides)
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def _apply_document_metadata(options: VimdocOptions, document: Document) -> VimdocOptions:
    """Fill the description from front matter when none was given."""
    description = document.metadata.get("description")
    if options.description is None and description:
        logger.debug("Using front matter description: %s", description)
        return options.create_updated(description=" ".join(str(description).split()))
    return options


def markdown_to_vimdoc(
    source: Union[str, Path, IO[bytes], IO[str], bytes],
    options: Optional[VimdocOptions] = None,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    **kwargs: Any,
) -> RenderResult:
    """Convert Markdown to Vim help text.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Markdown text, a ``Path`` to a Markdown file, a stream or UTF-8 bytes
    options : VimdocOptions, optional
        Rendering options
    parser_options : MarkdownParserOptions, optional
        Markdown parsing options
    **kwargs
        Overrides for individual ``VimdocOptions`` fields (e.g. ``columns=60``)

    Returns
    -------
    RenderResult
        The help text and the tags it defines

    Raises
    ------
    ValidationError
        If options are invalid
    FileError
        If a ``Path`` source cannot be read
    ParsingError
        If the Markdown cannot be parsed

    """
    render_options = _create_options_from_kwargs(options, **kwargs)
    document = MarkdownToAstConverter(parser_options).parse(source)
    render_options = _apply_document_metadata(render_options, document)
    return VimdocRenderer(render_options).render_with_tags(document)


def convert(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    options: Optional[VimdocOptions] = None,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    generate_tags: bool = False,
    **kwargs: Any,
) -> RenderResult:
    """Convert a Markdown file into a Vim help file.

    The output file name becomes the title tag (and so the default tag
    prefix) unless ``filename`` is set in the options. Rendering completes
    in memory before the output file is opened, so a failed conversion never
    leaves a partial help file behind.

    Parameters
    ----------
    input_path : str or Path
        Markdown file to read (UTF-8)
    output_path : str or Path
        Help file to write; overwritten if present
    options : VimdocOptions, optional
        Rendering options
    parser_options : MarkdownParserOptions, optional
        Markdown parsing options
    generate_tags : bool, default False
        Also write a ``tags`` index into the output directory
    **kwargs
        Overrides for individual ``VimdocOptions`` fields

    Returns
    -------
    RenderResult
        The written help text and its tags

    Raises
    ------
    FileError
        If the input cannot be read
    OutputWriteError
        If the help file or the tags index cannot be written

    """
    output_path = Path(output_path)
    render_options = _create_options_from_kwargs(options, **kwargs)
    if render_options.filename is None:
        render_options = render_options.create_updated(filename=output_path.name)

    markdown = read_text_file(input_path)
    document = MarkdownToAstConverter(parser_options).parse(markdown)
    render_options = _apply_document_metadata(render_options, document)
    result = VimdocRenderer(render_options).render_with_tags(document)

    write_content(result.text, output_path)
    logger.info("Wrote help file to %s", output_path)

    if generate_tags:
        write_tags_file(result.tags, output_path)

    return result


__all__ = [
    "markdown_to_vimdoc",
    "convert",
]
