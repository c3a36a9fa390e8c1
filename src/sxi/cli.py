"""Command line interface for sxi.

Usage:
    sxi page.htm                  # Expand the includes of one file
    sxi *.htm docs/*.htm          # Several patterns
    sxi -s *.htm                  # Also match in subdirectories
    sxi -v *.htm                  # Debug logging and full tracebacks
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import List, Optional

import typer

from sxi.file_patterns import iter_files
from sxi.rewriter import DocumentRewriter
from sxi.settings import SxiSettings

SYNTAX = """\
Syntax: sxi [-s] [-v] <html filename> ...

   Multiple filenames can be given and they may contain wildcards. With -s,
   subdirectories are searched for matching files as well.

   Includes work like server-side includes (SSI), except that they are
   resolved when sxi runs, so the web server has nothing to do at request
   time. An include therefore needs a tag at the beginning AND at the end of
   the included segment. Everything between the two tags is replaced by the
   content of the included file.

   The tags are HTML comments, so browsers ignore them, but anyone viewing
   the page source can see them. Don't put sensitive information in them.

   An include begins with an include tag:
   <!--#sxi-include src="/_includes/header.sxi" -->

   or

   <!--#sxi-include file="../../_includes/header.sxi" -->

   and ends with an endinclude tag:
   <!--#sxi-endinclude-->

   Includes may be nested: an included file can have include tags of its
   own. The inner tags are resolved while the included file is processed.

   The "file" attribute names a path relative to the current file. The "src"
   attribute names a web path. Both may use ".." segments.

   A web path starting with a slash "/" is relative to the root of the
   website. The root is found by walking up the directories above the
   current file until the web path names an existing file.

   The root can also be declared with a "this" tag giving the web path of
   the current file:
   <!--#sxi-this src="/index.htm" -->

   The tag above says that the file is called "index.htm" and is located in
   the root of the website.
"""

typer_app = typer.Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})


def announce(paths: Iterable[Path]) -> Iterator[Path]:
    """Print a progress line for each path as it is processed."""
    for path in paths:
        typer.echo(f"Processing: {path}")
        yield path


def expand_patterns(patterns: Iterable[str], settings: SxiSettings) -> Iterator[Path]:
    """Yield every file matched by the given patterns."""
    for pattern in patterns:
        yield from iter_files(pattern, recursive=settings.recursive, temp_suffix=settings.temp_suffix)


@typer_app.command()
def cli(
    recursive: bool = typer.Option(
        False, "-s", "--recursive", help="Also match files in subdirectories."
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Log debug output and full tracebacks."
    ),
    patterns: Optional[List[str]] = typer.Argument(None, help="Files to process; wildcards allowed."),
) -> None:
    """Expand sxi include tags in HTML files, in place."""
    if not patterns:
        typer.echo(SYNTAX)
        raise typer.Exit()

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    settings = SxiSettings(recursive=recursive, verbose=verbose)
    rewriter = DocumentRewriter(settings)
    summary = rewriter.rewrite_all(announce(expand_patterns(patterns, settings)))

    typer.echo(
        f"{len(summary.rewritten)} rewritten, {len(summary.unchanged)} unchanged, "
        f"{len(summary.failed)} failed"
    )

    if not summary.ok:
        raise typer.Exit(code=1)


def app() -> None:
    """Entry point for the ``sxi`` console script."""
    typer_app()


if __name__ == "__main__":
    app()
