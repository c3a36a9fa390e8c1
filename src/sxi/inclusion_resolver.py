"""Inclusion Resolver for sxi documents.

This module provides the InclusionResolver class, which copies a document to an
output sink while expanding its include tags. Each include is replaced by the
fully processed content of the referenced file, so includes nested inside
included files are expanded as well.

The text between an include tag and its matching endinclude tag is the output
of a previous run. It is discarded and regenerated every time, which is why
the tool can be run repeatedly over the same files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from sxi.exceptions import MalformedRootTagError, UnterminatedIncludeError
from sxi.path_resolver import resolve_reference
from sxi.scanner import TagScanner
from sxi.tag import END_INCLUDE_MARKER, LABEL_END_INCLUDE, LABEL_INCLUDE, LABEL_THIS, ScanResult
from sxi.text_io import open_source

logger = logging.getLogger(__name__)

UNKNOWN_ROOT_DEPTH = -1


@dataclass
class InclusionContext:
    """State of a single document scan.

    Attributes:
        source_path: Absolute path of the document being scanned
        root_depth: Directory levels between the document and the website
            root as declared by a ``this`` tag, or -1 if unknown
    """

    source_path: Path
    root_depth: int = UNKNOWN_ROOT_DEPTH


class InclusionResolver:
    """Expands sxi include tags in a document, recursively."""

    def __init__(self, fallback_encoding: str = "utf-8") -> None:
        """Initialize the resolver.

        Args:
            fallback_encoding: Encoding assumed for documents without a BOM.
        """
        self._fallback_encoding = fallback_encoding

    def process_document(self, path: str | Path, out: TextIO) -> bool:
        """Copy a document to ``out`` with its includes expanded.

        Args:
            path: Absolute path of the document.
            out: The sink receiving the processed text.

        Returns:
            True if at least one include tag was processed.

        Raises:
            MalformedRootTagError: A ``this`` tag is invalid.
            MissingIncludeAttributeError: An include names no file.
            ReferenceNotFoundError: An included file doesn't exist.
            UnterminatedIncludeError: An include has no matching endinclude.
        """
        context = InclusionContext(source_path=Path(path))
        processed = False

        with open_source(context.source_path, self._fallback_encoding) as source:
            scanner = TagScanner(source)
            while True:
                result = scanner.scan(out)
                if result is None:
                    break

                label = result.tag.label
                if label == LABEL_THIS:
                    context.root_depth = self._read_root_depth(result, context)
                    logger.debug(f"{context.source_path}: root depth declared as {context.root_depth}")
                elif label == LABEL_INCLUDE:
                    self._process_include(result, context, out)
                    self._skip_prior_include(scanner, result, context)
                    processed = True
                else:
                    logger.debug(f"{context.source_path}:{result.line}: ignoring tag '{label}'")

        return processed

    def _read_root_depth(self, result: ScanResult, context: InclusionContext) -> int:
        """Validate a ``this`` tag and return the root depth it declares."""
        src = result.tag.get("src")
        if src is None:
            raise MalformedRootTagError(
                f"sxi-this: Expected 'src' attribute. ({context.source_path}:{result.line})"
            )

        src = src.lower().replace("\\", "/")
        document = str(context.source_path).lower().replace("\\", "/")
        if not src.startswith("/") or not document.endswith(src):
            raise MalformedRootTagError(
                "sxi-this: 'src' attribute must begin with slash and match tail of physical file path. "
                f"({context.source_path}:{result.line})"
            )

        # One level per slash above the file name
        return src.count("/") - 1

    def _process_include(self, result: ScanResult, context: InclusionContext, out: TextIO) -> None:
        """Write the processed content of an included file, followed by the closing marker."""
        target = resolve_reference(result.tag.attributes, context.source_path, context.root_depth)
        logger.debug(f"{context.source_path}:{result.line}: including {target}")

        out.write("\n")
        self.process_document(target, out)
        out.write(END_INCLUDE_MARKER)

    def _skip_prior_include(self, scanner: TagScanner, result: ScanResult, context: InclusionContext) -> None:
        """Discard the old content of an include region, up to its endinclude tag."""
        depth = 1
        while depth > 0:
            skipped = scanner.scan()
            if skipped is None:
                raise UnterminatedIncludeError(
                    f"sxi-endinclude tag not found! ({context.source_path}:{result.line})"
                )

            if skipped.tag.label == LABEL_INCLUDE:
                depth += 1
            elif skipped.tag.label == LABEL_END_INCLUDE:
                depth -= 1
