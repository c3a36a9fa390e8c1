"""Document Rewriter for sxi.

This module provides the DocumentRewriter class, which expands the includes of
a document into a scratch file next to it and, only when that succeeds,
replaces the original with the result.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from sxi.exceptions import SxiError
from sxi.inclusion_resolver import InclusionResolver
from sxi.settings import SxiSettings
from sxi.text_io import open_output

logger = logging.getLogger(__name__)


@dataclass
class RewriteSummary:
    """Outcome of rewriting a batch of documents.

    Attributes:
        rewritten: Documents that were replaced with their expanded version
        unchanged: Documents without include tags, left as they were
        failed: Documents that could not be processed, with the error raised
    """

    rewritten: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, Exception]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if no document failed."""
        return not self.failed


class DocumentRewriter:
    """Rewrites documents in place with their includes expanded."""

    def __init__(self, settings: SxiSettings | None = None) -> None:
        self._settings = settings or SxiSettings()
        self._resolver = InclusionResolver(fallback_encoding=self._settings.fallback_encoding)

    def scratch_path(self, path: Path) -> Path:
        """Return the scratch file used while rewriting ``path``."""
        return path.with_name(path.name + self._settings.temp_suffix)

    def rewrite(self, path: str | Path) -> bool:
        """Expand the includes of one document and write the result over it.

        The original file is only replaced after the scratch file has been
        written completely. On any error, or if the document has no include
        tags, the scratch file is deleted and the original is left untouched.

        Args:
            path: Absolute path of the document.

        Returns:
            True if the document was replaced.
        """
        path = Path(path)
        scratch = self.scratch_path(path)

        try:
            with open_output(scratch, self._settings.output_encoding) as out:
                processed = self._resolver.process_document(path, out)

            if processed:
                os.replace(scratch, path)
                logger.info(f"Rewrote {path}")
            else:
                logger.info(f"No includes in {path}")
            return processed
        finally:
            if scratch.exists():
                scratch.unlink()

    def rewrite_all(self, paths: Iterable[str | Path]) -> RewriteSummary:
        """Rewrite each document in turn; a failing document doesn't stop the others.

        Circular includes aren't detected and end in a RecursionError, which
        is reported as a failure of that document like any other error.
        """
        summary = RewriteSummary()
        for path in paths:
            path = Path(path)
            try:
                if self.rewrite(path):
                    summary.rewritten.append(path)
                else:
                    summary.unchanged.append(path)
            except (SxiError, OSError, RecursionError) as e:
                if self._settings.verbose:
                    logger.exception(f"Failed to process {path}")
                else:
                    logger.error(f"Failed to process {path}: {e}")
                summary.failed.append((path, e))
        return summary
