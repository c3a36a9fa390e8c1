"""Path resolution for sxi include references.

An include names its target either with a ``file`` attribute (a path relative
to the including document) or with a ``src`` attribute. A ``src`` that starts
with a slash is a web path, relative to the root of the website, and the
website root has to be found on disk first:

- If the document declared its own location with a ``this`` tag, the root is
  exactly ``root_depth`` directories above the document's directory.
- Otherwise directories are tried one at a time, walking up from the
  document's directory, until the web path names an existing file. This can
  match a same-named file higher up the tree than intended.

The upward search never tries the filesystem root itself; a document stored
directly in it can only reach web paths through a ``this`` tag.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path

from sxi.exceptions import MissingIncludeAttributeError, ReferenceNotFoundError

logger = logging.getLogger(__name__)

ROOT_MARKERS = ("/", "\\")


def is_web_root_path(reference: str) -> bool:
    """Return True if a reference starts at the website root."""
    return reference.startswith(ROOT_MARKERS)


def normalize_reference(reference: str) -> str:
    """Normalize backslashes and strip the leading root marker."""
    return reference.replace("\\", "/").lstrip("/")


class DirectoryAscent:
    """Cursor that walks up a directory path one segment at a time.

    The cursor never goes above the first directory below the filesystem
    anchor (``/a`` for ``/a/b/c``, ``C:\\a`` for ``C:\\a\\b\\c``).
    """

    def __init__(self, directory: Path) -> None:
        self._anchor = Path(directory.anchor) if directory.anchor else None
        self._segments = list(directory.parts[1:] if self._anchor else directory.parts)
        self._min_segments = min(1, len(self._segments))

    @property
    def directory(self) -> Path:
        """The directory the cursor is currently on."""
        if self._anchor is None:
            return Path(*self._segments) if self._segments else Path(".")
        return self._anchor.joinpath(*self._segments)

    @property
    def at_boundary(self) -> bool:
        """True if the cursor cannot ascend any further."""
        return len(self._segments) <= self._min_segments

    def ascend(self, levels: int = 1) -> bool:
        """Move up to ``levels`` directories; return False if the boundary stopped it."""
        for _ in range(levels):
            if self.at_boundary:
                return False
            self._segments.pop()
        return True

    def __iter__(self) -> Iterator[Path]:
        """Yield the current directory and then each one above it.

        Yields nothing for the filesystem root itself.
        """
        if self._anchor is not None and not self._segments:
            return
        yield self.directory
        while self.ascend():
            yield self.directory


def resolve_reference(
    attributes: Mapping[str, str],
    outer_document: Path,
    root_depth: int = -1,
) -> Path:
    """Resolve the target of an include tag to a file path.

    Args:
        attributes: The include tag's attributes (``src`` and/or ``file``).
        outer_document: Absolute path of the document containing the tag.
        root_depth: Directory levels between the document and the website
            root, or -1 if unknown.

    Returns:
        The path of the existing file to include.

    Raises:
        MissingIncludeAttributeError: Neither ``src`` nor ``file`` was given.
        ReferenceNotFoundError: No file exists at the resolved location.
    """
    src = attributes.get("src")
    if src:
        if is_web_root_path(src):
            if root_depth >= 0:
                return resolve_from_declared_root(src, outer_document, root_depth)
            return resolve_by_ascent(src, outer_document)
        return resolve_relative(src, outer_document, "src")

    file = attributes.get("file")
    if file:
        return resolve_relative(file, outer_document, "file")

    raise MissingIncludeAttributeError(
        f"sxi-include: Must specify either 'src' or 'file' attribute. ({outer_document})"
    )


def resolve_relative(reference: str, outer_document: Path, attribute: str = "file") -> Path:
    """Resolve a reference relative to the including document's directory."""
    candidate = outer_document.parent / reference.replace("\\", "/")
    if not candidate.is_file():
        raise ReferenceNotFoundError(
            f'sxi-include: Failed to find source. {attribute}="{reference}" ({outer_document})'
        )
    logger.debug(f"Resolved {attribute}=\"{reference}\" to {candidate}")
    return candidate


def resolve_from_declared_root(src: str, outer_document: Path, root_depth: int) -> Path:
    """Resolve a web path using the root depth declared by a ``this`` tag."""
    ascent = DirectoryAscent(outer_document.parent)
    ascent.ascend(root_depth)
    candidate = ascent.directory / normalize_reference(src)
    if not candidate.is_file():
        raise ReferenceNotFoundError(
            f'sxi-include: Failed to find source using \'this\' path. src="{src}" ({outer_document})'
        )
    logger.debug(f"Resolved src=\"{src}\" at declared depth {root_depth} to {candidate}")
    return candidate


def resolve_by_ascent(src: str, outer_document: Path) -> Path:
    """Resolve a web path by trying each directory above the document."""
    relative = normalize_reference(src)
    for directory in DirectoryAscent(outer_document.parent):
        candidate = directory / relative
        if candidate.is_file():
            logger.debug(f"Resolved src=\"{src}\" by ascent to {candidate}")
            return candidate

    raise ReferenceNotFoundError(f'sxi-include: Failed to find source. src="{src}" ({outer_document})')
