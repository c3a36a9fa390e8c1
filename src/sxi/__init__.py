"""sxi: build-time static includes for HTML files.

This package expands ``<!--#sxi-include ...-->`` tags by writing the content of
the referenced files into the including document, once, offline.
"""

from sxi.exceptions import (
    MalformedRootTagError,
    MissingIncludeAttributeError,
    ReferenceNotFoundError,
    SxiError,
    UnterminatedIncludeError,
)
from sxi.inclusion_resolver import InclusionResolver
from sxi.rewriter import DocumentRewriter
from sxi.settings import SxiSettings
from sxi.tag import Tag

__all__ = [
    "DocumentRewriter",
    "InclusionResolver",
    "MalformedRootTagError",
    "MissingIncludeAttributeError",
    "ReferenceNotFoundError",
    "SxiError",
    "SxiSettings",
    "Tag",
    "UnterminatedIncludeError",
]
