"""Errors raised while resolving sxi includes."""

from __future__ import annotations


class SxiError(Exception):
    """Base exception for sxi processing errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MalformedRootTagError(SxiError):
    """A ``this`` tag is missing its ``src`` or doesn't match the document path."""


class MissingIncludeAttributeError(SxiError):
    """An ``include`` tag has neither a ``src`` nor a ``file`` attribute."""


class ReferenceNotFoundError(SxiError):
    """The file referenced by an ``include`` tag could not be located."""


class UnterminatedIncludeError(SxiError):
    """The stream ended before the ``endinclude`` closing an include region."""
