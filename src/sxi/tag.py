"""Tag data model for sxi comment directives.

This module provides the Tag and ScanResult dataclasses that represent
``<!--#sxi-...-->`` directives found while scanning an HTML document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Recognized tag labels
LABEL_THIS = "this"
LABEL_INCLUDE = "include"
LABEL_END_INCLUDE = "endinclude"

# Closing marker written after the content of each expanded include
END_INCLUDE_MARKER = "<!--#sxi-endinclude-->"


@dataclass(frozen=True)
class Tag:
    """Represents a parsed sxi directive.

    Attributes:
        label: The directive label ("this", "include", "endinclude", or
            whatever a garbled comment happened to contain)
        attributes: Attribute values keyed by attribute name, in the order
            they were written
    """

    label: str
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mapping so a Tag can't be changed after parsing
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def get(self, key: str) -> str | None:
        """Return the value of an attribute, or None if it was not given."""
        return self.attributes.get(key)


@dataclass(frozen=True)
class ScanResult:
    """A complete tag occurrence found by the scanner.

    Attributes:
        tag: The parsed tag
        text: The exact text that matched, delimiters included
        line: Line number (1-indexed) on which the tag started
    """

    tag: Tag
    text: str
    line: int
