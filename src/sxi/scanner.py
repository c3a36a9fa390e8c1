"""Tag Scanner for sxi comment directives.

This module provides the TagScanner class, a streaming matcher that reads a
document one character at a time, optionally copies everything it reads to an
output sink, and stops at each complete ``<!--#sxi-...-->`` tag.
"""

from __future__ import annotations

import enum
import logging
from typing import TextIO

from sxi.tag import ScanResult
from sxi.tag_parser import parse_tag

logger = logging.getLogger(__name__)

# Opening and closing comment wrapper. Characters before TAG_MIDDLE are the
# fixed prefix; the label and attributes go between TAG_MIDDLE and the "-->".
TAG_PATTERN = "<!--#sxi--->"
TAG_MIDDLE = 9
TAG_COMPLETE = 12


class MatchState(enum.Enum):
    """States of the tag-matching automaton."""

    NO_MATCH = "no_match"
    PREFIX_MATCH = "prefix_match"
    BODY_CAPTURE = "body_capture"


def state_for_index(index: int) -> MatchState:
    """Return the automaton state for a position in TAG_PATTERN."""
    if index == 0:
        return MatchState.NO_MATCH
    if index < TAG_MIDDLE:
        return MatchState.PREFIX_MATCH
    return MatchState.BODY_CAPTURE


class TagScanner:
    """Streaming scanner that finds sxi tags in a character source.

    The prefix match is greedy: when a partial prefix fails to match, the
    failing character is not tried again as the start of a new tag. Text such
    as ``<<!--#sxi-this ...-->`` is therefore not recognized as a tag.
    """

    def __init__(self, source: TextIO) -> None:
        """Initialize the scanner.

        Args:
            source: The text stream to read from.
        """
        self._source = source
        self._line = 1

    @property
    def line(self) -> int:
        """Line number (1-indexed) of the next character to be read."""
        return self._line

    def scan(self, sink: TextIO | None = None) -> ScanResult | None:
        """Read up to and including the next complete tag.

        Args:
            sink: If given, every character read (tag text included) is
                written to it.

        Returns:
            The tag found, or None if the stream ended first. A tag that is
            still incomplete at the end of the stream is dropped.
        """
        index = 0
        chars: list[str] = []
        start_line = self._line

        while True:
            c = self._source.read(1)
            if not c:
                break

            if sink is not None:
                sink.write(c)

            state = state_for_index(index)
            if state is MatchState.NO_MATCH:
                if c == TAG_PATTERN[0]:
                    chars.append(c)
                    start_line = self._line
                    index = 1
            elif state is MatchState.PREFIX_MATCH:
                if c == TAG_PATTERN[index]:
                    chars.append(c)
                    index += 1
                else:
                    chars.clear()
                    index = 0
            else:
                chars.append(c)
                if c == TAG_PATTERN[index]:
                    index += 1
                else:
                    index = TAG_MIDDLE

            if c == "\n":
                self._line += 1

            if index >= TAG_COMPLETE:
                text = "".join(chars)
                tag = parse_tag(text)
                logger.debug(f"Found tag '{tag.label}' at line {start_line}")
                return ScanResult(tag=tag, text=text, line=start_line)

        if chars:
            logger.debug(f"Stream ended inside an incomplete tag starting at line {start_line}")
        return None
