"""Tag Parser for sxi comment directives.

This module converts the text matched by the scanner, e.g.
``<!--#sxi-include src="/_includes/header.sxi" -->``, into a Tag holding the
label and its attributes.

The parser assumes the tag is well-formed and does very little error checking.
A comment that is not really a tag (but still starts with ``<!--#sxi-``) still
produces a Tag, whose label may be empty or unexpected and whose attributes may
not be the ones the caller wants. Checking the result is up to the caller.
"""

from __future__ import annotations

from sxi.tag import Tag

TAG_PREFIX = "<!--#sxi-"
TAG_SUFFIX = "-->"


def parse_tag(text: str) -> Tag:
    """Parse the exact text of a tag into a Tag.

    Args:
        text: The tag text, starting with ``<!--#sxi-`` and ending with ``-->``.

    Returns:
        The parsed Tag. Duplicate attribute keys keep the last value.

    Raises:
        ValueError: ``text`` isn't wrapped in the tag delimiters.
    """
    _check_delimiters(text)

    i = len(TAG_PREFIX)
    end = len(text) - len(TAG_SUFFIX)

    # Label
    anchor = i
    while i < end and not text[i].isspace():
        i += 1
    label = text[anchor:i]

    attributes: dict[str, str] = {}
    while True:
        while i < end and text[i].isspace():
            i += 1

        # Key
        anchor = i
        while i < end and text[i] != "=" and not text[i].isspace():
            i += 1
        key = text[anchor:i]

        # Past the equals sign
        while i < end and text[i] != "=":
            i += 1
        if i < end:
            i += 1

        # Quoted value
        while i < end and text[i] != '"':
            i += 1
        if i < end:
            i += 1
        anchor = i
        while i < end and text[i] != '"':
            i += 1
        value = text[anchor:i]
        if i < end:
            i += 1

        if not key:
            break

        attributes[key] = value

    return Tag(label=label, attributes=attributes)


def _check_delimiters(text: str) -> None:
    """Raise ValueError unless ``text`` is a complete delimited tag."""
    if (
        len(text) < len(TAG_PREFIX) + len(TAG_SUFFIX)
        or not text.startswith(TAG_PREFIX)
        or not text.endswith(TAG_SUFFIX)
    ):
        raise ValueError(f"Not an sxi tag: {text!r}")
