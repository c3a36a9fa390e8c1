"""Text file helpers for reading source documents and writing results."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import TextIO

# Checked longest first so UTF-32 LE isn't mistaken for UTF-16 LE
BOM_ENCODINGS = [
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
]


def detect_encoding(path: str | Path, fallback: str = "utf-8") -> str:
    """Detect the encoding of a text file from its byte-order mark.

    Args:
        path: The file to inspect.
        fallback: Encoding returned when the file has no BOM.

    Returns:
        A codec name that also strips the BOM while decoding.
    """
    with open(path, "rb") as f:
        head = f.read(4)

    for bom, encoding in BOM_ENCODINGS:
        if head.startswith(bom):
            return encoding
    return fallback


def open_source(path: str | Path, fallback: str = "utf-8") -> TextIO:
    """Open a document for reading with its detected encoding.

    Undecodable bytes are replaced rather than raising, and line endings are
    returned exactly as stored.
    """
    encoding = detect_encoding(path, fallback)
    return open(path, "r", encoding=encoding, errors="replace", newline="")


def open_output(path: str | Path, encoding: str = "utf-8") -> TextIO:
    """Open a file for writing without a BOM and without newline translation."""
    return open(path, "w", encoding=encoding, newline="")
