"""Settings for sxi document rewriting."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SxiSettings:
    """Options shared by the rewriter and the command line.

    Attributes:
        temp_suffix: Suffix appended to a document's path for its scratch file
        output_encoding: Encoding of rewritten documents (written without BOM)
        fallback_encoding: Encoding assumed for input files without a BOM
        recursive: Whether file patterns also match in subdirectories
        verbose: Whether failures are reported with a full traceback
    """

    temp_suffix: str = ".tmp"
    output_encoding: str = "utf-8"
    fallback_encoding: str = "utf-8"
    recursive: bool = False
    verbose: bool = False
