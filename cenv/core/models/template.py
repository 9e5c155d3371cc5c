"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by a generator, not yet written to disk.

    Attributes:
        path:    Relative path from the project root.
        content: Full file content (may be empty).
        mode:    POSIX permission bits to apply after writing, or None
                 to keep the process default.
        reason:  Why this file was generated.
    """

    path: str
    content: str
    mode: int | None = None
    reason: str = ""
