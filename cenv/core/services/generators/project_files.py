"""
Optional project files — ``.gitignore`` and ``readme.md``.
"""

from __future__ import annotations

from cenv.core.models.template import GeneratedFile


def generate_gitignore() -> GeneratedFile:
    # Only the CMake build directory is ignored.
    return GeneratedFile(
        path=".gitignore",
        content="build",
        reason="git ignore rules",
    )


def generate_readme() -> GeneratedFile:
    return GeneratedFile(path="readme.md", content="", reason="empty readme")
