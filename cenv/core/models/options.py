"""
Project option models — the closed set of choices a scaffold run accepts.

``Language`` and ``BuildTool`` are closed enums validated once at the CLI
boundary. ``ProjectOptions`` bundles them with the project name and the
optional extras; it is frozen after construction.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


class Language(StrEnum):
    """Source language of the generated project."""

    C = "c"
    CPP = "cpp"

    @property
    def display_name(self) -> str:
        return "C" if self is Language.C else "C++"

    @property
    def extension(self) -> str:
        """Source file extension, including the dot."""
        return ".c" if self is Language.C else ".cpp"

    @property
    def header(self) -> str:
        """Minimal standard header included by the entry file."""
        return "stdio.h" if self is Language.C else "iostream"

    @property
    def cmake_language(self) -> str:
        """Language tag used in the CMake ``project()`` directive."""
        return "C" if self is Language.C else "CXX"


class BuildTool(StrEnum):
    """Build tool choice. Values are the CLI spellings."""

    GCC = "gcc"
    GPP = "gpp"
    CMAKE = "cmake"
    CLANG = "clang"
    CLANGPP = "clangpp"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def compiler(self) -> str | None:
        """Compiler command for script-based tools, None for CMake."""
        return _COMPILERS.get(self)

    @property
    def uses_run_script(self) -> bool:
        return self is not BuildTool.CMAKE


_DISPLAY_NAMES: dict[BuildTool, str] = {
    BuildTool.GCC: "gcc",
    BuildTool.GPP: "g++",
    BuildTool.CMAKE: "CMake",
    BuildTool.CLANG: "Clang",
    BuildTool.CLANGPP: "Clang++",
}

_COMPILERS: dict[BuildTool, str] = {
    BuildTool.GCC: "gcc",
    BuildTool.GPP: "g++",
    BuildTool.CLANG: "clang",
    BuildTool.CLANGPP: "clang++",
}


class ProjectOptions(BaseModel):
    """Everything a scaffold run needs, resolved from CLI input.

    Attributes:
        name:          Project name; also the project root directory name.
        language:      Resolved language (``-c`` wins over ``-x``).
        build_tool:    Requested build tool (see ``resolve_build_tool``).
        init_vcs:      Run ``git init`` and write a ``.gitignore``.
        create_readme: Create an empty ``readme.md``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    language: Language = Language.CPP
    build_tool: BuildTool = BuildTool.CMAKE
    init_vcs: bool = False
    create_readme: bool = False

    @field_validator("name")
    @classmethod
    def _single_path_segment(cls, value: str) -> str:
        if not value:
            raise ValueError("project name must not be empty")
        if "/" in value or "\\" in value:
            raise ValueError("project name must be a single path segment")
        if value in (".", ".."):
            raise ValueError(f"'{value}' is not a valid project name")
        # argv bytes that are not UTF-8 arrive as lone surrogates
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("project name must be valid UTF-8") from None
        return value
