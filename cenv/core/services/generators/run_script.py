"""
Run script generator — one-line compile-and-run for compiler-only builds.

Used for gcc, g++, clang and clang++. The script is written with mode
0744 so the owner can execute it directly.
"""

from __future__ import annotations

from cenv.core.models.options import BuildTool, Language
from cenv.core.models.template import GeneratedFile

RUN_SCRIPT_MODE = 0o744


def run_command(tool: BuildTool, language: Language) -> str:
    """The compile-and-run shell command for *tool*.

    Raises:
        ValueError: if *tool* has no compiler command (CMake).
    """
    compiler = tool.compiler
    if compiler is None:
        raise ValueError(f"{tool.display_name} does not use a run script")
    return f"{compiler} -o main ./src/main{language.extension} && ./main"


def generate_run_script(tool: BuildTool, language: Language) -> GeneratedFile:
    """``run`` script invoking the compiler on the entry file."""
    return GeneratedFile(
        path="run",
        content=run_command(tool, language),
        mode=RUN_SCRIPT_MODE,
        reason=f"{tool.display_name} build script",
    )
