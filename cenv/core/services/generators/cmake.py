"""
CMake generator — ``CMakeLists.txt`` for a single-executable project.

The ``build/`` directory that goes with it is created by the scaffold
service, since generators only describe files.
"""

from __future__ import annotations

from cenv.core.models.options import Language
from cenv.core.models.template import GeneratedFile

CMAKE_MINIMUM_VERSION = "3.14"
BUILD_DIR = "build"


def generate_cmakelists(project_name: str, language: Language) -> GeneratedFile:
    """``CMakeLists.txt`` building ``src/main<ext>`` into *project_name*.

    Args:
        project_name: Used for both the ``project()`` and the executable name.
        language: Selects the CMake language tag and the source extension.
    """
    lines = [
        f"cmake_minimum_required(VERSION {CMAKE_MINIMUM_VERSION})",
        "",
        f"project({project_name} {language.cmake_language})",
        "",
        "set(src",
        f"src/main{language.extension}",
        ")",
        "",
        f"add_executable({project_name} ${{src}})",
    ]
    return GeneratedFile(
        path="CMakeLists.txt",
        content="\n".join(lines),
        reason=f"CMake project ({language.cmake_language})",
    )
