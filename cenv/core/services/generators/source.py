"""
Entry source generator — ``src/main.c`` or ``src/main.cpp``.
"""

from __future__ import annotations

from cenv.core.models.options import Language
from cenv.core.models.template import GeneratedFile


_MAIN_TEMPLATE = """\
#include <{header}>

int main() {{

}}
"""


def source_path(language: Language) -> str:
    """Relative path of the entry file, e.g. ``src/main.cpp``."""
    return f"src/main{language.extension}"


def generate_main_source(language: Language) -> GeneratedFile:
    """Minimal entry file: the language's standard header and an empty main."""
    return GeneratedFile(
        path=source_path(language),
        content=_MAIN_TEMPLATE.format(header=language.header),
        reason=f"{language.display_name} entry point",
    )
