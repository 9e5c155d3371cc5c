"""
Tests for project file generators.

Pure unit tests: language / tool in → GeneratedFile out. Nothing is written.
"""

import pytest

from cenv.core.models.options import BuildTool, Language
from cenv.core.services.generators.cmake import generate_cmakelists
from cenv.core.services.generators.project_files import generate_gitignore, generate_readme
from cenv.core.services.generators.run_script import (
    RUN_SCRIPT_MODE,
    generate_run_script,
    run_command,
)
from cenv.core.services.generators.source import generate_main_source, source_path


# ═══════════════════════════════════════════════════════════════════
#  main source
# ═══════════════════════════════════════════════════════════════════


class TestMainSource:
    def test_c(self):
        f = generate_main_source(Language.C)
        assert f.path == "src/main.c"
        assert f.content == "#include <stdio.h>\n\nint main() {\n\n}\n"
        assert f.mode is None

    def test_cpp(self):
        f = generate_main_source(Language.CPP)
        assert f.path == "src/main.cpp"
        assert f.content == "#include <iostream>\n\nint main() {\n\n}\n"

    def test_source_path(self):
        assert source_path(Language.C) == "src/main.c"
        assert source_path(Language.CPP) == "src/main.cpp"


# ═══════════════════════════════════════════════════════════════════
#  run script
# ═══════════════════════════════════════════════════════════════════


class TestRunScript:
    @pytest.mark.parametrize(
        "tool, compiler",
        [
            (BuildTool.GCC, "gcc"),
            (BuildTool.GPP, "g++"),
            (BuildTool.CLANG, "clang"),
            (BuildTool.CLANGPP, "clang++"),
        ],
    )
    def test_command_per_tool(self, tool: BuildTool, compiler: str):
        assert run_command(tool, Language.C) == f"{compiler} -o main ./src/main.c && ./main"
        assert run_command(tool, Language.CPP) == f"{compiler} -o main ./src/main.cpp && ./main"

    def test_cmake_has_no_run_script(self):
        with pytest.raises(ValueError, match="CMake"):
            run_command(BuildTool.CMAKE, Language.CPP)

    def test_generated_file(self):
        f = generate_run_script(BuildTool.GCC, Language.C)
        assert f.path == "run"
        assert f.content == "gcc -o main ./src/main.c && ./main"
        assert f.mode == RUN_SCRIPT_MODE == 0o744
        assert not f.content.endswith("\n")


# ═══════════════════════════════════════════════════════════════════
#  CMakeLists.txt
# ═══════════════════════════════════════════════════════════════════


class TestCMakeLists:
    def test_cpp_exact(self):
        f = generate_cmakelists("demo", Language.CPP)
        assert f.path == "CMakeLists.txt"
        assert f.content == (
            "cmake_minimum_required(VERSION 3.14)\n"
            "\n"
            "project(demo CXX)\n"
            "\n"
            "set(src\n"
            "src/main.cpp\n"
            ")\n"
            "\n"
            "add_executable(demo ${src})"
        )

    def test_c(self):
        content = generate_cmakelists("hello", Language.C).content
        assert "project(hello C)" in content
        assert "src/main.c\n" in content
        assert "add_executable(hello ${src})" in content

    def test_minimum_version_first(self):
        content = generate_cmakelists("x", Language.CPP).content
        assert content.splitlines()[0] == "cmake_minimum_required(VERSION 3.14)"


# ═══════════════════════════════════════════════════════════════════
#  .gitignore / readme.md
# ═══════════════════════════════════════════════════════════════════


class TestProjectFiles:
    def test_gitignore(self):
        f = generate_gitignore()
        assert f.path == ".gitignore"
        assert f.content == "build"

    def test_readme_is_empty(self):
        f = generate_readme()
        assert f.path == "readme.md"
        assert f.content == ""
