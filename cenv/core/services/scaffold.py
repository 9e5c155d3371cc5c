"""
Scaffold service — guard, resolve and generate a new C/C++ project.

Channel-independent: no click, no printing. The CLI goes through
``cenv.core.use_cases.new_project``; tests may call these directly.

Generation runs in four steps, each depending on the previous one:

    1. base structure   src/ + src/main.<ext>
    2. build artifact   run (0744)  |  CMakeLists.txt + build/
    3. version control  git init + .gitignore        (if requested)
    4. readme           empty readme.md              (if requested)

There is no rollback. When a step fails, the files already written stay
on disk; the raised ``GenerationError`` lists them in ``written``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from cenv.adapters.base import Adapter, ExecutionContext
from cenv.core.models.action import Action
from cenv.core.models.options import BuildTool, Language, ProjectOptions
from cenv.core.models.template import GeneratedFile
from cenv.core.services.generators.cmake import BUILD_DIR, generate_cmakelists
from cenv.core.services.generators.project_files import generate_gitignore, generate_readme
from cenv.core.services.generators.run_script import generate_run_script
from cenv.core.services.generators.source import generate_main_source, source_path

logger = logging.getLogger(__name__)

SOURCE_DIR = "src"

VCS_INIT_HINT = (
    "Fatal error during git initialization:\n"
    "it might be that...\n"
    "\t1. Git is not installed.\n"
    "\t2. The path is not correct."
)


# ═══════════════════════════════════════════════════════════════════
#  Errors
# ═══════════════════════════════════════════════════════════════════


class ScaffoldError(Exception):
    """Base class for everything that stops a scaffold run."""


class PathExistsError(ScaffoldError):
    """The project root is already taken by a file, directory or link."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"The `{path}` already exists!")


class GenerationError(ScaffoldError):
    """Writing the project failed part-way.

    Attributes:
        written: Relative paths created before the failure (directories
            end with ``/``). They are not removed.
    """

    def __init__(self, message: str, written: list[str] | None = None):
        super().__init__(message)
        self.written: list[str] = list(written or [])


class VersionControlInitError(GenerationError):
    """``git init`` could not be run or exited non-zero."""

    def __init__(self, detail: str = "", written: list[str] | None = None):
        super().__init__(VCS_INIT_HINT, written)
        self.detail = detail


# ═══════════════════════════════════════════════════════════════════
#  Path guard + resolver
# ═══════════════════════════════════════════════════════════════════


def check_path(path: Path) -> None:
    """Refuse to scaffold over any existing filesystem entry.

    ``is_symlink()`` catches dangling links, which ``exists()`` misses.

    Raises:
        PathExistsError: if *path* is present in any form.
    """
    if path.exists() or path.is_symlink():
        raise PathExistsError(path)


def resolve_build_tool(requested: BuildTool, language: Language) -> BuildTool:
    """Pick the build tool actually used for *language*.

    gcc and clang stay themselves for C. No other pair is rewritten:
    asking for g++ or clang++ with C keeps the C++ compiler.
    """
    is_c = language is Language.C

    if requested is BuildTool.GCC and is_c:
        return BuildTool.GCC

    if requested is BuildTool.CLANG and is_c:
        return BuildTool.CLANG

    return requested


# ═══════════════════════════════════════════════════════════════════
#  Plan
# ═══════════════════════════════════════════════════════════════════


@dataclass
class ProjectPlan:
    """What one run creates, in creation order.

    ``entries`` matches the ``written`` list of a successful run:
    directories end with ``/`` and ``.git/`` stands for ``git init``.
    """

    build_tool: BuildTool
    files: list[GeneratedFile] = field(default_factory=list)
    entries: list[str] = field(default_factory=list)
    init_vcs: bool = False

    def add_dir(self, name: str) -> None:
        self.entries.append(f"{name}/")

    def add_file(self, generated: GeneratedFile) -> None:
        self.files.append(generated)
        self.entries.append(generated.path)

    def paths(self) -> list[str]:
        return list(self.entries)


def plan_project(options: ProjectOptions) -> ProjectPlan:
    """Describe what ``generate_project`` would create, without writing."""
    tool = resolve_build_tool(options.build_tool, options.language)
    plan = ProjectPlan(build_tool=tool, init_vcs=options.init_vcs)

    plan.add_dir(SOURCE_DIR)
    plan.add_file(generate_main_source(options.language))

    if tool.uses_run_script:
        plan.add_file(generate_run_script(tool, options.language))
    else:
        plan.add_dir(BUILD_DIR)
        plan.add_file(generate_cmakelists(options.name, options.language))

    if options.init_vcs:
        plan.add_dir(".git")
        plan.add_file(generate_gitignore())

    if options.create_readme:
        plan.add_file(generate_readme())

    return plan


# ═══════════════════════════════════════════════════════════════════
#  Writers
# ═══════════════════════════════════════════════════════════════════


def write_generated_file(project_root: Path, generated: GeneratedFile) -> Path:
    """Write a GeneratedFile under *project_root* and apply its mode.

    The parent directory must already exist.

    Raises:
        GenerationError: on any OS-level or encoding failure.
    """
    target = project_root / generated.path
    try:
        target.write_text(generated.content, encoding="utf-8")
        if generated.mode is not None:
            target.chmod(generated.mode)
    except (OSError, UnicodeError) as e:
        raise GenerationError(f"Cannot write {target}: {e}") from e

    logger.info("Wrote %s", target)
    return target


def init_repository(vcs: Adapter, project_root: Path) -> None:
    """Run ``git init`` in *project_root* through the VCS adapter.

    Raises:
        VersionControlInitError: if the adapter rejects or fails the action.
    """
    action = Action(id="vcs-init", adapter=vcs.name, params={"operation": "init"})
    context = ExecutionContext(
        action=action,
        project_root=str(project_root),
        params=action.params,
    )

    is_valid, error_msg = vcs.validate(context)
    if not is_valid:
        raise VersionControlInitError(error_msg)

    receipt = vcs.execute(context)
    if receipt.failed:
        logger.warning("%s init failed: %s", vcs.name, receipt.error)
        raise VersionControlInitError(receipt.error or "")

    logger.debug("%s init: %s", vcs.name, receipt.output)


def _make_dir(path: Path, parents: bool) -> None:
    try:
        path.mkdir(parents=parents, exist_ok=parents)
    except OSError as e:
        raise GenerationError(f"Cannot create directory {path}: {e}") from e
    logger.info("Created %s/", path)


# ═══════════════════════════════════════════════════════════════════
#  Generate
# ═══════════════════════════════════════════════════════════════════


def generate_project(
    project_root: Path,
    options: ProjectOptions,
    vcs: Adapter | None = None,
) -> list[str]:
    """Create the project tree at *project_root*.

    Args:
        project_root: Directory to create. Callers run ``check_path`` first.
        options: Resolved project options.
        vcs: Adapter used for ``git init``; a ``GitAdapter`` by default.

    Returns:
        Relative paths created, in order (directories end with ``/``).

    Raises:
        GenerationError: on any failure; ``written`` lists what was left.
    """
    written: list[str] = []
    try:
        _generate(project_root, options, vcs, written)
    except GenerationError as e:
        e.written = list(written)
        if written:
            logger.warning(
                "Generation stopped; left behind in %s: %s",
                project_root, ", ".join(written),
            )
        raise
    return written


def _generate(
    project_root: Path,
    options: ProjectOptions,
    vcs: Adapter | None,
    written: list[str],
) -> None:
    plan = plan_project(options)
    files = {f.path: f for f in plan.files}

    # 1. Base structure
    _make_dir(project_root / SOURCE_DIR, parents=True)
    written.append(f"{SOURCE_DIR}/")
    main_path = source_path(options.language)
    write_generated_file(project_root, files[main_path])
    written.append(main_path)

    # 2. Build-tool artifact
    if plan.build_tool.uses_run_script:
        write_generated_file(project_root, files["run"])
        written.append("run")
    else:
        _make_dir(project_root / BUILD_DIR, parents=False)
        written.append(f"{BUILD_DIR}/")
        write_generated_file(project_root, files["CMakeLists.txt"])
        written.append("CMakeLists.txt")

    # 3. Version control
    if options.init_vcs:
        if vcs is None:
            from cenv.adapters.vcs.git import GitAdapter

            vcs = GitAdapter()
        init_repository(vcs, project_root)
        written.append(".git/")
        write_generated_file(project_root, files[".gitignore"])
        written.append(".gitignore")

    # 4. Readme
    if options.create_readme:
        write_generated_file(project_root, files["readme.md"])
        written.append("readme.md")
