"""
Tests for the defaults file loader.
"""

import textwrap
from pathlib import Path

import pytest

from cenv.core.config.loader import (
    CONFIG_ENV_VAR,
    ConfigError,
    Defaults,
    find_config_file,
    load_defaults,
)
from cenv.core.models.options import BuildTool, Language


@pytest.fixture
def defaults_yml(tmp_path: Path) -> Path:
    path = tmp_path / "cenv.yml"
    path.write_text(textwrap.dedent("""\
        build_type: gcc
        language: c
        git: true
        readme: false
    """))
    return path


class TestFindConfigFile:
    def test_nothing_set(self):
        assert find_config_file() is None

    def test_explicit_wins(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yml"))
        assert find_config_file(tmp_path / "cli.yml") == tmp_path / "cli.yml"

    def test_env_var(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yml"))
        assert find_config_file() == tmp_path / "env.yml"


class TestLoadDefaults:
    def test_no_file_gives_empty_defaults(self):
        assert load_defaults() == Defaults()

    def test_valid_file(self, defaults_yml: Path):
        d = load_defaults(defaults_yml)
        assert d.build_type is BuildTool.GCC
        assert d.language is Language.C
        assert d.git is True
        assert d.readme is False
        assert d.output_dir is None

    def test_via_env_var(self, defaults_yml: Path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(defaults_yml))
        assert load_defaults().build_type is BuildTool.GCC

    def test_partial_file(self, tmp_path: Path):
        path = tmp_path / "cenv.yml"
        path.write_text("readme: true\n")
        d = load_defaults(path)
        assert d.readme is True
        assert d.build_type is None
        assert d.language is None

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "cenv.yml"
        path.write_text("")
        assert load_defaults(path) == Defaults()

    def test_output_dir_expands_home(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        path = tmp_path / "cenv.yml"
        path.write_text("output_dir: ~/code\n")
        assert load_defaults(path).output_dir == tmp_path / "code"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_defaults(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "cenv.yml"
        path.write_text("build_type: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_defaults(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "cenv.yml"
        path.write_text("- gcc\n- clang\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_defaults(path)

    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / "cenv.yml"
        path.write_text("compiler: tcc\n")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_defaults(path)

    def test_unknown_build_type(self, tmp_path: Path):
        path = tmp_path / "cenv.yml"
        path.write_text("build_type: ninja\n")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_defaults(path)
