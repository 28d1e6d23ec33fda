"""Tests for packaging metadata"""

import sys
from pathlib import Path

import pytest

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import strvec

PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def pyproject():
    """Parsed pyproject.toml"""
    with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f)


class TestPackaging:
    """Test suite for pyproject.toml and the package layout"""

    def test_subpackages_present(self):
        """Test each subpackage ships an __init__.py"""
        for sub in ("core", "compat", "cli"):
            assert (PROJECT_ROOT / "strvec" / sub / "__init__.py").is_file(), sub

    def test_version_matches(self, pyproject):
        """Test the package version matches the project metadata"""
        assert pyproject["project"]["name"] == "strvec"
        assert pyproject["project"]["version"] == strvec.__version__

    def test_yaml_dependency_declared(self, pyproject):
        """Test PyYAML is a runtime dependency"""
        deps = pyproject["project"]["dependencies"]
        assert any(dep.lower().startswith("pyyaml") for dep in deps)

    def test_console_script(self, pyproject):
        """Test the strvec command points at the CLI"""
        assert pyproject["project"]["scripts"]["strvec"] == "strvec.cli.main:main"

    def test_public_api(self):
        """Test every name in __all__ is exported"""
        for name in strvec.__all__:
            assert hasattr(strvec, name), f"strvec.{name} is not exported"
