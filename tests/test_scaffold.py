"""Tests for env-map package scaffold structure."""

import pathlib

import tomllib

import env_map


ROOT = pathlib.Path(__file__).resolve().parent.parent


class TestDirectoryStructure:
    def test_pyproject_toml_exists(self):
        assert (ROOT / "pyproject.toml").is_file()

    def test_package_init_exists(self):
        assert (ROOT / "env_map" / "__init__.py").is_file()


class TestPublicApi:
    def test_all_names_importable(self):
        for name in env_map.__all__:
            assert hasattr(env_map, name)


class TestPyprojectToml:
    """Verify pyproject.toml has correct metadata."""

    def _load(self) -> dict:
        return tomllib.loads((ROOT / "pyproject.toml").read_text())

    def test_package_name(self):
        assert self._load()["project"]["name"] == "env-map"

    def test_requires_python(self):
        assert self._load()["project"]["requires-python"] == ">=3.11"

    def test_pydantic_dependency(self):
        deps = self._load()["project"]["dependencies"]
        assert any("pydantic" in d for d in deps)

    def test_hatchling_build_backend(self):
        data = self._load()
        assert data["build-system"]["build-backend"] == "hatchling.build"

    def test_no_entry_points(self):
        project = self._load()["project"]
        assert "scripts" not in project
        assert "entry-points" not in project
