"""Tests for project root discovery."""

from pathlib import Path

import pytest

from script_picker.core.errors import ProjectNotFoundError
from script_picker.core.locator import find_project_root, locate_project


class TestFindProjectRoot:
    """Tests for walking up to the nearest package.json."""

    def test_start_directory_is_root(self, npm_project):
        """Test that the start directory itself is checked first."""
        assert find_project_root(npm_project) == npm_project.resolve()

    def test_finds_ancestor(self, nested_project, npm_project):
        """Test that package.json three levels up is found."""
        assert find_project_root(nested_project) == npm_project.resolve()

    @pytest.mark.parametrize("depth", [1, 2, 5])
    def test_any_descendant_finds_same_root(self, npm_project, depth):
        """Test that the result does not depend on which descendant we start in."""
        start = npm_project
        for i in range(depth):
            start = start / f"level{i}"
        start.mkdir(parents=True)

        assert find_project_root(start) == npm_project.resolve()

    def test_nearest_wins(self, npm_project):
        """Test that a closer package.json shadows the outer one."""
        inner = npm_project / "packages" / "web"
        inner.mkdir(parents=True)
        (inner / "package.json").write_text("{}")
        start = inner / "src"
        start.mkdir()

        assert find_project_root(start) == inner.resolve()

    def test_directory_named_package_json_ignored(self, tmp_path):
        """Test that only a file named package.json counts."""
        project = tmp_path / "project"
        (project / "package.json").mkdir(parents=True)

        assert find_project_root(project) is None

    def test_not_found(self, tmp_path):
        """Test that None is returned when there is no package.json."""
        start = tmp_path / "a" / "b"
        start.mkdir(parents=True)

        assert find_project_root(start) is None

    def test_returns_absolute_path(self, npm_project, monkeypatch):
        """Test that a relative start directory still yields an absolute root."""
        monkeypatch.chdir(npm_project)

        root = find_project_root(Path("."))

        assert root.is_absolute()
        assert root == npm_project.resolve()


class TestLocateProject:
    """Tests for the raising variant."""

    def test_returns_root(self, nested_project, npm_project):
        """Test that the root is returned when found."""
        assert locate_project(nested_project) == npm_project.resolve()

    def test_raises_when_missing(self, tmp_path):
        """Test that a missing package.json raises with the user-facing message."""
        with pytest.raises(ProjectNotFoundError) as exc_info:
            locate_project(tmp_path)

        assert str(exc_info.value) == (
            "No package.json found in current directory or parent directories"
        )
