"""
Unit tests for workspace and package detection.

Tests verify:
- find_upward returns the nearest marked ancestor
- Filesystem errors while probing count as "absent"
- Package names come from the directory name, not package.xml
- Workspace fallback and package failure behaviour
"""

import os
from pathlib import Path

import pytest

from colb.core.exceptions import PackageNotFoundError
from colb.services.context.locator import (
    contains_marker,
    detect_package,
    detect_workspace,
    find_upward,
    resolve_package,
    resolve_workspace,
)

UNLIKELY_MARKER = "colb-test-marker-that-does-not-exist"


class TestFindUpward:
    """Tests for the upward directory search."""

    def test_returns_marked_ancestor_from_deep_descendant(self, tmp_path):
        root = tmp_path / "a"
        deep = root / "b" / "c" / "d"
        deep.mkdir(parents=True)
        (root / UNLIKELY_MARKER).touch()

        assert find_upward([UNLIKELY_MARKER], deep) == root.resolve()

    def test_returns_start_dir_when_it_is_marked(self, tmp_path):
        (tmp_path / UNLIKELY_MARKER).mkdir()
        assert find_upward([UNLIKELY_MARKER], tmp_path) == tmp_path.resolve()

    def test_nearest_match_wins(self, tmp_path):
        outer = tmp_path / "outer"
        inner = outer / "inner"
        start = inner / "src"
        start.mkdir(parents=True)
        (outer / UNLIKELY_MARKER).touch()
        (inner / UNLIKELY_MARKER).touch()

        assert find_upward([UNLIKELY_MARKER], start) == inner.resolve()

    def test_any_marker_of_the_set_matches(self, tmp_path):
        start = tmp_path / "x" / "y"
        start.mkdir(parents=True)
        (tmp_path / "x" / "second-marker").touch()

        found = find_upward([UNLIKELY_MARKER, "second-marker"], start)
        assert found == (tmp_path / "x").resolve()

    def test_returns_none_when_nothing_matches(self, tmp_path):
        assert find_upward([UNLIKELY_MARKER], tmp_path) is None

    def test_defaults_to_current_directory(self, tmp_path, monkeypatch):
        (tmp_path / UNLIKELY_MARKER).touch()
        sub = tmp_path / "sub"
        sub.mkdir()
        monkeypatch.chdir(sub)

        assert find_upward([UNLIKELY_MARKER]) == tmp_path.resolve()

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_start_dir_symlink_is_canonicalized(self, tmp_path):
        real = tmp_path / "real"
        (real / "pkg").mkdir(parents=True)
        (real / UNLIKELY_MARKER).touch()
        link = tmp_path / "elsewhere" / "link"
        link.parent.mkdir()
        link.symlink_to(real / "pkg")

        assert find_upward([UNLIKELY_MARKER], link) == real.resolve()


class TestContainsMarker:
    """Tests for marker probing."""

    def test_present_marker(self, tmp_path):
        (tmp_path / "package.xml").touch()
        assert contains_marker(tmp_path, ["package.xml"]) is True

    def test_absent_marker(self, tmp_path):
        assert contains_marker(tmp_path, ["package.xml"]) is False

    def test_probe_errors_count_as_absent(self, tmp_path, monkeypatch):
        def broken_exists(self, *args, **kwargs):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "exists", broken_exists)
        assert contains_marker(tmp_path, ["package.xml", "build"]) is False

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_broken_symlink_counts_as_absent(self, tmp_path):
        (tmp_path / "package.xml").symlink_to(tmp_path / "missing-target")
        assert contains_marker(tmp_path, ["package.xml"]) is False


class TestWorkspaceDetection:
    """Tests for workspace detection and fallback."""

    def test_detects_build_directory(self, workspace, package_dir):
        assert detect_workspace(package_dir / "src") == workspace

    def test_detects_config_file(self, tmp_path):
        ws = tmp_path / "ws"
        start = ws / "src" / "pkg"
        start.mkdir(parents=True)
        (ws / ".colb.toml").write_text("")

        assert detect_workspace(start) == ws.resolve()

    def test_explicit_workspace_wins(self, workspace, tmp_path):
        other = tmp_path / "other"
        other.mkdir()
        assert resolve_workspace(str(other), workspace) == other.resolve()

    def test_falls_back_to_start_directory(self, tmp_path):
        start = tmp_path / "plain"
        start.mkdir()
        assert resolve_workspace(None, start) == start.resolve()

    def test_result_is_absolute(self, workspace, monkeypatch):
        monkeypatch.chdir(workspace)
        resolved = resolve_workspace(".")
        assert resolved.is_absolute()
        assert resolved == workspace


class TestPackageDetection:
    """Tests for package detection."""

    def test_package_name_is_directory_name(self, package_dir):
        # package.xml declares a different <name>; the directory name is used
        assert detect_package(package_dir / "src") == "my_pkg"

    def test_no_package_found(self, workspace):
        assert detect_package(workspace) is None

    def test_explicit_package_wins(self, workspace):
        assert resolve_package("other_pkg", workspace) == "other_pkg"

    def test_detected_package_used_when_not_explicit(self, package_dir):
        assert resolve_package(None, package_dir) == "my_pkg"

    def test_undetectable_package_is_fatal(self, workspace):
        with pytest.raises(PackageNotFoundError, match="try specifying it explicitly"):
            resolve_package(None, workspace)
