"""Unit tests for markup file discovery."""

import pytest

from a11ycheck.config import ScanConfig
from a11ycheck.exceptions import TargetNotFoundError
from a11ycheck.sources import discover_files, is_url


def discover(root, scan=None):
    scan = scan or ScanConfig()
    return discover_files(root, scan.allowed_extensions, scan.excluded_dirs)


class TestDiscoverFiles:
    def test_recursive_sorted_walk(self, write_tree):
        root = write_tree(
            {
                "b.html": "",
                "a.latte": "",
                "sub/c.twig": "",
                "sub/deeper/d.PHP": "",
                "notes.txt": "",
                "script.js": "",
            }
        )
        found = [p.relative_to(root).as_posix() for p in discover(root)]
        assert found == ["a.latte", "b.html", "sub/c.twig", "sub/deeper/d.PHP"]

    def test_excluded_directories_pruned(self, write_tree):
        root = write_tree(
            {
                "index.html": "",
                "node_modules/pkg/index.html": "",
                "vendor/x.php": "",
                ".git/hooks/a.html": "",
                "src/node_modules/y.html": "",
            }
        )
        assert [p.name for p in discover(root)] == ["index.html"]

    def test_custom_extensions(self, write_tree):
        root = write_tree({"a.vue": "", "b.html": ""})
        scan = ScanConfig(allowed_extensions=["vue"])
        assert [p.name for p in discover(root, scan)] == ["a.vue"]

    def test_single_file_returned_as_is(self, write_tree):
        root = write_tree({"page.txt": "<h1>x</h1>"})
        assert discover(root / "page.txt") == [root / "page.txt"]

    def test_missing_target(self, tmp_path):
        with pytest.raises(TargetNotFoundError, match="Target not found"):
            discover(tmp_path / "absent")

    def test_empty_directory(self, write_tree):
        assert discover(write_tree({})) == []


class TestIsUrl:
    @pytest.mark.parametrize(
        "target, expected",
        [("http://example.com", True), ("https://example.com/a", True), ("ftp://x", False), ("./site", False)],
    )
    def test_is_url(self, target, expected):
        assert is_url(target) is expected
