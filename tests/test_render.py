"""Tests for neols.render and neols.fs helpers."""

import os
import stat
from pathlib import Path

import pytest

from neols import LsError
from neols.fs import join_path, stat_path
from neols.options import ListOptions
from neols.render import render_entry


class TestJoinPath:
    @pytest.mark.parametrize(
        ("dirname", "name", "expected"),
        [
            ("/", "etc", "/etc"),
            ("/usr", "lib", "/usr/lib"),
            (".", "a.txt", "./a.txt"),
            ("dir/", "x", "dir//x"),
        ],
    )
    def test_join(self, dirname: str, name: str, expected: str) -> None:
        assert join_path(dirname, name) == expected


class TestStatPath:
    def test_symlink_without_slash_is_link(self, tmp_path: Path) -> None:
        (tmp_path / "real").mkdir()
        os.symlink("real", tmp_path / "link")
        st = stat_path(str(tmp_path / "link"))
        assert stat.S_ISLNK(st.st_mode)

    def test_symlink_with_slash_is_directory(self, tmp_path: Path) -> None:
        (tmp_path / "real").mkdir()
        os.symlink("real", tmp_path / "link")
        st = stat_path(str(tmp_path / "link") + "/")
        assert stat.S_ISDIR(st.st_mode)

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(LsError, match="nope"):
            stat_path(str(tmp_path / "nope"))


class TestRenderEntry:
    def test_bare_name_needs_no_stat(self, tmp_path: Path) -> None:
        # No stat happens in bare mode, so a missing entry still renders.
        assert render_entry(str(tmp_path), "ghost", ListOptions()) == "ghost"

    def test_size_mode(self, tmp_path: Path) -> None:
        (tmp_path / "data.bin").write_bytes(b"\x00" * 10_000)
        expected_kb = os.lstat(tmp_path / "data.bin").st_blocks // 2
        line = render_entry(str(tmp_path), "data.bin", ListOptions(show_size=True))
        assert line == f"{expected_kb} data.bin"

    def test_size_mode_without_parent_uses_given_path(self, tmp_path: Path) -> None:
        path = tmp_path / "f"
        path.write_text("")
        line = render_entry(None, str(path), ListOptions(show_size=True))
        assert line == f"{os.lstat(path).st_blocks // 2} {path}"

    def test_long_mode(self, tmp_path: Path) -> None:
        (tmp_path / "f.txt").write_text("abc")
        line = render_entry(str(tmp_path), "f.txt", ListOptions(long_format=True))
        assert line.startswith("-")
        assert line.endswith(" f.txt")

    def test_long_wins_over_size(self, tmp_path: Path) -> None:
        (tmp_path / "f.txt").write_text("abc")
        opts = ListOptions(long_format=True, show_size=True)
        assert render_entry(str(tmp_path), "f.txt", opts).startswith("-")

    @pytest.mark.parametrize(
        "options",
        [ListOptions(long_format=True), ListOptions(show_size=True)],
    )
    def test_missing_entry_raises(self, tmp_path: Path, options: ListOptions) -> None:
        with pytest.raises(LsError):
            render_entry(str(tmp_path), "ghost", options)
