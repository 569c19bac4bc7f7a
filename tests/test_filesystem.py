"""Tests for filesystem utilities."""

from pathlib import Path

import pytest

from folderzipper.crawler.filesystem import (
    AccessError,
    claim_target,
    enumerate_files,
    list_directory,
    read_file_record,
)


class TestEnumerateFiles:
    """Tests for enumerate_files function."""

    def test_empty_directory(self, tmp_path: Path):
        assert list(enumerate_files(tmp_path)) == []

    def test_finds_nested_files(self, tmp_path: Path, make_tree):
        make_tree(tmp_path, {"a.txt": "a", "sub/b.txt": "b", "sub/deeper/c.txt": "c"})

        found = {p.relative_to(tmp_path).as_posix() for p in enumerate_files(tmp_path)}

        assert found == {"a.txt", "sub/b.txt", "sub/deeper/c.txt"}

    def test_directories_are_not_yielded(self, tmp_path: Path):
        (tmp_path / "empty").mkdir()
        assert list(enumerate_files(tmp_path)) == []

    def test_predicate_filters_files(self, tmp_path: Path, make_tree):
        make_tree(tmp_path, {"keep.txt": "k", "drop.log": "d", "sub/keep2.txt": "k"})

        found = {p.name for p in enumerate_files(tmp_path, predicate=lambda p: p.suffix == ".txt")}

        assert found == {"keep.txt", "keep2.txt"}

    def test_skips_symlinks(self, tmp_path: Path, make_tree):
        make_tree(tmp_path, {"real/file.txt": "x"})
        (tmp_path / "link_dir").symlink_to(tmp_path / "real")
        (tmp_path / "link.txt").symlink_to(tmp_path / "real" / "file.txt")

        found = [p.relative_to(tmp_path).as_posix() for p in enumerate_files(tmp_path)]

        assert found == ["real/file.txt"]

    def test_unreadable_subtree_raises(self, tmp_path: Path, make_tree, deny_directory):
        make_tree(tmp_path, {"ok/a.txt": "a", "locked/b.txt": "b"})
        deny_directory(tmp_path / "locked")

        with pytest.raises(AccessError) as exc_info:
            list(enumerate_files(tmp_path))

        assert exc_info.value.path.name == "locked"

    def test_unreadable_subtree_skipped_on_request(self, tmp_path: Path, make_tree, deny_directory):
        make_tree(tmp_path, {"ok/a.txt": "a", "locked/b.txt": "b"})
        deny_directory(tmp_path / "locked")

        found = [p.name for p in enumerate_files(tmp_path, skip_unreadable=True)]

        assert found == ["a.txt"]

    def test_unreadable_root_always_raises(self, tmp_path: Path, deny_directory):
        deny_directory(tmp_path)

        with pytest.raises(AccessError):
            list(enumerate_files(tmp_path, skip_unreadable=True))


class TestListDirectory:
    """Tests for list_directory function."""

    def test_separates_files_and_subdirectories(self, tmp_path: Path, make_tree):
        make_tree(tmp_path, {"a.txt": "a", "sub/b.txt": "b"})

        listing = list_directory(tmp_path)

        assert listing.files == [tmp_path / "a.txt"]
        assert listing.subdirectories == [tmp_path / "sub"]

    def test_alphabetical_order(self, tmp_path: Path, make_tree):
        make_tree(tmp_path, {"zebra.txt": "z", "apple.txt": "a", "middle.txt": "m"})
        for name in ["zz", "aa", "mm"]:
            (tmp_path / name).mkdir()

        listing = list_directory(tmp_path)

        assert [p.name for p in listing.files] == ["apple.txt", "middle.txt", "zebra.txt"]
        assert [p.name for p in listing.subdirectories] == ["aa", "mm", "zz"]

    def test_includes_hidden_files(self, tmp_path: Path, make_tree):
        make_tree(tmp_path, {".hidden": "secret", "visible.txt": "visible"})

        names = [p.name for p in list_directory(tmp_path).files]

        assert names == [".hidden", "visible.txt"]

    def test_skips_symlinks(self, tmp_path: Path, make_tree):
        make_tree(tmp_path, {"real.txt": "real", "dir/x.txt": "x"})
        (tmp_path / "link.txt").symlink_to(tmp_path / "real.txt")
        (tmp_path / "dirlink").symlink_to(tmp_path / "dir")

        listing = list_directory(tmp_path)

        assert [p.name for p in listing.files] == ["real.txt"]
        assert [p.name for p in listing.subdirectories] == ["dir"]

    def test_unreadable_directory_raises(self, tmp_path: Path, deny_directory):
        deny_directory(tmp_path)

        with pytest.raises(AccessError, match="permission denied"):
            list_directory(tmp_path)

    def test_missing_directory_raises(self, tmp_path: Path):
        with pytest.raises(AccessError):
            list_directory(tmp_path / "missing")


class TestReadFileRecord:
    """Tests for read_file_record function."""

    def test_reads_size_and_timestamp(self, tmp_path: Path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"x" * 1234)

        record = read_file_record(path)

        assert record.path == path
        assert record.size == 1234
        assert record.created_at > 0


class TestClaimTarget:
    """Tests for claim_target function."""

    def test_missing_target_is_claimed(self, tmp_path: Path):
        assert claim_target(tmp_path / "out.zip", overwrite=False) is True

    def test_existing_target_kept_without_overwrite(self, tmp_path: Path):
        target = tmp_path / "out.zip"
        target.write_text("old")

        assert claim_target(target, overwrite=False) is False
        assert target.read_text() == "old"

    def test_existing_target_deleted_with_overwrite(self, tmp_path: Path):
        target = tmp_path / "out.zip"
        target.write_text("old")

        assert claim_target(target, overwrite=True) is True
        assert not target.exists()
