"""Unit tests for the FileSystemTree class."""

import os
from pathlib import Path

import pytest

from file_lister.exclusion_rules.glob_rules import GlobExclusionRules
from file_lister.file_system_tree.file_system_tree import FileSystemTree


@pytest.fixture
def temp_directory(tmp_path):
    # Create a temporary directory structure
    (tmp_path / "dir1").mkdir()
    (tmp_path / "dir1" / "file1.txt").touch()
    (tmp_path / "dir2").mkdir()
    (tmp_path / "dir2" / "file2.py").touch()
    (tmp_path / "dir2" / "file2.log").touch()
    return tmp_path


def rendered_names(fs_tree):
    """Entry names shown in the tree representation, without the root line."""
    lines = fs_tree.get_tree_representation().splitlines()[1:]
    return [line.split("── ", 1)[1] for line in lines]


def test_file_system_tree_initialization(temp_directory):
    fs_tree = FileSystemTree(str(temp_directory))
    assert fs_tree.root_path == Path(temp_directory)
    assert fs_tree._tree is None


def test_file_system_tree_build(temp_directory):
    fs_tree = FileSystemTree(str(temp_directory))
    tree = fs_tree.get_tree()
    assert tree.name == temp_directory.name
    assert tree.is_dir
    assert [child.name for child in tree.children] == ["dir1", "dir2"]
    assert fs_tree.get_file_count() == 3
    assert fs_tree.get_directory_count() == 2


def test_children_are_sorted_by_name(tmp_path):
    for name in ["zeta.txt", "Alpha.txt", "beta", "_private.py"]:
        (tmp_path / name).touch()

    tree = FileSystemTree(tmp_path).get_tree()
    assert [child.name for child in tree.children] == sorted(["zeta.txt", "Alpha.txt", "beta", "_private.py"])


def test_file_system_tree_with_exclusions(temp_directory):
    fs_tree = FileSystemTree(str(temp_directory), GlobExclusionRules("*.log"))
    tree = fs_tree.get_tree()
    dir2 = next(node for node in tree.children if node.name == "dir2")
    assert [node.name for node in dir2.children] == ["file2.py"]
    assert fs_tree.get_file_count() == 2


def test_excluded_directory_is_omitted_entirely(tmp_path):
    (tmp_path / "dir" / "sub" / "empty_dir").mkdir(parents=True)
    (tmp_path / "dir" / "keep.txt").touch()

    fs_tree = FileSystemTree(tmp_path, GlobExclusionRules("sub"))
    names = rendered_names(fs_tree)

    assert "sub" not in names
    assert "empty_dir" not in names
    assert names == ["dir", "keep.txt"]


def test_nested_log_files_are_excluded(tmp_path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "top.log").touch()
    (tmp_path / "a" / "mid.log").touch()
    (tmp_path / "a" / "b" / "deep.log").touch()
    (tmp_path / "a" / "b" / "keep.py").touch()

    names = rendered_names(FileSystemTree(tmp_path, GlobExclusionRules("*.log")))
    assert not any(name.endswith(".log") for name in names)
    assert names == ["a", "b", "keep.py"]


def test_anchored_pattern_only_matches_from_root(tmp_path):
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "out.js").touch()
    (tmp_path / "src" / "build").mkdir(parents=True)
    (tmp_path / "src" / "build" / "gen.js").touch()

    fs_tree = FileSystemTree(tmp_path, GlobExclusionRules("build/*.js"))
    files = [rel for _, rel in fs_tree.iterate_files()]
    assert files == ["src/build/gen.js"]


def test_rendered_names_match_reachable_entries(temp_directory):
    (temp_directory / "dir1" / "nested").mkdir()
    (temp_directory / "dir1" / "nested" / "deep.md").touch()

    fs_tree = FileSystemTree(temp_directory)
    names = rendered_names(fs_tree)

    expected = []
    for dirpath, dirnames, filenames in os.walk(temp_directory):
        expected.extend(dirnames)
        expected.extend(filenames)

    assert sorted(names) == sorted(expected)
    assert len(names) == len(set(names))


def test_tree_representation(temp_directory):
    fs_tree = FileSystemTree(temp_directory)
    expected = "\n".join(
        [
            str(temp_directory),
            "├── dir1",
            "│   └── file1.txt",
            "└── dir2",
            "    ├── file2.log",
            "    └── file2.py",
        ]
    )
    assert fs_tree.get_tree_representation() == expected


def test_last_sibling_connector(tmp_path):
    (tmp_path / "a").touch()
    (tmp_path / "b").touch()

    lines = list(FileSystemTree(tmp_path).stream_tree_representation())
    assert lines[1:] == ["├── a", "└── b"]


def test_root_line_uses_path_as_given(temp_directory, monkeypatch):
    monkeypatch.chdir(temp_directory)
    lines = list(FileSystemTree("dir2").stream_tree_representation())
    assert lines[0] == "dir2"


def test_empty_directory(temp_directory):
    (temp_directory / "empty_dir").mkdir()
    tree = FileSystemTree(str(temp_directory)).get_tree()
    empty_node = next(node for node in tree.children if node.name == "empty_dir")
    assert empty_node.is_dir
    assert empty_node.children == ()


def test_iterate_files_in_tree_order(temp_directory):
    (temp_directory / "root.txt").touch()
    fs_tree = FileSystemTree(temp_directory)

    files = list(fs_tree.iterate_files())
    assert [rel for _, rel in files] == ["dir1/file1.txt", "dir2/file2.log", "dir2/file2.py", "root.txt"]
    assert files[0][0] == str(temp_directory / "dir1" / "file1.txt")


def test_file_system_tree_refresh(temp_directory):
    fs_tree = FileSystemTree(str(temp_directory))
    fs_tree.get_tree()
    (temp_directory / "new_file.txt").touch()
    fs_tree.refresh()
    tree = fs_tree.get_tree()
    assert any(node.name == "new_file.txt" for node in tree.children)
    assert fs_tree.get_file_count() == 4


def test_file_system_tree_non_existent_directory():
    with pytest.raises(FileNotFoundError, match="Root path does not exist"):
        FileSystemTree("/non/existent/directory").get_tree()


def test_file_system_tree_file_as_root():
    with pytest.raises(NotADirectoryError):
        FileSystemTree(__file__).get_tree()


def test_broken_symlink_aborts_build(temp_directory):
    try:
        os.symlink(temp_directory / "missing", temp_directory / "dir1" / "dangling")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")

    with pytest.raises(OSError):
        FileSystemTree(temp_directory).get_tree()


def test_excluded_broken_symlink_is_skipped(tmp_path):
    (tmp_path / "keep.py").touch()
    try:
        os.symlink(tmp_path / "missing", tmp_path / "stale_link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")

    tree = FileSystemTree(tmp_path, GlobExclusionRules("stale_link")).get_tree()
    assert [child.name for child in tree.children] == ["keep.py"]


def test_symlinked_directory_is_walked(temp_directory):
    try:
        os.symlink(temp_directory / "dir1", temp_directory / "link")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported on this platform")

    tree = FileSystemTree(temp_directory).get_tree()
    link = next(node for node in tree.children if node.name == "link")
    assert link.is_dir
    assert [child.name for child in link.children] == ["file1.txt"]
