"""Tests for the directory emulation algorithm."""

from objstore._internal.listing import list_dir_entries, split_after


def test_split_after():
    assert split_after("a/b/c", "/") == ["a/", "b/", "c"]
    assert split_after("a/b/", "/") == ["a/", "b/", ""]
    assert split_after("", "/") == [""]


def test_root_listing():
    keys = ["dir1/obj1", "dir1/obj2", "dir2/obj3", "top"]
    assert list_dir_entries(keys, "", "/") == ["dir1/", "dir2/", "top"]


def test_nested_listing():
    keys = ["a/b", "a/c", "a/d/e"]
    assert list_dir_entries(keys, "a/", "/") == ["a/d/", "a/b", "a/c"]


def test_directories_sort_before_leaves():
    keys = ["a/x", "a/y/z", "a/0", "a/zz/1"]
    assert list_dir_entries(keys, "a/", "/") == ["a/y/", "a/zz/", "a/0", "a/x"]


def test_prefix_without_trailing_delimiter():
    # A bare prefix matches on characters, not whole segments.
    keys = ["a/b", "ab/c"]
    assert list_dir_entries(keys, "a", "/") == ["a/b", "ab/c"]


def test_key_equal_to_prefix_is_skipped():
    assert list_dir_entries(["a/", "a/b"], "a/", "/") == ["a/b"]
    assert list_dir_entries(["x"], "x", "/") == []


def test_unrelated_keys_ignored():
    assert list_dir_entries(["b/c", "c"], "a/", "/") == []


def test_deeper_prefix():
    keys = ["a/b/c/d", "a/b/c/e/f", "a/b/x"]
    assert list_dir_entries(keys, "a/b/c/", "/") == ["a/b/c/e/", "a/b/c/d"]


def test_custom_delimiter():
    keys = ["a|b", "a|c|d"]
    assert list_dir_entries(keys, "a|", "|") == ["a|c|", "a|b"]


def test_ordering_is_bytewise():
    keys = ["p/B", "p/a", "p/_"]
    assert list_dir_entries(keys, "p/", "/") == ["p/B", "p/_", "p/a"]
