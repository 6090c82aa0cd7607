import os
from unittest.mock import MagicMock

import pytest
from hypothesis import given

from _macresforks.verifier import (
    is_resource_fork_name,
    is_verified_resource_fork,
    path_exists,
    primary_path,
    split_path,
)

from .generators.paths import directories, non_resource_fork_names, resource_fork_paths


@pytest.mark.parametrize(
    "path, expected",
    [
        (b"", (b".", b".")),
        (b"/", (b"/", b"/")),
        (b"//", (b"/", b"/")),
        (b"foo", (b".", b"foo")),
        (b"/foo", (b"/", b"foo")),
        (b"a/b", (b"a", b"b")),
        (b"a/b/", (b"a", b"b")),
        (b"a//b", (b"a", b"b")),
        (b"/a/b/._c", (b"/a/b", b"._c")),
        (b"./._c", (b".", b"._c")),
    ],
)
def test_split_path(path, expected):
    assert split_path(path) == expected


def test_split_path_does_not_alias_input():
    path = bytearray(b"a/._b")
    directory, base_name = split_path(path)
    path[:] = b"xxxxx"
    assert (directory, base_name) == (b"a", b"._b")


@pytest.mark.parametrize(
    "name, expected",
    [
        (b"._foo", True),
        (b"._", True),
        (b".", False),
        (b"_", False),
        (b"", False),
        (b"_.foo", False),
        (b".foo", False),
        (b"foo._", False),
    ],
)
def test_is_resource_fork_name(name, expected):
    assert is_resource_fork_name(name) == expected


@pytest.mark.parametrize(
    "path, expected",
    [
        (b"/tmp/._foo", b"/tmp/foo"),
        (b"._foo", b"./foo"),
        (b"/._foo", b"//foo"),
        (b"a/._._foo", b"a/._foo"),
        (b"a/._FOO.TXT", b"a/FOO.TXT"),
        (b"a/._", b"a/"),
        (b"a/foo", None),
        (b"a/._foo/bar", None),
    ],
)
def test_primary_path(path, expected):
    assert primary_path(path) == expected


@given(resource_fork_paths())
def test_primary_path_removes_prefix_after_last_separator(path):
    sep_index = path.rfind(b"/")
    expected = path[: sep_index + 1] + path[sep_index + 3 :]
    assert primary_path(path) == expected


@given(directories(min_size=0), non_resource_fork_names())
def test_non_matching_names_do_not_query_filesystem(directory, name):
    exists = MagicMock(return_value=True)
    path = directory + b"/" + name if directory else name
    assert not is_verified_resource_fork(path, exists=exists)
    exists.assert_not_called()


def test_verified_iff_primary_file_exists(tmp_path):
    fork = os.fsencode(tmp_path / "._foo")
    primary = tmp_path / "foo"

    assert not is_verified_resource_fork(fork)
    primary.write_bytes(b"")
    assert is_verified_resource_fork(fork)
    primary.unlink()
    assert not is_verified_resource_fork(fork)


def test_resource_fork_file_itself_need_not_exist(tmp_path):
    (tmp_path / "foo").write_bytes(b"")
    assert is_verified_resource_fork(os.fsencode(tmp_path / "._foo"))


def test_primary_may_be_a_directory(tmp_path):
    (tmp_path / "foo").mkdir()
    assert is_verified_resource_fork(os.fsencode(tmp_path / "._foo"))


def test_empty_primary_name_is_not_verified(tmp_path):
    (tmp_path / "a").mkdir()
    exists = MagicMock(return_value=True)
    assert not is_verified_resource_fork(os.fsencode(tmp_path / "a" / "._"))
    assert not is_verified_resource_fork(b"a/._", exists=exists)


def test_exists_is_given_candidate_path():
    exists = MagicMock(return_value=False)
    assert not is_verified_resource_fork(b"dir/._name", exists=exists)
    exists.assert_called_once_with(b"dir/name")


def test_path_exists_false_on_error(monkeypatch):
    def raise_permission_error(path, mode):
        raise PermissionError(path)

    monkeypatch.setattr(os, "access", raise_permission_error)
    assert not path_exists(b"/some/path")


def test_path_exists(tmp_path):
    assert path_exists(os.fsencode(tmp_path))
    assert not path_exists(os.fsencode(tmp_path / "missing"))
