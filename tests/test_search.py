import calendar
import os

import pytest

from forg.search import find_files, parse_size, search_files


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "alpha.txt").write_bytes(b"0123456789")
    (root / "beta.log").write_bytes(b"abc")
    (root / "sub" / "gamma.txt").write_bytes(b"x" * 2048)
    return root


def _paths(root, *names):
    return [str(root.joinpath(*name.split("/"))) for name in names]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("3b", 3),
        ("1kb", 1024),
        ("2mb", 2 * 1024 * 1024),
        ("1gb", 1024 * 1024 * 1024),
        ("7 b", 7),
    ],
)
def test_parse_size_values(text, expected):
    assert parse_size(text) == expected


@pytest.mark.parametrize("text", ["100", "kb", "abc"])
def test_parse_size_bad_format(text):
    with pytest.raises(ValueError, match="invalid size format"):
        parse_size(text)


@pytest.mark.parametrize("text", ["5tb", "5KB", "5kbx"])
def test_parse_size_bad_unit(text):
    with pytest.raises(ValueError, match="invalid size unit"):
        parse_size(text)


def test_no_filters_lists_all_in_walk_order(tree):
    assert list(find_files([str(tree)])) == _paths(
        tree, "alpha.txt", "beta.log", "sub/gamma.txt"
    )


def test_name_filter_is_substring(tree):
    assert list(find_files([str(tree)], name="alp")) == _paths(tree, "alpha.txt")


def test_extension_filter(tree):
    assert list(find_files([str(tree)], extension=".txt")) == _paths(
        tree, "alpha.txt", "sub/gamma.txt"
    )


def test_extension_without_dot_matches_nothing(tree):
    assert list(find_files([str(tree)], extension="txt")) == []


def test_size_range(tree):
    assert list(find_files([str(tree)], min_size="5b", max_size="1kb")) == _paths(
        tree, "alpha.txt"
    )
    assert list(find_files([str(tree)], min_size="1kb", max_size="1mb")) == _paths(
        tree, "sub/gamma.txt"
    )


def test_max_size_alone_is_ignored(tree):
    assert len(list(find_files([str(tree)], max_size="1b"))) == 3


def test_min_size_alone_uses_zero_upper_bound(tree):
    assert list(find_files([str(tree)], min_size="1b")) == []


def test_date_filters(tree):
    stamp = calendar.timegm((2020, 6, 15, 0, 0, 0))
    target = tree / "alpha.txt"
    os.utime(target, (stamp, stamp))
    root = [str(tree)]
    assert str(target) in find_files(root, before_date="2020-06-16")
    assert str(target) in find_files(root, before_date="2020-06-15")
    assert str(target) not in find_files(root, before_date="2020-06-14")
    assert str(target) in find_files(root, after_date="2020-06-15")
    assert str(target) not in find_files(root, after_date="2020-06-16")


def test_single_file_root(tree):
    path = str(tree / "beta.log")
    assert list(find_files([path])) == [path]


def test_multiple_roots_in_given_order(tree):
    first = str(tree / "sub")
    second = str(tree / "beta.log")
    assert list(find_files([first, second])) == [
        str(tree / "sub" / "gamma.txt"),
        second,
    ]


def test_missing_root_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(find_files([str(tmp_path / "missing")]))


@pytest.mark.parametrize("text", ["2020/01/01", "2020-1-01", "2020-13-01"])
def test_invalid_before_date_raises_eagerly(tree, text):
    with pytest.raises(ValueError, match="invalid before date format"):
        find_files([str(tree)], before_date=text)


def test_invalid_after_date_raises_eagerly(tree):
    with pytest.raises(ValueError, match="invalid after date format"):
        find_files([str(tree)], after_date="yesterday")


def test_invalid_size_raises_eagerly(tree):
    with pytest.raises(ValueError, match="invalid size unit"):
        find_files([str(tree)], min_size="3xb")


def test_search_files_prints_matches(tree, capsys):
    found = search_files([str(tree)], extension=".txt")
    assert capsys.readouterr().out.splitlines() == found
    assert found == _paths(tree, "alpha.txt", "sub/gamma.txt")