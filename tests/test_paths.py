import pytest

from interviewkit.paths import simplify_path

SOURCE_CASES = {
    "/etc/": "/etc",
    "/../../../../": "/",
    "/first/second/../../third/": "/third",
    "/first/./second/./third": "/first/second/third",
    "/a/./b/../../c/": "/c",
    "/home//foo/": "/home/foo",
    "/": "/",
    "/a/b/c": "/a/b/c",
}


@pytest.mark.parametrize(("path", "expected"), sorted(SOURCE_CASES.items()))
def test_source_cases(path, expected):
    assert simplify_path(path) == expected


@pytest.mark.parametrize("path", sorted(SOURCE_CASES))
def test_result_is_idempotent(path):
    once = simplify_path(path)
    assert simplify_path(once) == once


@pytest.mark.parametrize("path", sorted(SOURCE_CASES))
def test_result_shape(path):
    result = simplify_path(path)
    assert result.startswith("/")
    assert "//" not in result
    assert result == "/" or not result.endswith("/")
    assert all(part not in (".", "..") for part in result.split("/"))


def test_cannot_climb_above_root():
    assert simplify_path("/..") == "/"
    assert simplify_path("/../a") == "/a"


def test_dotted_names_are_kept():
    assert simplify_path("/a/.../b") == "/a/.../b"