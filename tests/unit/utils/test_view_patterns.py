from types import SimpleNamespace

import pytest

from assemble_helpers.utils.patterns import _expand_braces, match_view_fields, matches_any, view_fields

VIEW = SimpleNamespace(
    key="posts/2016/hello.md",
    path="/site/src/posts/2016/hello.md",
    relative="posts/2016/hello.md",
    basename="hello.md",
    stem="hello",
)


def test_view_fields_skips_missing_values() -> None:
    view = SimpleNamespace(path="/site/a.hbs", stem="a")
    assert view_fields(view) == ["/site/a.hbs", "a"]
    assert view_fields({"stem": "b"}) == ["b"]


@pytest.mark.parametrize(
    "pattern",
    ["hello", "hello.md", "posts/2016/hello.md", "/site/src/posts/2016/hello.md"],
)
def test_exact_names_match(pattern) -> None:
    assert match_view_fields(pattern, VIEW)


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("*.md", True),
        ("*.{hbs,md}", True),
        ("posts/**/*.md", True),
        ("hel*", True),
        ("*.hbs", False),
        ("other", False),
    ],
)
def test_globs(pattern, expected) -> None:
    assert match_view_fields(pattern, VIEW) is expected


def test_nocase() -> None:
    assert not match_view_fields("HELLO", VIEW)
    assert match_view_fields("HELLO", VIEW, nocase=True)


def test_fields_limit_comparison() -> None:
    assert not match_view_fields("hello", VIEW, fields=["basename"])
    assert match_view_fields("hello.*", VIEW, fields=["basename"])


def test_string_paths_and_backslashes() -> None:
    assert match_view_fields("a/*.hbs", "a\\b.hbs")


def test_matches_any_leading_slash_is_relative() -> None:
    assert matches_any("posts/a.md", ["/posts/*.md"])
    assert not matches_any("drafts/a.md", ["/posts/*.md"])


@pytest.mark.parametrize(
    "value, pattern, expected",
    [
        ("posts/a.hbs", "posts/*.hbs", True),
        ("posts/2016/a.hbs", "posts/*.hbs", False),
        ("posts/2016/a.hbs", "posts/**/*.hbs", True),
        ("posts/a.hbs", "posts/**/*.hbs", True),
        ("posts/2016/01/a.hbs", "posts/**", True),
        ("posts/a.hbs", "posts/?.hbs", True),
        ("posts/ab.hbs", "posts/?.hbs", False),
        ("posts/b.hbs", "posts/[ab].hbs", True),
        ("posts/c.hbs", "posts/[!ab].hbs", True),
        ("posts/a.hbs", "posts/[!ab].hbs", False),
        ("a+b (1).hbs", "a+b (1).hbs", True),
    ],
)
def test_glob_segments(value, pattern, expected) -> None:
    assert matches_any(value, [pattern]) is expected


def test_brace_groups_expand_recursively() -> None:
    assert _expand_braces("{posts,pages}/*.{md,hbs}") == [
        "posts/*.md",
        "posts/*.hbs",
        "pages/*.md",
        "pages/*.hbs",
    ]
    assert _expand_braces("{single}.md") == ["{single}.md"]
    assert _expand_braces("open{a,b") == ["open{a,b"]
