# File: tests/test_utils.py
import pytest
from site_mirror.crawler.models import CrawlTarget, InvalidURLError
from site_mirror.utils import (
    canonical_url,
    extract_host,
    is_in_scope,
    parse_seed,
    remove_dot_segments,
    resolve_link,
)


@pytest.mark.parametrize(
    "url,expected",
    [
        ("HTTP://Ex.COM", "http://ex.com/"),
        ("https://ex.com/a/./b/../c", "https://ex.com/a/c"),
        ("https://ex.com/a/b/", "https://ex.com/a/b/"),
        ("https://ex.com/page#top", "https://ex.com/page"),
        ("https://ex.com/s?q=1&a=2", "https://ex.com/s?q=1&a=2"),
        ("https://ex.com/a//b", "https://ex.com/a//b"),
        ("https://ex.com/a/..", "https://ex.com/"),
        ("https://ex.com/../../x", "https://ex.com/x"),
    ],
)
def test_canonical_url(url, expected):
    assert canonical_url(url) == expected


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/a/./b/../c", "/a/c"),
        ("/a/b/", "/a/b/"),
        ("/a//b", "/a//b"),
        ("/a/.", "/a/"),
        ("/..", "/"),
        ("", ""),
    ],
)
def test_remove_dot_segments(path, expected):
    assert remove_dot_segments(path) == expected


@pytest.mark.parametrize(
    "base,raw,expected",
    [
        ("https://ex.com/index.html", "/page2", "https://ex.com/page2"),
        ("https://ex.com/index.html", "img.png", "https://ex.com/img.png"),
        ("https://ex.com/docs/a/", "../b", "https://ex.com/docs/b"),
        ("https://ex.com/docs/", "//cdn.ex.com/lib.js", "https://cdn.ex.com/lib.js"),
        ("https://ex.com/", "https://other.com/x", "https://other.com/x"),
        ("https://ex.com/", "#section", "https://ex.com/"),
    ],
)
def test_resolve_link(base, raw, expected):
    assert resolve_link(base, raw) == expected


def test_resolve_link_unparseable_returns_none():
    assert resolve_link("https://ex.com/", "http://[::1") is None


@pytest.mark.parametrize(
    "url,in_scope",
    [
        ("https://ex.com/a", True),
        ("http://ex.com:8080/a", True),
        ("https://other.com/a", False),
        ("https://sub.ex.com/a", False),
        ("ftp://ex.com/file", False),
        ("mailto:someone@ex.com", False),
        ("javascript:void(0)", False),
    ],
)
def test_is_in_scope(url, in_scope):
    assert is_in_scope(url, "ex.com") is in_scope


def test_extract_host():
    assert extract_host("https://user:pw@Ex.com:443/x") == "ex.com"
    assert extract_host("mailto:x@y") == ""


def test_parse_seed():
    assert parse_seed("https://Ex.com") == CrawlTarget(url="https://ex.com/", host="ex.com")


@pytest.mark.parametrize("seed", ["ftp://ex.com/", "ex.com/page", "http://[::1", "https://"])
def test_parse_seed_rejects(seed):
    with pytest.raises(InvalidURLError):
        parse_seed(seed)
