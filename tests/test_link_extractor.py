import pytest

from site_sketch.crawler.link_extractor import belongs_to_origin, extract_links, resolve_href


@pytest.mark.parametrize(
    "url,host,expected",
    [
        ("http://example.com/a", "example.com", True),
        ("https://example.com:8443/a", "example.com", True),
        ("http://other.com/x", "example.com", False),
        ("http://sub.example.com/", "example.com", False),
        ("mailto:someone@example.com", "example.com", False),
        ("/relative/path", "example.com", False),
        ("http://[::1", "example.com", False),
        ("", "example.com", False),
        ("http://example.com:abc/x", "example.com", False),
        ("http://example.com:99999/x", "example.com", False),
    ],
)
def test_belongs_to_origin(url, host, expected):
    assert belongs_to_origin(url, host) is expected


def test_relative_links_resolve_against_base():
    assert resolve_href("http://example.com/a/b", "../c") == "http://example.com/c"


def test_unresolvable_href_is_none():
    assert resolve_href("http://example.com/", "http://[::1") is None
    assert resolve_href("http://example.com/", "javascript:void(0)") is None


def test_extract_links_filters_other_hosts():
    html = '<a href="http://other.com/x">x</a><a href="/y">y</a>'
    assert extract_links(html, "http://example.com/", "example.com") == ["http://example.com/y"]


def test_extract_links_keeps_document_order_and_duplicates():
    html = """
        <link rel="stylesheet" href="/style.css">
        <a href="b">b</a>
        <a href="//example.com/c">c</a>
        <a href="#top">top</a>
        <a>no href</a>
        <a href="mailto:x@example.com">mail</a>
        <a href="http://[broken">bad</a>
        <a href="b">b again</a>
    """
    links = extract_links(html, "http://example.com/dir/page", "example.com")
    assert links == [
        "http://example.com/style.css",
        "http://example.com/dir/b",
        "http://example.com/c",
        "http://example.com/dir/page#top",
        "http://example.com/dir/b",
    ]


def test_extract_links_empty_document():
    assert extract_links("", "http://example.com/", "example.com") == []


def test_same_host_link_with_malformed_port_not_queued():
    assert resolve_href("http://example.com/", "http://example.com:abc/x") is None
    html = '<a href="http://example.com:abc/x">bad</a><a href="http://example.com:99999/y">bad</a><a href="/ok">ok</a>'
    assert extract_links(html, "http://example.com/", "example.com") == ["http://example.com/ok"]
