"""Tests for core/ddg.py"""
import urllib.parse

from link_preview_mcp.core.ddg import build_search_url, extract_search_results, resolve_result_url
from link_preview_mcp.core.extractor import parse_html


def ddg_block(href: str, title: str, snippet: str | None = None) -> str:
    snippet_html = f'<a class="result__snippet" href="{href}">{snippet}</a>' if snippet is not None else ""
    return (
        '<div class="result results_links web-result"><div class="links_main result__body">'
        f'<h2 class="result__title"><a rel="nofollow" class="result__a" href="{href}">{title}</a></h2>'
        f"{snippet_html}</div></div>"
    )


def redirect(target: str) -> str:
    return "//duckduckgo.com/l/?uddg=" + urllib.parse.quote(target, safe="") + "&amp;rut=abc"


def page(*blocks: str) -> str:
    return "<html><body><div id='links' class='results'>" + "".join(blocks) + "</div></body></html>"


def test_build_search_url():
    url = build_search_url("python tips & tricks")
    parsed = urllib.parse.urlparse(url)
    assert parsed.netloc == "html.duckduckgo.com"
    assert urllib.parse.parse_qs(parsed.query) == {"q": ["python tips & tricks"], "kl": ["us-en"]}


def test_resolve_redirect_link():
    assert resolve_result_url("//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fa%3Fb%3D1&rut=x") == \
        "https://example.com/a?b=1"


def test_resolve_direct_and_bad_links():
    assert resolve_result_url("https://example.com/") == "https://example.com/"
    assert resolve_result_url("") is None
    assert resolve_result_url("javascript:void(0)") is None
    assert resolve_result_url("//duckduckgo.com/l/?rut=x") is None


def test_extract_results_in_order():
    html = page(
        ddg_block(redirect("https://a.example/"), "Alpha", "First snippet"),
        ddg_block(redirect("https://b.example/"), "Beta", "Second  \n snippet"),
    )
    results = extract_search_results(parse_html(html))
    assert [r.to_dict() for r in results] == [
        {"title": "Alpha", "url": "https://a.example/", "snippet": "First snippet"},
        {"title": "Beta", "url": "https://b.example/", "snippet": "Second snippet"},
    ]


def test_skips_blocks_without_link_or_title():
    html = page(
        ddg_block("", "No link"),
        ddg_block(redirect("https://a.example/"), "   "),
        '<div class="result"><div class="result__snippet">orphan</div></div>',
        ddg_block(redirect("https://ok.example/"), "Kept"),
    )
    results = extract_search_results(parse_html(html))
    assert [r.title for r in results] == ["Kept"]


def test_missing_snippet_defaults_to_empty():
    results = extract_search_results(parse_html(page(ddg_block("https://a.example/", "Alpha"))))
    assert results[0].snippet == ""


def test_bounded_by_num_results():
    html = page(*(ddg_block(f"https://site{i}.example/", f"Result {i}") for i in range(15)))
    doc = parse_html(html)
    assert len(extract_search_results(doc)) == 10
    assert [r.title for r in extract_search_results(doc, 3)] == ["Result 0", "Result 1", "Result 2"]
    assert len(extract_search_results(doc, 100)) == 15
    assert extract_search_results(doc, 0) == []


def test_no_results_page():
    assert extract_search_results(parse_html("<html><body><div class='no-results'>No results.</div></body></html>")) == []
