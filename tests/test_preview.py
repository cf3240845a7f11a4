"""Tests for core/preview.py"""
from link_preview_mcp.core.config import LinkPreview
from link_preview_mcp.core.extractor import parse_html
from link_preview_mcp.core.preview import extract_preview

URL = "https://example.com/post"


def preview(head: str, body: str = "", headers=None, html_attrs: str = "", favicon=None) -> LinkPreview:
    html = f"<html {html_attrs}><head>{head}</head><body>{body}</body></html>"
    return extract_preview(parse_html(html), URL, headers, favicon=favicon)


def test_og_title_beats_twitter_title():
    p = preview(
        '<meta name="twitter:title" content="Tweet Title">'
        '<meta property="og:title" content="OG Title">'
        "<title>Page Title</title>"
    )
    assert p.title == "OG Title"


def test_twitter_title_then_title_tag():
    assert preview('<meta name="twitter:title" content="Tweet"><title>Tag</title>').title == "Tweet"
    assert preview("<title>  Tag Title \n</title>").title == "Tag Title"


def test_missing_title_is_absent():
    p = preview('<meta property="og:type" content="article">')
    assert p.title is None
    assert "title" not in p.to_dict()


def test_empty_title_tag_is_absent():
    p = preview("<title>   </title>")
    assert "title" not in p.to_dict()


def test_og_title_with_twitter_image_only():
    p = preview(
        '<meta property="og:title" content="Example">'
        '<meta name="twitter:image" content="http://x/img.png">'
    )
    assert p.to_dict() == {"url": URL, "title": "Example", "image": "http://x/img.png"}


def test_description_precedence():
    meta_desc = '<meta name="description" content="Plain">'
    tw_desc = '<meta name="twitter:description" content="Tweet">'
    og_desc = '<meta property="og:description" content="OG">'
    assert preview(meta_desc + tw_desc + og_desc).description == "OG"
    assert preview(meta_desc + tw_desc).description == "Tweet"
    assert preview(meta_desc).description == "Plain"


def test_first_non_empty_meta_description():
    p = preview('<meta name="description" content=""><meta name="description" content="Second">')
    assert p.description == "Second"


def test_og_image_beats_twitter_image():
    p = preview(
        '<meta name="twitter:image" content="https://x/tw.png">'
        '<meta property="og:image" content="https://x/og.png">'
    )
    assert p.image == "https://x/og.png"


def test_og_only_fields():
    p = preview(
        '<meta property="og:site_name" content="Example Site">'
        '<meta property="og:type" content="article">'
        '<meta property="og:url" content="https://example.com/canonical">'
        '<meta property="og:locale" content="en_US">'
    )
    d = p.to_dict()
    assert d["siteName"] == "Example Site"
    assert d["type"] == "article"
    assert d["urlCanonical"] == "https://example.com/canonical"
    assert "locale" not in d and "og:locale" not in d


def test_twitter_card():
    p = preview('<meta name="twitter:card" content="summary_large_image">')
    assert p.to_dict()["twitterCard"] == "summary_large_image"


def test_first_og_occurrence_wins():
    p = preview(
        '<meta property="og:title" content="">'
        '<meta property="og:title" content="First">'
        '<meta property="og:title" content="Second">'
    )
    assert p.title == "First"


def test_twitter_values_not_read_from_property_attribute():
    p = preview('<meta property="twitter:title" content="Wrong attr">')
    assert p.title is None


def test_content_type_and_language():
    p = preview("", headers={"content-type": "text/html; charset=utf-8"}, html_attrs='lang="de"')
    d = p.to_dict()
    assert d["contentType"] == "text/html; charset=utf-8"
    assert d["language"] == "de"


def test_favicon_passthrough():
    assert preview("", favicon="https://example.com/favicon.ico").favicon == "https://example.com/favicon.ico"
    assert "favicon" not in preview("").to_dict()


def test_bare_document_has_only_url():
    assert preview("").to_dict() == {"url": URL}


def test_extraction_does_not_mutate_document():
    doc = parse_html('<html><head><meta property="og:title" content="T"></head></html>')
    before = str(doc)
    extract_preview(doc, URL)
    assert str(doc) == before
