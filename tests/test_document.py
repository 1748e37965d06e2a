from seo_engine.document import SoupDocument, parse_document

HTML = """<html><head><title>Doc</title>
<meta name="viewport" content="width=device-width">
<script>var hidden = "script text";</script>
<style>.x { color: red }</style>
</head>
<body>
<nav><a href="/nav">Navigation link</a></nav>
<!-- a comment that is not content -->
<p>First paragraph.</p>
<img src="a.png" alt="">
<img src="b.png">
<a href="/x" rel="nofollow noopener">Go <b>there</b></a>
<a>No href</a>
<footer>Footer text</footer>
</body></html>"""


def test_parse_document_returns_soup_backend():
    doc = parse_document(HTML)
    assert isinstance(doc, SoupDocument)


def test_select_keeps_document_order():
    doc = parse_document(HTML)
    imgs = doc.select("img")
    assert [doc.attribute(i, "src") for i in imgs] == ["a.png", "b.png"]


def test_absent_attribute_is_none_and_empty_attribute_is_empty_string():
    doc = parse_document(HTML)
    first, second = doc.select("img")
    assert doc.attribute(first, "alt") == ""
    assert doc.attribute(second, "alt") is None


def test_select_where_passes_none_for_missing_attribute():
    doc = parse_document(HTML)
    missing_alt = doc.select_where("img", "alt", lambda v: v is None)
    assert [doc.attribute(i, "src") for i in missing_alt] == ["b.png"]


def test_multi_valued_attribute_is_joined():
    doc = parse_document(HTML)
    link = doc.select_where("a", "href", lambda v: v == "/x")[0]
    assert doc.attribute(link, "rel") == "nofollow noopener"


def test_element_text_concatenates_descendants():
    doc = parse_document(HTML)
    link = doc.select_where("a", "href", lambda v: v == "/x")[0]
    assert doc.text(link) == "Go there"


def test_document_text_skips_non_content():
    text = parse_document(HTML).text()
    assert "First paragraph." in text
    assert "Go" in text
    assert "script text" not in text
    assert "color: red" not in text
    assert "Navigation link" not in text
    assert "Footer text" not in text
    assert "a comment" not in text


def test_count_and_first_attribute():
    doc = parse_document(HTML)
    assert doc.count("img") == 2
    assert doc.count("a", "href") == 2
    assert doc.count("img", "alt", lambda v: v is None) == 1
    assert doc.first_attribute("meta", "name", "viewport", "content") == "width=device-width"
    assert doc.first_attribute("meta", "name", "description", "content") is None


def test_queries_do_not_mutate_the_tree():
    doc = parse_document(HTML)
    before = str(doc.soup)
    doc.text()
    doc.select_where("a", "href", lambda v: v is not None)
    doc.count("img", "alt", lambda v: v is None)
    assert str(doc.soup) == before


def test_text_of_empty_document_is_empty():
    assert parse_document("").text().strip() == ""


def test_inline_markup_does_not_split_words():
    doc = parse_document("<p>The <b>S</b>EO guide is un<em>believ</em>able.</p>")
    assert doc.text().split() == ["The", "SEO", "guide", "is", "unbelievable."]


def test_block_elements_start_new_lines():
    doc = parse_document("<h1>One</h1><h2>Two</h2><p>Three <i>four</i></p>")
    assert doc.text().split() == ["One", "Two", "Three", "four"]


def test_head_text_is_skipped_without_body():
    doc = parse_document("<title>Page title</title><meta name='x'><p>Only this.</p>")
    assert doc.text().strip() == "Only this."
