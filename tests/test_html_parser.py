from site_sketch.parser.html_parser import extract_content


def test_script_and_style_removed_from_body():
    result = extract_content("<body><script>alert(1)</script><p>hi</p></body>", "http://example.com/")
    assert "<p>hi</p>" in result.body
    assert "<script" not in result.body
    assert "alert(1)" not in result.body


def test_style_and_nested_script_removed():
    html = (
        "<html><head><title>T</title></head><body>"
        "<style>p {color: red}</style><div><p>x</p><script src='a.js'></script></div>"
        "</body></html>"
    )
    result = extract_content(html, "fallback")
    assert result.body == "<body><div><p>x</p></div></body>"
    assert "color: red" not in result.body


def test_title_taken_from_first_title_tag():
    html = "<html><head><title>First</title><title>Second</title></head><body></body></html>"
    assert extract_content(html, "fallback").title == "First"


def test_title_falls_back_to_default():
    assert extract_content("<body><p>x</p></body>", "http://example.com/x").title == "http://example.com/x"


def test_document_without_body_serialized_whole():
    result = extract_content("<div><p>fragment</p></div>", "u")
    assert result.body == "<div><p>fragment</p></div>"


def test_document_without_body_still_strips_script_and_style():
    result = extract_content("<title>T</title><script>alert(1)</script><style>p{}</style><p>hi</p>", "u")
    assert result.title == "T"
    assert result.body == "<title>T</title><p>hi</p>"
    assert "alert(1)" not in result.body


def test_garbage_input_does_not_raise():
    result = extract_content("<<<>>> not really </html", "u")
    assert result.title == "u"
    assert isinstance(result.body, str)
