from blogc.renderers import MarkdownRenderer


def test_heading_and_paragraph():
    renderer = MarkdownRenderer()
    html = renderer.render("# Hello\n\nWelcome *home*.")
    assert "<h1>Hello</h1>" in html
    assert "<p>Welcome <em>home</em>.</p>" in html


def test_accepts_bytes_and_replaces_invalid_utf8():
    renderer = MarkdownRenderer()
    assert renderer.render(b"hi") == "<p>hi</p>\n"
    assert "\ufffd" in renderer.render(b"bad \xff byte")


def test_raw_html_passes_through():
    renderer = MarkdownRenderer()
    html = renderer.render('<div class="note">kept</div>\n')
    assert '<div class="note">kept</div>' in html


def test_renderer_is_reusable():
    renderer = MarkdownRenderer()
    first = renderer.render("- one\n- two\n")
    second = renderer.render("- one\n- two\n")
    assert first == second
    assert "<li>one</li>" in first
