from pathlib import Path

from hquiz.core.markdown_math_renderer import MarkdownMathRenderer, image_tag, renderer


def test_render_fragment_uses_markdown():
    html = renderer.render_fragment("**bold** and $x^2$")
    assert "<strong>bold</strong>" in html
    assert "$x^2$" in html


def test_empty_fragment_has_placeholder():
    assert "No content provided" in renderer.render_fragment("   ")


def test_raw_html_is_escaped_by_default():
    html = MarkdownMathRenderer().render_fragment("<script>alert(1)</script>")
    assert "<script>" not in html


def test_full_document_loads_mathjax_and_escapes_title():
    document = renderer.render_full_document("Hello", title="<Quiz>", font_size=20)
    assert "mathjax" in document.lower()
    assert "&lt;Quiz&gt;" in document
    assert "font-size: 20pt" in document


def test_image_tag_keeps_urls():
    tag = image_tag("https://example.com/cat.png")
    assert 'src="https://example.com/cat.png"' in tag


def test_image_tag_converts_paths_to_file_uris(tmp_path):
    picture = tmp_path / "cat.png"
    tag = image_tag(str(picture))
    assert f'src="{Path(picture).resolve().as_uri()}"' in tag
