"""Markdown + LaTeX rendering helpers for question prompts.

Prompts are rendered to HTML with markdown-it and typeset at display time by
MathJax inside ``QWebEngineView``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from pathlib import Path

from markdown_it import MarkdownIt

_MATHJAX_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
)
_URL_PREFIXES = ("data:", "http://", "https://", "file:")


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Converts markdown-with-math into HTML fragments or full documents."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(sanitized)

    def wrap_with_mathjax(self, body_html: str, title: str = "HQuiz", font_size: int = 14) -> str:
        """Wrap a fragment inside a minimal HTML document that loads MathJax."""

        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{escape(title)}</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; background: transparent; color: #1e1e1e; }}
      .question-html {{ font-size: {font_size}pt; line-height: 1.5; }}
      .question-image {{ display: block; max-width: 400px; max-height: 300px; margin: 0 auto 1rem; }}
      .correct {{ background: #e7f5e7; border-radius: 6px; padding: 0 0.5rem; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src=\"{_MATHJAX_SCRIPT}\"></script>
  </head>
  <body>
    <div class=\"question-html\">{body_html}</div>
  </body>
</html>"""

    def render_full_document(self, markdown_text: str, title: str = "HQuiz", font_size: int = 14) -> str:
        """Convenience wrapper to render markdown and embed MathJax."""

        fragment = self.render_fragment(markdown_text)
        return self.wrap_with_mathjax(fragment, title=title, font_size=font_size)


def image_tag(source: str) -> str:
    """HTML for a prompt or answer image given as a data URI, URL or file path."""
    if not source.startswith(_URL_PREFIXES):
        source = Path(source).expanduser().resolve().as_uri()
    return f'<img class="question-image" src="{escape(source, quote=True)}" alt="Question image" />'


renderer = MarkdownMathRenderer()
# Shared instance; MarkdownIt is safe to reuse for read-only renders.
