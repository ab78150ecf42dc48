"""Question rendering utilities for the editor preview and the presenter."""

from __future__ import annotations

from hquiz.core.markdown_math_renderer import image_tag, renderer
from hquiz.core.models import Question, QuestionKind


def render_question(
    question: Question,
    font_size: int = 14,
    *,
    show_options: bool = True,
    reveal_answer: bool = False,
) -> str:
    """Render a question prompt, its image and optionally its options as HTML.

    Args:
        question: The question to render
        font_size: Font size in points for the question text (default 14)
        show_options: Whether to list the answer options below the prompt
        reveal_answer: Whether to highlight the correct option

    Returns:
        HTML string ready for display in QWebEngineView
    """
    parts: list[str] = []
    if question.image:
        parts.append(image_tag(question.image))
    parts.append(renderer.render_fragment(question.prompt or "(No question text)"))

    if show_options and question.kind is not QuestionKind.FREE_TEXT:
        for idx, option in enumerate(question.answers):
            letter = chr(ord("A") + idx)
            if question.kind is QuestionKind.IMAGE_CHOICE and option:
                body = image_tag(option)
            else:
                body = renderer.render_fragment(f"**{letter}.** {option or '(empty)'}")
            marker = ' class="correct"' if reveal_answer and idx == question.correct_answer else ""
            parts.append(f"<div{marker}>{body}</div>")

    return renderer.wrap_with_mathjax("\n".join(parts), font_size=font_size)
