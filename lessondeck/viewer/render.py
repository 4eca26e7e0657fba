"""
Unit renderer - Produce display text for a lesson unit.

Formats:
- plain: title, underline, position and body for terminals
- markdown: heading plus fenced code block
- html: escaped <article> fragment for web views

Rendering is pure: the same (unit, format) always gives the same output,
and nothing here writes to a file or terminal.
"""

from enum import Enum
from typing import Optional
import html
import re

from pydantic import BaseModel, ConfigDict

from lessondeck.errors import UnsupportedFormatError
from lessondeck.schemas import LessonUnit


class RenderFormat(str, Enum):
    PLAIN = "plain"
    HTML = "html"
    MARKDOWN = "markdown"


# File extension used when a rendered unit is exported
EXTENSIONS = {
    RenderFormat.PLAIN: ".txt",
    RenderFormat.HTML: ".html",
    RenderFormat.MARKDOWN: ".md",
}


class RenderedOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    unit_id: str
    format: RenderFormat
    content: str

    @property
    def extension(self) -> str:
        return EXTENSIONS[self.format]


def get_deck_css() -> str:
    """Get CSS styles for HTML unit display."""
    return """
    <style>
    .lesson-unit h1 {
        font-size: 1.6em;
        margin-bottom: 0.2em;
    }
    .lesson-position {
        color: #666;
        font-size: 0.9em;
        margin-bottom: 1em;
    }
    .lesson-body {
        background: #fafafa;
        border-left: 4px solid #F05138;
        padding: 1em 1.5em;
        border-radius: 0 8px 8px 0;
        overflow-x: auto;
        font-family: "SF Mono", Menlo, Consolas, monospace;
        font-size: 0.9em;
        line-height: 1.5em;
    }
    </style>
    """


def parse_format(target_format: str) -> RenderFormat:
    """
    Resolve a format name (case-insensitive).

    Raises:
        UnsupportedFormatError: If the name is not a known format
    """
    if isinstance(target_format, RenderFormat):
        return target_format
    try:
        return RenderFormat(str(target_format).strip().lower())
    except ValueError:
        raise UnsupportedFormatError(str(target_format), supported_formats()) from None


def supported_formats() -> list[str]:
    return [fmt.value for fmt in RenderFormat]


def _position_line(unit: LessonUnit, total: Optional[int]) -> str:
    if total:
        return f"Lesson {unit.position} of {total}"
    return f"Lesson {unit.position}"


def render_plain(unit: LessonUnit, total: Optional[int] = None) -> str:
    """Render a unit for terminal display."""
    body = unit.body.rstrip("\n")
    parts = [
        unit.title,
        "=" * max(len(unit.title), 3),
        _position_line(unit, total),
        "",
        body,
    ]
    return "\n".join(parts) + "\n"


def _fence_for(body: str) -> str:
    """Backtick fence longer than any backtick run in body."""
    runs = [len(run) for run in re.findall(r"`+", body)]
    return "`" * max(3, max(runs, default=0) + 1)


def render_markdown(unit: LessonUnit, total: Optional[int] = None) -> str:
    """
    Render a unit as Markdown.

    The body goes in a fenced code block so it is shown verbatim, tagged
    with the unit's language when known.
    """
    body = unit.body.rstrip("\n")
    fence = _fence_for(body)
    parts = [
        f"# {unit.title}",
        "",
        f"*{_position_line(unit, total)}*",
        "",
        f"{fence}{unit.language or ''}",
        body,
        fence,
    ]
    return "\n".join(parts) + "\n"


def render_html(unit: LessonUnit, total: Optional[int] = None) -> str:
    """
    Render a unit as an HTML fragment.

    Returns:
        <article> element; the caller adds get_deck_css() if it needs styling
    """
    body = html.escape(unit.body.rstrip("\n"))
    code_class = f' class="language-{html.escape(unit.language)}"' if unit.language else ''
    parts = [f'<article class="lesson-unit" id="{html.escape(unit.id)}">']
    parts.append(f'<h1>{html.escape(unit.title)}</h1>')
    parts.append(f'<div class="lesson-position">{html.escape(_position_line(unit, total))}</div>')
    parts.append(f'<pre class="lesson-body"><code{code_class}>{body}</code></pre>')
    parts.append('</article>')
    return '\n'.join(parts) + '\n'


RENDERERS = {
    RenderFormat.PLAIN: render_plain,
    RenderFormat.HTML: render_html,
    RenderFormat.MARKDOWN: render_markdown,
}


def render(unit: LessonUnit, target_format: str, total: Optional[int] = None) -> RenderedOutput:
    """
    Render a unit in the requested format.

    Args:
        unit: Unit to render
        target_format: "plain", "html" or "markdown"
        total: Deck size, shown as "Lesson n of total" when given

    Returns:
        RenderedOutput with the rendered text

    Raises:
        UnsupportedFormatError: If target_format is not recognized
    """
    fmt = parse_format(target_format)
    content = RENDERERS[fmt](unit, total)
    return RenderedOutput(unit_id=unit.id, format=fmt, content=content)


class DeckRenderer:
    """Renders units of one deck, adding "of N" to the position line."""

    def __init__(self, total: Optional[int] = None):
        self.total = total

    def render(self, unit: LessonUnit, target_format: str) -> RenderedOutput:
        return render(unit, target_format, total=self.total)
