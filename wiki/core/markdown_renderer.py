import markdown

from wiki.core.errors import RenderError

EXTENSIONS = ["tables", "fenced_code"]


def render_markdown(text: str) -> str:
    """Convert raw Markdown to an HTML fragment."""
    try:
        return markdown.markdown(text, extensions=EXTENSIONS)
    except Exception as e:
        raise RenderError(f"markdown rendering failed: {e}") from e
