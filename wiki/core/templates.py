from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from pydantic import BaseModel

from wiki.core.errors import RenderError

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

TEMPLATES = {
    "index": "index.html",
    "page": "page.html",
}


class TemplateRenderer:
    def __init__(self, directory: Path | str = TEMPLATES_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(directory)),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, template: str, view: BaseModel) -> str:
        """Render a named template with the fields of ``view``.

        Aliased fields are exposed under their alias, e.g. ``rawContent``.
        """
        filename = TEMPLATES.get(template)
        if filename is None:
            raise RenderError(f"unknown template: {template}")
        try:
            return self.env.get_template(filename).render(**view.model_dump(by_alias=True))
        except TemplateError as e:
            raise RenderError(f"rendering {filename} failed: {e}") from e
