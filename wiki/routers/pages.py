import logging
from datetime import datetime
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse, RedirectResponse

from wiki.core.markdown_renderer import render_markdown
from wiki.core.store import PageStore
from wiki.core.templates import TemplateRenderer
from wiki.deps import get_renderer, get_store
from wiki.models import IndexView, PageView

logger = logging.getLogger("wiki")

router = APIRouter(tags=["wiki"])

HOME_TITLE = "Wiki Home"
NEW_PAGE_ID = -1
EMPTY_PAGE_MARKDOWN = "# A new page\n\nFeel-free to write in Markdown!~\n"

Store = Annotated[PageStore, Depends(get_store)]
Templates = Annotated[TemplateRenderer, Depends(get_renderer)]


def _page_url(name: str) -> str:
    return "/wiki/" + quote(name, safe="/")


def _see_other(location: str) -> RedirectResponse:
    return RedirectResponse(location, status_code=303)


@router.get("/", response_class=HTMLResponse)
def index(store: Store, templates: Templates) -> HTMLResponse:
    view = IndexView(title=HOME_TITLE, pages=store.list_names())
    return HTMLResponse(templates.render("index", view))


@router.get("/wiki/{page:path}", response_class=HTMLResponse)
def wiki_page(page: str, store: Store, templates: Templates) -> HTMLResponse:
    row = store.get_by_name(page)
    if row is None:
        page_id, raw, new_page = NEW_PAGE_ID, EMPTY_PAGE_MARKDOWN, "yes"
    else:
        page_id, raw, new_page = row.id, row.content, "no"

    html = render_markdown(raw)
    logger.debug("rendered %r (%d bytes of markdown)", page, len(raw))
    view = PageView(
        title=page,
        id=page_id,
        new_page=new_page,
        raw_content=raw,
        content=html,
        timestamp=datetime.now().astimezone().strftime("%a %b %d %H:%M:%S %Z %Y"),
    )
    return HTMLResponse(templates.render("page", view))


@router.post("/create")
def create(name: Annotated[str | None, Form()] = None) -> RedirectResponse:
    if not name or not name.strip():
        return _see_other("/")
    return _see_other(_page_url(name))


@router.post("/save")
def save(
    store: Store,
    id: Annotated[int, Form()],
    title: Annotated[str, Form()],
    markdown: Annotated[str, Form()] = "",
    new_page: Annotated[str, Form(alias="newPage")] = "no",
) -> RedirectResponse:
    if new_page == "yes":
        store.insert(title, markdown)
    else:
        store.update_by_id(id, markdown)
    return _see_other(_page_url(title))


@router.post("/delete")
def delete(store: Store, id: Annotated[int, Form()]) -> RedirectResponse:
    store.delete_by_id(id)
    return _see_other("/")
