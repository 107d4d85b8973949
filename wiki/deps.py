from fastapi import Request

from wiki.core.store import PageStore
from wiki.core.templates import TemplateRenderer


def get_store(request: Request) -> PageStore:
    return request.app.state.store


def get_renderer(request: Request) -> TemplateRenderer:
    return request.app.state.templates


__all__ = ["get_store", "get_renderer"]
