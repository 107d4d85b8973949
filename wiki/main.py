import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from wiki.config import DATABASE_URL, HOST, POOL_SIZE, PORT
from wiki.core.errors import WikiError
from wiki.core.store import PageStore
from wiki.core.templates import TemplateRenderer
from wiki.log_utils import inject_request_id, log_request_event, setup_logging
from wiki.routers.health import router as health_router
from wiki.routers.pages import router as pages_router

logger = logging.getLogger("wiki")


@asynccontextmanager
async def lifespan(app: FastAPI):
    store: PageStore = app.state.store
    logger.info("Preparing database")
    # a StorageError here aborts startup before the server accepts requests
    await run_in_threadpool(store.ensure_schema)
    logger.info("Wiki started")

    yield

    store.close()
    logger.info("Wiki stopped")


def create_app(store: PageStore | None = None, templates: TemplateRenderer | None = None) -> FastAPI:
    setup_logging()

    app = FastAPI(title="Wiki", version="0.1.0", lifespan=lifespan, openapi_url=None)
    app.state.store = store or PageStore.from_url(DATABASE_URL, pool_size=POOL_SIZE)
    app.state.templates = templates or TemplateRenderer()

    @app.middleware("http")
    async def add_req_id(request, call_next):
        return await inject_request_id(request, call_next)

    @app.exception_handler(WikiError)
    async def wiki_error_handler(request: Request, exc: WikiError):
        log_request_event(
            logging.ERROR,
            "request failed",
            request,
            exc_info=exc,
            error=type(exc).__name__,
            detail=exc.message,
        )
        return PlainTextResponse("Internal Server Error", status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_on_wrong_method(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            exc = StarletteHTTPException(status_code=404)
        return await http_exception_handler(request, exc)

    app.include_router(pages_router)
    app.include_router(health_router)
    return app


app = create_app()


def run():
    uvicorn.run("wiki.main:app", host=HOST, port=PORT, log_level="info")


if __name__ == "__main__":
    run()
