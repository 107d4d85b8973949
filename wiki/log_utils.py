import json
import logging
import time
import uuid

from fastapi import Request, Response

from wiki.config import LOG_FORMAT, LOG_LEVEL

REQUEST_ID_HEADER = "X-Request-Id"

logger = logging.getLogger("wiki")


def setup_logging():
    logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.INFO), format=LOG_FORMAT)


def request_id(request: Request) -> str | None:
    return getattr(request.state, "req_id", None)


def log_request_event(level: int, msg: str, request: Request, exc_info=None, **fields):
    """Write one JSON log line tagged with the request's id, method and path."""
    record = {
        "msg": msg,
        "req_id": request_id(request),
        "method": request.method,
        "path": request.url.path,
    }
    record.update(fields)
    logger.log(level, json.dumps(record, default=str), exc_info=exc_info)


async def inject_request_id(request: Request, call_next):
    request.state.req_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    started = time.perf_counter()
    response: Response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request.state.req_id
    log_request_event(
        logging.INFO,
        "request",
        request,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return response
