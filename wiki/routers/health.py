from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from wiki.core.errors import StorageError
from wiki.core.store import PageStore
from wiki.deps import get_store
from wiki.models import HealthResponse, ReadyResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(ok=True)


@router.get(
    "/ready",
    response_model=ReadyResponse,
    responses={503: {"model": ReadyResponse, "description": "Database unreachable"}},
)
def ready(store: PageStore = Depends(get_store)):
    try:
        store.ping()
    except StorageError as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=ReadyResponse(ready=False, reason=e.message).model_dump(),
        )
    return ReadyResponse(ready=True)
