import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request

from catalog_admin import upstream
from catalog_admin.auth import get_admin_token
from catalog_admin.logging_config import get_logger, setup_logging
from catalog_admin.routers import categories_router

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if not upstream.is_initialized():
        upstream.init_from_env()
    logger.info("Catalog admin API started")
    yield
    await upstream.close_client()
    logger.info("Catalog admin API stopped")


app = FastAPI(title="Catalog Admin API", lifespan=lifespan)
app.include_router(categories_router, dependencies=[Depends(get_admin_token)])


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "Request handled",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return response


@app.get("/")
def read_root() -> dict[str, str]:
    return {"status": "ok"}
