import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn
from contextlib import asynccontextmanager
from core.config import settings
from core.state import create_storage
from routers.boxes import router as boxes_router
from routers.parties import router as parties_router
from routers.info import router as info_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.storage = create_storage()
    logger.info(
        "Storage ready (party size %d, box size %d)",
        settings.max_party_size,
        settings.max_box_size,
    )
    yield


app = FastAPI(
    title="Pokemon Storage API",
    description="API for moving Pokemon between a party and storage boxes",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


@app.middleware("http")
async def profiling(request: Request, call_next):
    start_time = time.perf_counter()
    try:
        response = await call_next(request)
    finally:
        elapsed_us = int((time.perf_counter() - start_time) * 1_000_000)
        path_and_query = request.url.path
        if request.url.query:
            path_and_query = f"{path_and_query}?{request.url.query}"
        logger.info("%dμs\t\t%s\t%s", elapsed_us, request.method, path_and_query)
    return response


@app.exception_handler(RequestValidationError)
async def parsing_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    field = "request"
    if errors:
        loc = errors[0]["loc"][1:]
        # malformed JSON reports a character offset instead of a field name
        if not loc or isinstance(loc[0], int):
            field = "body"
        else:
            field = ".".join(str(p) for p in loc)
    return JSONResponse(status_code=400, content={"detail": f"Failed to parse '{field}'"})


app.include_router(boxes_router, prefix="/boxes", tags=["boxes"])
app.include_router(parties_router, prefix="/parties", tags=["parties"])
app.include_router(info_router, prefix="/info", tags=["info"])

if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port)
