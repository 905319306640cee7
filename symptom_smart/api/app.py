"""
Symptom Smart: FastAPI Application

Run:
    uvicorn symptom_smart.api.app:app --reload --host 0.0.0.0 --port 8000

    or:

    python scripts/run_api.py
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time

from symptom_smart import __version__

from .config import config
from .dependencies import matcher_manager
from .routes import (
    health_router,
    symptoms_router,
    sessions_router,
)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager: builds the matcher on startup"""
    print("=" * 60)
    print("Symptom Smart API Starting...")
    print("=" * 60)

    if matcher_manager.load():
        print(f"API ready! {len(matcher_manager.symptom_list)} symptoms in dictionary")
    else:
        print(f"API starting in limited mode: {matcher_manager.error}")

    print("=" * 60)
    print(f"Swagger UI: http://{config.host}:{config.port}/docs")
    print("=" * 60)

    yield

    print("Symptom Smart API Stopping...")


app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    if request.url.path.startswith(config.api_prefix):
        logger.info(
            "%s %s -> %d (%.1fms)",
            request.method, request.url.path, response.status_code, process_time * 1000
        )

    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if config.debug else None
        }
    )


app.include_router(health_router)
app.include_router(symptoms_router, prefix=config.api_prefix)
app.include_router(sessions_router, prefix=config.api_prefix)
