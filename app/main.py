"""
FastAPI app

- JSON API under /api (clients, programs, tickets, recipes, admin login)
- Everything else is served from the public directory
- Errors are returned as {"error": "..."}
"""
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import router
from app.core import config
from app.api.middleware import TimingMiddleware
from app.database.storage import DocumentError, init_db
from app.services.static_files import guess_content_type, resolve_static_path

# Setup logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"Personal training server ready (db={config.DB_PATH}, public={config.PUBLIC_DIR})")
    yield


app = FastAPI(title="Personal Training API", lifespan=lifespan)

# Logs request duration and status for all requests
app.add_middleware(TimingMiddleware)

# CORS middleware configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,  # Uses CORS_ORIGINS from config (env var)
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _validation_message(error: dict) -> str:
    if error.get("type") == "json_invalid":
        return "Invalid JSON"
    # Messages raised by our own validators carry the original exception
    cause = (error.get("ctx") or {}).get("error")
    if isinstance(cause, Exception):
        return str(cause)
    field = error.get("loc", [])[-1] if error.get("loc") else None
    if isinstance(field, str) and field != "body":
        return f"{field}: {error.get('msg')}"
    return error.get("msg", "invalid request")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Missing required fields, bad types and malformed JSON are all 400s
    """
    message = "; ".join(_validation_message(error) for error in exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(DocumentError)
async def document_error_handler(request: Request, exc: DocumentError):
    """
    Corrupt database file: fail the request and leave the file as it is
    """
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"error": "database unavailable"})


app.include_router(router, prefix="/api")


@app.api_route(
    "/{full_path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def serve_static(full_path: str):
    """
    Serve a file from the public directory ("/" serves index.html)

    Every non-API path lands here whatever the method.
    """
    file_path = resolve_static_path("/" + full_path, config.PUBLIC_DIR)
    if file_path is None:
        return PlainTextResponse("Not Found", status_code=404)
    return FileResponse(file_path, media_type=guess_content_type(file_path))
