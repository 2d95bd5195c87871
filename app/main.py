from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app import config
from app.api.routes import router
from app.database import init_db
from app.storage import BACKENDS

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="String Analyzer Service",
    description="Analyze, store and query string properties",
    version="1.0.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    if config.STORAGE_BACKEND not in BACKENDS:
        raise ValueError(f"Unknown STORAGE_BACKEND {config.STORAGE_BACKEND!r}, expected one of {BACKENDS}")

    logger.info(f"Starting with storage backend: {config.STORAGE_BACKEND}")
    if config.STORAGE_BACKEND == "database":
        init_db()


app.include_router(router, tags=["strings"])


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "String Analyzer Service",
        "version": "1.0.0",
        "endpoints": {
            "POST /strings": "Analyze and store a string",
            "GET /strings/{string_value}": "Get specific string analysis",
            "GET /strings": "Get all strings with optional filters",
            "GET /strings/filter-by-natural-language": "Filter using natural language",
            "DELETE /strings/{string_value}": "Delete a string",
        },
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


def _validation_status(exc: RequestValidationError) -> int:
    """
    400 for anything missing or malformed, 422 only when a body field is
    present but has the wrong type (e.g. a number where a string belongs).
    """
    for error in exc.errors():
        loc = error.get("loc", ())
        if (
            len(loc) > 1
            and loc[0] == "body"
            and error.get("type") not in ("missing", "json_invalid")
        ):
            return status.HTTP_422_UNPROCESSABLE_ENTITY
    return status.HTTP_400_BAD_REQUEST


# Validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for error in exc.errors():
        field = error["loc"][-1]
        errors[str(field)] = error["msg"]

    return JSONResponse(
        status_code=_validation_status(exc),
        content={
            "error": "Validation failed",
            "details": errors,
        },
    )


# HTTPException handler
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        return JSONResponse(status_code=exc.status_code, content=exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


# Generic error handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=config.PORT)
