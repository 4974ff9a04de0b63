from contextlib import asynccontextmanager

from fastapi import FastAPI

from api import grammar
from core.config import settings
from core.errors import register_error_handlers
from core.logging import configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware

VERSION = "0.1.0"

# Initialize logging before anything else
configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("startup", message="Russian grammar API starting up", dictionary_backend=settings.DICTIONARY_BACKEND)
    yield
    log.info("shutdown", message="Russian grammar API shutting down")


app = FastAPI(
    title="Russian Grammar API",
    description="Case inflection of Russian words, names, phrases and numerals, and spelling of numbers",
    version=VERSION,
    lifespan=lifespan,
)

# Register structured error handlers
register_error_handlers(app)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(grammar.router, prefix="/api/grammar", tags=["grammar"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": VERSION}


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, debug=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # Disable uvicorn's default logging, we handle it
    )
