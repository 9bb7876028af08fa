"""FastAPI application for the bytecode builder."""

import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from executor import __version__
from executor.api.endpoints import router
from executor.errors import BytecodeBuilderError

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("EXECUTOR_HOST", "0.0.0.0")
PORT = int(os.environ.get("EXECUTOR_PORT", "8000"))
DEBUG = os.environ.get("EXECUTOR_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (1 MB)
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="Executor Bytecode Builder",
    description="Compiles priced swap routes into executor contract payloads",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(BytecodeBuilderError)
async def builder_error_handler(_request: Request, exc: BytecodeBuilderError) -> JSONResponse:
    """Builder errors are caused by the request, never partially served."""
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - EXECUTOR_HOST: Host to bind to (default: 0.0.0.0)
    - EXECUTOR_PORT: Port to bind to (default: 8000)
    - EXECUTOR_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "executor.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
