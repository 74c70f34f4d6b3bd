"""FastAPI application exposing the wwwaxe condensing pipeline.

Exports ``app`` for use with ``uvicorn main:app``.
"""

import os
import traceback
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

# Load .env from the project directory so WWWAXE_* settings are picked up
load_dotenv(Path(__file__).resolve().parent / ".env")

from condense.pipeline import condense
from logconfig import configure_logging
from models.request import CondenseRequest
from models.response import CondenseResponse

MAX_INPUT_CHARS = int(os.getenv("WWWAXE_MAX_INPUT_CHARS", "5000000"))

logger = configure_logging()


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="wwwaxe")


@app.exception_handler(Exception)
async def catch_all_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a generic 500 body."""
    logger.error(
        "Unhandled exception: %s: %s\n%s",
        type(exc).__name__,
        exc,
        traceback.format_exc(),
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def reduction_pct(input_chars: int, output_chars: int) -> float:
    """Percentage saved relative to the input; 0.0 for empty input."""
    if input_chars == 0:
        return 0.0
    return round((1 - output_chars / input_chars) * 100, 1)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
async def health() -> dict:
    """Health check."""
    return {"status": "healthy"}


@app.post("/condense", response_model=CondenseResponse)
def condense_endpoint(request: CondenseRequest) -> CondenseResponse:
    """Condense the submitted HTML with the requested options."""
    if len(request.html) > MAX_INPUT_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"html exceeds {MAX_INPUT_CHARS} characters",
        )

    content, frontmatter = condense(request.html, request.options)

    response = CondenseResponse(
        content=content,
        frontmatter=frontmatter.as_dict(),
        input_chars=len(request.html),
        output_chars=len(content),
        reduction_pct=reduction_pct(len(request.html), len(content)),
    )
    logger.info(
        "condense response",
        extra={
            "input_chars": response.input_chars,
            "output_chars": response.output_chars,
            "reduction_pct": response.reduction_pct,
            "core": request.options.core,
            "markdown": request.options.markdown,
        },
    )
    return response
