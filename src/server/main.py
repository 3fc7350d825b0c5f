"""FastAPI application for the category selection engine."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cattree.exceptions import FetchError, IntegrityError, InvalidParentError, ParseError, UnknownIdError
from cattree.utils.logging_config import get_logger
from server.models import ErrorResponse
from server.routers import categories, selection

logger = get_logger(__name__)

app = FastAPI(title="cattree", description="Canonical multi-select over category trees")
app.include_router(categories.router)
app.include_router(selection.router)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=str(exc)).model_dump())


@app.exception_handler(UnknownIdError)
async def unknown_id_handler(request: Request, exc: UnknownIdError) -> JSONResponse:
    logger.info("Unknown category id", extra={"path": request.url.path, "node_id": exc.node_id})
    return _error(404, exc)


@app.exception_handler(IntegrityError)
@app.exception_handler(ParseError)
async def invalid_forest_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Rejected category forest", extra={"path": request.url.path, "error": str(exc)})
    return _error(422, exc)


@app.exception_handler(InvalidParentError)
async def invalid_parent_handler(request: Request, exc: InvalidParentError) -> JSONResponse:
    return _error(422, exc)


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    logger.error("Category tree fetch failed", extra={"path": request.url.path, "error": str(exc)})
    return _error(502, exc)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
