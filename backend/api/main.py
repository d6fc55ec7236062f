"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
or: python -m api.main (listens on $PORT, default 3000)
"""
import logging
from pathlib import Path
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import books, users
from repositories import BooksRepository, UsersRepository, seed
from settings import settings

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong, please try again later"

# Details the router itself uses when no route matches the path or method.
_NO_ROUTE_DETAILS = {404: "Not Found", 405: "Method Not Allowed"}


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if _NO_ROUTE_DETAILS.get(exc.status_code) == exc.detail:
        return JSONResponse(status_code=404, content={"message": "Route not found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    # An unparseable JSON body is a server-side fault here, not a schema mismatch.
    if any(err.get("type") == "json_invalid" for err in errors):
        logger.error("Malformed JSON body on %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(status_code=500, content={"message": GENERIC_ERROR_MESSAGE})
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=400, content={"message": "Bad Request"})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": GENERIC_ERROR_MESSAGE})


def create_app(
    books_repo: Optional[BooksRepository] = None,
    users_repo: Optional[UsersRepository] = None,
) -> FastAPI:
    """
    Build the API with its own stores.

    Stores not passed in are created here, seeded with the mock records
    unless SEED_DATA_ENABLED is off.
    """
    app = FastAPI(
        title="In-N-Out-Books API",
        description="CRUD API for books and security-question checks for users",
        version="0.1.0",
    )

    if books_repo is None:
        books_repo = BooksRepository(seed.seed_books() if settings.SEED_DATA_ENABLED else None)
    if users_repo is None:
        users_repo = UsersRepository(seed.seed_users() if settings.SEED_DATA_ENABLED else None)
    app.state.books_repo = books_repo
    app.state.users_repo = users_repo

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include routers
    app.include_router(books.router, prefix="/api/books", tags=["books"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])

    @app.api_route("/health", methods=["GET", "HEAD"])
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running on http://localhost:%d", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
