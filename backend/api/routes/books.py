"""
Books API routes.
"""
import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel

from api.dependencies import get_books_repo
from domain.errors import NotFoundError, ValidationError
from domain.models import Book
from repositories import BooksRepository

router = APIRouter()
logger = logging.getLogger(__name__)

_BOOK_ID_RE = re.compile(r"-?[0-9]+")


class BookPayload(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None


class BookResponse(BaseModel):
    id: int
    title: str
    author: Optional[str] = None


def book_to_response(book: Book) -> BookResponse:
    """Convert domain Book to API response."""
    return BookResponse(id=book.id, title=book.title, author=book.author)


def parse_book_id(raw: str) -> Optional[int]:
    """Return the integer id in ``raw``, or None when it is not a number."""
    if not _BOOK_ID_RE.fullmatch(raw):
        return None
    return int(raw)


def _require_book_id(raw: str) -> int:
    book_id = parse_book_id(raw)
    if book_id is None:
        raise HTTPException(status_code=400, detail="Input must be a number")
    return book_id


@router.api_route("", methods=["GET", "HEAD"], response_model=List[BookResponse])
async def list_books(books_repo: BooksRepository = Depends(get_books_repo)):
    """List all books."""
    try:
        books = books_repo.list_books()
    except Exception:
        logger.exception("Failed to list books")
        raise HTTPException(status_code=500, detail="Server error while retrieving books")
    return [book_to_response(b) for b in books]


@router.api_route("/{book_id}", methods=["GET", "HEAD"], response_model=BookResponse)
async def get_book(book_id: str, books_repo: BooksRepository = Depends(get_books_repo)):
    """Get a book by ID."""
    bid = _require_book_id(book_id)
    book = books_repo.get_book(bid)
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return book_to_response(book)


@router.post("", response_model=BookResponse, status_code=201)
async def create_book(
    data: Optional[BookPayload] = None,
    books_repo: BooksRepository = Depends(get_books_repo),
):
    """Create a new book."""
    data = data or BookPayload()
    try:
        book = books_repo.create_book(data.title, data.author)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Book title is required")
    logger.info("Created book %d", book.id)
    return book_to_response(book)


@router.put("/{book_id}", status_code=204)
async def update_book(
    book_id: str,
    data: Optional[BookPayload] = None,
    books_repo: BooksRepository = Depends(get_books_repo),
):
    """Replace a book's title and author."""
    bid = _require_book_id(book_id)
    data = data or BookPayload()
    # PUT answers a missing title with the generic message, unlike POST.
    if not data.title:
        raise HTTPException(status_code=400, detail="Bad Request")
    try:
        books_repo.update_book(bid, data.title, data.author)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Bad Request")
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Book not found")
    return Response(status_code=204)


@router.delete("/{book_id}", status_code=204)
async def delete_book(book_id: str, books_repo: BooksRepository = Depends(get_books_repo)):
    """Delete a book."""
    bid = parse_book_id(book_id)
    if bid is None:
        raise HTTPException(status_code=404, detail="Book not found")
    try:
        books_repo.delete_book(bid)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Book not found")
    logger.info("Deleted book %d", bid)
    return Response(status_code=204)
