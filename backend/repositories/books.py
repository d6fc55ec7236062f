"""
Book repository backed by an in-memory list.
"""
import logging
from typing import Iterable, List, Optional

from domain.errors import NotFoundError, ValidationError
from domain.models import Book

logger = logging.getLogger(__name__)


def _copy_book(book: Book) -> Book:
    return Book(id=book.id, title=book.title, author=book.author)


class BooksRepository:
    """CRUD operations for books."""

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: List[Book] = [_copy_book(b) for b in (books or [])]

    def list_books(self) -> List[Book]:
        return list(self._books)

    def get_book(self, book_id: int) -> Optional[Book]:
        return next((b for b in self._books if b.id == book_id), None)

    def create_book(self, title: Optional[str], author: Optional[str] = None) -> Book:
        if not title:
            raise ValidationError("Book title is required")
        book = Book(id=self._next_id(), title=title, author=author)
        self._books.append(book)
        logger.debug("created book %d: %r", book.id, book.title)
        return book

    def update_book(self, book_id: int, title: Optional[str], author: Optional[str] = None) -> Book:
        if not title:
            raise ValidationError("Book title is required")
        book = self.get_book(book_id)
        if book is None:
            raise NotFoundError("Book not found")
        book.title = title
        book.author = author
        logger.debug("updated book %d", book_id)
        return book

    def delete_book(self, book_id: int) -> None:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                del self._books[index]
                logger.debug("deleted book %d", book_id)
                return
        raise NotFoundError("Book not found")

    def _next_id(self) -> int:
        return max((b.id for b in self._books), default=0) + 1
