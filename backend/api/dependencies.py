"""
FastAPI dependencies handing the app-owned stores to route handlers.
"""
from fastapi import Request

from repositories import BooksRepository, UsersRepository


def get_books_repo(request: Request) -> BooksRepository:
    return request.app.state.books_repo


def get_users_repo(request: Request) -> UsersRepository:
    return request.app.state.users_repo
