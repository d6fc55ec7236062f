from .books import BooksRepository
from .users import UsersRepository
from . import seed

__all__ = ["BooksRepository", "UsersRepository", "seed"]
