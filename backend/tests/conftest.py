import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from api.main import create_app  # noqa: E402
from repositories import BooksRepository, UsersRepository, seed  # noqa: E402


@pytest.fixture
def books_repo():
    return BooksRepository(seed.seed_books())


@pytest.fixture
def users_repo():
    return UsersRepository(seed.seed_users())


@pytest.fixture
def app(books_repo, users_repo):
    return create_app(books_repo=books_repo, users_repo=users_repo)


@pytest.fixture
def client(app):
    # Unhandled errors should come back as 500 responses, not re-raise in the test.
    return TestClient(app, raise_server_exceptions=False)
