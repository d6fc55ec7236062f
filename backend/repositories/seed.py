"""
Mock records the in-memory stores start with.
"""
from typing import List

from domain.models import Book, SecurityQuestion, User


def seed_books() -> List[Book]:
    return [
        Book(id=1, title="The Fellowship of the Ring", author="J.R.R. Tolkien"),
        Book(id=2, title="Harry Potter and the Philosopher's Stone", author="J.K. Rowling"),
        Book(id=3, title="The Two Towers", author="J.R.R. Tolkien"),
        Book(id=4, title="Harry Potter and the Chamber of Secrets", author="J.K. Rowling"),
        Book(id=5, title="The Return of the King", author="J.R.R. Tolkien"),
    ]


def seed_users() -> List[User]:
    return [
        User(
            email="harry@hogwarts.edu",
            security_questions=[
                SecurityQuestion("What is your pet's name?", "Hedwig"),
                SecurityQuestion("What is your favorite book?", "Quidditch Through the Ages"),
                SecurityQuestion("What is your mother's maiden name?", "Evans"),
            ],
        ),
        User(
            email="hermione@hogwarts.edu",
            security_questions=[
                SecurityQuestion("What is your pet's name?", "Crookshanks"),
                SecurityQuestion("What is your favorite book?", "Hogwarts: A History"),
                SecurityQuestion("What is your mother's maiden name?", "Granger"),
            ],
        ),
        User(
            email="ron@hogwarts.edu",
            security_questions=[
                SecurityQuestion("What is your pet's name?", "Scabbers"),
                SecurityQuestion("What is your favorite book?", "Flying with the Cannons"),
                SecurityQuestion("What is your mother's maiden name?", "Prewett"),
            ],
        ),
    ]
