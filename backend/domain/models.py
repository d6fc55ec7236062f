"""
Core domain models for the books API.
These are framework-agnostic and can be used across all services.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Book:
    """A book in the catalogue, identified by a positive integer id."""
    id: int
    title: str
    author: Optional[str] = None


@dataclass
class SecurityQuestion:
    """A question/answer pair; answers are compared by exact match."""
    question: str
    answer: str


@dataclass
class User:
    """
    A registered user.

    Users are preloaded and read-only. The order of ``security_questions``
    matters: submitted answers are matched against it by position.
    """
    email: str
    security_questions: List[SecurityQuestion] = field(default_factory=list)
