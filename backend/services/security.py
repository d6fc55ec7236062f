"""
Security-question verification.

A verification request is a JSON array of ``{"answer": str}`` objects. The
shape is checked against a pydantic schema before any user lookup happens;
the answers are then compared by position with the user's stored answers.
"""
import logging
from typing import Any, List

from pydantic import BaseModel, ConfigDict, StrictStr, TypeAdapter
from pydantic import ValidationError as SchemaError

from domain.errors import NotFoundError, UnauthorizedError, ValidationError
from domain.models import User
from repositories import UsersRepository

logger = logging.getLogger(__name__)


class SecurityAnswer(BaseModel):
    model_config = ConfigDict(extra="forbid")

    answer: StrictStr


_answers_adapter = TypeAdapter(List[SecurityAnswer])


def validate_security_answers(payload: Any) -> List[SecurityAnswer]:
    """Return the parsed answers, or raise ValidationError if the shape is wrong."""
    try:
        return _answers_adapter.validate_python(payload)
    except SchemaError as e:
        logger.info("security answers rejected: %d schema error(s)", e.error_count())
        raise ValidationError("Bad Request") from e


def answers_match(user: User, answers: List[SecurityAnswer]) -> bool:
    # Every stored question must be answered; a missing position is a mismatch.
    for i, question in enumerate(user.security_questions):
        if i >= len(answers) or answers[i].answer != question.answer:
            return False
    return True


def verify_security_answers(users_repo: UsersRepository, email: str, payload: Any) -> User:
    """
    Check submitted answers for the user with ``email``.

    Raises ValidationError for a malformed payload, NotFoundError for an
    unknown email and UnauthorizedError when any answer differs.
    """
    answers = validate_security_answers(payload)

    user = users_repo.get_user_by_email(email)
    if user is None:
        raise NotFoundError("User not found")

    if not answers_match(user, answers):
        logger.info("security answers mismatch for %s", email)
        raise UnauthorizedError("Unauthorized")
    return user
