"""
Users API routes.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from api.dependencies import get_users_repo
from domain.errors import NotFoundError, UnauthorizedError, ValidationError
from domain.models import User
from repositories import UsersRepository
from services.security import verify_security_answers

router = APIRouter()
logger = logging.getLogger(__name__)


class SecurityQuestionResponse(BaseModel):
    question: str
    answer: str


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str
    security_questions: List[SecurityQuestionResponse] = Field(
        default_factory=list, alias="securityQuestions"
    )


class MessageResponse(BaseModel):
    message: str


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        email=user.email,
        security_questions=[
            SecurityQuestionResponse(question=q.question, answer=q.answer)
            for q in user.security_questions
        ],
    )


@router.api_route("", methods=["GET", "HEAD"], response_model=List[UserResponse])
async def list_users(users_repo: UsersRepository = Depends(get_users_repo)):
    """List all users."""
    try:
        users = users_repo.list_users()
    except Exception:
        logger.exception("Failed to list users")
        raise HTTPException(status_code=500, detail="Server error while retrieving users")
    return [user_to_response(u) for u in users]


@router.post("/{email}/verify-security-question", response_model=MessageResponse)
async def verify_security_question(
    email: str,
    payload: Any = Body(None),
    users_repo: UsersRepository = Depends(get_users_repo),
):
    """Check the submitted answers against the user's security questions, in order."""
    try:
        verify_security_answers(users_repo, email, payload)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Bad Request")
    except NotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except UnauthorizedError:
        raise HTTPException(status_code=401, detail="Unauthorized")
    except Exception:
        logger.exception("Security question verification failed for %s", email)
        raise HTTPException(status_code=500, detail="Internal Server Error")
    return MessageResponse(message="Security questions successfully answered")
