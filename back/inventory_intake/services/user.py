# inventory_intake/services/user.py
from __future__ import annotations

from typing import Optional

from inventory_intake.schemas.result import Rejected
from inventory_intake.schemas.user import UserRequest
from inventory_intake.services.base import RequestValidator, semantic_inconsistency
from inventory_intake.services.vocabulary import RESERVED_USERNAMES
from inventory_intake.utils.text import (
    blank_to_none,
    capitalize_words,
    is_blank,
    mask_email,
    split_words,
)


def normalize(request: UserRequest) -> UserRequest:
    username = request.username.strip().lower() if request.username is not None else None
    full_name = capitalize_words(request.full_name)

    email = blank_to_none(request.email)
    if email is not None:
        email = email.lower()

    active = True if request.active is None else request.active

    return request.model_copy(
        update={
            "username": username,
            "full_name": full_name,
            "email": email,
            "active": active,
        }
    )


def is_valid_username(request: UserRequest) -> bool:
    """Reserved-name check only; the character set is the schema's job."""
    if is_blank(request.username):
        return False
    return request.username.strip().lower() not in RESERVED_USERNAMES


def has_full_name(request: UserRequest) -> bool:
    # first name + last name
    if is_blank(request.full_name):
        return False
    return len(split_words(request.full_name)) >= 2


def has_email(request: UserRequest) -> bool:
    return not is_blank(request.email)


def is_active(request: UserRequest) -> bool:
    return request.active is True


def masked_email(request: UserRequest) -> Optional[str]:
    return mask_email(request.email)


class UserValidator(RequestValidator[UserRequest]):
    schema = UserRequest
    entity = "user"

    def normalize(self, request: UserRequest) -> UserRequest:
        return normalize(request)

    def check(self, request: UserRequest) -> Optional[Rejected]:
        if not is_valid_username(request):
            return semantic_inconsistency(
                "is_valid_username",
                f"Username '{request.username}' is reserved",
                field="username",
            )
        return None
