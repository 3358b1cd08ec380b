# inventory_intake/schemas/user.py
from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import EmailStr, Field, StringConstraints, field_validator

from inventory_intake.schemas.base import RequestModel
from inventory_intake.utils.text import mask_email

EMAIL_MAX_LENGTH = 100


class UserRequest(RequestModel):
    """
    User data for create/update. Password is handled by its own flow
    and never travels in this request.
    """

    username: Annotated[
        str,
        StringConstraints(
            strip_whitespace=True,
            min_length=3,
            max_length=20,
            pattern=r"^[a-zA-Z0-9._-]+$",
        ),
    ] = Field(..., description="Unique login name, stored lowercased")
    full_name: Annotated[
        str,
        StringConstraints(
            strip_whitespace=True,
            min_length=2,
            max_length=100,
            pattern=r"^[a-zA-ZáéíóúÁÉÍÓÚñÑ\s]+$",
        ),
    ] = Field(..., description="First and last name, letters and spaces only")
    email: Optional[EmailStr] = Field(None, description="Optional contact email")
    active: Optional[bool] = Field(None, description="True when not given")
    role_id: int = Field(..., gt=0, description="Reference to an existing role")

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
            if len(v) > EMAIL_MAX_LENGTH:
                raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
        return v

    def log_summary(self) -> str:
        return (
            f"UserRequest{{username='{self.username}', fullName='{self.full_name}', "
            f"email='{mask_email(self.email)}', roleId={self.role_id}, active={self.active}}}"
        )
