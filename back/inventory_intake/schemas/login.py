# inventory_intake/schemas/login.py
from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from inventory_intake.schemas.base import RequestModel
from inventory_intake.utils.text import mask_email


class LoginRequest(RequestModel):
    username: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=3, max_length=100)
    ] = Field(..., description="Username or email")
    # never stripped or otherwise touched
    password: str = Field(..., min_length=6, max_length=100, repr=False)
    device_info: Optional[str] = None
    remember_me: bool = False
    extended_session: bool = False

    def log_summary(self) -> str:
        return (
            f"username={mask_email(self.username)}, deviceInfo={self.device_info}, "
            f"rememberMe={self.remember_me}, extendedSession={self.extended_session}"
        )


class RefreshTokenRequest(RequestModel):
    refresh_token: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(
        ..., repr=False
    )
    username: Optional[str] = Field(None, description="Optional, for an extra ownership check")
    device_info: Optional[str] = None
    extend_session: bool = False

    def log_summary(self) -> str:
        return f"username={mask_email(self.username)}, extendSession={self.extend_session}"
