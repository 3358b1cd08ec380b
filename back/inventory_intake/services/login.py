# inventory_intake/services/login.py
from __future__ import annotations

from typing import Optional

from inventory_intake.schemas.login import LoginRequest, RefreshTokenRequest
from inventory_intake.schemas.result import Rejected, RejectionKind
from inventory_intake.services.base import RequestValidator
from inventory_intake.utils.text import is_blank


def _strip(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


#
# Login
#
def normalize(request: LoginRequest) -> LoginRequest:
    # password is left exactly as typed
    username = _strip(request.username)
    username = username.lower() if username is not None else None
    return request.model_copy(
        update={"username": username, "device_info": _strip(request.device_info)}
    )


def has_valid_credentials(request: LoginRequest) -> bool:
    return not is_blank(request.username) and not is_blank(request.password)


def is_extended_session(request: LoginRequest) -> bool:
    return bool(request.extended_session or request.remember_me)


def has_device_info(request: LoginRequest) -> bool:
    return not is_blank(request.device_info)


class LoginValidator(RequestValidator[LoginRequest]):
    schema = LoginRequest
    entity = "login"

    def normalize(self, request: LoginRequest) -> LoginRequest:
        return normalize(request)

    def check(self, request: LoginRequest) -> Optional[Rejected]:
        if not has_valid_credentials(request):
            return Rejected(
                kind=RejectionKind.FORMAT_VIOLATION,
                predicate="has_valid_credentials",
                field="password" if is_blank(request.password) else "username",
                message="Username and password are required",
            )
        return None


#
# Refresh token
#
def normalize_refresh(request: RefreshTokenRequest) -> RefreshTokenRequest:
    token = _strip(request.refresh_token)
    username = _strip(request.username)
    username = username.lower() if username is not None else None
    return request.model_copy(
        update={
            "refresh_token": token,
            "username": username,
            "device_info": _strip(request.device_info),
        }
    )


def is_valid_refresh_request(request: RefreshTokenRequest) -> bool:
    return not is_blank(request.refresh_token)


def has_username(request: RefreshTokenRequest) -> bool:
    return not is_blank(request.username)


def requests_session_extension(request: RefreshTokenRequest) -> bool:
    return bool(request.extend_session)


class RefreshTokenValidator(RequestValidator[RefreshTokenRequest]):
    schema = RefreshTokenRequest
    entity = "refresh"

    def normalize(self, request: RefreshTokenRequest) -> RefreshTokenRequest:
        return normalize_refresh(request)

    def check(self, request: RefreshTokenRequest) -> Optional[Rejected]:
        if not is_valid_refresh_request(request):
            return Rejected(
                kind=RejectionKind.FORMAT_VIOLATION,
                predicate="is_valid_refresh_request",
                field="refreshToken",
                message="Refresh token is required",
            )
        return None
