# inventory_intake/services/role.py
from __future__ import annotations

import re
from typing import Optional

from inventory_intake.schemas.result import Rejected, RejectionKind
from inventory_intake.schemas.role import RoleRequest
from inventory_intake.services.base import RequestValidator
from inventory_intake.utils.text import blank_to_none, is_blank

NAME_PATTERN = re.compile(r"^[a-zA-ZáéíóúÁÉÍÓÚñÑ0-9\s\-_]+$")


def normalize(request: RoleRequest) -> RoleRequest:
    name = request.name.strip() if request.name is not None else None
    return request.model_copy(
        update={"name": name, "description": blank_to_none(request.description)}
    )


def is_valid_name(request: RoleRequest) -> bool:
    if is_blank(request.name):
        return False
    return NAME_PATTERN.match(request.name.strip()) is not None


def has_description(request: RoleRequest) -> bool:
    return not is_blank(request.description)


class RoleValidator(RequestValidator[RoleRequest]):
    schema = RoleRequest
    entity = "role"

    def normalize(self, request: RoleRequest) -> RoleRequest:
        return normalize(request)

    def check(self, request: RoleRequest) -> Optional[Rejected]:
        if not is_valid_name(request):
            return Rejected(
                kind=RejectionKind.FORMAT_VIOLATION,
                predicate="is_valid_name",
                field="name",
                message="Role name may only contain letters, digits, spaces, hyphens and underscores",
            )
        return None
