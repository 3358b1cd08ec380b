# inventory_intake/schemas/role.py
from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from inventory_intake.schemas.base import RequestModel
from inventory_intake.utils.text import is_blank, truncate


class RoleRequest(RequestModel):
    # upper-casing the name is up to whoever stores it
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=50)] = Field(
        ..., description="Role name"
    )
    description: Optional[
        Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]
    ] = None

    def log_summary(self) -> str:
        return (
            f"RoleRequest{{name='{self.name}', "
            f"description='{truncate(self.description)}', "
            f"hasDescription={not is_blank(self.description)}}}"
        )
