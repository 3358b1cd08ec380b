# inventory_intake/schemas/category.py
from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from inventory_intake.schemas.base import RequestModel
from inventory_intake.utils.text import is_blank, truncate


class CategoryRequest(RequestModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)] = Field(
        ...,
        description="Category name, title-cased on normalization",
    )
    description: Optional[
        Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]
    ] = Field(
        None,
        description="Optional free text; blank collapses to null",
    )

    def log_summary(self) -> str:
        return (
            f"CategoryRequest{{name='{self.name}', "
            f"description='{truncate(self.description)}', "
            f"hasDescription={not is_blank(self.description)}}}"
        )
