# inventory_intake/schemas/base.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """
    Common config for everything a client can send.

    Fields are declared in snake_case, the wire form is camelCase
    (imageUrl, categoryId, movementType ...). Both are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def log_summary(self) -> str:  # pragma: no cover - every request overrides it
        raise NotImplementedError

    def __str__(self) -> str:
        return self.log_summary()
