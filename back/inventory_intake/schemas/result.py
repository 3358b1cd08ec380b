# inventory_intake/schemas/result.py
from __future__ import annotations

from enum import Enum
from typing import Generic, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, Field

RecordT = TypeVar("RecordT", bound=BaseModel)


class RejectionKind(str, Enum):
    # a field breaks a length / pattern / type rule
    FORMAT_VIOLATION = "format_violation"
    # fields are fine one by one but make no sense together
    SEMANTIC_INCONSISTENCY = "semantic_inconsistency"
    # referenced id does not exist; only the storage side can tell
    REFERENCE_UNRESOLVED = "reference_unresolved"


class Accepted(BaseModel, Generic[RecordT]):
    status: Literal["accepted"] = "accepted"
    record: RecordT

    @property
    def accepted(self) -> bool:
        return True


class Rejected(BaseModel):
    status: Literal["rejected"] = "rejected"
    kind: RejectionKind
    predicate: str = Field(..., description="Name of the check that failed")
    field: Optional[str] = Field(None, description="Wire name of the offending field, if any")
    message: str

    @property
    def accepted(self) -> bool:
        return False


ValidationResult = Union[Accepted[RecordT], Rejected]
