# inventory_intake/schemas/movement.py
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, Field, StringConstraints, field_validator

from inventory_intake.schemas.base import RequestModel
from inventory_intake.schemas.result import Rejected
from inventory_intake.utils.text import truncate


class MovementType(str, Enum):
    ENTRY = "ENTRY"
    EXIT = "EXIT"


# Clients of the old API still send the Spanish names.
_MOVEMENT_TYPE_ALIASES = {
    "ENTRADA": MovementType.ENTRY,
    "SALIDA": MovementType.EXIT,
}


class ImpactLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"


class MovementState(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class MovementRequest(RequestModel):
    """
    Proposed stock movement. The timestamp is assigned by whoever applies it,
    so it is not part of the request.
    """

    product_id: int = Field(..., gt=0, description="Product the movement applies to")
    user_id: int = Field(..., gt=0, description="User performing the movement")
    movement_type: MovementType = Field(..., description="ENTRY or EXIT")
    quantity: int = Field(
        ...,
        gt=0,
        le=100_000,
        description="Units moved, always positive; direction comes from movement_type",
    )
    reason: Optional[Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]] = Field(
        None,
        description="Free text; a default per movement type is used when missing",
    )

    @field_validator("movement_type", mode="before")
    @classmethod
    def accept_legacy_type_names(cls, v: Any) -> Any:
        if isinstance(v, str):
            key = v.strip().upper()
            return _MOVEMENT_TYPE_ALIASES.get(key, key)
        return v

    def log_summary(self) -> str:
        movement_type = self.movement_type.value if self.movement_type else None
        return (
            f"MovementRequest{{product={self.product_id}, user={self.user_id}, "
            f"type={movement_type}, quantity={self.quantity}, "
            f"reason='{truncate(self.reason, 30)}'}}"
        )


#
# What the evaluator hands back besides accept/reject
#
class MovementAssessment(BaseModel):
    impact_level: str
    is_bulk: bool
    requires_authorization: bool
    is_reasonable_quantity: bool
    is_reason_coherent: bool
    description: str
    suggestions: List[str] = Field(default_factory=list)


class MovementDecision(BaseModel):
    state: MovementState
    request: Optional[MovementRequest] = None
    assessment: Optional[MovementAssessment] = None
    rejection: Optional[Rejected] = None

    @property
    def accepted(self) -> bool:
        return self.state is MovementState.ACCEPTED
