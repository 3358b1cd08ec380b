# inventory_intake/services/movement.py
"""
Coherence checks for a proposed stock movement.

A movement goes from proposed to accepted or rejected in a single
evaluation. Live stock is never consulted here: whoever applies an
accepted movement still has to refuse an EXIT larger than the stock.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

import structlog

from inventory_intake.schemas.movement import (
    ImpactLevel,
    MovementAssessment,
    MovementDecision,
    MovementRequest,
    MovementState,
    MovementType,
)
from inventory_intake.schemas.result import Rejected, RejectionKind
from inventory_intake.services.base import RequestValidator, semantic_inconsistency
from inventory_intake.services.vocabulary import (
    DEFAULT_ENTRY_REASON,
    DEFAULT_EXIT_REASON,
    DEFAULT_MOVEMENT_REASON,
    DEFAULT_REASONS,
    ENTRY_CONFIRMING,
    ENTRY_INDICATORS,
    ENTRY_REASON_SUGGESTIONS,
    EXIT_CONFIRMING,
    EXIT_INDICATORS,
    EXIT_REASON_SUGGESTIONS,
)
from inventory_intake.utils.text import capitalize_first, contains_any, is_blank

logger = structlog.get_logger(__name__)

MAX_REASONABLE_ENTRY = 10_000
MAX_REASONABLE_EXIT = 1_000
BULK_THRESHOLD = 100
AUTHORIZATION_THRESHOLD = 500
EXIT_AUTHORIZATION_THRESHOLD = 100

# (upper bound inclusive, level)
IMPACT_LEVELS = (
    (5, ImpactLevel.LOW),
    (50, ImpactLevel.MEDIUM),
    (500, ImpactLevel.HIGH),
)


#
# Normalization
#
def default_reason(movement_type: Optional[MovementType]) -> str:
    match movement_type:
        case MovementType.ENTRY:
            return DEFAULT_ENTRY_REASON
        case MovementType.EXIT:
            return DEFAULT_EXIT_REASON
        case _:
            return DEFAULT_MOVEMENT_REASON


def normalize(request: MovementRequest) -> MovementRequest:
    if is_blank(request.reason):
        reason = default_reason(request.movement_type)
    else:
        reason = capitalize_first(request.reason)
    return request.model_copy(update={"reason": reason})


#
# Direction helpers
#
def is_entry(request: MovementRequest) -> bool:
    return request.movement_type is MovementType.ENTRY


def is_exit(request: MovementRequest) -> bool:
    return request.movement_type is MovementType.EXIT


def is_default_reason(request: MovementRequest) -> bool:
    if request.reason is None:
        return False
    return request.reason.strip().lower() in DEFAULT_REASONS


def has_custom_reason(request: MovementRequest) -> bool:
    return not is_blank(request.reason) and not is_default_reason(request)


#
# Rules
#
def is_reasonable_quantity(request: MovementRequest) -> bool:
    quantity = request.quantity
    if quantity is None or request.movement_type is None or quantity <= 0:
        return False

    match request.movement_type:
        case MovementType.ENTRY:
            # a very large entry is most likely a typo
            return quantity <= MAX_REASONABLE_ENTRY
        case MovementType.EXIT:
            # real stock check happens when the movement is applied
            return quantity <= MAX_REASONABLE_EXIT


def is_reason_coherent(request: MovementRequest) -> bool:
    """
    A reason is coherent with its direction when it says so explicitly,
    or when it at least says nothing pointing the other way.
    Missing reason or type is coherent: the default reason will be used.
    """
    if request.reason is None or request.movement_type is None:
        return True

    reason = request.reason.lower()
    match request.movement_type:
        case MovementType.ENTRY:
            return contains_any(reason, ENTRY_CONFIRMING) or not contains_any(reason, EXIT_INDICATORS)
        case MovementType.EXIT:
            return contains_any(reason, EXIT_CONFIRMING) or not contains_any(reason, ENTRY_INDICATORS)


def impact_level(request: MovementRequest) -> str:
    if request.quantity is None:
        return "No information"
    for upper, level in IMPACT_LEVELS:
        if request.quantity <= upper:
            return level.value
    return ImpactLevel.VERY_HIGH.value


def is_bulk_movement(request: MovementRequest) -> bool:
    return request.quantity is not None and request.quantity > BULK_THRESHOLD


def requires_authorization(request: MovementRequest) -> bool:
    # signalled to the caller, not enforced here
    if request.quantity is None:
        return False
    return request.quantity > AUTHORIZATION_THRESHOLD or (
        is_exit(request) and request.quantity > EXIT_AUTHORIZATION_THRESHOLD
    )


def reason_suggestions(movement_type: Optional[MovementType]) -> List[str]:
    match movement_type:
        case MovementType.ENTRY:
            return list(ENTRY_REASON_SUGGESTIONS)
        case MovementType.EXIT:
            return list(EXIT_REASON_SUGGESTIONS)
        case _:
            return []


def full_description(request: MovementRequest) -> str:
    if request.movement_type is None or request.quantity is None:
        return "Incomplete movement"
    action = "Entry of" if is_entry(request) else "Exit of"
    units = "unit" if request.quantity == 1 else "units"
    return f"{action} {request.quantity} {units}"


def first_inconsistency(request: MovementRequest) -> Optional[Rejected]:
    for field, value in (("productId", request.product_id), ("userId", request.user_id)):
        if value is None or value <= 0:
            return Rejected(
                kind=RejectionKind.FORMAT_VIOLATION,
                predicate="positive_reference",
                field=field,
                message=f"{field} must be a positive id",
            )
    if request.movement_type is None:
        return Rejected(
            kind=RejectionKind.FORMAT_VIOLATION,
            predicate="movement_type_present",
            field="movementType",
            message="Movement type is required",
        )
    if not is_reasonable_quantity(request):
        limit = MAX_REASONABLE_ENTRY if is_entry(request) else MAX_REASONABLE_EXIT
        return semantic_inconsistency(
            "is_reasonable_quantity",
            f"{request.movement_type.value} of {request.quantity} units exceeds {limit}",
            field="quantity",
        )
    if not is_reason_coherent(request):
        return semantic_inconsistency(
            "is_reason_coherent",
            f"Reason '{request.reason}' contradicts a {request.movement_type.value} movement",
            field="reason",
        )
    return None


def is_consistent(request: MovementRequest) -> bool:
    return first_inconsistency(request) is None


def assess(request: MovementRequest) -> MovementAssessment:
    return MovementAssessment(
        impact_level=impact_level(request),
        is_bulk=is_bulk_movement(request),
        requires_authorization=requires_authorization(request),
        is_reasonable_quantity=is_reasonable_quantity(request),
        is_reason_coherent=is_reason_coherent(request),
        description=full_description(request),
        suggestions=reason_suggestions(request.movement_type),
    )


class MovementEvaluator(RequestValidator[MovementRequest]):
    schema = MovementRequest
    entity = "movement"

    def normalize(self, request: MovementRequest) -> MovementRequest:
        return normalize(request)

    def check(self, request: MovementRequest) -> Optional[Rejected]:
        return first_inconsistency(request)

    def evaluate(self, raw: Union[Mapping[str, Any], MovementRequest]) -> MovementDecision:
        """Proposed -> Accepted | Rejected, with the classification attached."""
        parsed = self.parse(raw)
        if isinstance(parsed, Rejected):
            logger.info(
                "movement.evaluated",
                state=MovementState.REJECTED.value,
                predicate=parsed.predicate,
                field=parsed.field,
            )
            return MovementDecision(state=MovementState.REJECTED, rejection=parsed)

        canonical = self.normalize(parsed)
        assessment = assess(canonical)
        rejection = self.check(canonical)
        state = MovementState.ACCEPTED if rejection is None else MovementState.REJECTED

        logger.info(
            "movement.evaluated",
            state=state.value,
            request=canonical.log_summary(),
            impact=assessment.impact_level,
            requires_authorization=assessment.requires_authorization,
            predicate=rejection.predicate if rejection else None,
        )
        return MovementDecision(
            state=state,
            request=canonical,
            assessment=assessment,
            rejection=rejection,
        )
