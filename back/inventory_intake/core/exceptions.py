# inventory_intake/core/exceptions.py
from typing import Dict, NoReturn, Type

from fastapi import HTTPException, status

from inventory_intake.schemas.result import Rejected, RejectionKind

UNPROCESSABLE = 422


class IntakeRejectedException(HTTPException):
    """Base for a request that did not make it through intake."""
    def __init__(self, rejection: Rejected, status_code: int = UNPROCESSABLE):
        super().__init__(
            status_code=status_code,
            detail=rejection.model_dump(mode="json", exclude={"status"}),
        )
        self.rejection = rejection


class FormatViolationException(IntakeRejectedException):
    pass


class SemanticInconsistencyException(IntakeRejectedException):
    pass


class ReferenceUnresolvedException(IntakeRejectedException):
    def __init__(self, rejection: Rejected):
        super().__init__(rejection, status_code=status.HTTP_404_NOT_FOUND)


_BY_KIND: Dict[RejectionKind, Type[IntakeRejectedException]] = {
    RejectionKind.FORMAT_VIOLATION: FormatViolationException,
    RejectionKind.SEMANTIC_INCONSISTENCY: SemanticInconsistencyException,
    RejectionKind.REFERENCE_UNRESOLVED: ReferenceUnresolvedException,
}


def raise_for_rejection(rejection: Rejected) -> NoReturn:
    raise _BY_KIND[rejection.kind](rejection)
