# inventory_intake/services/base.py
from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, Type, TypeVar, Union

import structlog
from pydantic import ValidationError

from inventory_intake.schemas.base import RequestModel
from inventory_intake.schemas.result import (
    Accepted,
    Rejected,
    RejectionKind,
    ValidationResult,
)

logger = structlog.get_logger(__name__)

RequestT = TypeVar("RequestT", bound=RequestModel)


def format_violation(error: ValidationError) -> Rejected:
    """First pydantic error -> FormatViolation rejection."""
    first = error.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ())) or None
    return Rejected(
        kind=RejectionKind.FORMAT_VIOLATION,
        predicate=first.get("type", "schema"),
        field=loc,
        message=first.get("msg", "Invalid value"),
    )


def semantic_inconsistency(predicate: str, message: str, field: Optional[str] = None) -> Rejected:
    return Rejected(
        kind=RejectionKind.SEMANTIC_INCONSISTENCY,
        predicate=predicate,
        field=field,
        message=message,
    )


class RequestValidator(Generic[RequestT]):
    """
    Stateless parse -> normalize -> check pipeline for one request kind.

    Subclasses set `schema` and `entity` and implement `normalize` and `check`.
    `validate` never raises on client data: schema errors and failed
    predicates both come back as `Rejected`.
    """

    schema: Type[RequestT]
    entity: str = "request"

    def parse(self, raw: Union[Mapping[str, Any], RequestT]) -> Union[RequestT, Rejected]:
        if isinstance(raw, self.schema):
            return raw
        try:
            return self.schema.model_validate(raw)
        except ValidationError as e:
            return format_violation(e)

    def normalize(self, request: RequestT) -> RequestT:
        raise NotImplementedError

    def check(self, request: RequestT) -> Optional[Rejected]:
        """Return the first failed rule for an already normalized request."""
        return None

    def validate(self, raw: Union[Mapping[str, Any], RequestT]) -> ValidationResult[RequestT]:
        parsed = self.parse(raw)
        if isinstance(parsed, Rejected):
            self._log_rejected(parsed)
            return parsed

        canonical = self.normalize(parsed)
        rejection = self.check(canonical)
        if rejection is not None:
            self._log_rejected(rejection, summary=canonical.log_summary())
            return rejection

        logger.info(f"{self.entity}.accepted", request=canonical.log_summary())
        return Accepted[self.schema](record=canonical)

    def _log_rejected(self, rejection: Rejected, summary: Optional[str] = None) -> None:
        logger.info(
            f"{self.entity}.rejected",
            kind=rejection.kind.value,
            predicate=rejection.predicate,
            field=rejection.field,
            request=summary,
        )
