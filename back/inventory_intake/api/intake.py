# inventory_intake/api/intake.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Body, Depends, Query

from inventory_intake.core.container import Container
from inventory_intake.core.exceptions import raise_for_rejection
from inventory_intake.schemas.movement import MovementType
from inventory_intake.schemas.result import Rejected, ValidationResult
from inventory_intake.services.base import RequestValidator
from inventory_intake.services.category import CategoryValidator
from inventory_intake.services.login import LoginValidator, RefreshTokenValidator
from inventory_intake.services.movement import MovementEvaluator, reason_suggestions
from inventory_intake.services.product import ProductValidator
from inventory_intake.services.role import RoleValidator
from inventory_intake.services.user import UserValidator

router = APIRouter(
    prefix="/api/intake",
    tags=["intake"],
)

RawBody = Dict[str, Any]


def _accepted_or_raise(result: ValidationResult, *, exclude: Optional[set] = None) -> dict:
    """
    Accepted -> {"status": "accepted", "record": {...camelCase...}}
    Rejected -> matching HTTP exception
    """
    if isinstance(result, Rejected):
        raise_for_rejection(result)
    return {
        "status": result.status,
        "record": result.record.model_dump(mode="json", by_alias=True, exclude=exclude),
    }


def _run(validator: RequestValidator, payload: RawBody, **kwargs) -> dict:
    return _accepted_or_raise(validator.validate(payload), **kwargs)


@router.post("/categories")
@inject
async def intake_category(
    payload: RawBody = Body(...),
    validator: CategoryValidator = Depends(Provide[Container.category_validator]),
):
    return _run(validator, payload)


@router.post("/products")
@inject
async def intake_product(
    payload: RawBody = Body(...),
    validator: ProductValidator = Depends(Provide[Container.product_validator]),
):
    return _run(validator, payload)


@router.post("/roles")
@inject
async def intake_role(
    payload: RawBody = Body(...),
    validator: RoleValidator = Depends(Provide[Container.role_validator]),
):
    return _run(validator, payload)


@router.post("/users")
@inject
async def intake_user(
    payload: RawBody = Body(...),
    validator: UserValidator = Depends(Provide[Container.user_validator]),
):
    return _run(validator, payload)


@router.post("/login")
@inject
async def intake_login(
    payload: RawBody = Body(...),
    validator: LoginValidator = Depends(Provide[Container.login_validator]),
):
    # the password never goes back out
    return _run(validator, payload, exclude={"password"})


@router.post("/refresh")
@inject
async def intake_refresh(
    payload: RawBody = Body(...),
    validator: RefreshTokenValidator = Depends(Provide[Container.refresh_validator]),
):
    return _run(validator, payload, exclude={"refresh_token"})


@router.post("/movements")
@inject
async def intake_movement(
    payload: RawBody = Body(...),
    evaluator: MovementEvaluator = Depends(Provide[Container.movement_evaluator]),
):
    """
    Evaluates a proposed movement.

    Accepted:
    {
      "status": "accepted",
      "record": {...},
      "assessment": {"impact_level": "High", "requires_authorization": true, ...}
    }
    """
    decision = evaluator.evaluate(payload)
    if decision.rejection is not None:
        raise_for_rejection(decision.rejection)

    return {
        "status": decision.state.value,
        "record": decision.request.model_dump(mode="json", by_alias=True),
        "assessment": decision.assessment.model_dump(mode="json"),
    }


@router.get("/movements/suggestions", response_model=List[str])
async def movement_reason_suggestions(
    movement_type: Optional[MovementType] = Query(None, alias="type"),
):
    return reason_suggestions(movement_type)
