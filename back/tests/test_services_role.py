import pytest

from inventory_intake.schemas.result import Accepted, Rejected, RejectionKind
from inventory_intake.schemas.role import RoleRequest
from inventory_intake.services import role
from inventory_intake.services.role import RoleValidator


def test_normalize_trims_without_case_change():
    req = role.normalize(RoleRequest(name="  Jefe de almacén ", description="  "))
    assert req.name == "Jefe de almacén"
    assert req.description is None
    assert role.normalize(req) == req


@pytest.mark.parametrize("name,expected", [
    ("ADMIN", True),
    ("Supervisor_Turno-2", True),
    ("Almacén Norte", True),
    ("admin.root", False),
    ("rol&más", False),
])
def test_is_valid_name(name, expected):
    assert role.is_valid_name(RoleRequest(name=name)) is expected


def test_has_description():
    assert role.has_description(RoleRequest(name="Operador", description="Mueve stock"))
    assert not role.has_description(RoleRequest(name="Operador"))


def test_validator():
    validator = RoleValidator()

    accepted = validator.validate({"name": " Auditor ", "description": " revisa movimientos "})
    assert isinstance(accepted, Accepted)
    assert accepted.record.name == "Auditor"
    assert accepted.record.description == "revisa movimientos"

    rejected = validator.validate({"name": "Auditor!"})
    assert isinstance(rejected, Rejected)
    assert rejected.kind is RejectionKind.FORMAT_VIOLATION
    assert rejected.predicate == "is_valid_name"

    too_long = validator.validate({"name": "R" * 51})
    assert isinstance(too_long, Rejected)
    assert too_long.field == "name"
