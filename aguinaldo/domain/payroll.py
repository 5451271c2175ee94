"""Payroll input models (Pydantic v2).

The payroll file is decoded strictly: required fields must be present, strings
must be JSON strings and earnings must be JSON numbers. Optional fields may be
absent or null. Unknown keys are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from aguinaldo.domain.models import EmployeeId
from aguinaldo.errors import UnableToDecodeError

_MODEL_CONFIG = ConfigDict(strict=True, frozen=True, populate_by_name=True)


class Company(BaseModel):
    """Employer data printed in the receipt header."""

    model_config = _MODEL_CONFIG

    name: str = Field(..., description="Razón social.")
    legal_id: str = Field(..., alias="legalId", description="Cédula jurídica.")
    address: str = Field(..., description="Dirección física.")
    phone: str | None = Field(default=None, description="Teléfono de contacto.")
    email: str | None = Field(default=None, description="Correo de contacto.")


class Period(BaseModel):
    """Calculation period. Dates are display text and are never parsed."""

    model_config = _MODEL_CONFIG

    start: str
    end: str


class Employee(BaseModel):
    """One employee and their monthly earnings in chronological order."""

    model_config = _MODEL_CONFIG

    id: str
    name: str
    position: str
    monthly_earnings: list[float] = Field(
        ...,
        alias="monthlyEarnings",
        description="Ingresos por mes; el orden determina la etiqueta 'Mes NN'.",
    )
    notes: str | None = None


class PayrollInput(BaseModel):
    """Aggregate root of a payroll file."""

    model_config = _MODEL_CONFIG

    company: Company
    period: Period
    employees: list[Employee]


def describe_validation_error(error: ValidationError) -> str:
    """Collapse a pydantic ValidationError into a single line.

    Args:
        error: Error raised by pydantic.

    Returns:
        Diagnostic of the form "loc: message; loc: message".
    """
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ()))
        message = detail.get("msg", "error")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


def decode_payroll(data: bytes | str) -> PayrollInput:
    """Decode a payroll JSON document.

    Args:
        data: Raw JSON text or bytes.

    Returns:
        Decoded PayrollInput.

    Raises:
        UnableToDecodeError: If the document is malformed or incomplete.
    """
    try:
        return PayrollInput.model_validate_json(data)
    except ValidationError as e:
        raise UnableToDecodeError(describe_validation_error(e)) from e


def find_employee(payroll: PayrollInput, employee_id: EmployeeId) -> Employee | None:
    """Find the first employee with the given id.

    Args:
        payroll: Decoded payroll.
        employee_id: Id to look for.

    Returns:
        Matching Employee or None if not found.
    """
    for employee in payroll.employees:
        if employee.id == employee_id:
            return employee
    return None
