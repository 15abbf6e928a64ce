from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMPLOYEE_FIELDS = ("name", "email", "position", "phone", "department")


def _falsy_as_missing(value: Any) -> Any:
    # 0 / false would otherwise be coerced to a non-empty string
    if not isinstance(value, str) and not value:
        return None
    return value


class EmployeeCreate(BaseModel):
    """
    Body of POST /api/employees.

    Required fields are optional here so the handler can answer a missing
    one with its own 400 message instead of a schema error.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str | None = None
    email: str | None = None
    position: str | None = None
    phone: str | None = None
    department: str | None = None

    @field_validator(*EMPLOYEE_FIELDS, mode="before")
    @classmethod
    def falsy_as_missing(cls, value: Any) -> Any:
        return _falsy_as_missing(value)


class EmployeeUpdate(BaseModel):
    """Body of PATCH /api/employees/{id}; only truthy fields are applied."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str | None = None
    email: str | None = None
    position: str | None = None
    phone: str | None = None
    department: str | None = None

    @field_validator(*EMPLOYEE_FIELDS, mode="before")
    @classmethod
    def falsy_as_missing(cls, value: Any) -> Any:
        return _falsy_as_missing(value)


class EmployeeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    email: str
    position: str
    phone: str
    department: str
    join_date: datetime = Field(alias="joinDate")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class MessageOut(BaseModel):
    message: str
