import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateEmail, EmployeeNotFound, StoreError
from app.core.logging import get_logger
from app.models.employee import Employee

logger = get_logger(__name__)

# Fields a PATCH may overwrite; join_date and the timestamps are not editable.
UPDATABLE_FIELDS = ("name", "email", "position", "phone", "department")


def _parse_id(employee_id) -> uuid.UUID:
    if isinstance(employee_id, uuid.UUID):
        return employee_id
    try:
        return uuid.UUID(str(employee_id))
    except ValueError:
        raise StoreError(f'Cast to UUID failed for value "{employee_id}" at path "_id"')


def _is_duplicate_email(exc: IntegrityError) -> bool:
    # sqlite: "UNIQUE constraint failed: employees.email"
    # postgres: 'duplicate key value violates unique constraint "ix_employees_email"'
    text = str(exc.orig).lower()
    return ("unique" in text or "duplicate" in text) and "email" in text


class EmployeeStore:
    """
    Persistent collection of employee records.

    Every write commits immediately; driver failures roll the session back and
    surface as EmployeeStoreError subclasses.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Employee]:
        try:
            return self.db.query(Employee).order_by(Employee.created_at.asc()).all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(str(exc)) from exc

    def get_by_id(self, employee_id) -> Employee:
        pk = _parse_id(employee_id)
        try:
            employee = self.db.get(Employee, pk)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(str(exc)) from exc
        if employee is None:
            raise EmployeeNotFound(employee_id)
        return employee

    def create(self, fields: dict[str, Any]) -> Employee:
        employee = Employee(
            name=fields["name"],
            email=fields["email"],
            position=fields["position"],
            phone=fields.get("phone") or "",
            department=fields.get("department") or "",
        )
        self.db.add(employee)
        self._commit(employee)
        logger.info("employee_created", employee_id=str(employee.id), email=employee.email)
        return employee

    def update(self, employee_id, partial: dict[str, Any]) -> Employee:
        employee = self.get_by_id(employee_id)

        changed = []
        for field in UPDATABLE_FIELDS:
            value = partial.get(field)
            if value:
                setattr(employee, field, value)
                changed.append(field)

        self._commit(employee)
        logger.info("employee_updated", employee_id=str(employee.id), fields=changed)
        return employee

    def delete(self, employee_id) -> None:
        employee = self.get_by_id(employee_id)
        try:
            self.db.delete(employee)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(str(exc)) from exc
        logger.info("employee_deleted", employee_id=str(employee_id))

    def _commit(self, employee: Employee) -> None:
        email = employee.email
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if _is_duplicate_email(exc):
                raise DuplicateEmail(email) from exc
            raise StoreError(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(str(exc)) from exc
        self.db.refresh(employee)
