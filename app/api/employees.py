from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.errors import DuplicateEmail, EmployeeNotFound, EmployeeStoreError
from app.core.logging import get_logger
from app.db.session import get_db
from app.models.employee import Employee
from app.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate, MessageOut
from app.services.employee_store import EmployeeStore

router = APIRouter(prefix="/api/employees", tags=["employees"])

logger = get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields. Name, email, and position are required."


def get_store(db: Session = Depends(get_db)) -> EmployeeStore:
    return EmployeeStore(db)


def employee_to_out(e: Employee) -> EmployeeOut:
    return EmployeeOut(
        id=str(e.id),
        name=e.name,
        email=e.email,
        position=e.position,
        phone=e.phone,
        department=e.department,
        join_date=e.join_date,
        created_at=e.created_at,
        updated_at=e.updated_at,
    )


def _server_error(exc: EmployeeStoreError) -> HTTPException:
    # The raw driver message goes back to the caller unchanged.
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.message)


@router.get("", response_model=list[EmployeeOut])
def list_employees(store: EmployeeStore = Depends(get_store)):
    """List every employee in insertion order."""
    try:
        employees = store.list_all()
    except EmployeeStoreError as exc:
        raise _server_error(exc)
    return [employee_to_out(e) for e in employees]


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: str, store: EmployeeStore = Depends(get_store)):
    """
    Get one employee.

    A malformed id is a store failure (500), not a 404.
    """
    try:
        employee = store.get_by_id(employee_id)
    except EmployeeNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.message)
    except EmployeeStoreError as exc:
        raise _server_error(exc)
    return employee_to_out(employee)


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: EmployeeCreate | None = Body(default=None),
    store: EmployeeStore = Depends(get_store),
):
    payload = payload or EmployeeCreate()
    logger.info("employee_create_requested", email=payload.email)

    if not payload.name or not payload.email or not payload.position:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS_MESSAGE)

    try:
        employee = store.create(payload.model_dump())
    except DuplicateEmail as exc:
        logger.warning("employee_create_duplicate_email", email=payload.email)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    except EmployeeStoreError as exc:
        logger.error("employee_create_failed", error=exc.message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    return employee_to_out(employee)


@router.patch("/{employee_id}", response_model=EmployeeOut)
def update_employee(
    employee_id: str,
    payload: EmployeeUpdate | None = Body(default=None),
    store: EmployeeStore = Depends(get_store),
):
    """
    Partial update: only fields present with a non-empty value are written.
    """
    payload = payload or EmployeeUpdate()
    try:
        employee = store.update(employee_id, payload.model_dump())
    except EmployeeNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.message)
    except EmployeeStoreError as exc:
        logger.error("employee_update_failed", employee_id=employee_id, error=exc.message)
        raise _server_error(exc)
    return employee_to_out(employee)


@router.delete("/{employee_id}", response_model=MessageOut)
def delete_employee(employee_id: str, store: EmployeeStore = Depends(get_store)):
    try:
        store.delete(employee_id)
    except EmployeeNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.message)
    except EmployeeStoreError as exc:
        raise _server_error(exc)
    return MessageOut(message="Employee deleted successfully")
