import threading
from typing import Any, Callable

import httpx

from app.client.employee_service import EmployeeService
from app.core.logging import get_logger
from app.ui.alerts import Alert, Cancellable, Scheduler, TimerScheduler

logger = get_logger(__name__)

FORM_FIELDS = ("name", "email", "position", "phone", "department")
REQUIRED_FIELDS = ("name", "email", "position")
SEARCH_FIELDS = ("name", "position", "department")

ALERT_TIMEOUT_SECONDS = 3.0
DELETE_PROMPT = "Are you sure you want to delete this employee?"

TABLE_COLUMNS = (
    ("Name", "name", 22),
    ("Email", "email", 28),
    ("Position", "position", 20),
    ("Phone", "phone", 16),
    ("Department", "department", 16),
)


def empty_employee() -> dict[str, str]:
    return {field: "" for field in FORM_FIELDS}


def error_message(exc: httpx.HTTPError) -> str:
    """Server-provided {"message": ...} when there is one, else the transport error text."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    return str(exc)


class EmployeeListView:
    """
    State and transitions of the employee table with its add/edit form.

    The view never patches ``employees`` locally: after every successful
    mutation it refetches the whole collection. Alerts are dismissed after
    ALERT_TIMEOUT_SECONDS through ``scheduler``; ``unmount()`` cancels any
    dismissal still pending.
    """

    def __init__(
        self,
        service: EmployeeService,
        confirm: Callable[[str], bool],
        scheduler: Scheduler | None = None,
    ):
        self.service = service
        self.confirm = confirm
        self.scheduler = scheduler or TimerScheduler()

        self.employees: list[dict[str, Any]] = []
        self.current_employee: dict[str, Any] = empty_employee()
        self.is_editing = False
        self.show_form = False
        self.search_term = ""
        self.alert: Alert | None = None

        self._pending_dismiss: Cancellable | None = None
        # Dismissals run on the scheduler thread
        self._alert_lock = threading.RLock()

    # lifecycle

    def mount(self) -> None:
        self.fetch_employees()

    def unmount(self) -> None:
        self._cancel_dismiss()

    def fetch_employees(self) -> None:
        try:
            response = self.service.get_all_employees()
        except httpx.HTTPError as exc:
            logger.error("employee_fetch_failed", error=str(exc))
            self.show_alert("Error fetching employee data", "danger")
            return
        self.employees = response.json()

    # form

    def open_add(self) -> None:
        self.current_employee = empty_employee()
        self.is_editing = False
        self.show_form = True

    def open_edit(self, employee: dict[str, Any]) -> None:
        self.current_employee = dict(employee)
        self.is_editing = True
        self.show_form = True

    def change_field(self, name: str, value: str) -> None:
        self.current_employee[name] = value

    def close_form(self) -> None:
        self.show_form = False
        self.current_employee = empty_employee()
        self.is_editing = False

    def submit(self) -> bool:
        draft = self.current_employee
        if any(not draft.get(field) for field in REQUIRED_FIELDS):
            self.show_alert("Please fill in all required fields", "danger")
            return False

        if self.is_editing:
            try:
                self.service.update_employee(draft["_id"], draft)
            except httpx.HTTPError as exc:
                logger.error("employee_update_failed", employee_id=draft.get("_id"), error=str(exc))
                self.show_alert(f"Error updating employee: {error_message(exc)}", "danger")
                return False
            success = "Employee updated successfully"
        else:
            try:
                self.service.create_employee(draft)
            except httpx.HTTPError as exc:
                logger.error("employee_create_failed", error=str(exc))
                self.show_alert(f"Error adding employee: {error_message(exc)}", "danger")
                return False
            success = "Employee added successfully"

        self.close_form()
        self.show_alert(success, "success")
        # a failed refetch replaces the success alert
        self.fetch_employees()
        return True

    def delete(self, employee_id: str) -> bool:
        if not self.confirm(DELETE_PROMPT):
            return False
        try:
            self.service.delete_employee(employee_id)
        except httpx.HTTPError as exc:
            logger.error("employee_delete_failed", employee_id=employee_id, error=str(exc))
            self.show_alert("Error deleting employee", "danger")
            return False
        self.show_alert("Employee deleted successfully", "success")
        self.fetch_employees()
        return True

    # search

    def set_search(self, term: str) -> None:
        self.search_term = term

    @property
    def filtered_employees(self) -> list[dict[str, Any]]:
        term = self.search_term.lower()
        return [
            e for e in self.employees
            if any(term in (e.get(field) or "").lower() for field in SEARCH_FIELDS)
        ]

    # alerts

    def show_alert(self, message: str, variant: str = "success") -> None:
        alert = Alert(message=message, variant=variant)
        with self._alert_lock:
            self._cancel_dismiss()
            self.alert = alert
            self._pending_dismiss = self.scheduler.schedule(
                ALERT_TIMEOUT_SECONDS, lambda: self._dismiss(alert)
            )

    def dismiss_alert(self) -> None:
        with self._alert_lock:
            self._cancel_dismiss()
            self.alert = None

    def _dismiss(self, alert: Alert) -> None:
        with self._alert_lock:
            # A newer alert may have replaced this one.
            if self.alert is alert:
                self.alert = None
                self._pending_dismiss = None

    def _cancel_dismiss(self) -> None:
        with self._alert_lock:
            if self._pending_dismiss is not None:
                self._pending_dismiss.cancel()
                self._pending_dismiss = None

    # rendering

    def render(self) -> str:
        lines = []
        if self.alert:
            lines.append(f"[{self.alert.variant.upper()}] {self.alert.message}")
        lines.append("Employee Management")
        if self.search_term:
            lines.append(f"Search: {self.search_term}")

        header = "  #  " + " ".join(title.ljust(width) for title, _, width in TABLE_COLUMNS)
        lines.append(header)
        lines.append("-" * len(header))

        rows = self.filtered_employees
        if not rows:
            lines.append("No employees found")
        for index, employee in enumerate(rows, start=1):
            cells = " ".join(
                str(employee.get(key) or "")[:width].ljust(width) for _, key, width in TABLE_COLUMNS
            )
            lines.append(f"{index:>3}  {cells}")
        return "\n".join(lines)
