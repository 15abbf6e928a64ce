class EmployeeStoreError(Exception):
    """Base class for failures reported by the employee store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmployeeNotFound(EmployeeStoreError):
    def __init__(self, employee_id):
        super().__init__("Employee not found")
        self.employee_id = employee_id


class DuplicateEmail(EmployeeStoreError):
    """Unique index on email rejected the write."""

    def __init__(self, email: str | None = None):
        super().__init__("Email already exists. Please use a different email address.")
        self.email = email


class StoreError(EmployeeStoreError):
    """Any other driver/database failure, including malformed identifiers."""
