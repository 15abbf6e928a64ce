from app.client.employee_service import EmployeeService

__all__ = ["EmployeeService"]
