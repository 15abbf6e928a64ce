"""
Interactive console front-end for the employee API.

    python -m app.ui.console [--api-url http://localhost:8000/api/employees]
"""
import argparse
from typing import Callable

from app.client.employee_service import EmployeeService
from app.core.config import settings
from app.core.logging import setup_logging
from app.ui.employee_list import FORM_FIELDS, REQUIRED_FIELDS, EmployeeListView
from app.ui.validation import validate_email, validate_name, validate_phone

MENU = """
[Employee Management]
1. List employees
2. Search
3. Add employee
4. Edit employee
5. Delete employee
0. Quit"""


def confirm_with(input_fn: Callable[[str], str]) -> Callable[[str], bool]:
    def confirm(prompt: str) -> bool:
        return input_fn(f"{prompt} [y/N]: ").strip().lower() in ("y", "yes")
    return confirm


def field_warning(field: str, value: str) -> str | None:
    if field == "name" and value and not validate_name(value):
        return "Name may only contain letters, spaces, hyphens and apostrophes."
    if field == "email" and value and not validate_email(value):
        return "Email address does not look valid."
    if field == "phone" and not validate_phone(value):
        return "Phone number format not recognised."
    return None


def fill_form(view: EmployeeListView, input_fn: Callable[[str], str]) -> None:
    for field in FORM_FIELDS:
        current = view.current_employee.get(field) or ""
        label = field.capitalize() + (" *" if field in REQUIRED_FIELDS else "")
        if current:
            label += f" [{current}]"
        while True:
            value = input_fn(f"{label}: ").strip() or current
            warning = field_warning(field, value)
            if warning is None:
                break
            print(warning)
        view.change_field(field, value)


def pick_employee(view: EmployeeListView, input_fn: Callable[[str], str]) -> dict | None:
    rows = view.filtered_employees
    choice = input_fn("Row #: ").strip()
    if not choice.isdecimal() or not 1 <= int(choice) <= len(rows):
        print("No such row.")
        return None
    return rows[int(choice) - 1]


def run(view: EmployeeListView, input_fn: Callable[[str], str] = input) -> None:
    view.mount()
    try:
        while True:
            print(view.render())
            print(MENU)
            choice = input_fn("Choice: ").strip()

            if choice == "1":
                view.set_search("")
            elif choice == "2":
                view.set_search(input_fn("Search employees...: ").strip())
            elif choice == "3":
                view.open_add()
                fill_form(view, input_fn)
                view.submit()
            elif choice == "4":
                employee = pick_employee(view, input_fn)
                if employee:
                    view.open_edit(employee)
                    fill_form(view, input_fn)
                    view.submit()
            elif choice == "5":
                employee = pick_employee(view, input_fn)
                if employee:
                    view.delete(employee["_id"])
            elif choice == "0":
                break
            else:
                print("Invalid choice.")
    finally:
        view.unmount()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Employee Management console")
    parser.add_argument("--api-url", default=settings.API_BASE_URL)
    args = parser.parse_args(argv)

    setup_logging()
    with EmployeeService(base_url=args.api_url) as service:
        view = EmployeeListView(service, confirm=confirm_with(input))
        run(view)


if __name__ == "__main__":
    main()
