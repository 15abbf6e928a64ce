from typing import Any

import httpx

from app.core.config import settings


class EmployeeService:
    """
    Thin HTTP proxy over /api/employees.

    Each call issues exactly one request and returns the httpx.Response.
    Non-2xx responses raise httpx.HTTPStatusError (the response, and its
    {"message": ...} body, stay reachable on the exception); transport
    failures propagate as httpx.RequestError. Nothing is retried.

    Pass ``client`` to reuse an existing httpx.Client, e.g. FastAPI's
    TestClient in tests.
    """

    def __init__(self, base_url: str | None = None, client: httpx.Client | None = None):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self._owns_client = client is None
        self.client = client if client is not None else httpx.Client()

    def _url(self, employee_id: str | None = None) -> str:
        if employee_id is None:
            return self.base_url
        return f"{self.base_url}/{employee_id}"

    def _send(self, method: str, url: str, payload: dict[str, Any] | None = None) -> httpx.Response:
        response = self.client.request(method, url, json=payload)
        response.raise_for_status()
        return response

    def get_all_employees(self) -> httpx.Response:
        return self._send("GET", self._url())

    def get_employee(self, employee_id: str) -> httpx.Response:
        return self._send("GET", self._url(employee_id))

    def create_employee(self, employee: dict[str, Any]) -> httpx.Response:
        return self._send("POST", self._url(), employee)

    def update_employee(self, employee_id: str, employee: dict[str, Any]) -> httpx.Response:
        return self._send("PATCH", self._url(employee_id), employee)

    def delete_employee(self, employee_id: str) -> httpx.Response:
        return self._send("DELETE", self._url(employee_id))

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "EmployeeService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
