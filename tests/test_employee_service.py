import httpx
import pytest

from app.client.employee_service import EmployeeService

BASE_URL = "http://testserver/api/employees"

JOHN = {"name": "John Doe", "email": "john@example.com", "position": "Developer"}


@pytest.fixture()
def service(client):
    return EmployeeService(base_url=BASE_URL, client=client)


def test_crud_round_trip_through_api(service):
    created = service.create_employee(JOHN)
    assert created.status_code == 201
    employee_id = created.json()["_id"]

    assert [e["_id"] for e in service.get_all_employees().json()] == [employee_id]
    assert service.get_employee(employee_id).json()["email"] == "john@example.com"

    updated = service.update_employee(employee_id, {"position": "Lead"})
    assert updated.json()["position"] == "Lead"

    deleted = service.delete_employee(employee_id)
    assert deleted.json() == {"message": "Employee deleted successfully"}


def test_http_errors_propagate_with_message(service):
    service.create_employee(JOHN)
    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        service.create_employee(JOHN)
    assert exc_info.value.response.status_code == 400
    assert exc_info.value.response.json()["message"] == (
        "Email already exists. Please use a different email address."
    )


def test_not_found_propagates(service):
    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        service.get_employee("00000000-0000-0000-0000-000000000000")
    assert exc_info.value.response.status_code == 404


def test_one_request_per_call_and_paths():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        return httpx.Response(200, json={})

    client = httpx.Client(transport=httpx.MockTransport(handler))
    service = EmployeeService(base_url="http://api.local/api/employees/", client=client)

    service.get_all_employees()
    service.get_employee("abc")
    service.create_employee(JOHN)
    service.update_employee("abc", {"name": "X"})
    service.delete_employee("abc")

    assert seen == [
        ("GET", "/api/employees"),
        ("GET", "/api/employees/abc"),
        ("POST", "/api/employees"),
        ("PATCH", "/api/employees/abc"),
        ("DELETE", "/api/employees/abc"),
    ]


def test_transport_errors_are_not_wrapped_or_retried():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    service = EmployeeService(base_url="http://api.local/api/employees", client=client)

    with pytest.raises(httpx.ConnectError):
        service.get_all_employees()
    assert len(calls) == 1


def test_close_leaves_injected_client_open():
    client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[])))
    with EmployeeService(base_url="http://api.local/api/employees", client=client) as service:
        service.get_all_employees()
    assert not client.is_closed
    client.close()
