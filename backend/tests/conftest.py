"""
Pytest fixtures for the ERS backend.

Each test gets its own in-memory SQLite database through a freshly built
container, so nothing leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from ers.container import build_container
from ers.core.config import Settings
from ers.domain.entities import Reimbursement, ReimbursementType, Role, User
from ers.main import create_app


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        app_env="test",
        database_url="sqlite://",
        jwt_secret_key="test-secret",
        log_level="WARNING",
    )


@pytest.fixture
def container(settings):
    c = build_container(settings)
    c.create_tables()
    yield c
    c.dispose()


@pytest.fixture
def client(container):
    app = create_app(container=container)
    with TestClient(app) as c:
        yield c


def make_user(container, username, role=Role.EMPLOYEE, password="secret123"):
    return container.user_service.add_new_user(
        User(
            username=username,
            password=password,
            first_name=username.capitalize(),
            last_name="Tester",
            email=f"{username}@example.com",
            role=role.value,
        )
    )


def make_reimbursement(container, author_id, amount=42.5, type=ReimbursementType.TRAVEL):
    return container.reimbursement_service.add_new_reimbursement(
        Reimbursement(
            amount=amount,
            description="Taxi to client site",
            author=author_id,
            type=int(type),
        )
    )


@pytest.fixture
def admin(container):
    return make_user(container, "admin", Role.ADMIN)


@pytest.fixture
def manager(container):
    return make_user(container, "manager", Role.MANAGER)


@pytest.fixture
def employee(container):
    return make_user(container, "employee", Role.EMPLOYEE)


def login(client, username, password="secret123"):
    """Authenticate and return bearer headers for ``username``."""
    response = client.post("/auth", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    # drop the cookie so each request is authorised only by the headers it sends
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
