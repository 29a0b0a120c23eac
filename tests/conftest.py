"""
Общие фикстуры тестов: пользователи и фабрика заявок.
"""

import pytest

from fieldops.models.request import ServiceRequest, ServiceStatus
from fieldops.models.user import User


@pytest.fixture
def admin_user() -> User:
    return User(name="Admin", email="admin@example.com", role="admin")


@pytest.fixture
def staff_user() -> User:
    return User(name="Asha", email="asha@example.com", role="staff")


@pytest.fixture
def guest_user() -> User:
    return User(name="Guest", role="staff", is_guest=True)


@pytest.fixture
def make_request():
    """Фабрика заявок с разумными значениями по умолчанию."""

    def _make(**overrides) -> ServiceRequest:
        data = {
            "customer_name": "Rajesh Gupta",
            "location": "Sector 4, Industrial Area",
            "date": "2024-01-10",
            "type": "New Borewell Drilling",
            "status": ServiceStatus.PENDING,
        }
        data.update(overrides)
        return ServiceRequest(**data)

    return _make
