"""
Тесты для фильтрации заявок.
"""

import datetime

import pytest

from fieldops.models.filters import FilterCriteria
from fieldops.models.request import ServiceStatus
from fieldops.services.filter_engine import filter_requests


@pytest.fixture
def requests(make_request):
    return [
        make_request(
            id="a",
            customer_name="Rajesh Gupta",
            location="Sector 4, Industrial Area",
            date="2024-01-05",
            status=ServiceStatus.PENDING,
            vehicle="Rig KA-01 (Drilling)",
            created_by="Ravi",
        ),
        make_request(
            id="b",
            customer_name="Amit Farmhouse",
            location="Village Raipur",
            date="2024-01-20",
            status=ServiceStatus.IN_PROGRESS,
            vehicle="Truck MH-12 (Support)",
            last_edited_by="Ravi",
        ),
        make_request(
            id="c",
            customer_name="City Park Management",
            location="Central Park Zone A",
            date="2024-02-01",
            status=ServiceStatus.COMPLETED,
            vehicle="Rig KA-01 (Drilling)",
            created_by="Sam",
            last_edited_by="Ravi",
        ),
        make_request(
            id="d",
            customer_name="Old Mill",
            location="Raipur Road",
            date="2024-02-15",
            status=ServiceStatus.CANCELLED,
        ),
    ]


def ids(result):
    return [request.id for request in result]


def test_default_criteria_is_identity(requests):
    """Тест: Фильтр по умолчанию пропускает все заявки без изменений."""
    assert filter_requests(requests, FilterCriteria()) == requests


def test_empty_input():
    assert filter_requests([], FilterCriteria(search_term="x")) == []


@pytest.mark.parametrize(
    "term, expected",
    [
        ("amit", ["b"]),
        ("RAIPUR", ["b", "d"]),
        ("park", ["c"]),
        ("nowhere", []),
    ],
)
def test_search_matches_customer_or_location(requests, term, expected):
    """Тест: Поиск без учета регистра по имени клиента или адресу."""
    assert ids(filter_requests(requests, FilterCriteria(search_term=term))) == expected


def test_status_filter(requests):
    criteria = FilterCriteria(status_filter=ServiceStatus.COMPLETED.value)

    assert ids(filter_requests(requests, criteria)) == ["c"]


def test_active_status_filter(requests):
    """Тест: "Active" = Pending + In Progress."""
    assert ids(filter_requests(requests, FilterCriteria(status_filter="Active"))) == ["a", "b"]


def test_vehicle_filter_exact_match(requests):
    criteria = FilterCriteria(vehicle_filter="Rig KA-01 (Drilling)")

    assert ids(filter_requests(requests, criteria)) == ["a", "c"]


def test_vehicle_filter_unknown_name_is_empty(requests):
    """Тест: Несуществующее имя техники дает пустой результат, а не ошибку."""
    assert filter_requests(requests, FilterCriteria(vehicle_filter="Rig KA-99")) == []


def test_employee_filter_with_last_editor_fallback(requests):
    """
    Тест: Заявка автора включается; заявка без автора включается по
    последнему редактору; заявка другого автора исключается.
    """
    result = filter_requests(requests, FilterCriteria(employee_filter="Ravi"))

    assert ids(result) == ["a", "b"]


def test_date_range_is_inclusive(requests):
    criteria = FilterCriteria(
        start_date=datetime.date(2024, 1, 5), end_date=datetime.date(2024, 2, 1)
    )

    assert ids(filter_requests(requests, criteria)) == ["a", "b", "c"]


def test_open_ended_date_bounds(requests):
    assert ids(filter_requests(requests, FilterCriteria(start_date="2024-02-01"))) == ["c", "d"]
    assert ids(filter_requests(requests, FilterCriteria(end_date="2024-01-05"))) == ["a"]


def test_contradictory_bounds_give_empty_result(requests):
    """Тест: Начало периода позже конца: пустой результат без исключения."""
    criteria = FilterCriteria(start_date="2024-03-01", end_date="2024-01-01")

    assert filter_requests(requests, criteria) == []


def test_predicates_are_combined(requests):
    criteria = FilterCriteria(
        search_term="park",
        vehicle_filter="Rig KA-01 (Drilling)",
        employee_filter="Sam",
        status_filter="Completed",
    )

    assert ids(filter_requests(requests, criteria)) == ["c"]


def test_result_is_subset_and_input_untouched(requests):
    snapshot = list(requests)

    result = filter_requests(requests, FilterCriteria(search_term="a"))

    assert all(request in requests for request in result)
    assert requests == snapshot
