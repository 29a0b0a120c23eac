"""
Тесты для сортировки заявок.
"""

from fieldops.models.request import ServiceStatus
from fieldops.services.sort_engine import (
    STATUS_PRIORITY,
    UNKNOWN_STATUS_PRIORITY,
    sort_requests,
    status_priority,
)


def test_pending_oldest_first_then_completed(make_request):
    """Тест: Ожидающие от старых к новым, затем выполненные."""
    requests = [
        make_request(id="p10", status=ServiceStatus.PENDING, date="2024-01-10"),
        make_request(id="p05", status=ServiceStatus.PENDING, date="2024-01-05"),
        make_request(id="c01", status=ServiceStatus.COMPLETED, date="2024-02-01"),
    ]

    assert [r.id for r in sort_requests(requests)] == ["p05", "p10", "c01"]


def test_status_priority_beats_date(make_request):
    """Тест: Более старая выполненная заявка не обгоняет новую ожидающую."""
    requests = [
        make_request(id="done", status=ServiceStatus.COMPLETED, date="2020-01-01"),
        make_request(id="todo", status=ServiceStatus.PENDING, date="2030-01-01"),
    ]

    assert [r.id for r in sort_requests(requests)] == ["todo", "done"]


def test_full_order(make_request):
    requests = [
        make_request(id="x1", status=ServiceStatus.CANCELLED, date="2024-03-01"),
        make_request(id="c1", status=ServiceStatus.COMPLETED, date="2024-01-01"),
        make_request(id="c2", status=ServiceStatus.COMPLETED, date="2024-02-01"),
        make_request(id="i1", status=ServiceStatus.IN_PROGRESS, date="2024-01-15"),
        make_request(id="i2", status=ServiceStatus.IN_PROGRESS, date="2024-02-15"),
        make_request(id="p1", status=ServiceStatus.PENDING, date="2024-02-20"),
    ]

    assert [r.id for r in sort_requests(requests)] == ["p1", "i2", "i1", "c2", "c1", "x1"]


def test_ties_keep_input_order(make_request):
    requests = [
        make_request(id="first", status=ServiceStatus.COMPLETED, date="2024-01-01"),
        make_request(id="second", status=ServiceStatus.COMPLETED, date="2024-01-01"),
    ]

    assert [r.id for r in sort_requests(requests)] == ["first", "second"]


def test_sort_is_idempotent(make_request):
    requests = [
        make_request(status=status, date=f"2024-01-{day:02d}")
        for status, day in [
            (ServiceStatus.CANCELLED, 3),
            (ServiceStatus.PENDING, 9),
            (ServiceStatus.COMPLETED, 1),
            (ServiceStatus.PENDING, 2),
        ]
    ]

    once = sort_requests(requests)

    assert sort_requests(once) == once


def test_sort_does_not_mutate_input(make_request):
    requests = [
        make_request(id="b", status=ServiceStatus.COMPLETED),
        make_request(id="a", status=ServiceStatus.PENDING),
    ]

    sort_requests(requests)

    assert [r.id for r in requests] == ["b", "a"]


def test_priority_table():
    assert [STATUS_PRIORITY[s] for s in ServiceStatus] == [1, 2, 3, 4]
    assert status_priority("Archived") == UNKNOWN_STATUS_PRIORITY == 99
