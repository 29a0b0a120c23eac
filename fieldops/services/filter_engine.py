"""
Фильтрация списка заявок.

Каждый предикат проверяет одно условие; заявка попадает в результат,
только если выполнены все условия. Функции чистые и не изменяют вход.
"""

import logging
from typing import Iterable

from fieldops.models.filters import ACTIVE, ALL, ALL_VEHICLES, FilterCriteria
from fieldops.models.request import ServiceRequest, ServiceStatus

logger = logging.getLogger(__name__)

ACTIVE_STATUSES = frozenset({ServiceStatus.PENDING, ServiceStatus.IN_PROGRESS})


def matches_search(request: ServiceRequest, search_term: str) -> bool:
    if not search_term:
        return True
    term = search_term.lower()
    return term in request.customer_name.lower() or term in request.location.lower()


def matches_status(request: ServiceRequest, status_filter: str) -> bool:
    if status_filter == ALL:
        return True
    if status_filter == ACTIVE:
        return request.status in ACTIVE_STATUSES
    return request.status == status_filter


def matches_vehicle(request: ServiceRequest, vehicle_filter: str) -> bool:
    return vehicle_filter == ALL_VEHICLES or request.vehicle == vehicle_filter


def matches_employee(request: ServiceRequest, employee_filter: str) -> bool:
    """
    Проверяет принадлежность заявки сотруднику.

    Заявки без created_by (старые или только отредактированные записи)
    относятся к последнему редактору.
    """
    if employee_filter == ALL:
        return True
    if request.created_by == employee_filter:
        return True
    return not request.created_by and request.last_edited_by == employee_filter


def matches_date_range(request: ServiceRequest, criteria: FilterCriteria) -> bool:
    if criteria.start_date and request.date < criteria.start_date:
        return False
    if criteria.end_date and request.date > criteria.end_date:
        return False
    return True


def matches(request: ServiceRequest, criteria: FilterCriteria) -> bool:
    """Проверяет заявку по всем условиям фильтра."""
    return (
        matches_search(request, criteria.search_term)
        and matches_status(request, criteria.status_filter)
        and matches_vehicle(request, criteria.vehicle_filter)
        and matches_employee(request, criteria.employee_filter)
        and matches_date_range(request, criteria)
    )


def filter_requests(
    requests: Iterable[ServiceRequest], criteria: FilterCriteria
) -> list[ServiceRequest]:
    """
    Возвращает заявки, удовлетворяющие фильтру, в исходном порядке.

    Противоречивые границы периода (начало позже конца) дают пустой
    результат, исключение не выбрасывается.
    """
    requests = list(requests)
    result = [request for request in requests if matches(request, criteria)]
    logger.debug(f"Filter kept {len(result)} of {len(requests)} requests.")
    return result
