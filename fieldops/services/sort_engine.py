"""
Сортировка заявок: сначала по приоритету статуса, затем по дате.
"""

from typing import Iterable

from fieldops.models.request import ServiceRequest, ServiceStatus

# Чем меньше число, тем выше заявка в списке
STATUS_PRIORITY: dict[ServiceStatus, int] = {
    ServiceStatus.PENDING: 1,
    ServiceStatus.IN_PROGRESS: 2,
    ServiceStatus.COMPLETED: 3,
    ServiceStatus.CANCELLED: 4,
}
# Ранг для статусов, которых нет в таблице
UNKNOWN_STATUS_PRIORITY = 99


def status_priority(status: ServiceStatus | str) -> int:
    return STATUS_PRIORITY.get(status, UNKNOWN_STATUS_PRIORITY)


def sort_key(request: ServiceRequest) -> tuple[int, int]:
    """
    Ключ сортировки заявки.

    Ожидающие заявки идут от старых к новым (их надо планировать первыми),
    остальные статусы от новых к старым.
    """
    day = request.date.toordinal()
    if request.status == ServiceStatus.PENDING:
        return status_priority(request.status), day
    return status_priority(request.status), -day


def sort_requests(requests: Iterable[ServiceRequest]) -> list[ServiceRequest]:
    """Возвращает новый список; при равных ключах сохраняется исходный порядок."""
    return sorted(requests, key=sort_key)
