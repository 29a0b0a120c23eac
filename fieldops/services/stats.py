"""
Сводные показатели по заявкам для панели.
"""

from datetime import date
from typing import Iterable

from fieldops.models.filters import RequestStats
from fieldops.models.request import ServiceRequest, ServiceStatus
from fieldops.services.filter_engine import ACTIVE_STATUSES


def compute_stats(requests: Iterable[ServiceRequest], today: date) -> RequestStats:
    """
    Считает открытые заявки, выполнение за текущий месяц и занятые бригады.

    Args:
        requests: Все заявки (без фильтров).
        today: Текущая дата; месяц отсчитывается от ее первого числа.
    """
    requests = list(requests)
    month_start = today.replace(day=1)

    this_month = [request for request in requests if request.date >= month_start]
    completed_this_month = sum(
        1 for request in this_month if request.status == ServiceStatus.COMPLETED
    )
    completion_rate = (
        round(completed_this_month / len(this_month) * 100) if this_month else 0
    )
    # Бригада = техника, на которой сейчас есть работа в процессе
    active_teams = {
        request.vehicle
        for request in requests
        if request.status == ServiceStatus.IN_PROGRESS and request.vehicle
    }

    return RequestStats(
        open_requests=sum(1 for request in requests if request.status in ACTIVE_STATUSES),
        completed_this_month=completed_this_month,
        total_this_month=len(this_month),
        completion_rate=completion_rate,
        active_teams=len(active_teams),
    )
