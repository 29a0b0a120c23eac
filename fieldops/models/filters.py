"""
Модели состояния фильтров и результатов выборки заявок.
"""

import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fieldops.models.request import ServiceRequest

# Значения фильтров, означающие "без ограничения"
ALL = "All"
ALL_VEHICLES = "All Vehicles"
# Псевдостатус: Pending + In Progress
ACTIVE = "Active"


class FilterCriteria(BaseModel):
    """
    Состояние фильтров списка заявок.

    Атрибуты:
        search_term (str): Подстрока для поиска по клиенту или адресу.
        status_filter (str): "All", "Active" или значение ServiceStatus.
        vehicle_filter (str): "All Vehicles" или имя техники.
        employee_filter (str): "All" или имя сотрудника.
        start_date, end_date (date | None): Границы периода, включительно.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    search_term: str = ""
    status_filter: str = ALL
    vehicle_filter: str = ALL_VEHICLES
    employee_filter: str = ALL
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None


class RequestPage(BaseModel):
    """Одна страница отсортированного списка заявок."""

    items: list[ServiceRequest]
    page: int
    per_page: int
    total_items: int
    total_pages: int


class RequestStats(BaseModel):
    """Сводка для панели заявок."""

    open_requests: int = 0
    completed_this_month: int = 0
    total_this_month: int = 0
    completion_rate: int = 0
    active_teams: int = 0
