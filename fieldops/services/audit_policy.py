"""
Политика видимости и аудита заявок.

Правила зависят только от переданного пользователя: здесь нет
глобального состояния сессии.
"""

import logging
from datetime import datetime, timezone

from fieldops.models.filters import ALL, FilterCriteria
from fieldops.models.request import ServiceRequest, ServiceRequestPatch
from fieldops.models.user import User

logger = logging.getLogger(__name__)

STAFF_ROLE = "staff"


def is_staff(user: User) -> bool:
    return user.role == STAFF_ROLE


def default_employee_filter(user: User) -> str:
    """
    Начальное значение фильтра по сотруднику.

    Сотрудник (staff) видит только свои заявки, и этот фильтр за ним
    закреплен. Администратор и любая другая роль видят все ("All").
    """
    if is_staff(user):
        return user.name
    return ALL


def apply_role_scope(criteria: FilterCriteria, user: User) -> FilterCriteria:
    """Закрепляет фильтр по сотруднику за staff, игнорируя переданное значение."""
    if not is_staff(user) or criteria.employee_filter == user.name:
        return criteria
    logger.debug(
        f"Employee filter '{criteria.employee_filter}' overridden with '{user.name}' for staff user."
    )
    return criteria.model_copy(update={"employee_filter": user.name})


def initial_criteria(user: User) -> FilterCriteria:
    """Фильтры по умолчанию при входе пользователя или смене сессии."""
    return FilterCriteria(employee_filter=default_employee_filter(user))


def clear_filters(criteria: FilterCriteria, user: User) -> FilterCriteria:
    """
    Сбрасывает фильтры к значениям по умолчанию.

    Для staff фильтр по сотруднику снова закрепляется за его именем, даже
    если переданы устаревшие фильтры другой сессии.
    """
    return FilterCriteria(employee_filter=default_employee_filter(user))


def stamp_edit(
    original: ServiceRequest,
    patch: ServiceRequestPatch | dict,
    acting_user: User,
    now: datetime | None = None,
) -> ServiceRequest:
    """
    Применяет изменения к заявке и проставляет отметку редактирования.

    Поля патча заменяют исходные, непереданные поля сохраняются.
    last_edited_by/last_edited_at выставляются всегда, даже если редактирует
    сам автор. id и created_by не меняются, total_cost пересчитывается.

    Args:
        original: Исходная заявка (не изменяется).
        patch: Изменения из формы; словарь проходит через ServiceRequestPatch.
        acting_user: Пользователь, выполняющий редактирование.
        now: Время редактирования; по умолчанию текущее время UTC.

    Returns:
        Новая версия заявки.
    """
    if isinstance(patch, dict):
        patch = ServiceRequestPatch.model_validate(patch)
    if now is None:
        now = datetime.now(timezone.utc)

    data = original.model_dump()
    data.update(patch.changes())
    data.update(
        id=original.id,
        created_by=original.created_by,
        last_edited_by=acting_user.name,
        last_edited_at=now,
    )
    # total_cost не передается: модель вычисляет его сама
    data.pop("total_cost", None)
    return ServiceRequest.model_validate(data)
