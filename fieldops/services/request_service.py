"""
Сервисный модуль для работы со списком заявок.

Связывает чистые функции фильтрации, сортировки и аудита с внешними
участниками: хранилищем (обратные вызовы on_update_request и
on_delete_request) и каналом уведомлений (show_toast). Сам сервис
ничего не сохраняет.
"""

import logging
import math
from datetime import date, datetime
from typing import Callable, Iterable

from pydantic import ValidationError

from fieldops.core.config import settings
from fieldops.core.decorators import require_role
from fieldops.models.filters import FilterCriteria, RequestPage, RequestStats
from fieldops.models.request import ServiceRequest, ServiceRequestPatch
from fieldops.models.user import User
from fieldops.services.audit_policy import apply_role_scope, stamp_edit
from fieldops.services.export import export_csv
from fieldops.services.filter_engine import filter_requests
from fieldops.services.notification_service import (
    DELETE_FAILED_MESSAGE,
    UPDATE_FAILED_MESSAGE,
    NotificationService,
    ShowToast,
)
from fieldops.services.sort_engine import sort_requests
from fieldops.services.stats import compute_stats

logger = logging.getLogger(__name__)


def describe_validation_error(error: ValidationError) -> str:
    """Краткое описание ошибок валидации: "drillingDepth: Input should be ..."."""
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    )


def paginate(
    requests: list[ServiceRequest], page: int, per_page: int
) -> RequestPage:
    """Возвращает страницу списка; номер страницы приводится к допустимому диапазону."""
    total_items = len(requests)
    total_pages = math.ceil(total_items / per_page)
    page = min(max(page, 1), max(total_pages, 1))
    start = (page - 1) * per_page
    return RequestPage(
        items=requests[start : start + per_page],
        page=page,
        per_page=per_page,
        total_items=total_items,
        total_pages=total_pages,
    )


class RequestService:
    """
    Сервис для просмотра, редактирования и удаления заявок.
    """

    def __init__(
        self,
        on_update_request: Callable[[ServiceRequest], None],
        on_delete_request: Callable[[str], None],
        show_toast: ShowToast,
        per_page: int | None = None,
    ):
        self.on_update_request = on_update_request
        self.on_delete_request = on_delete_request
        self.notifier = NotificationService(show_toast)
        self.per_page = per_page or settings.items_per_page

    def view(
        self,
        requests: Iterable[ServiceRequest],
        criteria: FilterCriteria,
        user: User,
    ) -> list[ServiceRequest]:
        """Отфильтрованный и отсортированный список с учетом роли пользователя."""
        scoped = apply_role_scope(criteria, user)
        return sort_requests(filter_requests(requests, scoped))

    def list_requests(
        self,
        requests: Iterable[ServiceRequest],
        criteria: FilterCriteria,
        user: User,
        page: int = 1,
    ) -> RequestPage:
        return paginate(self.view(requests, criteria, user), page, self.per_page)

    def export_requests(
        self,
        requests: Iterable[ServiceRequest],
        criteria: FilterCriteria,
        user: User,
    ) -> str:
        """Выгружает весь отфильтрованный список (без разбиения на страницы) в CSV."""
        rows = self.view(requests, criteria, user)
        csv_text = export_csv(rows)
        logger.info(f"User '{user.name}' exported {len(rows)} requests to CSV.")
        self.notifier.success("CSV exported successfully")
        return csv_text

    def stats(
        self, requests: Iterable[ServiceRequest], today: date | None = None
    ) -> RequestStats:
        return compute_stats(requests, today or date.today())

    @require_role("admin", "staff")
    def update_request(
        self,
        original: ServiceRequest,
        patch: ServiceRequestPatch | dict,
        user: User,
        now: datetime | None = None,
    ) -> ServiceRequest | None:
        """
        Применяет изменения, ставит отметку редактирования и передает
        заявку в хранилище.

        Returns:
            Обновленная заявка или None, если патч некорректен или
            хранилище вернуло ошибку.
        """
        try:
            updated = stamp_edit(original, patch, user, now)
        except ValidationError as e:
            summary = describe_validation_error(e)
            logger.warning(f"Rejected invalid edit of request {original.id}: {summary}")
            self.notifier.error(f"{UPDATE_FAILED_MESSAGE}: {summary}")
            return None

        try:
            self.on_update_request(updated)
        except Exception as e:
            logger.error(f"Failed to update request {original.id}: {e}", exc_info=True)
            self.notifier.store_error(UPDATE_FAILED_MESSAGE, e)
            return None

        logger.info(f"Request {updated.id} updated by '{user.name}'.")
        self.notifier.success("Service request updated successfully")
        return updated

    @require_role("admin", "staff")
    def delete_request(self, request_id: str, user: User) -> bool:
        """Удаляет заявку по id. Удаление необратимо."""
        logger.info(f"User '{user.name}' initiated deletion of request {request_id}.")
        try:
            self.on_delete_request(request_id)
        except Exception as e:
            logger.error(f"Failed to delete request {request_id}: {e}", exc_info=True)
            self.notifier.store_error(DELETE_FAILED_MESSAGE, e)
            return False

        logger.info(f"Request {request_id} deleted.")
        self.notifier.info("Service request deleted")
        return True
