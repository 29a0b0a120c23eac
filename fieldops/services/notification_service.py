"""
Сервис для отправки уведомлений (toast) пользователю консоли.

Ядро не отображает интерфейс само: оно вызывает функцию show_toast,
переданную вызывающей стороной.
"""

import logging
from typing import Callable, Literal

logger = logging.getLogger(__name__)

ToastKind = Literal["success", "error", "info"]
ShowToast = Callable[[str, ToastKind], None]

# Сообщения об ошибках операций с заявками
UPDATE_FAILED_MESSAGE = "Failed to update service request"
DELETE_FAILED_MESSAGE = "Failed to delete service request"

# Фрагменты текста ошибок хранилища и понятные пользователю сообщения
_STORE_ERROR_MESSAGES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("duplicate key",), "This record already exists"),
    (("foreign key",), "Cannot delete - this record is referenced elsewhere"),
    (("row-level security",), "You do not have permission for this action"),
    (("JWT expired",), "Your session has expired. Please log in again"),
    (("network", "fetch"), "Network error - please check your connection"),
)


def get_error_message(error: BaseException | str | None) -> str:
    """
    Извлекает понятное пользователю сообщение из ошибки хранилища.
    """
    if isinstance(error, str):
        return error
    if error is None:
        return "An unexpected error occurred"

    message = str(getattr(error, "message", None) or error)
    for fragments, friendly in _STORE_ERROR_MESSAGES:
        if any(fragment in message for fragment in fragments):
            return friendly
    return message or "An unexpected error occurred"


class NotificationService:
    def __init__(self, show_toast: ShowToast):
        self._show_toast = show_toast

    def notify(self, message: str, kind: ToastKind = "info") -> None:
        """
        Передает уведомление вызывающей стороне.

        Сбой отображения не должен прерывать операцию, поэтому ошибка
        только логируется.
        """
        try:
            self._show_toast(message, kind)
        except Exception as e:
            logger.error(f"Failed to show {kind} toast '{message}': {e}", exc_info=True)

    def success(self, message: str) -> None:
        self.notify(message, "success")

    def info(self, message: str) -> None:
        self.notify(message, "info")

    def error(self, message: str) -> None:
        self.notify(message, "error")

    def store_error(self, context: str, error: BaseException) -> None:
        """Сообщает об ошибке хранилища: "<контекст>: <понятное описание>"."""
        self.error(f"{context}: {get_error_message(error)}")
