"""
Декораторы для проверки прав доступа к изменяющим операциям.
"""

import inspect
import logging
from functools import wraps
from typing import Any, Callable

from fieldops.models.user import User

logger = logging.getLogger(__name__)

PERMISSION_DENIED_MESSAGE = "You do not have permission for this action"


def require_role(*roles: str) -> Callable:
    """
    Декоратор для проверки, что действующий пользователь имеет одну из указанных ролей.

    Оборачиваемый метод сервиса должен принимать действующего пользователя
    в параметре `user`, а сам сервис должен иметь атрибут `notifier`
    (NotificationService). Гости (`is_guest`) работают только на чтение и
    получают отказ при любой роли.

    Args:
        *roles: Список строк с названиями ролей, которым разрешен доступ.

    Returns:
        Декоратор для методов RequestService.
    """

    def decorator(func: Callable[..., Any]):
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(self, *args, **kwargs) -> Any:
            bound = signature.bind(self, *args, **kwargs)
            user: User | None = bound.arguments.get("user")

            if user and not user.is_guest and user.role in roles:
                return func(self, *args, **kwargs)

            if user is None:
                role_str = "Unauthorized"
            elif user.is_guest:
                role_str = "guest"
            else:
                role_str = user.role
            logger.warning(
                f"Unauthorized {func.__name__} attempt by user "
                f"'{user.name if user else None}'. "
                f"User role: '{role_str}'. Required roles: {roles}"
            )
            self.notifier.error(PERMISSION_DENIED_MESSAGE)
            return None

        return wrapper

    return decorator
