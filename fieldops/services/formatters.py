"""
Функции форматирования данных заявки для отображения.
"""

import re
from datetime import date, datetime

import pytz

from fieldops.core.config import settings

NOT_AVAILABLE = "N/A"


def format_phone_display(phone: str | None) -> str:
    if not phone:
        return NOT_AVAILABLE
    return phone


def format_phone_input(value: str) -> str:
    """
    Нормализует ввод телефона: добавляет код страны, если его нет.

    Ввод, начинающийся с "+", считается уже полным и не меняется.
    """
    if not value:
        return ""
    if value.startswith("+"):
        return value

    prefix = f"+{settings.phone_country_code}"
    # Убираем уже вставленный префикс, чтобы не продублировать его
    clean = re.sub(rf"^{re.escape(prefix)}\s?", "", value)
    return f"{prefix} {clean}"


def whatsapp_link(phone: str) -> str:
    """Ссылка wa.me; к номерам из 10 цифр и короче добавляется код страны."""
    digits = re.sub(r"\D", "", phone or "")
    if len(digits) <= 10:
        digits = settings.phone_country_code + digits
    return f"https://wa.me/{digits}"


def format_request_date(value: date) -> str:
    """Дата заявки в виде "Jan 5, 2024"."""
    return f"{value:%b} {value.day}, {value.year}"


def format_edit_timestamp(value: datetime | str | None) -> str:
    """
    Форматирует отметку редактирования с учетом часового пояса из настроек.

    Старые записи хранят отметку уже отформатированной строкой
    ("1/10/2024, 3:45:00 PM"), такая строка выводится без изменений.
    """
    if not value:
        return NOT_AVAILABLE
    if isinstance(value, str):
        return value

    # Наивное время считаем UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=pytz.utc)

    local_value = value.astimezone(pytz.timezone(settings.display_timezone))
    return local_value.strftime("%d.%m.%Y %H:%M")


def team_initials(vehicle: str | None) -> str:
    """Инициалы бригады по названию техники: "Rig KA-01 (Drilling)" -> "RK"."""
    if not vehicle:
        return "?"
    return "".join(word[0] for word in vehicle.split()).upper()[:2]
