"""
Модели данных, связанные с пользователями и сотрудниками.
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Role = Literal["admin", "staff"]


class User(BaseModel):
    """
    Модель текущего пользователя консоли.

    Атрибуты:
        name (str): Отображаемое имя; по нему заявки связываются с автором.
        email (str): Адрес электронной почты.
        role (str | None): Роль в системе (admin, staff). Отсутствие роли
            трактуется как не-staff, то есть полная видимость.
        is_guest (bool): Гостевой режим, доступ только на чтение.
        employee_id (str | None): Идентификатор связанной записи сотрудника.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., description="User's display name")
    email: str = Field(default="", description="User's e-mail address")
    phone: str | None = None
    role: Role | None = Field(default=None, description="User's role in the system")
    is_guest: bool = False
    employee_id: str | None = None


class Employee(BaseModel):
    """
    Модель сотрудника. Справочная сущность, ядро ее не изменяет.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    designation: str = ""
    role: Role = "staff"
    email: str | None = None
    phone: str = ""
    salary: float = Field(default=0, ge=0)
    join_date: date | None = None
    assigned_vehicle: str | None = None
    status: Literal["active", "on_holiday"] = "active"
