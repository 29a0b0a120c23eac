"""
Модели данных, связанные с заявкой на выполнение работ.
"""

import datetime
import logging
import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from fieldops.services.cost import compute_total

logger = logging.getLogger(__name__)

# Поля заявки, которые не могут быть пустыми после редактирования
NON_NULLABLE_FIELDS = frozenset(
    {"customer_name", "phone", "location", "date", "type", "status", "notes", "items"}
)


class ServiceStatus(str, Enum):
    """Статусы жизненного цикла заявки."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class ServiceItem(BaseModel):
    """Позиция каталога в заявке: товар, количество и цена на момент продажи."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str
    quantity: float = Field(default=0, ge=0)
    price_at_time: float = Field(default=0, ge=0)


class ServiceRequest(BaseModel):
    """
    Модель заявки: выполненная или запланированная работа для клиента.

    Поле total_cost всегда вычисляется из пар (глубина, ставка); переданное
    извне значение игнорируется. Ссылки vehicle, created_by и last_edited_by
    хранят отображаемые имена (слабые ссылки, см. ReferenceResolver).
    Незнакомые колонки хранилища (например, created_at) сохраняются как есть,
    чтобы редактирование не теряло данные.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    customer_name: str
    phone: str = ""
    location: str = ""
    latitude: float | None = None
    longitude: float | None = None
    date: datetime.date
    type: str = ""
    vehicle: str | None = None
    status: ServiceStatus = ServiceStatus.PENDING
    notes: str = ""

    # Адрес объекта
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    district: str | None = None
    state: str | None = None
    pincode: str | None = None

    # Товары из каталога; в total_cost не входят
    items: list[ServiceItem] = Field(default_factory=list)

    # Оплачиваемые позиции: глубина в футах и ставка за фут
    drilling_depth: float | None = Field(default=None, ge=0)
    drilling_rate: float | None = Field(default=None, ge=0)
    casing_depth: float | None = Field(default=None, ge=0)
    casing_rate: float | None = Field(default=None, ge=0)
    casing_type: str | None = None
    casing10_depth: float | None = Field(default=None, ge=0)
    casing10_rate: float | None = Field(default=None, ge=0)

    total_cost: float = Field(default=0, ge=0)

    created_by: str | None = None
    last_edited_by: str | None = None
    # Старые записи хранят отметку как локализованную строку ("1/10/2024, 3:45:00 PM")
    last_edited_at: datetime.datetime | str | None = None

    @field_validator("phone", "location", "type", "notes", mode="before")
    @classmethod
    def blank_if_null(cls, value):
        # Хранилище возвращает NULL для незаполненных текстовых колонок
        return "" if value is None else value

    @field_validator("items", mode="before")
    @classmethod
    def empty_if_null(cls, value):
        return [] if value is None else value

    @field_validator("last_edited_at", mode="before")
    @classmethod
    def parse_edit_timestamp(cls, value):
        if not isinstance(value, str):
            return value
        if not value.strip():
            return None
        try:
            return datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logger.debug(f"Keeping non-ISO edit timestamp '{value}' as text.")
            return value

    @model_validator(mode="after")
    def derive_total_cost(self) -> "ServiceRequest":
        derived = compute_total(self)
        if "total_cost" in self.model_fields_set and self.total_cost != derived:
            logger.debug(
                f"Ignoring supplied total_cost {self.total_cost} for request {self.id}; "
                f"derived value is {derived}."
            )
        self.total_cost = derived
        return self

    @property
    def owner_name(self) -> str | None:
        """Автор заявки; для записей без created_by — последний редактор."""
        return self.created_by or self.last_edited_by


class ServiceRequestPatch(BaseModel):
    """
    Изменения, вносимые через форму редактирования.

    Содержит только редактируемые поля: id, created_by, отметки
    редактирования и total_cost в патч не входят и отбрасываются.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    customer_name: str | None = None
    phone: str | None = None
    location: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    date: datetime.date | None = None
    type: str | None = None
    vehicle: str | None = None
    status: ServiceStatus | None = None
    notes: str | None = None

    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    district: str | None = None
    state: str | None = None
    pincode: str | None = None

    items: list[ServiceItem] | None = None

    drilling_depth: float | None = Field(default=None, ge=0)
    drilling_rate: float | None = Field(default=None, ge=0)
    casing_depth: float | None = Field(default=None, ge=0)
    casing_rate: float | None = Field(default=None, ge=0)
    casing_type: str | None = None
    casing10_depth: float | None = Field(default=None, ge=0)
    casing10_rate: float | None = Field(default=None, ge=0)

    def changes(self) -> dict:
        """
        Возвращает только явно переданные поля.

        Явный None для обязательных полей заявки отбрасывается: очистить
        можно только необязательные поля (vehicle, координаты, позиции).
        """
        data = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key not in NON_NULLABLE_FIELDS
        }
