"""
Справочные сущности: товары и техника.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ProductCategory = Literal["Motor", "Pipe", "Cable", "Service", "Accessory"]


class Product(BaseModel):
    """Позиция каталога (труба, насос, кабель, услуга)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    category: ProductCategory = "Service"
    unit_price: float = Field(default=0, ge=0)
    unit: str = "pcs"


class Vehicle(BaseModel):
    """Единица техники: буровая установка, грузовик и т.п."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    type: str = ""
    status: str = ""
