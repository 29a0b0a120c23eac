"""
Разрешение слабых ссылок заявки на справочные сущности.

Заявка хранит имена техники и сотрудников, а позиции заявки ссылаются на
товары по id. Резолвер находит сущность по имени или id (без владения ею) и
сообщает о ссылках, которые никуда не ведут, например после переименования
сотрудника.
"""

import logging
from typing import Iterable, NamedTuple

from fieldops.models.catalog import Product, Vehicle
from fieldops.models.request import ServiceRequest
from fieldops.models.user import Employee

logger = logging.getLogger(__name__)


class DanglingReference(NamedTuple):
    request_id: str
    field: str
    name: str


class ReferenceResolver:
    """
    Справочник для поиска сущностей по имени или id.
    """

    def __init__(
        self,
        vehicles: Iterable[Vehicle] = (),
        employees: Iterable[Employee] = (),
        products: Iterable[Product] = (),
    ):
        self._vehicles = {vehicle.name: vehicle for vehicle in vehicles}
        self._employees = {employee.name: employee for employee in employees}
        self._products = {product.id: product for product in products}

    def vehicle(self, name: str | None) -> Vehicle | None:
        if not name:
            return None
        return self._vehicles.get(name)

    def employee(self, name: str | None) -> Employee | None:
        if not name:
            return None
        return self._employees.get(name)

    def product(self, product_id: str | None) -> Product | None:
        if not product_id:
            return None
        return self._products.get(product_id)

    def owner(self, request: ServiceRequest) -> Employee | None:
        """Сотрудник-владелец заявки (created_by или, если его нет, last_edited_by)."""
        return self.employee(request.owner_name)

    def item_products(self, request: ServiceRequest) -> list[Product | None]:
        """Товары позиций заявки в том же порядке; None для неизвестного id."""
        return [self.product(item.product_id) for item in request.items]

    def dangling_references(
        self, requests: Iterable[ServiceRequest]
    ) -> list[DanglingReference]:
        """Находит имена техники и сотрудников и id товаров, которых нет в справочниках."""
        dangling = []
        for request in requests:
            checks = [
                ("vehicle", request.vehicle, self.vehicle),
                ("created_by", request.created_by, self.employee),
                ("last_edited_by", request.last_edited_by, self.employee),
            ]
            checks.extend(("items", item.product_id, self.product) for item in request.items)
            for field, name, lookup in checks:
                if name and lookup(name) is None:
                    logger.warning(
                        f"Request {request.id} references unknown {field} '{name}'."
                    )
                    dangling.append(DanglingReference(request.id, field, name))
        return dangling
