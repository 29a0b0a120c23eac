"""
Расчет стоимости заявки по оплачиваемым позициям.
"""

from typing import Any

# Пары (глубина, ставка) для каждой оплачиваемой категории
BILLABLE_LINE_ITEMS: tuple[tuple[str, str], ...] = (
    ("drilling_depth", "drilling_rate"),
    ("casing_depth", "casing_rate"),
    ("casing10_depth", "casing10_rate"),
)


def line_item_total(request: Any, depth_field: str, rate_field: str) -> float:
    """Стоимость одной позиции; отсутствующие значения считаются нулем."""
    depth = getattr(request, depth_field, None) or 0
    rate = getattr(request, rate_field, None) or 0
    return float(depth) * float(rate)


def compute_total(request: Any) -> float:
    """
    Вычисляет итоговую стоимость заявки.

    Сумма (глубина × ставка) по бурению, основной обсадной трубе и
    10-дюймовой обсадной трубе. Позиция без ставки дает 0, а не ошибку.

    Args:
        request: Заявка или любой объект с полями глубин и ставок.

    Returns:
        Неотрицательная сумма.
    """
    total = sum(
        line_item_total(request, depth_field, rate_field)
        for depth_field, rate_field in BILLABLE_LINE_ITEMS
    )
    return max(total, 0.0)
