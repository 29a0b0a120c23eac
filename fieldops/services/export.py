"""
Выгрузка списка заявок в CSV.
"""

import csv
import io
from typing import Iterable

from fieldops.models.request import ServiceRequest

CSV_HEADERS = ["Customer", "Location", "Date", "Status", "Type", "Vehicle", "Total Cost"]


def format_cost(value: float) -> str:
    """Целые суммы без дробной части: 5000.0 -> "5000"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def export_csv(requests: Iterable[ServiceRequest]) -> str:
    """
    Формирует CSV в переданном порядке заявок; все ячейки в кавычках.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for request in requests:
        writer.writerow(
            [
                request.customer_name,
                request.location,
                request.date.isoformat(),
                request.status.value,
                request.type,
                request.vehicle or "",
                format_cost(request.total_cost),
            ]
        )
    return buffer.getvalue()
