"""
Точка входа командной строки.

Загружает заявки из JSON-файла, применяет фильтры и сортировку от имени
указанного пользователя и печатает результат в формате CSV.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from fieldops.core.config import settings
from fieldops.core.logging_config import setup_logging
from fieldops.models.filters import ALL, ALL_VEHICLES, FilterCriteria
from fieldops.models.request import ServiceRequest
from fieldops.models.user import User
from fieldops.services.audit_policy import default_employee_filter
from fieldops.services.export import export_csv
from fieldops.services.request_service import RequestService

logger = logging.getLogger(__name__)

_requests_adapter = TypeAdapter(list[ServiceRequest])


def load_requests(path: Path) -> list[ServiceRequest]:
    """Читает список заявок из JSON (ключи в camelCase или snake_case)."""
    return _requests_adapter.validate_json(path.read_bytes())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fieldops", description="Filter and sort service requests."
    )
    parser.add_argument("requests_file", type=Path, help="JSON list of requests")
    parser.add_argument("--user", default="Admin", help="Acting user's name")
    parser.add_argument("--role", choices=["admin", "staff"], default="admin")
    parser.add_argument("--search", default="")
    parser.add_argument("--status", default=ALL)
    parser.add_argument("--vehicle", default=ALL_VEHICLES)
    parser.add_argument("--employee", default=None)
    parser.add_argument("--start", default=None, help="Start date, YYYY-MM-DD")
    parser.add_argument("--end", default=None, help="End date, YYYY-MM-DD")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument(
        "--all", action="store_true", help="Print every match instead of one page"
    )
    parser.add_argument("--verbose", action="store_true")
    return parser


def _print_toast(message: str, kind: str) -> None:
    print(f"[{kind}] {message}", file=sys.stderr)


def _read_only(*args) -> None:
    raise RuntimeError("The command line view is read-only")


def main(argv: list[str] | None = None) -> int:
    """Основная функция CLI. Возвращает код завершения."""
    args = build_parser().parse_args(argv)
    setup_logging(settings.log_level if args.verbose else logging.WARNING)

    user = User(name=args.user, role=args.role)
    try:
        requests = load_requests(args.requests_file)
        criteria = FilterCriteria(
            search_term=args.search,
            status_filter=args.status,
            vehicle_filter=args.vehicle,
            employee_filter=args.employee or default_employee_filter(user),
            start_date=args.start,
            end_date=args.end,
        )
    except (OSError, ValidationError) as e:
        logger.error(f"Failed to load input: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    service = RequestService(
        on_update_request=_read_only,
        on_delete_request=_read_only,
        show_toast=_print_toast,
    )

    if args.all:
        sys.stdout.write(service.export_requests(requests, criteria, user))
    else:
        page = service.list_requests(requests, criteria, user, page=args.page)
        sys.stdout.write(export_csv(page.items))
        print(
            f"page {page.page}/{page.total_pages}, {page.total_items} requests",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
