"""
Тесты для точки входа командной строки.
"""

import json

import pytest

from fieldops.main import main

REQUESTS = [
    {"id": "sr1", "customerName": "Rajesh Gupta", "location": "Sector 4", "date": "2024-01-10",
     "status": "Pending", "createdBy": "Asha", "drillingDepth": 100, "drillingRate": 50},
    {"id": "sr2", "customerName": "Amit Farmhouse", "location": "Village Raipur", "date": "2024-01-05",
     "status": "Pending", "createdBy": "Ravi"},
    {"id": "sr3", "customerName": "City Park", "location": "Zone A", "date": "2024-02-01",
     "status": "Completed", "lastEditedBy": "Asha"},
]


@pytest.fixture(autouse=True)
def no_logging_setup(mocker):
    """Не переустанавливаем обработчики корневого логгера во время тестов."""
    return mocker.patch("fieldops.main.setup_logging")


@pytest.fixture
def requests_file(tmp_path):
    path = tmp_path / "requests.json"
    path.write_text(json.dumps(REQUESTS), encoding="utf-8")
    return path


def test_main_admin_sees_all(requests_file, capsys):
    assert main([str(requests_file)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert [line.split(",")[0] for line in out[1:]] == [
        '"Amit Farmhouse"',
        '"Rajesh Gupta"',
        '"City Park"',
    ]
    assert out[2].endswith('"5000"')


def test_main_staff_is_scoped(requests_file, capsys):
    """Тест: Staff видит только свои заявки, даже если передан другой сотрудник."""
    assert main([str(requests_file), "--user", "Asha", "--role", "staff", "--employee", "Ravi", "--all"]) == 0

    captured = capsys.readouterr()
    rows = captured.out.splitlines()[1:]
    assert len(rows) == 2
    assert "CSV exported successfully" in captured.err


def test_main_bad_file(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text('[{"customerName": "x"}]', encoding="utf-8")

    assert main([str(path)]) == 1
    assert "error" in capsys.readouterr().err
