"""
Тесты для выгрузки заявок в CSV.
"""

from fieldops.models.request import ServiceStatus
from fieldops.services.export import export_csv


def test_export_csv(make_request):
    requests = [
        make_request(
            customer_name="Rajesh Gupta",
            location="Sector 4, Industrial Area",
            date="2023-10-15",
            status=ServiceStatus.COMPLETED,
            vehicle="Rig KA-01 (Drilling)",
            drilling_depth=300,
            drilling_rate=110,
        ),
        make_request(customer_name='Amit "Farm" House', location="Raipur", date="2023-10-20", casing_depth=1.5, casing_rate=3),
    ]

    lines = export_csv(requests).splitlines()

    assert lines[0] == '"Customer","Location","Date","Status","Type","Vehicle","Total Cost"'
    assert lines[1] == (
        '"Rajesh Gupta","Sector 4, Industrial Area","2023-10-15","Completed",'
        '"New Borewell Drilling","Rig KA-01 (Drilling)","33000"'
    )
    assert lines[2] == (
        '"Amit ""Farm"" House","Raipur","2023-10-20","Pending",'
        '"New Borewell Drilling","","4.5"'
    )


def test_export_empty():
    assert export_csv([]).splitlines() == [
        '"Customer","Location","Date","Status","Type","Vehicle","Total Cost"'
    ]
