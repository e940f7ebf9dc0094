"""
导出服务测试
"""
import json
from datetime import date, datetime

from hotelops.services.export_service import (
    export_all, export_all_json, report_rows, report_to_csv, csv_filename,
)
from hotelops.services.report_service import ReportType


class TestDataExport:

    def test_export_contains_all_collections(self, hotel, make_room, make_guest, make_reservation):
        room = make_room("101")
        make_reservation(make_guest(), room, "2024-01-01", "2024-01-03")

        data = export_all(hotel.store, exported_at=datetime(2024, 1, 10, 12, 0))

        assert set(data) == {"rooms", "reservations", "guests", "staff", "exportDate"}
        assert data["exportDate"] == "2024-01-10T12:00:00"
        assert data["rooms"][0]["number"] == "101"
        assert data["reservations"][0]["roomId"] == room.id
        assert data["reservations"][0]["totalAmount"] == 200.0
        assert data["staff"] == []

    def test_export_json_is_indented(self, hotel, make_room):
        make_room()
        text = export_all_json(hotel.store)
        assert text.startswith("{\n  ")
        assert json.loads(text)["rooms"][0]["type"] == "single"


class TestReportCsv:

    def test_occupancy_csv(self, hotel, make_room, make_guest, make_reservation):
        room = make_room("101")
        make_room("102")
        make_reservation(make_guest(), room, "2024-01-01", "2024-01-02")
        report = hotel.reports.get_occupancy_report(date(2024, 1, 1), date(2024, 1, 2))

        assert report_to_csv(ReportType.OCCUPANCY, report) == (
            "Date,Occupied Rooms,Total Rooms,Occupancy Rate\n"
            "2024-01-01,1,2,50.0%\n"
            "2024-01-02,0,2,0.0%\n"
        )

    def test_revenue_csv(self, hotel, make_room, make_guest, make_reservation):
        make_reservation(make_guest(), make_room(price="99.5"), "2024-01-01", "2024-01-02")
        report = hotel.reports.get_revenue_report(date(2024, 1, 1), date(2024, 1, 2))

        assert report_to_csv(ReportType.REVENUE, report) == (
            "Date,Daily Revenue\n"
            "2024-01-01,$99.50\n"
            "2024-01-02,$0.00\n"
        )

    def test_guest_activity_csv(self, hotel, make_guest):
        make_guest()
        report = hotel.reports.get_guest_activity_report(date(2024, 1, 1), date(2024, 1, 31))

        lines = report_to_csv("guest-activity", report).splitlines()
        assert lines == ["Metric,Value", "New Guests,0", "Returning Guests,0", "Total Guests,1"]

    def test_csv_filename(self):
        assert csv_filename(ReportType.REVENUE) == "revenue-report.csv"
        assert csv_filename("guest-activity") == "guest-activity-report.csv"

    def test_report_rows_are_formatted_cells(self, hotel, make_room, make_guest, make_reservation):
        room = make_room("101")
        make_reservation(make_guest(), room, "2024-01-01", "2024-01-02")

        header, rows = report_rows(
            ReportType.OCCUPANCY, hotel.reports.get_occupancy_report(date(2024, 1, 1), date(2024, 1, 2))
        )
        assert header == ["Date", "Occupied Rooms", "Total Rooms", "Occupancy Rate"]
        assert rows == [["2024-01-01", "1", "1", "100.0%"], ["2024-01-02", "0", "1", "0.0%"]]

        header, rows = report_rows(
            ReportType.REVENUE, hotel.reports.get_revenue_report(date(2024, 1, 1), date(2024, 1, 1))
        )
        assert header == ["Date", "Daily Revenue"]
        assert rows == [["2024-01-01", "$100.00"]]
