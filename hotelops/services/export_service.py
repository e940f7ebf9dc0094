"""
导出服务
全量数据 JSON 备份与报表 CSV 导出
"""
import csv
import io
import json
from datetime import datetime
from decimal import Decimal
from typing import List, Tuple, Union

from hotelops.models.entities import EntityKind
from hotelops.models.schemas import OccupancyReport, RevenueReport, GuestActivityReport
from hotelops.services.report_service import ReportType
from hotelops.services.store import EntityStore

Report = Union[OccupancyReport, RevenueReport, GuestActivityReport]


def export_all(store: EntityStore, exported_at: datetime = None) -> dict:
    """全量数据导出（四个集合 + 导出时间）"""
    snapshot = store.snapshot()
    return {
        "rooms": snapshot[EntityKind.ROOMS],
        "reservations": snapshot[EntityKind.RESERVATIONS],
        "guests": snapshot[EntityKind.GUESTS],
        "staff": snapshot[EntityKind.STAFF],
        "exportDate": (exported_at or datetime.now()).isoformat(),
    }


def export_all_json(store: EntityStore, exported_at: datetime = None) -> str:
    return json.dumps(export_all(store, exported_at), indent=2, ensure_ascii=False)


def _money(value: Decimal) -> str:
    return f"${value:.2f}"


def report_rows(report_type: ReportType, report: Report) -> Tuple[List[str], List[List[str]]]:
    """报表的表头和数据行（已格式化为字符串），CSV 导出和命令行表格共用"""
    report_type = ReportType(report_type)

    if report_type == ReportType.OCCUPANCY:
        header = ["Date", "Occupied Rooms", "Total Rooms", "Occupancy Rate"]
        rows = [
            [d.day.isoformat(), str(d.occupied_rooms), str(d.total_rooms), f"{d.occupancy_rate:.1f}%"]
            for d in report.days
        ]
    elif report_type == ReportType.REVENUE:
        header = ["Date", "Daily Revenue"]
        rows = [[d.day.isoformat(), _money(d.revenue)] for d in report.days]
    else:
        header = ["Metric", "Value"]
        rows = [
            ["New Guests", str(report.new_guests)],
            ["Returning Guests", str(report.returning_guests)],
            ["Total Guests", str(report.total_guests)],
        ]
    return header, rows


def report_to_csv(report_type: ReportType, report: Report) -> str:
    """把报表转换为 CSV 文本，表头随报表类型变化"""
    header, rows = report_rows(report_type, report)
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return output.getvalue()


def csv_filename(report_type: ReportType) -> str:
    return f"{ReportType(report_type).value}-report.csv"
