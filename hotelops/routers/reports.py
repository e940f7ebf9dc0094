"""
统计报表路由
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from hotelops.deps import get_hotel
from hotelops.models.schemas import DashboardStats
from hotelops.services.export_service import report_to_csv, csv_filename
from hotelops.services.hotel import Hotel
from hotelops.services.report_service import ReportType

# 接口保持 async def 且内部不 await，所有修改在事件循环上串行执行；改成 def 会进入线程池并发访问同一个 EntityStore
router = APIRouter(prefix="/reports", tags=["统计报表"])


def _resolve_range(start_date: Optional[date], end_date: Optional[date]):
    """默认区间：本月第一天到今天"""
    today = date.today()
    return start_date or today.replace(day=1), end_date or today


@router.get("/dashboard", response_model=DashboardStats)
async def get_dashboard(hotel: Hotel = Depends(get_hotel)):
    """获取仪表盘数据"""
    return hotel.reports.get_dashboard_stats()


@router.get("/{report_type}")
async def get_report(
    report_type: ReportType,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    hotel: Hotel = Depends(get_hotel)
):
    """生成报表"""
    start_date, end_date = _resolve_range(start_date, end_date)
    try:
        return hotel.reports.generate(report_type, start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{report_type}/csv")
async def export_report_csv(
    report_type: ReportType,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    hotel: Hotel = Depends(get_hotel)
):
    """导出报表 CSV"""
    start_date, end_date = _resolve_range(start_date, end_date)
    try:
        report = hotel.reports.generate(report_type, start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return Response(
        content=report_to_csv(report_type, report),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{csv_filename(report_type)}"'},
    )
