"""
报表服务
基于 EntityStore 的只读统计：入住率、营收、客人活跃度和仪表盘
"""
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum
from typing import Callable, List

from hotelops.config import settings
from hotelops.models.entities import (
    EntityKind, Reservation, ReservationStatus, RoomStatus, StaffStatus,
)
from hotelops.models.schemas import (
    OccupancyDay, OccupancyReport, RevenueDay, RevenueReport, GuestActivityReport,
    ActivityItem, DashboardAlert, DashboardStats,
)
from hotelops.services.errors import InvalidDateRange
from hotelops.services.reservation_service import UNKNOWN_GUEST, UNKNOWN_ROOM
from hotelops.services.store import EntityStore


class ReportType(str, Enum):
    """报表类型"""
    OCCUPANCY = "occupancy"
    REVENUE = "revenue"
    GUEST_ACTIVITY = "guest-activity"


def date_range(start_date: date, end_date: date) -> List[date]:
    """闭区间 [start_date, end_date] 内的每一天"""
    days = []
    current = start_date
    while current <= end_date:
        days.append(current)
        current += timedelta(days=1)
    return days


class ReportService:
    """报表服务"""

    def __init__(self, store: EntityStore, today: Callable[[], date] = date.today):
        self.store = store
        self._today = today

    def generate(self, report_type: ReportType, start_date: date, end_date: date):
        """按报表类型分发"""
        generators = {
            ReportType.OCCUPANCY: self.get_occupancy_report,
            ReportType.REVENUE: self.get_revenue_report,
            ReportType.GUEST_ACTIVITY: self.get_guest_activity_report,
        }
        return generators[ReportType(report_type)](start_date, end_date)

    def _check_range(self, start_date: date, end_date: date):
        if end_date < start_date:
            raise InvalidDateRange("End date must be after start date")

    def _active_on(self, day: date) -> List[Reservation]:
        return self.store.find(
            EntityKind.RESERVATIONS, lambda r: r.is_active and r.covers(day)
        )

    def get_occupancy_report(self, start_date: date, end_date: date) -> OccupancyReport:
        """获取入住率报表"""
        self._check_range(start_date, end_date)
        total_rooms = self.store.count(EntityKind.ROOMS)

        days = []
        for day in date_range(start_date, end_date):
            occupied = len(self._active_on(day))
            rate = (occupied / total_rooms * 100) if total_rooms > 0 else 0
            days.append(OccupancyDay(
                day=day,
                occupied_rooms=occupied,
                total_rooms=total_rooms,
                occupancy_rate=round(rate, 1),
            ))

        average = sum(d.occupancy_rate for d in days) / len(days) if days else 0
        return OccupancyReport(
            date_from=start_date,
            date_to=end_date,
            days=days,
            average_rate=round(average, 1),
        )

    def get_revenue_report(self, start_date: date, end_date: date) -> RevenueReport:
        """获取营收报表：每天在住预订对应房间的房价之和"""
        self._check_range(start_date, end_date)

        days = []
        for day in date_range(start_date, end_date):
            revenue = sum((self._room_price(r.room_id) for r in self._active_on(day)), Decimal("0"))
            days.append(RevenueDay(day=day, revenue=revenue))

        total = sum((d.revenue for d in days), Decimal("0"))
        average = (total / len(days)).quantize(Decimal("0.01")) if days else Decimal("0")
        return RevenueReport(
            date_from=start_date,
            date_to=end_date,
            days=days,
            total_revenue=total,
            average_daily_revenue=average,
        )

    def _room_price(self, room_id: str) -> Decimal:
        room = self.store.get(EntityKind.ROOMS, room_id)
        return room.price if room else Decimal("0")

    def get_guest_activity_report(self, start_date: date, end_date: date) -> GuestActivityReport:
        """
        客人活跃度报表

        new_guests: 最早一次预订的入住日期落在区间内的客人数
        returning_guests: 区间内有入住日期的预订的去重客人数
        total_guests: 全部客人数（不受区间限制）
        """
        self._check_range(start_date, end_date)
        reservations = self.store.all(EntityKind.RESERVATIONS)

        new_guests = 0
        for guest in self.store.all(EntityKind.GUESTS):
            own = [r for r in reservations if r.guest_id == guest.id]
            if not own:
                continue
            first = min(own, key=lambda r: r.check_in)
            if start_date <= first.check_in <= end_date:
                new_guests += 1

        # TODO: count only guests with more than one in-range stay once "returning" is redefined
        in_range = {r.guest_id for r in reservations if start_date <= r.check_in <= end_date}

        return GuestActivityReport(
            date_from=start_date,
            date_to=end_date,
            new_guests=new_guests,
            returning_guests=len(in_range),
            total_guests=self.store.count(EntityKind.GUESTS),
        )

    # ============== 仪表盘 ==============

    def get_dashboard_stats(self) -> DashboardStats:
        """获取仪表盘统计数据"""
        today = self._today()
        rooms = self.store.all(EntityKind.ROOMS)
        total_rooms = len(rooms)
        occupied = len([r for r in rooms if r.status == RoomStatus.OCCUPIED])
        occupancy_rate = (occupied / total_rooms * 100) if total_rooms > 0 else 0

        active = self.store.find(
            EntityKind.RESERVATIONS,
            lambda r: r.status == ReservationStatus.CHECKED_IN or (
                r.status == ReservationStatus.CONFIRMED and r.check_in <= today <= r.check_out
            )
        )
        daily_revenue = sum((self._room_price(r.room_id) for r in active), Decimal("0"))

        return DashboardStats(
            total_rooms=total_rooms,
            occupied_rooms=occupied,
            occupancy_rate=round(occupancy_rate, 1),
            daily_revenue=daily_revenue,
            active_reservations=len(active),
            recent_activity=self.get_recent_activity(),
            alerts=self.get_alerts(),
        )

    def get_recent_activity(self, limit: int = None) -> List[ActivityItem]:
        """最近的预订（按入住日期倒序）"""
        limit = limit or settings.RECENT_ACTIVITY_LIMIT
        recent = sorted(
            self.store.all(EntityKind.RESERVATIONS), key=lambda r: r.check_in, reverse=True
        )[:limit]

        items = []
        for r in recent:
            guest = self.store.get(EntityKind.GUESTS, r.guest_id)
            room = self.store.get(EntityKind.ROOMS, r.room_id)
            items.append(ActivityItem(
                reservation_id=r.id,
                guest_name=guest.name if guest else UNKNOWN_GUEST,
                room_number=room.number if room else UNKNOWN_ROOM,
                status=r.status,
                check_in=r.check_in,
            ))
        return items

    def get_alerts(self) -> List[DashboardAlert]:
        """维修房间、今日退房、员工不足提醒"""
        today = self._today()
        alerts = []

        for room in self.store.find(EntityKind.ROOMS, lambda r: r.status == RoomStatus.MAINTENANCE):
            alerts.append(DashboardAlert(
                level="warning", message=f"Room {room.number} is under maintenance"
            ))

        checkouts = self.store.find(
            EntityKind.RESERVATIONS,
            lambda r: r.status == ReservationStatus.CHECKED_IN and r.check_out == today
        )
        for r in checkouts:
            guest = self.store.get(EntityKind.GUESTS, r.guest_id)
            room = self.store.get(EntityKind.ROOMS, r.room_id)
            alerts.append(DashboardAlert(
                level="info",
                message=f"{guest.name if guest else 'Guest'} checkout due today "
                        f"from Room {room.number if room else 'Unknown'}",
            ))

        active_staff = self.store.find(EntityKind.STAFF, lambda s: s.status == StaffStatus.ACTIVE)
        if len(active_staff) < settings.LOW_STAFF_THRESHOLD:
            alerts.append(DashboardAlert(
                level="warning", message="Low staff count - consider scheduling more staff"
            ))

        return alerts
