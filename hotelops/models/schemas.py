"""
Pydantic 模式定义
用于表单输入校验和报表输出
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from hotelops.models.entities import (
    Money, RoomType, RoomStatus, ReservationStatus, StaffRole, Shift, StaffStatus,
)


class FormModel(BaseModel):
    """表单输入，同时接受 camelCase 与 snake_case 字段名"""
    model_config = ConfigDict(populate_by_name=True)


# ============== 房间 Schemas ==============

class RoomCreate(FormModel):
    number: str = Field(..., min_length=1, max_length=10)
    type: RoomType
    # 最多 8 位整数和 2 位小数，经 JSON 数字保存后原样读回
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    status: RoomStatus = RoomStatus.AVAILABLE


class RoomUpdate(FormModel):
    number: Optional[str] = Field(None, min_length=1, max_length=10)
    type: Optional[RoomType] = None
    price: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    status: Optional[RoomStatus] = None


# ============== 客人 Schemas ==============

class GuestCreate(FormModel):
    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field("", max_length=30)
    email: str = Field(..., min_length=1, max_length=100)
    address: str = ""


class GuestUpdate(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    email: Optional[str] = Field(None, min_length=1, max_length=100)
    address: Optional[str] = None


# ============== 员工 Schemas ==============

class StaffCreate(FormModel):
    name: str = Field(..., min_length=1, max_length=100)
    role: StaffRole
    phone: str = Field("", max_length=30)
    email: str = ""
    shift: Shift


class StaffUpdate(FormModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[StaffRole] = None
    phone: Optional[str] = Field(None, max_length=30)
    email: Optional[str] = None
    shift: Optional[Shift] = None
    status: Optional[StaffStatus] = None


# ============== 预订 Schemas ==============

class ReservationCreate(FormModel):
    guest_id: str = Field(..., alias="guestId")
    room_id: str = Field(..., alias="roomId")
    check_in: date = Field(..., alias="checkIn")
    check_out: date = Field(..., alias="checkOut")
    status: ReservationStatus = ReservationStatus.CONFIRMED


class ReservationUpdate(FormModel):
    guest_id: Optional[str] = Field(None, alias="guestId")
    room_id: Optional[str] = Field(None, alias="roomId")
    check_in: Optional[date] = Field(None, alias="checkIn")
    check_out: Optional[date] = Field(None, alias="checkOut")
    status: Optional[ReservationStatus] = None


class ReservationDetail(BaseModel):
    """预订列表行（包含关联信息）"""
    id: str
    guest_id: str
    guest_name: str
    room_id: str
    room_number: str
    check_in: date
    check_out: date
    status: ReservationStatus
    total_amount: Money


class GuestSummary(BaseModel):
    """客人列表行"""
    id: str
    name: str
    phone: str
    email: str
    address: str
    total_stays: int


# ============== 报表 Schemas ==============

class OccupancyDay(BaseModel):
    day: date
    occupied_rooms: int
    total_rooms: int
    occupancy_rate: float


class OccupancyReport(BaseModel):
    date_from: date
    date_to: date
    days: List[OccupancyDay]
    average_rate: float


class RevenueDay(BaseModel):
    day: date
    revenue: Money


class RevenueReport(BaseModel):
    date_from: date
    date_to: date
    days: List[RevenueDay]
    total_revenue: Money
    average_daily_revenue: Money


class GuestActivityReport(BaseModel):
    date_from: date
    date_to: date
    new_guests: int
    returning_guests: int
    total_guests: int


class ActivityItem(BaseModel):
    reservation_id: str
    guest_name: str
    room_number: str
    status: ReservationStatus
    check_in: date


class DashboardAlert(BaseModel):
    level: str  # info / warning
    message: str


class DashboardStats(BaseModel):
    total_rooms: int
    occupied_rooms: int
    occupancy_rate: float
    daily_revenue: Money
    active_reservations: int
    recent_activity: List[ActivityItem] = []
    alerts: List[DashboardAlert] = []
