"""
实体定义
Room / Guest / Reservation / Staff 四类记录，持久化字段名使用 camelCase 别名
"""
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer


# 金额精确到分，在 JSON 快照中保存为数字
CENTS = Decimal("0.01")
Money = Annotated[
    Decimal,
    AfterValidator(lambda v: v.quantize(CENTS)),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class EntityKind(str, Enum):
    """实体集合"""
    ROOMS = "rooms"
    RESERVATIONS = "reservations"
    GUESTS = "guests"
    STAFF = "staff"


class RoomType(str, Enum):
    """房型"""
    SINGLE = "single"
    DOUBLE = "double"
    SUITE = "suite"


class RoomStatus(str, Enum):
    """房间状态"""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class ReservationStatus(str, Enum):
    """预订状态"""
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    CANCELLED = "cancelled"


# 占用房间的预订状态
ACTIVE_STATUSES = (ReservationStatus.CONFIRMED, ReservationStatus.CHECKED_IN)
# 已释放房间的预订状态
RELEASED_STATUSES = (ReservationStatus.CHECKED_OUT, ReservationStatus.CANCELLED)


class StaffRole(str, Enum):
    """员工角色"""
    MANAGER = "manager"
    RECEPTION = "reception"
    HOUSEKEEPING = "housekeeping"
    MAINTENANCE = "maintenance"
    SECURITY = "security"


class Shift(str, Enum):
    """班次"""
    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"


class StaffStatus(str, Enum):
    """员工状态"""
    ACTIVE = "active"
    INACTIVE = "inactive"


class Record(BaseModel):
    """所有实体的基类，id 由 EntityStore 分配"""
    id: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    def to_storage(self) -> dict:
        """序列化为快照中的扁平记录"""
        return self.model_dump(mode="json", by_alias=True)


class Room(Record):
    number: str
    type: RoomType
    price: Money = Field(..., gt=0)
    status: RoomStatus = RoomStatus.AVAILABLE


class Guest(Record):
    name: str
    phone: str = ""
    email: str
    address: str = ""
    history: List[Any] = Field(default_factory=list)


class Reservation(Record):
    guest_id: str = Field(..., alias="guestId")
    room_id: str = Field(..., alias="roomId")
    check_in: date = Field(..., alias="checkIn")
    check_out: date = Field(..., alias="checkOut")
    status: ReservationStatus = ReservationStatus.CONFIRMED
    total_amount: Money = Field(default=Decimal("0"), alias="totalAmount")

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES

    def covers(self, day: date) -> bool:
        """当天是否在 [checkIn, checkOut) 内"""
        return self.check_in <= day < self.check_out

    def overlaps(self, check_in: date, check_out: date) -> bool:
        """半开区间重叠判断"""
        return check_in < self.check_out and check_out > self.check_in


class Staff(Record):
    name: str
    role: StaffRole
    phone: str = ""
    email: str = ""
    shift: Shift
    status: StaffStatus = StaffStatus.ACTIVE


# 实体集合 -> 记录类型
ENTITY_MODELS = {
    EntityKind.ROOMS: Room,
    EntityKind.RESERVATIONS: Reservation,
    EntityKind.GUESTS: Guest,
    EntityKind.STAFF: Staff,
}
