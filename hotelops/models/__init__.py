"""
数据模型
"""
from hotelops.models.entities import (  # noqa
    EntityKind, Room, Guest, Reservation, Staff,
    RoomType, RoomStatus, ReservationStatus, StaffRole, Shift, StaffStatus,
)
