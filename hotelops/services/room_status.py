"""
房态推导
Room.status 是根据预订状态推导出的缓存字段，每次预订变化后重新计算
"""
from datetime import date
from typing import Iterable, Optional

from hotelops.models.entities import (
    Room, RoomStatus, Reservation, ReservationStatus, RELEASED_STATUSES,
)


def derive_room_status(room: Room, reservations: Iterable[Reservation], today: date,
                       trigger: Optional[Reservation] = None) -> RoomStatus:
    """
    根据触发预订和房间上的其他预订计算房态

    Args:
        room: 目标房间
        reservations: 所有预订（只看 room_id 匹配的）
        today: 当前日期
        trigger: 本次变化的预订；为 None 表示预订已从该房间移走

    Returns:
        新的房态。维修中的房间保持不变，只有显式编辑才能离开维修状态。
    """
    if room.status == RoomStatus.MAINTENANCE:
        return room.status

    if trigger is not None:
        if trigger.status == ReservationStatus.CHECKED_IN:
            return RoomStatus.OCCUPIED
        if trigger.status == ReservationStatus.CONFIRMED and trigger.check_in <= today:
            return RoomStatus.OCCUPIED
        if trigger.status not in RELEASED_STATUSES:
            return room.status

    trigger_id = trigger.id if trigger is not None else None
    has_other_active = any(
        r.room_id == room.id and r.id != trigger_id and r.is_active
        for r in reservations
    )
    return room.status if has_other_active else RoomStatus.AVAILABLE
