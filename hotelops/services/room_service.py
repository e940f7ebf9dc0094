"""
房间服务
管理 Room 对象；房态的自动变化由预订服务驱动
"""
import logging
from typing import Callable, List, Optional

from hotelops.models.entities import (
    EntityKind, Room, RoomStatus, Reservation, ACTIVE_STATUSES,
)
from hotelops.models.schemas import RoomCreate, RoomUpdate
from hotelops.services.errors import DuplicateRoomNumber, RoomHasActiveReservation, EntityNotFound
from hotelops.services.store import EntityStore

logger = logging.getLogger(__name__)


class RoomService:
    """房间服务"""

    def __init__(self, store: EntityStore, on_change: Callable[[], object] = None):
        self.store = store
        # 每次成功修改后调用（通常是保存快照）
        self._on_change = on_change or (lambda: None)

    def get_rooms(self, status: Optional[RoomStatus] = None) -> List[Room]:
        """获取房间列表"""
        if status is None:
            return self.store.all(EntityKind.ROOMS)
        return self.store.find(EntityKind.ROOMS, lambda r: r.status == status)

    def get_room(self, room_id: str) -> Optional[Room]:
        return self.store.get(EntityKind.ROOMS, room_id)

    def get_room_by_number(self, number: str, exclude_id: str = None) -> Optional[Room]:
        """根据房间号获取房间"""
        matches = self.store.find(
            EntityKind.ROOMS, lambda r: r.number == number and r.id != exclude_id
        )
        return matches[0] if matches else None

    def get_available_rooms(self) -> List[Room]:
        """可预订的房间（预订表单下拉框）"""
        return self.get_rooms(RoomStatus.AVAILABLE)

    def create_room(self, data: RoomCreate) -> Room:
        """创建房间"""
        if self.get_room_by_number(data.number):
            raise DuplicateRoomNumber()

        room = Room(**data.model_dump())
        self.store.add(EntityKind.ROOMS, room)
        logger.info(f"Room {room.number} created")
        self._on_change()
        return room

    def update_room(self, room_id: str, data: RoomUpdate) -> Room:
        """更新房间"""
        if not self.get_room(room_id):
            raise EntityNotFound("Room", room_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if 'number' in update_data and self.get_room_by_number(update_data['number'], exclude_id=room_id):
            raise DuplicateRoomNumber()

        room = self.store.update(EntityKind.ROOMS, room_id, update_data)
        self._on_change()
        return room

    def delete_room(self, room_id: str) -> bool:
        """删除房间；存在已确认或在住预订时不可删除"""
        room = self.get_room(room_id)
        if not room:
            raise EntityNotFound("Room", room_id)

        if any(r.status in ACTIVE_STATUSES for r in self.get_room_reservations(room_id)):
            raise RoomHasActiveReservation()

        self.store.remove(EntityKind.ROOMS, room_id)
        logger.info(f"Room {room.number} deleted")
        self._on_change()
        return True

    def get_room_status_summary(self) -> dict:
        """获取房态统计"""
        rooms = self.get_rooms()
        summary = {'total': len(rooms)}
        for status in RoomStatus:
            summary[status.value] = len([r for r in rooms if r.status == status])
        return summary

    def get_room_reservations(self, room_id: str) -> List[Reservation]:
        return self.store.find(EntityKind.RESERVATIONS, lambda r: r.room_id == room_id)
