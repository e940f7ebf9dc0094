"""
表单分发表
实体类型 -> 创建/更新/删除处理函数
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict

from hotelops.models.entities import EntityKind, Record
from hotelops.models.schemas import (
    RoomCreate, RoomUpdate, GuestCreate, GuestUpdate,
    StaffCreate, StaffUpdate, ReservationCreate, ReservationUpdate,
)

if TYPE_CHECKING:
    from hotelops.services.hotel import Hotel


@dataclass(frozen=True)
class EntityHandlers:
    """某类实体的一组处理函数，入参为原始表单字段"""
    create: Callable[[dict], Record]
    update: Callable[[str, dict], Record]
    delete: Callable[[str], object]


def build_dispatch_table(hotel: "Hotel") -> Dict[EntityKind, EntityHandlers]:
    """构建分发表；预订没有物理删除，删除即取消"""
    return {
        EntityKind.ROOMS: EntityHandlers(
            create=lambda fields: hotel.rooms.create_room(RoomCreate.model_validate(fields)),
            update=lambda entity_id, fields: hotel.rooms.update_room(
                entity_id, RoomUpdate.model_validate(fields)),
            delete=hotel.rooms.delete_room,
        ),
        EntityKind.GUESTS: EntityHandlers(
            create=lambda fields: hotel.guests.create_guest(GuestCreate.model_validate(fields)),
            update=lambda entity_id, fields: hotel.guests.update_guest(
                entity_id, GuestUpdate.model_validate(fields)),
            delete=hotel.guests.delete_guest,
        ),
        EntityKind.STAFF: EntityHandlers(
            create=lambda fields: hotel.staff.create_staff(StaffCreate.model_validate(fields)),
            update=lambda entity_id, fields: hotel.staff.update_staff(
                entity_id, StaffUpdate.model_validate(fields)),
            delete=hotel.staff.delete_staff,
        ),
        EntityKind.RESERVATIONS: EntityHandlers(
            create=lambda fields: hotel.reservations.create_reservation(
                ReservationCreate.model_validate(fields)),
            update=lambda entity_id, fields: hotel.reservations.update_reservation(
                entity_id, ReservationUpdate.model_validate(fields)),
            delete=hotel.reservations.cancel_reservation,
        ),
    }
