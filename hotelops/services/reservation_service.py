"""
预订服务
管理 Reservation 对象：日期校验、同房间重叠检测、总价计算，
并在每次预订变化后重新推导房态
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional

from hotelops.models.entities import (
    EntityKind, Room, Reservation, ReservationStatus, RELEASED_STATUSES,
)
from hotelops.models.schemas import ReservationCreate, ReservationUpdate, ReservationDetail
from hotelops.services.errors import InvalidDateRange, RoomUnavailable, EntityNotFound
from hotelops.services.room_status import derive_room_status
from hotelops.services.store import EntityStore

logger = logging.getLogger(__name__)

UNKNOWN_GUEST = "Unknown Guest"
UNKNOWN_ROOM = "Unknown Room"


def calculate_total_amount(room: Room, check_in: date, check_out: date) -> Decimal:
    """总价 = 入住晚数 × 房价"""
    nights = (check_out - check_in).days
    return nights * room.price


class ReservationService:
    """预订服务"""

    def __init__(self, store: EntityStore, on_change: Callable[[], object] = None,
                 today: Callable[[], date] = date.today):
        self.store = store
        self._on_change = on_change or (lambda: None)
        self._today = today

    # ============== 查询 ==============

    def get_reservations(self, status: Optional[ReservationStatus] = None,
                         search: Optional[str] = None) -> List[Reservation]:
        """获取预订列表，支持按客人姓名/房间号/预订号搜索"""
        reservations = self.store.all(EntityKind.RESERVATIONS)

        if search:
            term = search.lower()
            reservations = [r for r in reservations if self._matches(r, term)]
        if status:
            reservations = [r for r in reservations if r.status == status]

        return reservations

    def _matches(self, reservation: Reservation, term: str) -> bool:
        guest = self.store.get(EntityKind.GUESTS, reservation.guest_id)
        room = self.store.get(EntityKind.ROOMS, reservation.room_id)
        return (
            (guest is not None and term in guest.name.lower())
            or (room is not None and term in room.number.lower())
            or term in reservation.id.lower()
        )

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        return self.store.get(EntityKind.RESERVATIONS, reservation_id)

    def get_reservation_detail(self, reservation: Reservation) -> ReservationDetail:
        """预订详情（包含客人姓名和房间号）"""
        guest = self.store.get(EntityKind.GUESTS, reservation.guest_id)
        room = self.store.get(EntityKind.ROOMS, reservation.room_id)
        return ReservationDetail(
            id=reservation.id,
            guest_id=reservation.guest_id,
            guest_name=guest.name if guest else UNKNOWN_GUEST,
            room_id=reservation.room_id,
            room_number=room.number if room else UNKNOWN_ROOM,
            check_in=reservation.check_in,
            check_out=reservation.check_out,
            status=reservation.status,
            total_amount=reservation.total_amount,
        )

    def get_reservation_details(self, status: Optional[ReservationStatus] = None,
                                search: Optional[str] = None) -> List[ReservationDetail]:
        return [self.get_reservation_detail(r) for r in self.get_reservations(status, search)]

    def find_conflicts(self, room_id: str, check_in: date, check_out: date,
                       exclude_id: str = None) -> List[Reservation]:
        """同一房间上与 [check_in, check_out) 重叠的未释放预订"""
        return self.store.find(
            EntityKind.RESERVATIONS,
            lambda r: (
                r.room_id == room_id
                and r.id != exclude_id
                and r.status not in RELEASED_STATUSES
                and r.overlaps(check_in, check_out)
            )
        )

    # ============== 变更 ==============

    def _validate(self, room_id: str, check_in: date, check_out: date, exclude_id: str = None):
        if check_out <= check_in:
            raise InvalidDateRange()
        if self.find_conflicts(room_id, check_in, check_out, exclude_id):
            raise RoomUnavailable()

    def create_reservation(self, data: ReservationCreate) -> Reservation:
        """创建预订"""
        self._validate(data.room_id, data.check_in, data.check_out)

        room = self.store.get(EntityKind.ROOMS, data.room_id)
        if not room:
            raise EntityNotFound("Room", data.room_id)

        reservation = Reservation(
            **data.model_dump(),
            total_amount=calculate_total_amount(room, data.check_in, data.check_out),
        )
        self.store.add(EntityKind.RESERVATIONS, reservation)
        self._refresh_room_status(room, reservation)

        logger.info(
            f"Reservation {reservation.id} created for room {room.number} "
            f"({reservation.check_in} ~ {reservation.check_out})"
        )
        self._on_change()
        return reservation

    def update_reservation(self, reservation_id: str, data: ReservationUpdate) -> Reservation:
        """更新预订；总价只在创建时计算"""
        reservation = self.get_reservation(reservation_id)
        if not reservation:
            raise EntityNotFound("Reservation", reservation_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        merged = {**reservation.model_dump(), **update_data}
        self._validate(merged['room_id'], merged['check_in'], merged['check_out'], reservation_id)

        room = self.store.get(EntityKind.ROOMS, merged['room_id'])
        if 'room_id' in update_data and not room:
            raise EntityNotFound("Room", merged['room_id'])

        previous_room_id = reservation.room_id
        self.store.update(EntityKind.RESERVATIONS, reservation_id, update_data)

        if room:
            self._refresh_room_status(room, reservation)
        if previous_room_id != reservation.room_id:
            previous_room = self.store.get(EntityKind.ROOMS, previous_room_id)
            if previous_room:
                self._refresh_room_status(previous_room, None)

        self._on_change()
        return reservation

    def cancel_reservation(self, reservation_id: str) -> Reservation:
        """取消预订（保留记录，只修改状态）"""
        reservation = self.get_reservation(reservation_id)
        if not reservation:
            raise EntityNotFound("Reservation", reservation_id)

        reservation.status = ReservationStatus.CANCELLED
        room = self.store.get(EntityKind.ROOMS, reservation.room_id)
        if room:
            self._refresh_room_status(room, reservation)

        logger.info(f"Reservation {reservation_id} cancelled")
        self._on_change()
        return reservation

    def _refresh_room_status(self, room: Room, trigger: Optional[Reservation]):
        new_status = derive_room_status(
            room, self.store.all(EntityKind.RESERVATIONS), self._today(), trigger
        )
        if new_status != room.status:
            logger.info(f"Room {room.number}: {room.status.value} -> {new_status.value}")
            room.status = new_status
