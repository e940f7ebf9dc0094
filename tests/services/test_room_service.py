"""
房间服务测试
"""
from decimal import Decimal

import pytest

from hotelops.models.entities import EntityKind, RoomStatus, RoomType
from hotelops.models.schemas import RoomCreate, RoomUpdate
from hotelops.services.store import EntityStore
from hotelops.services.errors import (
    DuplicateRoomNumber, RoomHasActiveReservation, EntityNotFound,
)


class TestRoomCreate:

    def test_create_room(self, hotel):
        """测试创建房间"""
        room = hotel.rooms.create_room(RoomCreate(number="101", type=RoomType.SINGLE, price=Decimal("80")))
        assert room.id
        assert room.status == RoomStatus.AVAILABLE
        assert hotel.rooms.get_room(room.id) is room

    def test_duplicate_number_rejected(self, hotel, make_room):
        """房间号唯一"""
        make_room("101")
        with pytest.raises(DuplicateRoomNumber, match="Room number already exists"):
            hotel.rooms.create_room(RoomCreate(number="101", type=RoomType.SUITE, price=Decimal("200")))
        assert len(hotel.rooms.get_rooms()) == 1

    def test_non_positive_price_rejected(self, hotel):
        with pytest.raises(ValueError):
            hotel.rooms.create_room(RoomCreate(number="101", type=RoomType.SINGLE, price=Decimal("0")))

    def test_create_persists_snapshot(self, hotel, persistence, make_room):
        make_room("101")
        assert persistence.load(EntityStore()).count(EntityKind.ROOMS) == 1


class TestRoomUpdate:

    def test_update_price(self, hotel, make_room):
        room = make_room("101")
        updated = hotel.rooms.update_room(room.id, RoomUpdate(price=Decimal("150")))
        assert updated.price == Decimal("150")
        assert updated.number == "101"

    def test_update_to_existing_number_rejected(self, hotel, make_room):
        make_room("101")
        room = make_room("102")
        with pytest.raises(DuplicateRoomNumber):
            hotel.rooms.update_room(room.id, RoomUpdate(number="101"))
        assert hotel.rooms.get_room(room.id).number == "102"

    def test_update_keeps_own_number(self, hotel, make_room):
        room = make_room("101")
        updated = hotel.rooms.update_room(room.id, RoomUpdate(number="101", type=RoomType.DOUBLE))
        assert updated.type == RoomType.DOUBLE

    def test_set_maintenance_manually(self, hotel, make_room):
        room = make_room("101")
        hotel.rooms.update_room(room.id, RoomUpdate(status=RoomStatus.MAINTENANCE))
        assert hotel.rooms.get_room(room.id).status == RoomStatus.MAINTENANCE

    def test_update_missing_room(self, hotel):
        with pytest.raises(EntityNotFound):
            hotel.rooms.update_room("missing", RoomUpdate(price=Decimal("90")))


class TestRoomDelete:

    def test_delete_room(self, hotel, make_room):
        room = make_room("101")
        assert hotel.rooms.delete_room(room.id) is True
        assert hotel.rooms.get_room(room.id) is None

    def test_delete_with_active_reservation_fails_until_cancelled(
        self, hotel, make_room, make_guest, make_reservation
    ):
        """存在在住/已确认预订时不可删除，取消后可删除"""
        room = make_room("101")
        guest = make_guest()
        reservation = make_reservation(guest, room, "2024-01-20", "2024-01-22")

        with pytest.raises(RoomHasActiveReservation):
            hotel.rooms.delete_room(room.id)

        hotel.reservations.cancel_reservation(reservation.id)
        assert hotel.rooms.delete_room(room.id) is True

    def test_delete_with_checked_out_reservation(self, hotel, make_room, make_guest, make_reservation):
        room = make_room("101")
        make_reservation(make_guest(), room, "2024-01-01", "2024-01-03", status="checked-out")
        assert hotel.rooms.delete_room(room.id) is True

    def test_delete_missing_room(self, hotel):
        with pytest.raises(EntityNotFound):
            hotel.rooms.delete_room("missing")


class TestRoomQueries:

    def test_filter_by_status_and_summary(self, hotel, make_room):
        make_room("101")
        make_room("102", status="maintenance")
        make_room("103")

        assert [r.number for r in hotel.rooms.get_available_rooms()] == ["101", "103"]
        assert [r.number for r in hotel.rooms.get_rooms(RoomStatus.MAINTENANCE)] == ["102"]
        assert hotel.rooms.get_room_status_summary() == {
            "total": 3, "available": 2, "occupied": 0, "maintenance": 1,
        }

    def test_get_room_by_number(self, hotel, make_room):
        room = make_room("201")
        assert hotel.rooms.get_room_by_number("201") is room
        assert hotel.rooms.get_room_by_number("201", exclude_id=room.id) is None

    def test_room_reservations(self, hotel, make_room, make_guest, make_reservation):
        """只返回该房间的预订，其他房间的在住预订不影响删除"""
        guest = make_guest()
        room = make_room("101")
        other = make_room("102")
        own = make_reservation(guest, room, "2024-01-01", "2024-01-03", status="checked-out")
        make_reservation(guest, other, "2024-01-09", "2024-01-12", status="checked-in")

        assert [r.id for r in hotel.rooms.get_room_reservations(room.id)] == [own.id]
        assert hotel.rooms.delete_room(room.id) is True
