"""
示例数据
首次启动且没有任何房间时写入
"""
import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from hotelops.models.entities import (
    EntityKind, Room, RoomType, RoomStatus, Guest, Staff, StaffRole, Shift,
    Reservation, ReservationStatus,
)

if TYPE_CHECKING:
    from hotelops.services.hotel import Hotel

logger = logging.getLogger(__name__)


def seed_sample_data(hotel: "Hotel", today: date = None):
    """写入示例房间、客人、员工和一条在住预订"""
    today = today or date.today()
    store = hotel.store

    rooms = [
        Room(number="101", type=RoomType.SINGLE, price=Decimal("80"), status=RoomStatus.AVAILABLE),
        Room(number="102", type=RoomType.DOUBLE, price=Decimal("120"), status=RoomStatus.OCCUPIED),
        Room(number="103", type=RoomType.SUITE, price=Decimal("200"), status=RoomStatus.AVAILABLE),
        Room(number="201", type=RoomType.DOUBLE, price=Decimal("120"), status=RoomStatus.MAINTENANCE),
        Room(number="202", type=RoomType.SINGLE, price=Decimal("80"), status=RoomStatus.AVAILABLE),
    ]
    guests = [
        Guest(name="John Smith", phone="+1234567890", email="john.smith@email.com",
              address="123 Main St, City, State"),
        Guest(name="Sarah Johnson", phone="+1987654321", email="sarah.johnson@email.com",
              address="456 Oak Ave, City, State"),
    ]
    staff = [
        Staff(name="Alice Manager", role=StaffRole.MANAGER, phone="+1111111111",
              email="alice@hotel.com", shift=Shift.MORNING),
        Staff(name="Bob Reception", role=StaffRole.RECEPTION, phone="+2222222222",
              email="bob@hotel.com", shift=Shift.AFTERNOON),
    ]

    for room in rooms:
        store.add(EntityKind.ROOMS, room)
    for guest in guests:
        store.add(EntityKind.GUESTS, guest)
    for member in staff:
        store.add(EntityKind.STAFF, member)

    store.add(EntityKind.RESERVATIONS, Reservation(
        guest_id=guests[0].id,
        room_id=rooms[1].id,
        check_in=today,
        check_out=today + timedelta(days=7),
        status=ReservationStatus.CHECKED_IN,
        total_amount=Decimal("840"),
    ))

    logger.info("Sample data initialized")
    hotel.save()
