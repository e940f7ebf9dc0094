"""
员工服务测试
"""
import pytest

from hotelops.models.entities import StaffRole, StaffStatus, Shift
from hotelops.models.schemas import StaffCreate, StaffUpdate
from hotelops.services.errors import EntityNotFound


def _create(hotel, name="Alice Manager", role=StaffRole.MANAGER):
    return hotel.staff.create_staff(StaffCreate(name=name, role=role, shift=Shift.MORNING))


class TestStaffService:

    def test_new_staff_is_active(self, hotel):
        staff = _create(hotel)
        assert staff.id
        assert staff.status == StaffStatus.ACTIVE

    def test_update_staff(self, hotel):
        staff = _create(hotel)
        hotel.staff.update_staff(staff.id, StaffUpdate(shift=Shift.NIGHT, role=StaffRole.SECURITY))
        updated = hotel.staff.get_staff(staff.id)
        assert updated.shift == Shift.NIGHT
        assert updated.role == StaffRole.SECURITY
        assert updated.status == StaffStatus.ACTIVE

    def test_deactivate_and_filter(self, hotel):
        alice = _create(hotel)
        _create(hotel, name="Bob Reception", role=StaffRole.RECEPTION)
        hotel.staff.update_staff(alice.id, StaffUpdate(status=StaffStatus.INACTIVE))

        active = hotel.staff.get_staff_list(StaffStatus.ACTIVE)
        assert [s.name for s in active] == ["Bob Reception"]
        assert len(hotel.staff.get_staff_list()) == 2

    def test_delete_staff(self, hotel):
        staff = _create(hotel)
        assert hotel.staff.delete_staff(staff.id) is True
        assert hotel.staff.get_staff(staff.id) is None

    def test_missing_staff(self, hotel):
        with pytest.raises(EntityNotFound):
            hotel.staff.update_staff("missing", StaffUpdate(name="X"))
        with pytest.raises(EntityNotFound):
            hotel.staff.delete_staff("missing")
