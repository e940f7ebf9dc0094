"""
员工服务
"""
import logging
from typing import Callable, List, Optional

from hotelops.models.entities import EntityKind, Staff, StaffStatus
from hotelops.models.schemas import StaffCreate, StaffUpdate
from hotelops.services.errors import EntityNotFound
from hotelops.services.store import EntityStore

logger = logging.getLogger(__name__)


class StaffService:
    """员工服务"""

    def __init__(self, store: EntityStore, on_change: Callable[[], object] = None):
        self.store = store
        self._on_change = on_change or (lambda: None)

    def get_staff_list(self, status: Optional[StaffStatus] = None) -> List[Staff]:
        if status is None:
            return self.store.all(EntityKind.STAFF)
        return self.store.find(EntityKind.STAFF, lambda s: s.status == status)

    def get_staff(self, staff_id: str) -> Optional[Staff]:
        return self.store.get(EntityKind.STAFF, staff_id)

    def create_staff(self, data: StaffCreate) -> Staff:
        """创建员工，新员工默认在职"""
        staff = Staff(**data.model_dump(), status=StaffStatus.ACTIVE)
        self.store.add(EntityKind.STAFF, staff)
        logger.info(f"Staff {staff.id} created")
        self._on_change()
        return staff

    def update_staff(self, staff_id: str, data: StaffUpdate) -> Staff:
        if not self.get_staff(staff_id):
            raise EntityNotFound("Staff", staff_id)

        staff = self.store.update(
            EntityKind.STAFF, staff_id, data.model_dump(exclude_unset=True, exclude_none=True)
        )
        self._on_change()
        return staff

    def delete_staff(self, staff_id: str) -> bool:
        if not self.get_staff(staff_id):
            raise EntityNotFound("Staff", staff_id)

        self.store.remove(EntityKind.STAFF, staff_id)
        logger.info(f"Staff {staff_id} deleted")
        self._on_change()
        return True
