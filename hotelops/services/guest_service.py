"""
客人服务
管理 Guest 对象，邮箱在客人之间唯一
"""
import logging
from typing import Callable, List, Optional

from hotelops.models.entities import EntityKind, Guest, Reservation
from hotelops.models.schemas import GuestCreate, GuestUpdate, GuestSummary
from hotelops.services.errors import DuplicateGuestEmail, GuestHasReservations, EntityNotFound
from hotelops.services.store import EntityStore

logger = logging.getLogger(__name__)


class GuestService:
    """客人服务"""

    def __init__(self, store: EntityStore, on_change: Callable[[], object] = None):
        self.store = store
        self._on_change = on_change or (lambda: None)

    def get_guests(self, search: Optional[str] = None) -> List[Guest]:
        """获取客人列表，支持按姓名/电话/邮箱搜索"""
        guests = self.store.all(EntityKind.GUESTS)
        if not search:
            return guests

        term = search.lower()
        return [
            g for g in guests
            if term in g.name.lower() or search in g.phone or term in g.email.lower()
        ]

    def get_guest(self, guest_id: str) -> Optional[Guest]:
        return self.store.get(EntityKind.GUESTS, guest_id)

    def get_guest_by_email(self, email: str, exclude_id: str = None) -> Optional[Guest]:
        matches = self.store.find(
            EntityKind.GUESTS, lambda g: g.email == email and g.id != exclude_id
        )
        return matches[0] if matches else None

    def create_guest(self, data: GuestCreate) -> Guest:
        """创建客人"""
        if self.get_guest_by_email(data.email):
            raise DuplicateGuestEmail()

        guest = Guest(**data.model_dump())
        self.store.add(EntityKind.GUESTS, guest)
        logger.info(f"Guest {guest.id} created")
        self._on_change()
        return guest

    def update_guest(self, guest_id: str, data: GuestUpdate) -> Guest:
        """更新客人信息"""
        if not self.get_guest(guest_id):
            raise EntityNotFound("Guest", guest_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if 'email' in update_data and self.get_guest_by_email(update_data['email'], exclude_id=guest_id):
            raise DuplicateGuestEmail()

        guest = self.store.update(EntityKind.GUESTS, guest_id, update_data)
        self._on_change()
        return guest

    def delete_guest(self, guest_id: str) -> bool:
        """删除客人；只要存在任何状态的预订就不可删除"""
        if not self.get_guest(guest_id):
            raise EntityNotFound("Guest", guest_id)

        if self.get_guest_reservations(guest_id):
            raise GuestHasReservations()

        self.store.remove(EntityKind.GUESTS, guest_id)
        logger.info(f"Guest {guest_id} deleted")
        self._on_change()
        return True

    def get_guest_reservations(self, guest_id: str) -> List[Reservation]:
        return self.store.find(EntityKind.RESERVATIONS, lambda r: r.guest_id == guest_id)

    def get_guest_summaries(self, search: Optional[str] = None) -> List[GuestSummary]:
        """客人列表行，附带累计预订次数"""
        return [
            GuestSummary(
                id=g.id,
                name=g.name,
                phone=g.phone,
                email=g.email,
                address=g.address,
                total_stays=len(self.get_guest_reservations(g.id)),
            )
            for g in self.get_guests(search)
        ]
