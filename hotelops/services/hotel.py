"""
酒店上下文
持有唯一的 EntityStore 和持久化适配器，并把它们显式注入各个服务
"""
import logging
from datetime import date
from typing import Callable, Optional

from sqlalchemy.orm import sessionmaker

from hotelops.config import settings
from hotelops.database import create_storage_engine, engine, init_db
from hotelops.models.entities import EntityKind, Record
from hotelops.services.dispatch import build_dispatch_table
from hotelops.services.guest_service import GuestService
from hotelops.services.persistence import LocalStorage, SnapshotPersistence
from hotelops.services.report_service import ReportService
from hotelops.services.reservation_service import ReservationService
from hotelops.services.room_service import RoomService
from hotelops.services.sample_data import seed_sample_data
from hotelops.services.staff_service import StaffService
from hotelops.services.store import EntityStore

logger = logging.getLogger(__name__)


class Hotel:
    """
    酒店上下文

    每次成功修改后整体保存快照。保存失败时内存数据保留，
    unsaved 置为 True 供界面提示，下一次修改会再次尝试保存。
    """

    def __init__(self, persistence: Optional[SnapshotPersistence] = None,
                 store: EntityStore = None, today: Callable[[], date] = date.today):
        self.store = store or EntityStore()
        self.persistence = persistence
        self.unsaved = False

        self.rooms = RoomService(self.store, self.save)
        self.guests = GuestService(self.store, self.save)
        self.staff = StaffService(self.store, self.save)
        self.reservations = ReservationService(self.store, self.save, today=today)
        self.reports = ReportService(self.store, today=today)
        self.handlers = build_dispatch_table(self)

    @classmethod
    def open(cls, persistence: SnapshotPersistence, seed: bool = False,
             today: Callable[[], date] = date.today) -> "Hotel":
        """从持久化存储加载；seed 为 True 且没有房间时写入示例数据"""
        hotel = cls(persistence, today=today)
        persistence.load(hotel.store)
        logger.info(
            "Loaded %d rooms, %d reservations, %d guests, %d staff",
            *(hotel.store.count(kind) for kind in EntityKind)
        )

        if seed and hotel.store.count(EntityKind.ROOMS) == 0:
            seed_sample_data(hotel, today())
        return hotel

    def save(self) -> bool:
        """保存快照"""
        if self.persistence is None:
            return True
        ok = self.persistence.save(self.store)
        self.unsaved = not ok
        if not ok:
            logger.warning("In-memory changes are not saved; will retry on next change")
        return ok

    def submit(self, kind: EntityKind, fields: dict, editing_id: str = None) -> Record:
        """表单提交：没有 editing_id 时创建，否则更新"""
        handlers = self.handlers[EntityKind(kind)]
        if editing_id:
            return handlers.update(editing_id, fields)
        return handlers.create(fields)

    def delete(self, kind: EntityKind, entity_id: str):
        return self.handlers[EntityKind(kind)].delete(entity_id)


def open_local_hotel(database_url: str = None, seed: bool = None) -> Hotel:
    """打开本地 SQLite 键值存储中的酒店数据"""
    bind = create_storage_engine(database_url) if database_url else engine
    init_db(bind)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=bind)
    persistence = SnapshotPersistence(LocalStorage(session_factory))
    return Hotel.open(persistence, seed=settings.SEED_SAMPLE_DATA if seed is None else seed)
