"""
实体存储 - 内存中的唯一数据源
按实体集合保存有序记录列表，负责分配 id
"""
import logging
import uuid
from typing import Callable, Dict, Iterable, List, Optional

from hotelops.models.entities import EntityKind, Record

logger = logging.getLogger(__name__)


def generate_id() -> str:
    """生成进程内唯一的实体 id"""
    return uuid.uuid4().hex


class EntityStore:
    """
    内存实体存储

    update 找不到 id 时不做任何修改并返回 None，调用方需要事先校验。
    """

    def __init__(self, id_factory: Callable[[], str] = None):
        self._collections: Dict[EntityKind, List[Record]] = {kind: [] for kind in EntityKind}
        self._id_factory = id_factory or generate_id

    def add(self, kind: EntityKind, record: Record) -> str:
        """追加记录并返回新分配的 id"""
        record.id = self._id_factory()
        self._collections[kind].append(record)
        logger.debug(f"{kind.value}: added {record.id}")
        return record.id

    def update(self, kind: EntityKind, entity_id: str, fields: dict) -> Optional[Record]:
        """合并字段到已有记录"""
        record = self.get(kind, entity_id)
        if record is None:
            return None
        for key, value in fields.items():
            setattr(record, key, value)
        return record

    def remove(self, kind: EntityKind, entity_id: str) -> bool:
        """删除记录"""
        before = len(self._collections[kind])
        self._collections[kind] = [r for r in self._collections[kind] if r.id != entity_id]
        return len(self._collections[kind]) < before

    def get(self, kind: EntityKind, entity_id: str) -> Optional[Record]:
        for record in self._collections[kind]:
            if record.id == entity_id:
                return record
        return None

    def find(self, kind: EntityKind, predicate: Callable[[Record], bool]) -> List[Record]:
        return [r for r in self._collections[kind] if predicate(r)]

    def all(self, kind: EntityKind) -> List[Record]:
        return list(self._collections[kind])

    def count(self, kind: EntityKind) -> int:
        return len(self._collections[kind])

    def replace(self, kind: EntityKind, records: Iterable[Record]):
        """整体替换某个集合（加载快照时使用）"""
        self._collections[kind] = list(records)

    def snapshot(self) -> Dict[EntityKind, List[dict]]:
        """导出所有集合的扁平记录"""
        return {
            kind: [r.to_storage() for r in records]
            for kind, records in self._collections.items()
        }
