"""
持久化适配器
把四个实体集合作为 JSON 快照写入本地键值存储；
快照缺失或无法解析时该集合按空列表加载
"""
import json
import logging
from typing import Dict, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from hotelops.config import settings
from hotelops.models.entities import ENTITY_MODELS, EntityKind
from hotelops.models.storage import KeyValueEntry
from hotelops.services.errors import StorageQuotaExceeded
from hotelops.services.store import EntityStore

logger = logging.getLogger(__name__)


class LocalStorage:
    """基于 SQLite 的键值存储，带总字节配额"""

    def __init__(self, session_factory: sessionmaker, quota_bytes: int = None):
        self._session_factory = session_factory
        self.quota_bytes = quota_bytes if quota_bytes is not None else settings.STORAGE_QUOTA_BYTES

    def get_item(self, key: str) -> Optional[str]:
        with self._session_factory() as db:
            entry = db.get(KeyValueEntry, key)
            return entry.value if entry else None

    def set_item(self, key: str, value: str):
        self.set_items({key: value})

    def set_items(self, items: Dict[str, str]):
        """在一个事务内写入多个键，超出配额时不写入任何内容"""
        with self._session_factory() as db:
            others = db.query(KeyValueEntry).filter(~KeyValueEntry.key.in_(list(items))).all()
            used = sum(len(e.value.encode("utf-8")) for e in others)
            used += sum(len(v.encode("utf-8")) for v in items.values())
            if used > self.quota_bytes:
                raise StorageQuotaExceeded(
                    f"Storage quota exceeded: {used} bytes > {self.quota_bytes} bytes"
                )

            for key, value in items.items():
                entry = db.get(KeyValueEntry, key)
                if entry:
                    entry.value = value
                else:
                    db.add(KeyValueEntry(key=key, value=value))
            db.commit()

    def remove_item(self, key: str):
        with self._session_factory() as db:
            entry = db.get(KeyValueEntry, key)
            if entry:
                db.delete(entry)
                db.commit()


class SnapshotPersistence:
    """实体存储的快照读写"""

    def __init__(self, storage: LocalStorage, key_prefix: str = None):
        self.storage = storage
        self.key_prefix = key_prefix if key_prefix is not None else settings.STORAGE_KEY_PREFIX

    def key_for(self, kind: EntityKind) -> str:
        return f"{self.key_prefix}{kind.value}"

    def load(self, store: EntityStore) -> EntityStore:
        """从存储加载全部集合"""
        for kind in EntityKind:
            store.replace(kind, self._load_collection(kind))
        return store

    def _load_collection(self, kind: EntityKind) -> list:
        key = self.key_for(kind)
        try:
            raw = self.storage.get_item(key)
        except SQLAlchemyError as e:
            logger.error(f"Error loading {key}: {e}")
            return []
        if not raw:
            return []

        try:
            items = json.loads(raw)
            if not isinstance(items, list):
                raise ValueError("snapshot is not a list")
            model = ENTITY_MODELS[kind]
            return [model.model_validate(item) for item in items]
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError 是 ValueError 的子类
            logger.warning(f"Discarding unreadable snapshot {key}: {e}")
            return []

    def save(self, store: EntityStore) -> bool:
        """
        整体覆盖写入四个集合

        Returns:
            是否保存成功；失败时内存数据保持不变，由调用方提示警告
        """
        snapshot = store.snapshot()
        try:
            self.storage.set_items({
                self.key_for(kind): json.dumps(records, ensure_ascii=False)
                for kind, records in snapshot.items()
            })
        except (SQLAlchemyError, StorageQuotaExceeded) as e:
            logger.error(f"Error saving data: {e}")
            return False
        return True
