"""
键值存储表
每个实体集合以一条记录保存，value 为整个集合的 JSON 快照
"""
from datetime import datetime

from sqlalchemy import Column, String, Text, DateTime

from hotelops.database import Base


class KeyValueEntry(Base):
    """本地存储条目"""
    __tablename__ = "kv_store"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)
