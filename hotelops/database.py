"""
数据库配置 - SQLite 键值持久化层
数据库仅作为快照存储，所有业务操作在内存中的 EntityStore 上进行
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from hotelops.config import settings

Base = declarative_base()


def create_storage_engine(url: str = None) -> Engine:
    """创建存储引擎"""
    url = url or settings.DATABASE_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = create_storage_engine()


def init_db(bind: Engine = None):
    """初始化数据库表"""
    from hotelops.models import storage  # noqa
    Base.metadata.create_all(bind=bind or engine)
