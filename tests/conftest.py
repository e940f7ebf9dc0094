"""
Pytest 配置和共享 fixtures
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hotelops.database import Base
from hotelops.main import create_app
from hotelops.models.entities import EntityKind
from hotelops.models import storage  # noqa
from hotelops.services.hotel import Hotel
from hotelops.services.persistence import LocalStorage, SnapshotPersistence

TODAY = date(2024, 1, 10)


@pytest.fixture(scope="function")
def db_engine():
    """创建内存数据库引擎"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def local_storage(session_factory):
    return LocalStorage(session_factory, quota_bytes=5 * 1024 * 1024)


@pytest.fixture
def persistence(local_storage):
    return SnapshotPersistence(local_storage, key_prefix="hotel_")


@pytest.fixture
def hotel(persistence):
    """固定“今天”为 2024-01-10 的酒店上下文"""
    return Hotel(persistence, today=lambda: TODAY)


@pytest.fixture
def client(hotel):
    """创建测试客户端"""
    app = create_app(hotel)
    with TestClient(app) as test_client:
        yield test_client


# ============== 数据 Fixtures ==============

@pytest.fixture
def make_room(hotel):
    """房间工厂"""
    def _make(number="101", price="100", type="single", **kwargs):
        return hotel.submit(EntityKind.ROOMS, {"number": number, "type": type, "price": price, **kwargs})
    return _make


@pytest.fixture
def make_guest(hotel):
    """客人工厂"""
    def _make(name="John Smith", email="john.smith@email.com", phone="+1234567890", **kwargs):
        return hotel.submit(EntityKind.GUESTS, {"name": name, "email": email, "phone": phone, **kwargs})
    return _make


@pytest.fixture
def make_reservation(hotel):
    """预订工厂，日期使用 ISO 字符串"""
    def _make(guest, room, check_in, check_out, status="confirmed"):
        return hotel.submit(EntityKind.RESERVATIONS, {
            "guestId": guest.id,
            "roomId": room.id,
            "checkIn": check_in,
            "checkOut": check_out,
            "status": status,
        })
    return _make
