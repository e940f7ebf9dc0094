"""
HotelOps 主应用入口

所有接口都是 async 且不 await，修改在事件循环上串行执行，
同一时刻只有一个操作访问 EntityStore
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from hotelops import __version__
from hotelops.config import settings
from hotelops.routers import data, guests, reports, reservations, rooms, staff
from hotelops.services.hotel import Hotel, open_local_hotel

logger = logging.getLogger(__name__)

PERSISTENCE_WARNING_HEADER = "X-Persistence-Warning"


def configure_logging():
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(hotel: Hotel = None) -> FastAPI:
    """创建应用；未传入 hotel 时在启动阶段从默认数据库加载"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        if getattr(app.state, "hotel", None) is None:
            app.state.hotel = open_local_hotel()
        logger.info(f"{settings.APP_NAME} started")
        yield

    app = FastAPI(
        title=f"{settings.APP_NAME} - 酒店运营管理",
        description="房间、预订、客人、员工管理与经营报表",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.hotel = hotel

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def persistence_warning(request: Request, call_next):
        """快照保存失败时在响应头中提示"""
        response = await call_next(request)
        current = request.app.state.hotel
        if current is not None and current.unsaved:
            response.headers[PERSISTENCE_WARNING_HEADER] = "Changes are kept in memory but could not be saved"
        return response

    app.include_router(rooms.router)
    app.include_router(guests.router)
    app.include_router(staff.router)
    app.include_router(reservations.router)
    app.include_router(reports.router)
    app.include_router(data.router)

    @app.get("/")
    async def root():
        """根路径"""
        return {"name": settings.APP_NAME, "version": __version__}

    @app.get("/health")
    async def health_check():
        """健康检查"""
        return {"status": "healthy"}

    return app


app = create_app()
