"""
房间管理路由
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from hotelops.deps import get_hotel
from hotelops.models.entities import Room, RoomStatus
from hotelops.models.schemas import RoomCreate, RoomUpdate
from hotelops.services.errors import EntityNotFound
from hotelops.services.hotel import Hotel

# 接口保持 async def 且内部不 await，所有修改在事件循环上串行执行；改成 def 会进入线程池并发访问同一个 EntityStore
router = APIRouter(prefix="/rooms", tags=["房间管理"])


@router.get("", response_model=List[Room])
async def list_rooms(
    status: Optional[RoomStatus] = None,
    hotel: Hotel = Depends(get_hotel)
):
    """获取房间列表"""
    return hotel.rooms.get_rooms(status)


@router.get("/available", response_model=List[Room])
async def list_available_rooms(hotel: Hotel = Depends(get_hotel)):
    """可预订的房间"""
    return hotel.rooms.get_available_rooms()


@router.get("/status-summary")
async def get_room_status_summary(hotel: Hotel = Depends(get_hotel)):
    """获取房态统计"""
    return hotel.rooms.get_room_status_summary()


@router.get("/{room_id}", response_model=Room)
async def get_room(room_id: str, hotel: Hotel = Depends(get_hotel)):
    """获取房间详情"""
    room = hotel.rooms.get_room(room_id)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    return room


@router.post("", response_model=Room)
async def create_room(data: RoomCreate, hotel: Hotel = Depends(get_hotel)):
    """创建房间"""
    try:
        return hotel.rooms.create_room(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{room_id}", response_model=Room)
async def update_room(room_id: str, data: RoomUpdate, hotel: Hotel = Depends(get_hotel)):
    """更新房间"""
    try:
        return hotel.rooms.update_room(room_id, data)
    except EntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{room_id}")
async def delete_room(room_id: str, hotel: Hotel = Depends(get_hotel)):
    """删除房间"""
    try:
        hotel.rooms.delete_room(room_id)
        return {"message": "Room deleted successfully"}
    except EntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
