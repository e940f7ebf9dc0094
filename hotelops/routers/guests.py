"""
客人管理路由
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from hotelops.deps import get_hotel
from hotelops.models.entities import Guest
from hotelops.models.schemas import GuestCreate, GuestUpdate, GuestSummary
from hotelops.services.errors import EntityNotFound
from hotelops.services.hotel import Hotel

# 接口保持 async def 且内部不 await，所有修改在事件循环上串行执行；改成 def 会进入线程池并发访问同一个 EntityStore
router = APIRouter(prefix="/guests", tags=["客人管理"])


@router.get("", response_model=List[GuestSummary])
async def list_guests(search: Optional[str] = None, hotel: Hotel = Depends(get_hotel)):
    """获取客人列表"""
    return hotel.guests.get_guest_summaries(search)


@router.get("/{guest_id}", response_model=Guest)
async def get_guest(guest_id: str, hotel: Hotel = Depends(get_hotel)):
    guest = hotel.guests.get_guest(guest_id)
    if not guest:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Guest not found")
    return guest


@router.post("", response_model=Guest)
async def create_guest(data: GuestCreate, hotel: Hotel = Depends(get_hotel)):
    """创建客人"""
    try:
        return hotel.guests.create_guest(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{guest_id}", response_model=Guest)
async def update_guest(guest_id: str, data: GuestUpdate, hotel: Hotel = Depends(get_hotel)):
    """更新客人信息"""
    try:
        return hotel.guests.update_guest(guest_id, data)
    except EntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{guest_id}")
async def delete_guest(guest_id: str, hotel: Hotel = Depends(get_hotel)):
    """删除客人"""
    try:
        hotel.guests.delete_guest(guest_id)
        return {"message": "Guest deleted successfully"}
    except EntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
