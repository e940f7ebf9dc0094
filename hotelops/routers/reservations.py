"""
预订管理路由
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from hotelops.deps import get_hotel
from hotelops.models.entities import Reservation, ReservationStatus
from hotelops.models.schemas import ReservationCreate, ReservationUpdate, ReservationDetail
from hotelops.services.errors import EntityNotFound
from hotelops.services.hotel import Hotel

# 接口保持 async def 且内部不 await，所有修改在事件循环上串行执行；改成 def 会进入线程池并发访问同一个 EntityStore
router = APIRouter(prefix="/reservations", tags=["预订管理"])


@router.get("", response_model=List[ReservationDetail])
async def list_reservations(
    status: Optional[ReservationStatus] = None,
    search: Optional[str] = None,
    hotel: Hotel = Depends(get_hotel)
):
    """获取预订列表"""
    return hotel.reservations.get_reservation_details(status, search)


@router.get("/{reservation_id}", response_model=ReservationDetail)
async def get_reservation(reservation_id: str, hotel: Hotel = Depends(get_hotel)):
    """获取预订详情"""
    reservation = hotel.reservations.get_reservation(reservation_id)
    if not reservation:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")
    return hotel.reservations.get_reservation_detail(reservation)


@router.post("", response_model=Reservation)
async def create_reservation(data: ReservationCreate, hotel: Hotel = Depends(get_hotel)):
    """创建预订"""
    try:
        return hotel.reservations.create_reservation(data)
    except EntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{reservation_id}", response_model=Reservation)
async def update_reservation(reservation_id: str, data: ReservationUpdate,
                             hotel: Hotel = Depends(get_hotel)):
    """更新预订"""
    try:
        return hotel.reservations.update_reservation(reservation_id, data)
    except EntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/{reservation_id}/cancel", response_model=Reservation)
async def cancel_reservation(reservation_id: str, hotel: Hotel = Depends(get_hotel)):
    """取消预订"""
    try:
        return hotel.reservations.cancel_reservation(reservation_id)
    except EntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
