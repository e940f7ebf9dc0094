"""
员工管理路由
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from hotelops.deps import get_hotel
from hotelops.models.entities import Staff, StaffStatus
from hotelops.models.schemas import StaffCreate, StaffUpdate
from hotelops.services.errors import EntityNotFound
from hotelops.services.hotel import Hotel

# 接口保持 async def 且内部不 await，所有修改在事件循环上串行执行；改成 def 会进入线程池并发访问同一个 EntityStore
router = APIRouter(prefix="/staff", tags=["员工管理"])


@router.get("", response_model=List[Staff])
async def list_staff(status: Optional[StaffStatus] = None, hotel: Hotel = Depends(get_hotel)):
    """获取员工列表"""
    return hotel.staff.get_staff_list(status)


@router.post("", response_model=Staff)
async def create_staff(data: StaffCreate, hotel: Hotel = Depends(get_hotel)):
    """创建员工"""
    return hotel.staff.create_staff(data)


@router.put("/{staff_id}", response_model=Staff)
async def update_staff(staff_id: str, data: StaffUpdate, hotel: Hotel = Depends(get_hotel)):
    """更新员工"""
    try:
        return hotel.staff.update_staff(staff_id, data)
    except EntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{staff_id}")
async def delete_staff(staff_id: str, hotel: Hotel = Depends(get_hotel)):
    """删除员工"""
    try:
        hotel.staff.delete_staff(staff_id)
        return {"message": "Staff deleted successfully"}
    except EntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
