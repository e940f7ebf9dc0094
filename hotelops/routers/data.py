"""
数据导出与通用表单路由
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from pydantic import BaseModel

from hotelops.deps import get_hotel
from hotelops.models.entities import EntityKind
from hotelops.services.errors import EntityNotFound
from hotelops.services.export_service import export_all_json
from hotelops.services.hotel import Hotel

# 接口保持 async def 且内部不 await，所有修改在事件循环上串行执行；改成 def 会进入线程池并发访问同一个 EntityStore
router = APIRouter(tags=["数据管理"])


class FormSubmission(BaseModel):
    fields: Dict[str, Any]
    editing_id: Optional[str] = None


@router.get("/data/export")
async def export_data(hotel: Hotel = Depends(get_hotel)):
    """全量数据备份"""
    return Response(
        content=export_all_json(hotel.store),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="hotel-data-backup.json"'},
    )


@router.post("/forms/{kind}")
async def submit_form(kind: EntityKind, data: FormSubmission, hotel: Hotel = Depends(get_hotel)):
    """表单提交：editing_id 为空时创建，否则更新"""
    try:
        record = hotel.submit(kind, data.fields, data.editing_id)
    except EntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return record.to_storage()


@router.delete("/forms/{kind}/{entity_id}")
async def delete_entity(kind: EntityKind, entity_id: str, hotel: Hotel = Depends(get_hotel)):
    """删除实体（预订为取消）"""
    try:
        hotel.delete(kind, entity_id)
    except EntityNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"message": "OK"}
