"""
路由依赖
"""
from fastapi import Request

from hotelops.services.hotel import Hotel


def get_hotel(request: Request) -> Hotel:
    """依赖注入：获取当前应用的酒店上下文"""
    return request.app.state.hotel
