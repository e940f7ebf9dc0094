"""
HotelOps - 酒店运营管理
"""
__version__ = "1.0.0"
