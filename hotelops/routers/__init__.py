# API Routers
from hotelops.routers import rooms, guests, staff, reservations, reports, data

__all__ = ['rooms', 'guests', 'staff', 'reservations', 'reports', 'data']
