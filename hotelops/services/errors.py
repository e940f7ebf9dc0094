"""
业务规则异常
所有规则违例都是可恢复的校验失败，消息直接展示给用户
"""


class RuleViolation(ValueError):
    """业务规则违例基类"""
    message = "Operation not allowed"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class DuplicateRoomNumber(RuleViolation):
    message = "Room number already exists"


class RoomHasActiveReservation(RuleViolation):
    message = "Cannot delete room with active reservations"


class DuplicateGuestEmail(RuleViolation):
    message = "Email already exists"


class GuestHasReservations(RuleViolation):
    message = "Cannot delete guest with existing reservations"


class InvalidDateRange(RuleViolation):
    message = "Check-out date must be after check-in date"


class RoomUnavailable(RuleViolation):
    message = "Room is not available for selected dates"


class EntityNotFound(ValueError):
    """按 id 查找实体失败"""

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} '{entity_id}' not found")


class StorageQuotaExceeded(Exception):
    """快照超出本地存储配额"""
