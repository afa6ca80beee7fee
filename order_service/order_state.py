"""
Order lifecycle statuses. Any status may follow any other; the wire format is the lowercase value.
"""
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "pending"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: str) -> "OrderStatus | None":
        """Exact, case-sensitive match against the four wire values. None if unknown."""
        try:
            return cls(value)
        except ValueError:
            return None
