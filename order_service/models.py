from dataclasses import dataclass
from uuid import UUID

from order_service.order_state import OrderStatus


@dataclass
class Order:
    """Stored order. Only status changes after creation."""
    id: UUID
    customer: str
    items: list[str]
    status: OrderStatus = OrderStatus.PENDING
