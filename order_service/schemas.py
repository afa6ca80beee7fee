"""
Request and response bodies for /orders.

Request DTOs only describe shape (types, required fields); pydantic rejects shape
errors at decode time. Business rules live in field_errors(), which the store
runs before touching any state so all failing fields are reported together.
"""
from uuid import UUID

from pydantic import BaseModel, Field

from order_service.models import Order
from order_service.order_state import OrderStatus

CUSTOMER_EMPTY = "customer name must not be empty"
ITEMS_EMPTY = "at least one item required"
STATUS_INVALID = "invalid status"


class CreateOrderDto(BaseModel):
    customer: str = Field(..., description="Customer name")
    items: list[str] = Field(..., description="Ordered items, duplicates allowed")

    def field_errors(self) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        if len(self.customer) < 1:
            errors.setdefault("customer", []).append(CUSTOMER_EMPTY)
        if len(self.items) < 1:
            errors.setdefault("items", []).append(ITEMS_EMPTY)
        return errors


class UpdateStatusDto(BaseModel):
    status: str = Field(..., description="One of pending, shipped, delivered, cancelled")

    def field_errors(self) -> dict[str, list[str]]:
        if OrderStatus.parse(self.status) is None:
            return {"status": [STATUS_INVALID]}
        return {}

    def to_status(self) -> OrderStatus:
        """Only valid after field_errors() came back empty."""
        return OrderStatus(self.status)


class OrderResponseDto(BaseModel):
    id: UUID
    customer: str
    items: list[str]
    status: OrderStatus

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponseDto":
        return cls(
            id=order.id,
            customer=order.customer,
            items=list(order.items),
            status=order.status,
        )
